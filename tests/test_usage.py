import io

import pytest

from clover import CommandLineOptions, FlagValue, StringValue, UnsignedValue, program_name
from clover.options import Kind, Option
from clover.usage import (
    COLUMN_PADDING,
    OPTION_INDENT,
    column_width,
    format_option,
    usage_line,
    usage_lines,
    wrap_description,
)


@pytest.fixture
def simple():
    opts = CommandLineOptions("prog")
    opts.add_flag(FlagValue(), "verbose", "be verbose")
    opts.add_string(StringValue(), "file", None, None)
    return opts


def test_verbose_and_file_layout(simple):
    assert simple.usage_lines() == [
        "usage: prog [options] file",
        "options:",
        "    --verbose  be verbose",
        "    file",
    ]


def test_description_starts_at_column(simple):
    lines = simple.usage_lines()
    col = column_width(list(simple))
    assert col == len("verbose") + 8
    assert lines[2].index("be verbose") == col


def test_print_usage_writes_to_sink(simple):
    sink = io.StringIO()
    simple.print_usage(sink)
    assert sink.getvalue() == "\n".join(simple.usage_lines()) + "\n"


def test_print_usage_defaults_to_stderr(simple, capsys):
    simple.print_usage()
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("usage: prog [options] file\n")


def test_value_options_markers_and_hidden_entries():
    opts = CommandLineOptions("tool")
    opts.add_unsigned(UnsignedValue(), "count", "N", "how many")
    opts.add_usage_newline()
    opts.add_string(StringValue(), "output", "PATH", "where to write")
    opts.add_flag(FlagValue(), "secret", "not listed", include_in_usage=False)
    opts.add_string(StringValue(), "input", None, "source file")
    opts.add_string(StringValue(), "extra", None, None)

    # "output=PATH" is the widest label
    col = len("output=PATH") + 8
    assert column_width(list(opts)) == col
    assert opts.usage_lines() == [
        "usage: tool [options] input extra",
        "options:",
        "    --count=N".ljust(col) + "how many",
        "",
        "    --output=PATH  where to write",
        "    input".ljust(col) + "source file",
        "    extra",
    ]


def test_hidden_options_still_widen_the_column():
    opts = CommandLineOptions("tool")
    opts.add_flag(FlagValue(), "v", "visible")
    opts.add_flag(FlagValue(), "a-very-long-hidden-name", "hidden", include_in_usage=False)
    lines = opts.usage_lines()
    assert lines[2] == "    --v".ljust(len("a-very-long-hidden-name") + 8) + "visible"
    assert len(lines) == 3


def test_only_positionals_prints_no_options_block():
    opts = CommandLineOptions("copy")
    opts.add_string(StringValue(), "src", None, "from")
    opts.add_string(StringValue(), "dst", None, "to")
    assert opts.usage_lines() == ["usage: copy src dst"]


def test_empty_registry():
    assert CommandLineOptions("bare").usage_lines() == ["usage: bare"]


def test_wrap_breaks_only_at_spaces_past_target():
    opt = Option(Kind.BOOL, "a", description="one two three")
    col = 9
    assert format_option(opt, col, target_width=10) == [
        "    --a  one",
        "         two",
        "         three",
    ]


def test_wrap_never_splits_words():
    lines = wrap_description("supercalifragilistic word", 0, 4, 5)
    assert lines == ["supercalifragilistic", "    word"]


def test_wrap_keeps_short_text_on_one_line():
    assert wrap_description("fits fine", 20, 20, 100) == ["fits fine"]


def test_long_description_wraps_at_default_width():
    opts = CommandLineOptions("prog")
    opts.add_flag(FlagValue(), "verbose", " ".join(["word"] * 60))
    lines = opts.usage_lines()[2:]
    col = column_width(list(opts))
    assert len(lines) > 1
    for line in lines[1:]:
        assert line.startswith(" " * col)
        assert not line[col:].startswith(" ")
    assert all(len(line) <= 100 + len("word") + 1 for line in lines)
    assert " ".join(line.strip() for line in lines).endswith("word word")


def test_narrow_target_width():
    opts = CommandLineOptions("prog")
    opts.add_flag(FlagValue(), "a", "one two three")
    assert opts.usage_lines(target_width=10)[2:] == [
        "    --a  one",
        "         two",
        "         three",
    ]


def test_usage_line_lists_positionals_in_order():
    options = [
        Option(Kind.ARG, "b"),
        Option(Kind.NEWLINE),
        Option(Kind.ARG, "a"),
    ]
    assert usage_line(options, "p") == "usage: p b a"
    assert usage_lines(options, "p") == ["usage: p b a"]


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("prog", "prog"),
        ("/usr/local/bin/prog", "prog"),
        ("C:\\tools\\App.EXE", "App"),
        ("c:/tools/app.exe", "app"),
        ("build\\run.Exe", "run"),
        (".exe", ".exe"),
        ("archive.exe.bak", "archive.exe.bak"),
    ],
)
def test_program_name(path, expected):
    assert program_name(path) == expected


def test_default_program_name_from_argv(monkeypatch):
    monkeypatch.setattr("sys.argv", ["/opt/bin/Tool.exe", "--x"])
    assert CommandLineOptions().usage_lines() == ["usage: Tool"]


def test_default_program_name_with_empty_argv(monkeypatch):
    monkeypatch.setattr("sys.argv", [])
    assert CommandLineOptions().usage_lines() == ["usage: "]


def test_description_column_leaves_one_space_after_widest_label():
    assert COLUMN_PADDING == len(OPTION_INDENT + "--") + 2
    opts = CommandLineOptions("prog")
    opts.add_unsigned(UnsignedValue(), "count", "N", "how many")
    assert opts.usage_lines()[2] == "    --count=N  how many"
