"""Usage text layout.

Everything here returns lines instead of writing them, so the layout can be
checked without capturing process output.
"""
import re
from typing import Iterable, List

from .options import Kind, Option

# Constants
DEFAULT_TARGET_WIDTH = 100
COLUMN_PADDING = 8
OPTION_INDENT = "    "  # with "--" and a space, one short of COLUMN_PADDING
EXE_SUFFIX = ".exe"

def program_name(path: str) -> str:
    """Display name for the usage line: basename without a trailing .exe."""
    filename = re.split(r"[/\\]", path)[-1]
    if len(filename) > len(EXE_SUFFIX) and filename.lower().endswith(EXE_SUFFIX):
        filename = filename[:-len(EXE_SUFFIX)]
    return filename

def has_options(options: Iterable[Option]) -> bool:
    return any(opt.kind not in (Kind.NEWLINE, Kind.ARG) for opt in options)

def column_width(options: Iterable[Option]) -> int:
    width = 0
    for opt in options:
        if opt.kind in (Kind.NEWLINE, Kind.ARG):
            continue
        label = len(opt.name or "")
        if opt.value_desc is not None:
            label += len(opt.value_desc) + 1
        width = max(width, label)
    return width + COLUMN_PADDING

def option_label(opt: Option) -> str:
    if opt.kind is Kind.NEWLINE:
        return ""
    label = OPTION_INDENT
    if opt.kind is not Kind.ARG:
        label += "--"
    label += opt.name or ""
    if opt.value_desc is not None:
        label += "=" + opt.value_desc
    return label

def wrap_description(text: str, start: int, col_width: int, target_width: int) -> List[str]:
    """Wrap `text` whose first character lands on column `start`.

    A space seen after the column has passed `target_width` ends the line and
    is dropped; continuation lines are indented to `col_width`.
    """
    lines = []
    current = ""
    x = start
    for ch in text:
        if x > target_width and ch == " ":
            lines.append(current)
            current = " " * col_width
            x = col_width
        else:
            current += ch
            x += 1
    lines.append(current)
    return lines

def format_option(opt: Option, col_width: int, target_width: int = DEFAULT_TARGET_WIDTH) -> List[str]:
    head = option_label(opt)
    if opt.description is None:
        return [head]

    head = (head + " ").ljust(col_width)
    body = wrap_description(opt.description, len(head), col_width, target_width)
    return [head + body[0]] + body[1:]

def usage_line(options: List[Option], program: str) -> str:
    line = f"usage: {program}"
    if has_options(options):
        line += " [options]"
    for opt in options:
        if opt.kind is Kind.ARG:
            line += f" {opt.name}"
    return line

def usage_lines(options: List[Option], program: str,
                target_width: int = DEFAULT_TARGET_WIDTH) -> List[str]:
    lines = [usage_line(options, program)]
    if not has_options(options):
        return lines

    col_width = column_width(options)
    lines.append("options:")
    for opt in options:
        if opt.include_in_usage:
            lines.extend(format_option(opt, col_width, target_width))
    return lines
