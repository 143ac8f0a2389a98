import sys
from typing import List, Optional

from .options import Result, error_message
from .parser import CommandLineOptions
from .values import FlagValue, StringValue, UnsignedValue

# Constants
MAX_GREETINGS = 10

def build_options(program: Optional[str] = None):
    verbose = FlagValue()
    count = UnsignedValue(1)
    name = StringValue("world")
    source = StringValue()
    target = StringValue()

    options = CommandLineOptions(program)
    options.add_flag(verbose, "verbose", "Print every parsed value, including the ones left at their defaults.")
    options.add_unsigned(count, "count", "N", f"How many times to greet, at most {MAX_GREETINGS}. Accepts decimal, 0x hex and 0 octal.")
    options.add_string(name, "name", "TEXT", "Who to greet.")
    options.add_usage_newline()
    options.add_string(source, "source", None, "Input file.")
    options.add_string(target, "target", None, "Output file.")

    values = {"verbose": verbose, "count": count, "name": name, "source": source, "target": target}
    return options, values

def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv

    options, values = build_options()
    outcome = options.parse(argv)

    if outcome.result is Result.HELP_REQUESTED:
        options.print_usage()
        return 0
    if not outcome:
        print(error_message(outcome.result, argv[outcome.index]), file=sys.stderr)
        options.print_usage()
        return 1

    verbose = values["verbose"].store
    for key, value in values.items():
        if verbose or options.was_found(key):
            print(f"{key}: {value.store}")
    for _ in range(min(int(values["count"]), MAX_GREETINGS)):
        print(f"hello, {values['name'].store}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
