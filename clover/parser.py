import logging
import sys
from typing import Iterator, List, Optional

from .exceptions import ArgumentIncorrectType, DestinationTypeError
from .options import EXCEPTIONS, VALUE_SEPARATOR, Kind, Option, ParseOutcome, Result, is_help_token, split_prefix
from .usage import DEFAULT_TARGET_WIDTH, program_name, usage_lines
from .values import FlagValue, StringValue, UnsignedValue, Value

logger = logging.getLogger(__name__)

class CommandLineOptions:
    """Ordered registry of option declarations and the parser that fills them.

    Destinations are caller-owned value cells; parsing overwrites their
    `store` on a match. An instance is meant for one parse at a time.
    """

    def __init__(self, program: Optional[str] = None):
        self.program = program
        self.options: List[Option] = []

    def __iter__(self) -> Iterator[Option]:
        return iter(self.options)

    def __len__(self) -> int:
        return len(self.options)

    def _add(self, option: Option) -> Option:
        self.options.append(option)
        logger.debug("registered %r", option)
        return option

    @staticmethod
    def _check_destination(value: Value, expected: type, name: str) -> None:
        if not isinstance(value, expected):
            raise DestinationTypeError(name, expected.kind_name, value)

    def add_flag(self, value: FlagValue, name: str, description: Optional[str] = None,
                 include_in_usage: bool = True) -> Option:
        self._check_destination(value, FlagValue, name)
        return self._add(Option(Kind.BOOL, name, None, description, value, include_in_usage))

    def add_unsigned(self, value: UnsignedValue, name: str, value_desc: Optional[str] = None,
                     description: Optional[str] = None, include_in_usage: bool = True) -> Option:
        self._check_destination(value, UnsignedValue, name)
        return self._add(Option(Kind.UINT32, name, value_desc, description, value, include_in_usage))

    def add_string(self, value: StringValue, name: str, value_desc: Optional[str] = None,
                   description: Optional[str] = None, include_in_usage: bool = True) -> Option:
        self._check_destination(value, StringValue, name)
        kind = Kind.ARG if value_desc is None else Kind.STRING
        return self._add(Option(kind, name, value_desc, description, value, include_in_usage))

    def add_usage_newline(self) -> Option:
        return self._add(Option(Kind.NEWLINE))

    def get_option_count(self, include_newlines: bool = False) -> int:
        if include_newlines:
            return len(self.options)
        return sum(1 for opt in self.options if opt.kind is not Kind.NEWLINE)

    def was_found(self, name: str) -> bool:
        for opt in self.options:
            if opt.matches_name(name):
                return opt.found
        return False

    def parse(self, argv: List[str], argc: Optional[int] = None) -> ParseOutcome:
        """Match argv[1:argc] against the registered options.

        Stops at the first argument that requests help or fails to match;
        the outcome then carries that argument's index. Destinations written
        before a failure keep their values.
        """
        if argc is None:
            argc = len(argv)

        for index in range(1, min(argc, len(argv))):
            result = self._parse_argument(argv[index])
            if result is not Result.OK:
                logger.debug("parse stopped at argv[%d] %r: %s", index, argv[index], result.name)
                return ParseOutcome(result, index)

        return ParseOutcome(Result.OK)

    def parse_or_raise(self, argv: List[str], argc: Optional[int] = None) -> None:
        outcome = self.parse(argv, argc)
        if outcome:
            return
        raise EXCEPTIONS[outcome.result](argv[outcome.index], outcome.index)

    def _parse_argument(self, arg: str) -> Result:
        has_prefix, token = split_prefix(arg)

        if has_prefix and is_help_token(token):
            return Result.HELP_REQUESTED

        for opt in self.options:
            if opt.kind is Kind.ARG:
                if not has_prefix and not opt.found:
                    opt.value.parse(token)
                    opt.set_found()
                    logger.debug("positional %s = %r", opt.name, token)
                    return Result.OK

            elif opt.kind is Kind.BOOL:
                if has_prefix and opt.matches_name(token):
                    opt.value.parse()
                    opt.set_found()
                    logger.debug("flag %s set", opt.name)
                    return Result.OK

            elif opt.is_named() and has_prefix:
                n = len(opt.name)
                if token[:n].lower() == opt.name.lower():
                    # a name-prefix match commits to this declaration
                    return self._parse_value(opt, token[n:])

        return Result.ERROR_UNRECOGNISED

    def _parse_value(self, opt: Option, rest: str) -> Result:
        if not rest:
            return Result.ERROR_EXPECTING_VALUE
        if not rest.startswith(VALUE_SEPARATOR):
            return Result.ERROR_UNRECOGNISED

        text = rest[len(VALUE_SEPARATOR):]
        try:
            opt.value.parse(text)
        except ArgumentIncorrectType:
            logger.debug("invalid value %r for %s", text, opt.name)
            return Result.ERROR_VALUE_INVALID

        opt.set_found()
        logger.debug("option %s = %r", opt.name, opt.value.store)
        return Result.OK

    def usage_lines(self, target_width: int = DEFAULT_TARGET_WIDTH) -> List[str]:
        program = self.program if self.program is not None else program_name(sys.argv[0] if sys.argv else "")
        return usage_lines(self.options, program, target_width)

    def print_usage(self, file=None, target_width: int = DEFAULT_TARGET_WIDTH) -> None:
        if file is None:
            file = sys.stderr
        for line in self.usage_lines(target_width):
            file.write(line + "\n")
