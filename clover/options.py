from enum import Enum
from typing import NamedTuple, Optional, Tuple

from .exceptions import (
    ArgumentIncorrectType,
    HelpRequested,
    MissingArgumentException,
    OptionNotExistsException,
)
from .values import Value

# Constants
HELP_TOKENS = ("?", "h", "help")
VALUE_SEPARATOR = "="

class Kind(Enum):
    NEWLINE = 0  # usage formatting only
    ARG = 1      # positional, string destination without a value description
    BOOL = 2
    UINT32 = 3
    STRING = 4

class Result(Enum):
    OK = 0
    HELP_REQUESTED = 1
    ERROR_EXPECTING_VALUE = 2
    ERROR_VALUE_INVALID = 3
    ERROR_UNRECOGNISED = 4

class ParseOutcome(NamedTuple):
    result: Result
    index: Optional[int] = None

    def __bool__(self):
        return self.result is Result.OK

EXCEPTIONS = {
    Result.HELP_REQUESTED: HelpRequested,
    Result.ERROR_EXPECTING_VALUE: MissingArgumentException,
    Result.ERROR_VALUE_INVALID: ArgumentIncorrectType,
    Result.ERROR_UNRECOGNISED: OptionNotExistsException,
}

_MESSAGES = {
    Result.ERROR_EXPECTING_VALUE: "command line argument expecting value",
    Result.ERROR_VALUE_INVALID: "invalid command line argument value",
    Result.ERROR_UNRECOGNISED: "unrecognised command line argument",
}

def error_message(result: Result, argument: str) -> Optional[str]:
    """Return the diagnostic line for a failed parse, or None for OK and help."""
    message = _MESSAGES.get(result)
    if message is None:
        return None
    return f"error: {message}: {argument}."

def split_prefix(arg: str) -> Tuple[bool, str]:
    """Strip a leading '/', '-' or '--' from `arg`.

    Returns whether a prefix was present and the remaining token.
    """
    if arg.startswith("/"):
        return True, arg[1:]
    if arg.startswith("--"):
        return True, arg[2:]
    if arg.startswith("-"):
        return True, arg[1:]
    return False, arg

def is_help_token(token: str) -> bool:
    return token.lower() in HELP_TOKENS

class Option:
    def __init__(self, kind: Kind, name: Optional[str] = None, value_desc: Optional[str] = None,
                 description: Optional[str] = None, value: Optional[Value] = None,
                 include_in_usage: bool = True):
        self.kind = kind
        self.name = name
        self.value_desc = value_desc
        self.description = description
        self.value = value
        self.include_in_usage = include_in_usage
        self.found = False

    def is_named(self) -> bool:
        """True for declarations matched by a prefixed NAME token."""
        return self.kind in (Kind.BOOL, Kind.UINT32, Kind.STRING)

    def matches_name(self, name: str) -> bool:
        return self.name is not None and self.name.lower() == name.lower()

    def set_found(self) -> None:
        self.found = True

    def __repr__(self):
        return f"Option({self.kind.name}, {self.name!r}, found={self.found})"
