from .exceptions import (
    ArgumentIncorrectType,
    DestinationTypeError,
    HelpRequested,
    MissingArgumentException,
    OptionException,
    OptionNotExistsException,
    OptionParseException,
    OptionSpecException,
)
from .options import Kind, Option, ParseOutcome, Result, error_message
from .parser import CommandLineOptions
from .usage import program_name
from .values import FlagValue, StringValue, UnsignedValue, Value, parse_unsigned

__version__ = "0.1.0"
