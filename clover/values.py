import re
from typing import Optional

import numpy as np

from .exceptions import ArgumentIncorrectType

UINT32_MAX = int(np.iinfo(np.uint32).max)

# strtoul with base 0: hex, octal (leading zero) or decimal
_UNSIGNED = re.compile(r"\s*(\+?)(?:0[xX]([0-9a-fA-F]+)|(0[0-7]*)|([1-9][0-9]*))")

def parse_unsigned(text: str) -> np.uint32:
    """Parse `text` as a 32-bit unsigned integer, honouring 0x and 0 prefixes.

    The whole text must be consumed. Signs other than '+' and values that do
    not fit in 32 bits are rejected.
    """
    match = _UNSIGNED.match(text)
    if not match or match.end() != len(text):
        raise ArgumentIncorrectType(text)

    hex_digits, octal, decimal = match.group(2), match.group(3), match.group(4)
    if hex_digits is not None:
        number = int(hex_digits, 16)
    elif octal is not None:
        number = int(octal, 8)
    else:
        number = int(decimal, 10)

    if number > UINT32_MAX:
        raise ArgumentIncorrectType(text)
    return np.uint32(number)

class Value:
    kind_name = "value"

    def __init__(self, store=None):
        self.store = store

    def parse(self, text: str) -> None:
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}({self.store!r})"

class FlagValue(Value):
    kind_name = "flag"

    def __init__(self, store: bool = False):
        super().__init__(store)

    def parse(self, text: str = "") -> None:
        self.store = True

    def __bool__(self):
        return bool(self.store)

class UnsignedValue(Value):
    kind_name = "unsigned integer"

    def __init__(self, store: int = 0):
        super().__init__(np.uint32(store))

    def parse(self, text: str) -> None:
        self.store = parse_unsigned(text)

    def __int__(self):
        return int(self.store)

class StringValue(Value):
    kind_name = "string"

    def __init__(self, store: Optional[str] = None):
        super().__init__(store)

    def parse(self, text: str) -> None:
        self.store = text
