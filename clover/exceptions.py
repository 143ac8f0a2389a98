from typing import Optional

class OptionException(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message

class OptionSpecException(OptionException):
    pass

class DestinationTypeError(OptionSpecException, TypeError):
    def __init__(self, option: str, expected: str, got: object):
        super().__init__(f"Option ‘{option}’ needs a {expected} destination, got {type(got).__name__}")

class OptionParseException(OptionException):
    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index

class HelpRequested(OptionParseException):
    def __init__(self, arg: str, index: Optional[int] = None):
        super().__init__(f"Help requested by ‘{arg}’", index)

class MissingArgumentException(OptionParseException):
    def __init__(self, option: str, index: Optional[int] = None):
        super().__init__(f"Option ‘{option}’ is missing an argument", index)

class ArgumentIncorrectType(OptionParseException):
    def __init__(self, arg: str, index: Optional[int] = None):
        super().__init__(f"Argument ‘{arg}’ failed to parse", index)

class OptionNotExistsException(OptionParseException):
    def __init__(self, option: str, index: Optional[int] = None):
        super().__init__(f"Option ‘{option}’ does not exist", index)
