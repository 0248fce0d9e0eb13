from enum import Enum
from typing import Optional

__all__ = ["ErrorKind", "InputError"]


class ErrorKind(Enum):
    FILE_ACCESS = "unable to open input file"
    UNKNOWN_OPTION = "unknown option"
    INCORRECT_VALUE = "incorrect option value"
    OUT_OF_RANGE = "option value out of range"
    TRAILING_INPUT = "more than one option on a line"
    COORD_TYPE_CHANGED = "coordinate type changed after fragments"
    FRAGMENT_NAME = "bad fragment name"
    FRAGMENT_COORDINATES = "bad fragment coordinates"
    FRAGMENT_VELOCITIES = "bad fragment velocities"
    NO_FRAGMENTS = "no fragments"


class InputError(Exception):
    """
    Exception raised when an input file can not be loaded. No partial configuration is ever returned.

    Args:
        kind (ErrorKind): Category of the failure.
        message (str): Human readable description.
        line_number (int, optional): Line of the input file the failure was detected on.
    """

    def __init__(
        self, kind: ErrorKind, message: str, line_number: Optional[int] = None
    ):
        self.kind = kind
        self.message = message
        self.line_number = line_number

        if line_number is not None:
            message = "line {:d}: {:s}".format(line_number, message)

        super(InputError, self).__init__(message)
