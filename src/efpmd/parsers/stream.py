"""
Line based access to EFP input files. Every line is handed out as an immutable, lower case :obj:`Cursor`,
which the parsers move along the line without modifying it.
"""
from typing import NamedTuple, Optional, TextIO

__all__ = ["Cursor", "LineStream"]


class Cursor(NamedTuple):
    """
    Position inside a single input line.

    Args:
        line (str): Lower case line without terminator.
        pos (int): Offset of the next unread character.
        line_number (int): Line number in the input, starting at 1. 0 for text not read from a file.
    """

    line: str
    pos: int = 0
    line_number: int = 0

    @property
    def rest(self) -> str:
        return self.line[self.pos :]

    def at_end(self) -> bool:
        return self.pos >= len(self.line)

    def startswith(self, prefix: str) -> bool:
        return self.line.startswith(prefix, self.pos)

    def advance(self, n: int) -> "Cursor":
        return self._replace(pos=min(self.pos + n, len(self.line)))

    def move_to(self, pos: int) -> "Cursor":
        return self._replace(pos=pos)

    def skip_space(self) -> "Cursor":
        pos = self.pos
        while pos < len(self.line) and self.line[pos].isspace():
            pos += 1
        return self._replace(pos=pos)


class LineStream:
    """
    Reads an input file one line at a time. Lines are lower cased, so the grammar is case insensitive.
    A line that is empty after removing the terminator is returned as an empty cursor, only the end
    of the input yields ``None``.

    Args:
        file (TextIO): Open text stream.
    """

    def __init__(self, file: TextIO):
        self.file = file
        self.line_number = 0

    def next_line(self) -> Optional[Cursor]:
        line = self.file.readline()

        if not line:
            return None

        self.line_number += 1

        if line.endswith("\n"):
            line = line[:-1]

        return Cursor(line.lower(), 0, self.line_number)
