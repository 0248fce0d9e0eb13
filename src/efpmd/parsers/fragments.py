import logging
from typing import List, Optional, Tuple

from efpmd.configuration import Fragment
from efpmd.definitions import (
    COORD_SHAPES,
    N_VELOCITIES,
    VELOCITY_KEYWORD,
    CoordType,
)
from efpmd.parsers.errors import ErrorKind, InputError
from efpmd.parsers.scalars import parse_double, parse_string
from efpmd.parsers.stream import Cursor, LineStream

log = logging.getLogger(__name__)

__all__ = ["parse_fragment"]


def _read_row(
    stream: LineStream,
    n_values: int,
    kind: ErrorKind,
    message: str,
) -> List[float]:
    """
    Read the leading ``n_values`` floating point numbers of the next line. The rest of the line is ignored.
    """
    cursor = stream.next_line()

    if cursor is None:
        raise InputError(kind, message + " (unexpected end of input)", stream.line_number)

    values = []
    for _ in range(n_values):
        match = parse_double(cursor)
        if match is None:
            raise InputError(kind, message, cursor.line_number)
        values.append(match.value)
        cursor = match.cursor

    return values


def parse_fragment(
    stream: LineStream, cursor: Cursor, coord_type: CoordType
) -> Tuple[Fragment, Optional[Cursor]]:
    """
    Parse a fragment block::

        fragment <name>
        <coordinates, 1x6 (xyzabc), 3x3 (points) or 4x3 (rotmat)>
        [velocity
        <6 values>]

    Args:
        stream (efpmd.parsers.stream.LineStream): Input the block is read from.
        cursor (efpmd.parsers.stream.Cursor): Position after the fragment keyword.
        coord_type (efpmd.definitions.CoordType): Coordinate representation of the run.

    Returns:
        tuple(Fragment, Cursor): The fragment and the first line after the block, None if the input ended.
    """
    match = parse_string(cursor)

    if match is None or not match.value:
        raise InputError(
            ErrorKind.FRAGMENT_NAME, "unable to read fragment name", cursor.line_number
        )

    if not match.cursor.skip_space().at_end():
        raise InputError(
            ErrorKind.FRAGMENT_NAME,
            "fragment coordinates must start on the line after the fragment name",
            cursor.line_number,
        )

    fragment = Fragment(match.value)

    n_rows, n_cols = COORD_SHAPES[coord_type]
    for row in range(n_rows):
        fragment.coord[row * n_cols : (row + 1) * n_cols] = _read_row(
            stream,
            n_cols,
            ErrorKind.FRAGMENT_COORDINATES,
            "incorrect fragment coordinates format",
        )

    cursor = stream.next_line()

    if cursor is not None and cursor.skip_space().startswith(VELOCITY_KEYWORD):
        fragment.vel[:] = _read_row(
            stream,
            N_VELOCITIES,
            ErrorKind.FRAGMENT_VELOCITIES,
            "incorrect fragment velocities format",
        )
        cursor = stream.next_line()

    log.debug("Read fragment {:s}".format(fragment.name))

    return fragment, cursor
