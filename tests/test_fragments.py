import io

import numpy as np
import pytest

from efpmd.definitions import COORD_SHAPES, CoordType
from efpmd.parsers.errors import ErrorKind, InputError
from efpmd.parsers.fragments import parse_fragment
from efpmd.parsers.stream import LineStream


def start_fragment(text):
    """
    Set up a stream on ``text`` positioned after the fragment keyword of its first line.
    """
    stream = LineStream(io.StringIO(text))
    cursor = stream.next_line().skip_space()
    return stream, cursor.advance(len("fragment"))


def block_text(rows):
    return "\n".join(" ".join(str(v) for v in row) for row in rows)


def test_parse_fragment(coord_type, coord_block):
    stream, cursor = start_fragment("fragment h2o\n" + block_text(coord_block))

    fragment, cursor = parse_fragment(stream, cursor, coord_type)

    assert cursor is None
    assert fragment.name == "h2o"
    assert np.allclose(fragment.get_coordinates(coord_type), coord_block)
    assert np.allclose(fragment.vel, 0.0)

    # unused capacity stays zero
    n_rows, n_cols = COORD_SHAPES[coord_type]
    assert np.allclose(fragment.coord[n_rows * n_cols :], 0.0)


def test_parse_fragment_short_row(coord_type, coord_block):
    rows = [list(row) for row in coord_block]
    rows[-1] = rows[-1][:-1]
    stream, cursor = start_fragment("fragment h2o\n" + block_text(rows))

    with pytest.raises(InputError) as excinfo:
        parse_fragment(stream, cursor, coord_type)

    assert excinfo.value.kind is ErrorKind.FRAGMENT_COORDINATES
    assert excinfo.value.line_number == len(rows) + 1


def test_parse_fragment_missing_row(coord_type, coord_block):
    stream, cursor = start_fragment("fragment h2o\n" + block_text(coord_block[:-1]))

    with pytest.raises(InputError) as excinfo:
        parse_fragment(stream, cursor, coord_type)

    assert excinfo.value.kind is ErrorKind.FRAGMENT_COORDINATES


def test_parse_fragment_ignores_rest_of_row(coord_type, coord_block):
    rows = [list(row) + [99.0, "# note"] for row in coord_block]
    stream, cursor = start_fragment("fragment h2o\n" + block_text(rows))

    fragment, cursor = parse_fragment(stream, cursor, coord_type)

    assert cursor is None
    assert np.allclose(fragment.get_coordinates(coord_type), coord_block)
    n_rows, n_cols = COORD_SHAPES[coord_type]
    assert np.allclose(fragment.coord[n_rows * n_cols :], 0.0)


def test_parse_fragment_quoted_name():
    stream, cursor = start_fragment('fragment "water molecule"\n0 0 0 0 0 0\n')

    fragment, cursor = parse_fragment(stream, cursor, CoordType.XYZABC)

    assert fragment.name == "water molecule"
    assert cursor is None


@pytest.mark.parametrize("text", ["fragment\n", "fragment   \n", 'fragment ""\n', 'fragment "h2o\n'])
def test_parse_fragment_bad_name(text):
    stream, cursor = start_fragment(text + "0 0 0 0 0 0\n")

    with pytest.raises(InputError) as excinfo:
        parse_fragment(stream, cursor, CoordType.XYZABC)

    assert excinfo.value.kind is ErrorKind.FRAGMENT_NAME
    assert excinfo.value.line_number == 1


def test_parse_fragment_coordinates_on_name_line():
    stream, cursor = start_fragment('fragment "a" 0 0 0 0 0 0\n')

    with pytest.raises(InputError) as excinfo:
        parse_fragment(stream, cursor, CoordType.XYZABC)

    assert excinfo.value.kind is ErrorKind.FRAGMENT_NAME


def test_parse_fragment_velocity():
    text = "fragment h2o\n1 2 3 0 0 0\n  velocity\n0.1 0.2 0.3 0.4 0.5 0.6\nrun_type md\n"
    stream, cursor = start_fragment(text)

    fragment, cursor = parse_fragment(stream, cursor, CoordType.XYZABC)

    assert np.allclose(fragment.vel, [0.1, 0.2, 0.3, 0.4, 0.5, 0.6])
    # the line following the block is handed back
    assert cursor.line == "run_type md"
    assert cursor.line_number == 5


def test_parse_fragment_without_velocity_returns_next_line():
    text = "fragment h2o\n1 2 3 0 0 0\nfragment nh3\n"
    stream, cursor = start_fragment(text)

    fragment, cursor = parse_fragment(stream, cursor, CoordType.XYZABC)

    assert np.allclose(fragment.vel, 0.0)
    assert cursor.line == "fragment nh3"


@pytest.mark.parametrize(
    "velocity",
    ["0.1 0.2 0.3 0.4 0.5", "", None],
    ids=["short", "empty", "missing"],
)
def test_parse_fragment_bad_velocity(velocity):
    text = "fragment h2o\n1 2 3 0 0 0\nvelocity\n"
    if velocity is not None:
        text += velocity + "\n"
    stream, cursor = start_fragment(text)

    with pytest.raises(InputError) as excinfo:
        parse_fragment(stream, cursor, CoordType.XYZABC)

    assert excinfo.value.kind is ErrorKind.FRAGMENT_VELOCITIES


def test_parse_fragment_velocity_ignores_rest_of_row():
    text = "fragment h2o\n1 2 3 0 0 0\nvelocity\n0.1 0.2 0.3 0.4 0.5 0.6 0.7  # fast\n"
    stream, cursor = start_fragment(text)

    fragment, cursor = parse_fragment(stream, cursor, CoordType.XYZABC)

    assert np.allclose(fragment.vel, [0.1, 0.2, 0.3, 0.4, 0.5, 0.6])
    assert cursor is None
