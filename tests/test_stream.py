import io

from efpmd.parsers.stream import Cursor, LineStream


def test_line_stream_lower_case():
    stream = LineStream(io.StringIO("Run_Type MD\nFragment \"H2O\"\n"))

    first = stream.next_line()
    assert first.line == "run_type md"
    assert first.line_number == 1

    second = stream.next_line()
    assert second.line == 'fragment "h2o"'
    assert second.line_number == 2

    assert stream.next_line() is None


def test_line_stream_empty_lines():
    stream = LineStream(io.StringIO("\n\nlast"))

    assert stream.next_line().line == ""
    assert stream.next_line().line == ""

    # final line without terminator is still returned
    last = stream.next_line()
    assert last.line == "last"
    assert last.line_number == 3

    assert stream.next_line() is None
    assert stream.next_line() is None


def test_line_stream_empty_input():
    stream = LineStream(io.StringIO(""))
    assert stream.next_line() is None
    assert stream.line_number == 0


def test_cursor_is_immutable():
    cursor = Cursor("  coord points")

    moved = cursor.skip_space()
    assert cursor.pos == 0
    assert moved.pos == 2
    assert moved.startswith("coord")
    assert not cursor.startswith("coord")

    moved = moved.advance(len("coord"))
    assert moved.rest == " points"
    assert moved.skip_space().rest == "points"


def test_cursor_end():
    cursor = Cursor("ab   ")

    assert not cursor.at_end()
    assert cursor.advance(2).skip_space().at_end()
    # advancing never moves past the end of the line
    assert cursor.advance(100).pos == len(cursor.line)
