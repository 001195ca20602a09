import io

import pytest

from fdf.lines import BUFFER_SIZE, LineReader, read_lines

TEXT = "0 0 0\n1 2 3\nlast"


class Trickle:
    """A stream that hands out preset pieces, whatever size is asked for."""

    def __init__(self, pieces):
        self.pieces = list(pieces)

    def read(self, n):
        return self.pieces.pop(0) if self.pieces else ""


@pytest.mark.parametrize("size", [1, 2, 5, BUFFER_SIZE, 1000])
def test_lines_match_splitlines(size):
    assert list(read_lines(io.StringIO(TEXT), size)) == TEXT.splitlines(keepends=True)


def test_binary_stream():
    assert list(read_lines(io.BytesIO(b"a\nb\n"))) == [b"a\n", b"b\n"]


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None


def test_stays_exhausted():
    reader = LineReader(io.StringIO("x\n"), 3)
    assert reader.read_line() == "x\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_blank_lines_kept():
    assert list(LineReader(io.StringIO("\n\n"), 1)) == ["\n", "\n"]


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("abc"), size)


def test_short_read_ends_a_line():
    reader = LineReader(Trickle(["ab", "c\n"]), 4)
    assert reader.read_line() == "ab"
    assert reader.read_line() == "c\n"
    assert reader.read_line() is None


def test_concatenation_restores_text():
    text = "first line\nsecond\n\nfourth without end"
    assert "".join(read_lines(io.StringIO(text), 3)) == text