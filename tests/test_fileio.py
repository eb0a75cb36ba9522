import io

import pytest

from krtools.fileio import filecopy, fputs, getline


def test_filecopy_text_is_identical():
    text = "first line\nsecond line\n\tindented\n" * 500
    dst = io.StringIO()
    filecopy(io.StringIO(text), dst)
    assert dst.getvalue() == text


def test_filecopy_bytes_is_identical():
    data = bytes(range(256)) * 100
    dst = io.BytesIO()
    filecopy(io.BytesIO(data), dst)
    assert dst.getvalue() == data


def test_filecopy_empty_source():
    dst = io.StringIO()
    filecopy(io.StringIO(""), dst)
    assert dst.getvalue() == ""


def test_fputs_writes_text():
    stream = io.StringIO()
    fputs("hello", stream)
    fputs(" there\n", stream)
    assert stream.getvalue() == "hello there\n"


def test_fputs_closed_stream_raises():
    stream = io.StringIO()
    stream.close()
    with pytest.raises(ValueError):
        fputs("x", stream)


def test_getline_returns_lines_with_newline():
    stream = io.StringIO("alpha\nbeta\n")
    assert getline(stream) == "alpha\n"
    assert getline(stream) == "beta\n"
    assert getline(stream) == ""


def test_getline_last_line_without_newline():
    stream = io.StringIO("one\ntwo")
    assert getline(stream) == "one\n"
    assert getline(stream) == "two"
    assert getline(stream) == ""


def test_getline_splits_long_line():
    stream = io.StringIO("abcdef\n")
    assert getline(stream, 4) == "abc"
    assert getline(stream, 4) == "def"
    assert getline(stream, 4) == "\n"


def test_getline_pieces_rebuild_input():
    text = "x" * 37 + "\n" + "y" * 5 + "\n"
    stream = io.StringIO(text)
    pieces = []
    while piece := getline(stream, 8):
        assert len(piece) <= 7
        pieces.append(piece)
    assert "".join(pieces) == text


def test_getline_reads_stdin_by_default(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("from stdin\nrest\n"))
    assert getline() == "from stdin\n"


@pytest.mark.parametrize("limit", [1, 0, -3])
def test_getline_rejects_small_limit(limit):
    with pytest.raises(ValueError):
        getline(io.StringIO("abc\n"), limit)