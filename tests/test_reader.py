import io

import pytest

from cubkit.reader import LineReader, get_next_line


def test_lines_keep_newlines_and_last_line_without_one():
    reader = LineReader()
    stream = io.StringIO("first\nsecond\nthird")
    assert reader.next_line(stream) == "first\n"
    assert reader.next_line(stream) == "second\n"
    assert reader.next_line(stream) == "third"
    assert reader.next_line(stream) is None
    assert reader.next_line(stream) is None


def test_empty_stream_gives_none():
    assert LineReader().next_line(io.StringIO("")) is None


@pytest.mark.parametrize("size", [1, 2, 3, 7, 100])
def test_buffer_size_does_not_change_result(size):
    text = "alpha\n\nbeta\ngamma delta\n"
    reader = LineReader(size)
    lines = list(reader.lines(io.StringIO(text)))
    assert "".join(lines) == text
    assert lines == text.splitlines(keepends=True)


def test_binary_stream():
    reader = LineReader(4)
    lines = list(reader.lines(io.BytesIO(b"one\ntwo\n")))
    assert lines == [b"one\n", b"two\n"]


def test_streams_are_kept_apart():
    reader = LineReader(16)
    first = io.StringIO("a1\na2\n")
    second = io.StringIO("b1\nb2\n")
    assert reader.next_line(first) == "a1\n"
    assert reader.next_line(second) == "b1\n"
    assert reader.next_line(first) == "a2\n"
    assert reader.next_line(second) == "b2\n"
    assert reader.next_line(first) is None


def test_module_function_reads_lines():
    stream = io.StringIO("x\ny")
    assert get_next_line(stream) == "x\n"
    assert get_next_line(stream) == "y"
    assert get_next_line(stream) is None


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(0)