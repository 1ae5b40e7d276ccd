import os

import pytest

from pipex.linereader import LineReader, forget, get_next_line


def _pipe_with(data: bytes) -> int:
    read_end, write_end = os.pipe()
    os.write(write_end, data)
    os.close(write_end)
    return read_end


def test_read_lines_keep_newlines():
    fd = _pipe_with(b"first\nsecond\nthird")
    reader = LineReader(fd)
    assert reader.read_line() == "first\n"
    assert reader.read_line() == "second\n"
    assert reader.read_line() == "third"
    assert reader.read_line() is None
    os.close(fd)


@pytest.mark.parametrize("size", [1, 2, 3, 7, 64])
def test_buffer_size_does_not_change_lines(size):
    data = "alpha\nbe\n\ngamma delta\nend"
    fd = _pipe_with(data.encode())
    lines = list(LineReader(fd, size))
    os.close(fd)
    assert "".join(lines) == data
    assert lines == data.splitlines(keepends=True)


def test_empty_input():
    fd = _pipe_with(b"")
    assert list(LineReader(fd)) == []
    os.close(fd)


def test_file_input(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"a\nb\n")
    with open(path, "rb") as handle:
        assert list(LineReader(handle.fileno(), 4)) == ["a\n", "b\n"]


def test_utf8_split_across_reads():
    text = "héllo wörld\nñ\n"
    fd = _pipe_with(text.encode())
    assert list(LineReader(fd, 1)) == ["héllo wörld\n", "ñ\n"]
    os.close(fd)


def test_invalid_arguments():
    with pytest.raises(ValueError):
        LineReader(-1)
    with pytest.raises(ValueError):
        LineReader(0, 0)


def test_get_next_line_sequence():
    fd = _pipe_with(b"one\ntwo")
    try:
        assert get_next_line(fd) == "one\n"
        assert get_next_line(fd) == "two"
        assert get_next_line(fd) is None
    finally:
        forget(fd)
        os.close(fd)


def test_get_next_line_separate_descriptors():
    fd_a = _pipe_with(b"a1\na2\n")
    fd_b = _pipe_with(b"b1\nb2\n")
    try:
        assert get_next_line(fd_a) == "a1\n"
        assert get_next_line(fd_b) == "b1\n"
        assert get_next_line(fd_a) == "a2\n"
        assert get_next_line(fd_b) == "b2\n"
    finally:
        forget(fd_a)
        forget(fd_b)
        os.close(fd_a)
        os.close(fd_b)


def test_get_next_line_negative_fd():
    with pytest.raises(ValueError):
        get_next_line(-3)


def test_get_next_line_bad_fd_raises():
    read_end, write_end = os.pipe()
    os.close(write_end)
    os.close(read_end)
    with pytest.raises(OSError):
        get_next_line(read_end)
    forget(read_end)
    with pytest.raises(OSError):
        get_next_line(read_end)
    forget(read_end)