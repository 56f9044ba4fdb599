import os

import pytest

from ftlib.nextline import LineReader, get_next_line


@pytest.fixture
def open_fd(tmp_path):
    fds = []

    def make(content: bytes) -> int:
        path = tmp_path / f"input{len(fds)}.txt"
        path.write_bytes(content)
        fd = os.open(path, os.O_RDONLY)
        fds.append(fd)
        return fd

    yield make
    for fd in fds:
        os.close(fd)


def test_reads_lines_with_newlines(open_fd):
    fd = open_fd(b"first\nsecond\n")
    reader = LineReader()
    assert reader.next_line(fd) == "first\n"
    assert reader.next_line(fd) == "second\n"
    assert reader.next_line(fd) is None


def test_last_line_without_newline(open_fd):
    fd = open_fd(b"one\ntwo")
    reader = LineReader(4)
    assert list(reader.lines(fd)) == ["one\n", "two"]


def test_empty_input_gives_none(open_fd):
    fd = open_fd(b"")
    assert LineReader().next_line(fd) is None


@pytest.mark.parametrize("size", [1, 2, 3, 7, 42, 10000])
def test_buffer_size_does_not_change_result(open_fd, size):
    content = b"alpha\n\nbeta gamma\ndelta\nend"
    fd = open_fd(content)
    lines = list(LineReader(size).lines(fd))
    assert "".join(lines) == content.decode()
    assert all(line.endswith("\n") for line in lines[:-1])


def test_empty_lines_are_kept(open_fd):
    fd = open_fd(b"\n\n")
    assert list(LineReader(5).lines(fd)) == ["\n", "\n"]


def test_descriptors_are_kept_apart(open_fd):
    fd_a = open_fd(b"a1\na2\n")
    fd_b = open_fd(b"b1\nb2\n")
    reader = LineReader(16)
    assert reader.next_line(fd_a) == "a1\n"
    assert reader.next_line(fd_b) == "b1\n"
    assert reader.next_line(fd_a) == "a2\n"
    assert reader.next_line(fd_b) == "b2\n"


def test_reads_from_pipe():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"x\ny\n")
        os.close(write_fd)
        assert list(LineReader(3).lines(read_fd)) == ["x\n", "y\n"]
    finally:
        os.close(read_fd)


def test_module_function(open_fd):
    fd = open_fd(b"hello\nworld")
    assert get_next_line(fd) == "hello\n"
    assert get_next_line(fd) == "world"
    assert get_next_line(fd) is None


def test_negative_descriptor_rejected():
    with pytest.raises(ValueError):
        LineReader().next_line(-1)


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(size)


def test_read_error_propagates(open_fd):
    fd = open_fd(b"data")
    os.close(fd)
    new_fd = os.open(os.devnull, os.O_RDONLY)
    os.close(new_fd)
    with pytest.raises(OSError):
        LineReader().next_line(new_fd + 1000)
    # Re-open a descriptor so the fixture's close succeeds.
    reopened = os.open(os.devnull, os.O_RDONLY)
    if reopened != fd:
        os.dup2(reopened, fd)
        os.close(reopened)