import io

import pytest

from solong.linereader import LineReader


class _CountingStream(io.BytesIO):
    def __init__(self, data):
        super().__init__(data)
        self.requests = []

    def read(self, size=-1):
        self.requests.append(size)
        return super().read(size)


class _FailingStream:
    def __init__(self):
        self.calls = 0

    def read(self, size):
        self.calls += 1
        if self.calls == 1:
            return b"partial"
        raise OSError("read failed")


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 5, 42, 1000])
def test_lines_reassemble(buffer_size):
    data = b"1111\n1PCE1\n10001\n1111"
    lines = list(LineReader(io.BytesIO(data), buffer_size))
    assert b"".join(lines) == data
    assert lines == data.splitlines(keepends=True)


def test_each_line_ends_with_newline_except_last():
    data = b"ab\ncd\nef"
    lines = list(LineReader(io.BytesIO(data), 4))
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert lines[-1] == b"ef"


def test_empty_stream():
    reader = LineReader(io.BytesIO(b""), 8)
    assert reader.read_line() is None
    assert list(reader) == []


def test_none_after_exhaustion():
    reader = LineReader(io.BytesIO(b"x\n"), 8)
    assert reader.read_line() == b"x\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_blank_lines_kept():
    data = b"\n\nz\n"
    assert list(LineReader(io.BytesIO(data), 3)) == [b"\n", b"\n", b"z\n"]


def test_text_stream():
    data = "first\nsecond\n"
    assert list(LineReader(io.StringIO(data), 4)) == data.splitlines(keepends=True)


def test_reads_use_buffer_size():
    stream = _CountingStream(b"0123456789\n")
    LineReader(stream, 4).read_line()
    assert set(stream.requests) == {4}


def test_default_buffer_size_reads_whole_short_file():
    data = b"short line\nnext\n"
    assert list(LineReader(io.BytesIO(data))) == data.splitlines(keepends=True)


@pytest.mark.parametrize("size", [0, -3])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b"a"), size)


def test_read_error_propagates_and_discards():
    stream = _FailingStream()
    reader = LineReader(stream, 4)
    with pytest.raises(OSError):
        reader.read_line()
    with pytest.raises(OSError):
        reader.read_line()
    assert stream.calls == 3