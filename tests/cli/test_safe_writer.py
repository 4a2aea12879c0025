"""Unit tests for SafeWriter."""

import errno
import io
import os
from unittest.mock import patch

import pytest

from pretty_print.cli.safe_writer import SafeWriter, stdout_target


def test_write_to_stream():
    buffer = io.StringIO()
    with SafeWriter(buffer) as writer:
        writer.write("hello\n")
        writer.write("world\n")
    assert buffer.getvalue() == "hello\nworld\n"


def test_write_to_descriptor_preserves_raw_bytes(tmp_path):
    path = tmp_path / "out.bin"
    fd = os.open(str(path), os.O_WRONLY | os.O_CREAT)
    try:
        with SafeWriter(fd) as writer:
            writer.write(b"caf\xe9\r\n".decode("utf-8", "surrogateescape"))
            writer.write("📁 ok\n")
    finally:
        os.close(fd)
    assert path.read_bytes() == b"caf\xe9\r\n" + "📁 ok\n".encode("utf-8")


def test_partial_writes_are_completed():
    written = []

    def short_write(fd, data):
        chunk = bytes(data[:3])
        written.append(chunk)
        return len(chunk)

    with patch("pretty_print.cli.safe_writer.os.write", side_effect=short_write):
        SafeWriter(99).write("abcdefgh")
    assert b"".join(written) == b"abcdefgh"


def test_broken_pipe_on_descriptor():
    error = OSError(errno.EPIPE, "Broken pipe")
    with patch("pretty_print.cli.safe_writer.os.write", side_effect=error):
        with pytest.raises(BrokenPipeError):
            SafeWriter(99).write("data")


def test_other_errors_propagate():
    error = OSError(errno.ENOSPC, "No space left on device")
    with patch("pretty_print.cli.safe_writer.os.write", side_effect=error):
        with pytest.raises(OSError) as exc_info:
            SafeWriter(99).write("data")
    assert exc_info.value.errno == errno.ENOSPC


def test_write_after_close():
    writer = SafeWriter(io.StringIO())
    writer.close()
    with pytest.raises(ValueError, match="Cannot write to closed SafeWriter"):
        writer.write("x")


def test_invalid_target():
    with pytest.raises(TypeError):
        SafeWriter(object())


def test_stdout_target_without_fileno(monkeypatch):
    stream = io.StringIO()
    monkeypatch.setattr("sys.stdout", stream)
    assert stdout_target() is stream
