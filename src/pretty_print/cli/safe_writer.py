"""Safe output writing utilities for the pretty_print CLI.

This module provides a writer that preserves the raw bytes of printed files and turns
a closed output pipe (``pretty-print . | head``) into a single BrokenPipeError that the
CLI can handle quietly.
"""

import errno
import io
import os
import sys
import types
from typing import Optional, TextIO, Type, Union

ENCODING = "utf-8"
ERRORS = "surrogateescape"


def stdout_target() -> Union[int, TextIO]:
    """Return the stdout file descriptor, or the stdout stream if it has none."""
    try:
        return sys.stdout.fileno()
    except (AttributeError, ValueError, io.UnsupportedOperation):
        return sys.stdout


def silence_stdout() -> None:
    """Point the stdout descriptor at the null device.

    Called after the reader of a pipe went away so the interpreter's final flush of
    stdout cannot fail with another broken pipe error during shutdown.
    """
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (AttributeError, ValueError, OSError, io.UnsupportedOperation):
        pass


class SafeWriter:
    """Writes text to a file descriptor or text stream.

    Text is encoded as UTF-8 with ``surrogateescape``, so bytes that were not valid UTF-8
    when a file was read are written back unchanged. When writing to a descriptor the
    whole payload is written even if the operating system accepts it in pieces.

    Attributes:
        target: File descriptor (int) or text stream being written to.

    Example:
        >>> import io
        >>> buffer = io.StringIO()
        >>> with SafeWriter(buffer) as writer:
        ...     writer.write("hello\\n")
        >>> buffer.getvalue()
        'hello\\n'
    """

    def __init__(self, target: Union[int, TextIO]):
        """Initialize the safe writer.

        Args:
            target: A file descriptor or an object with a ``write(str)`` method.

        Raises:
            TypeError: If target is neither.
        """
        if not isinstance(target, int) and not hasattr(target, "write"):
            raise TypeError(f"Expected a file descriptor or text stream, got {type(target).__name__}")
        self.target = target
        self._closed = False

    def write(self, data: str) -> None:
        """Write ``data`` completely.

        Raises:
            BrokenPipeError: If the reading end of the output pipe has been closed.
            OSError: If any other I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        try:
            if isinstance(self.target, int):
                payload = memoryview(data.encode(ENCODING, ERRORS))
                while payload:
                    written = os.write(self.target, payload)
                    payload = payload[written:]
            else:
                self.target.write(data)
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError(errno.EPIPE, "Output pipe closed") from e
            raise

    def flush(self) -> None:
        """Flush the underlying stream; descriptors are unbuffered."""
        if not isinstance(self.target, int):
            try:
                self.target.flush()
            except OSError as e:
                if e.errno == errno.EPIPE:
                    raise BrokenPipeError(errno.EPIPE, "Output pipe closed") from e
                raise

    def close(self) -> None:
        """Mark the writer as closed. The target itself belongs to the caller and stays open."""
        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            if exc_type is None:
                self.flush()
        finally:
            self.close()
