"""Cursor position query over the ANSI device status report."""

from __future__ import annotations

import os
import select
import sys
import threading
import time
from typing import Optional

from termprobe.codec.cpr_parser import ResponseBuffer, parse_cursor_report
from termprobe.core.constants import CPR_REQUEST, DEFAULT_RESPONSE_CAPACITY
from termprobe.core.geometry import CursorPosition
from termprobe.errors import MalformedResponse, ReadError, ResponseTimeout
from termprobe.logging import get_logger
from termprobe.term.mode import raw_input_mode, stream_fd

logger = get_logger(__name__)

# The terminal mode and the reply bytes are process-wide; one query at a time.
_query_lock = threading.Lock()


def query_cursor_position(
    timeout: Optional[float] = None,
    *,
    input_fd: Optional[int] = None,
    output_fd: Optional[int] = None,
    capacity: int = DEFAULT_RESPONSE_CAPACITY,
) -> CursorPosition:
    """
    Ask the terminal where the cursor is.

    Switches the input terminal to non-canonical, no-echo mode, writes
    ``ESC[6n`` and reads the ``ESC[row;colR`` reply one byte at a time. The
    original terminal mode is restored before this returns or raises.

    Args:
        timeout: Seconds to wait for the complete reply. None waits forever.
        input_fd: Descriptor the reply is read from (standard input by default).
        output_fd: Descriptor the request is written to (standard output by default).
        capacity: Maximum reply length in bytes.

    Raises:
        ReadError: The input reached end of stream before the reply finished.
        ResponseTimeout: The reply did not finish within ``timeout``.
        MalformedResponse: The reply does not follow the report grammar.
        TerminalModeError: The input is not a terminal, or a standard stream
            has no file descriptor.
        ValueError: ``timeout`` is not positive or ``capacity`` is too small.
            Nothing is written in that case.
    """
    if timeout is not None and timeout <= 0:
        raise ValueError(f"timeout must be positive or None, got {timeout}")
    buffer = ResponseBuffer(capacity)

    if input_fd is None:
        input_fd = stream_fd(sys.stdin, "standard input")
    if output_fd is None:
        output_fd = stream_fd(sys.stdout, "standard output")
        sys.stdout.flush()

    with _query_lock, raw_input_mode(input_fd):
        _write_all(output_fd, CPR_REQUEST)
        logger.debug("cursor.request_sent", fd=output_fd)
        response = _read_report(input_fd, timeout, buffer)

    logger.debug("cursor.response", response=response)
    return parse_cursor_report(response)


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _read_report(fd: int, timeout: Optional[float], buffer: ResponseBuffer) -> bytes:
    """Read bytes until the terminator, end of stream, deadline, or a full buffer."""
    deadline = None if timeout is None else time.monotonic() + timeout

    while True:
        if buffer.full:
            raise MalformedResponse(
                f"no terminator within {buffer.capacity} bytes", bytes(buffer)
            )
        if deadline is not None and not _wait_readable(fd, deadline):
            raise ResponseTimeout(timeout, bytes(buffer))

        try:
            chunk = os.read(fd, 1)
        except OSError as exc:
            # A pty whose other side went away reports EIO rather than EOF
            raise ReadError(f"reading the reply failed: {exc}") from exc
        if not chunk:
            raise ReadError(f"input closed after {len(buffer)} bytes of the reply")

        if buffer.push(chunk[0]):
            return bytes(buffer)


def _wait_readable(fd: int, deadline: float) -> bool:
    remaining = deadline - time.monotonic()
    if remaining <= 0:
        return False
    ready, _, _ = select.select([fd], [], [], remaining)
    return bool(ready)
