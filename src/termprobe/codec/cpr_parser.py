"""Cursor position report (CPR) decoding."""

from __future__ import annotations

from termprobe.core.constants import (
    DEFAULT_RESPONSE_CAPACITY,
    ESC_BYTE,
    OPEN_MARKER,
    SEPARATOR,
    TERMINATOR,
)
from termprobe.core.geometry import CursorPosition
from termprobe.errors import MalformedResponse
from termprobe.logging import get_logger

logger = get_logger(__name__)

_DIGIT_0 = ord("0")
_DIGIT_9 = ord("9")


class ResponseBuffer:
    """
    Fixed-capacity accumulator for a terminal reply.

    Bytes are pushed one at a time as they are read; ``push`` reports when
    the terminator arrives. The buffer never grows past its capacity.
    """

    def __init__(self, capacity: int = DEFAULT_RESPONSE_CAPACITY):
        if capacity < 2:
            raise ValueError(f"capacity must be at least 2, got {capacity}")
        self.capacity = capacity
        self._data = bytearray()

    def push(self, byte: int) -> bool:
        """Append one byte. Returns True once the terminator has been stored."""
        if self.full:
            raise MalformedResponse(
                f"no terminator within {self.capacity} bytes", bytes(self._data)
            )
        self._data.append(byte)
        return byte == TERMINATOR

    @property
    def full(self) -> bool:
        return len(self._data) >= self.capacity

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)


def parse_cursor_report(response: bytes) -> CursorPosition:
    """
    Decode ``ESC [ row ; column R`` into a CursorPosition.

    Fields are scanned right to left from just before the terminator, since
    their lengths are not known up front: first the column up to ``;``, then
    the row up to ``[``. Anything in front of the ``ESC`` is stray input that
    arrived before the reply and is ignored.

    Raises:
        MalformedResponse: on any deviation from the grammar.
    """
    if len(response) < 2 or response[-1] != TERMINATOR:
        raise MalformedResponse("reply is not terminated by 'R'", response)

    column, index = _scan_field(response, len(response) - 2, SEPARATOR)
    row, index = _scan_field(response, index - 1, OPEN_MARKER)

    if index == 0 or response[index - 1] != ESC_BYTE:
        raise MalformedResponse("missing ESC before '['", response)
    if index > 1:
        logger.debug("cpr.leading_bytes", skipped=response[: index - 1])

    if row == 0 or column == 0:
        raise MalformedResponse("coordinates are 1-based", response)

    return CursorPosition(row=row, column=column)


def _scan_field(response: bytes, index: int, stop: int) -> tuple[int, int]:
    """
    Accumulate a decimal field ending at ``index``, scanning backward to ``stop``.

    Returns the value and the index of the stop byte.
    """
    value = 0
    weight = 1
    end = index

    while index >= 0 and response[index] != stop:
        byte = response[index]
        if not _DIGIT_0 <= byte <= _DIGIT_9:
            raise MalformedResponse(
                f"non-digit byte {bytes([byte])!r} in numeric field", response
            )
        value += (byte - _DIGIT_0) * weight
        weight *= 10
        index -= 1

    if index < 0:
        raise MalformedResponse(f"missing {chr(stop)!r}", response)
    if index == end:
        raise MalformedResponse(f"empty field before {chr(stop)!r}", response)

    return value, index
