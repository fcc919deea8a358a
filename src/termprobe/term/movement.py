"""Cursor positioning sequences."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from termprobe.core.constants import CSI


class Cursor:
    """
    Emit CSI cursor movement sequences.

    Rows and columns are 1-based, matching what ``query_cursor_position``
    reports, so ``Cursor.move_to(pos.row, pos.column)`` returns to a
    previously queried spot.
    """

    @staticmethod
    def _emit(sequence: str, stream: Optional[TextIO]) -> None:
        out = sys.stdout if stream is None else stream
        out.write(sequence)
        out.flush()

    @staticmethod
    def move_to_home(stream: Optional[TextIO] = None) -> None:
        """Move cursor to the top-left corner."""
        Cursor._emit(f"{CSI}H", stream)

    @staticmethod
    def move_to(row: int, column: int, stream: Optional[TextIO] = None) -> None:
        """Move cursor to (row, column)."""
        Cursor._emit(f"{CSI}{row};{column}f", stream)

    @staticmethod
    def move_to_column(column: int, stream: Optional[TextIO] = None) -> None:
        """Move cursor to ``column`` within the current line."""
        Cursor._emit(f"{CSI}{column}G", stream)

    @staticmethod
    def move_right(count: int, stream: Optional[TextIO] = None) -> None:
        """Move cursor right by ``count``; negative moves left."""
        if count > 0:
            Cursor._emit(f"{CSI}{count}C", stream)
        elif count < 0:
            Cursor._emit(f"{CSI}{-count}D", stream)

    @staticmethod
    def move_left(count: int, stream: Optional[TextIO] = None) -> None:
        Cursor.move_right(-count, stream)
