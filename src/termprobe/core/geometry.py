"""Terminal geometry value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class TerminalSize:
    """
    Terminal dimensions as reported by the device.

    Pixel fields are 0 when the terminal does not report them.
    """
    rows: int
    columns: int
    x_pixels: int = 0
    y_pixels: int = 0

    UNKNOWN: ClassVar[TerminalSize]

    @property
    def is_known(self) -> bool:
        """Check if the terminal reported a usable character grid."""
        return self.rows > 0 and self.columns > 0

    def __str__(self) -> str:
        return f"{self.rows}x{self.columns}"


TerminalSize.UNKNOWN = TerminalSize(0, 0)


@dataclass(frozen=True)
class CursorPosition:
    """Cursor location, 1-based like the terminal reports it."""
    row: int
    column: int

    def __str__(self) -> str:
        return f"{self.row};{self.column}"
