"""
termprobe: terminal introspection primitives

Ask the terminal how big it is and where its cursor is.

Quick Start:
    >>> import termprobe
    >>> termprobe.query_terminal_size()
    TerminalSize(rows=24, columns=80, x_pixels=0, y_pixels=0)
    >>> termprobe.query_cursor_position(timeout=1.0)
    CursorPosition(row=3, column=1)

Features:
    - Terminal size from the TIOCGWINSZ ioctl, with an optional fallback
    - Cursor position via the ESC[6n / ESC[row;colR round trip
    - Terminal mode always restored, even when the query fails
    - Optional reply deadline for terminals that never answer
    - Typed errors for unreadable, late, or malformed replies
"""

__version__ = "0.1.0"

# Core types
from termprobe.core.geometry import CursorPosition, TerminalSize

# Errors
from termprobe.errors import (
    CursorQueryError,
    MalformedResponse,
    ReadError,
    ResponseTimeout,
    TermProbeError,
    TerminalModeError,
    TerminalSizeError,
)

# Probes
from termprobe.term.cursor import query_cursor_position
from termprobe.term.size import query_terminal_size
from termprobe.term.mode import TerminalModeSnapshot, raw_input_mode
from termprobe.term.movement import Cursor

# Settings
from termprobe.config import ProbeSettings

__all__ = [
    # Version
    "__version__",
    # Core types
    "CursorPosition",
    "TerminalSize",
    # Errors
    "TermProbeError",
    "TerminalSizeError",
    "CursorQueryError",
    "ReadError",
    "ResponseTimeout",
    "MalformedResponse",
    "TerminalModeError",
    # Probes
    "query_cursor_position",
    "query_terminal_size",
    "raw_input_mode",
    "TerminalModeSnapshot",
    "Cursor",
    # Settings
    "ProbeSettings",
]
