"""Terminal probes: size, cursor position, and line-discipline control."""

from termprobe.term.cursor import query_cursor_position
from termprobe.term.mode import TerminalModeSnapshot, raw_input_mode
from termprobe.term.movement import Cursor
from termprobe.term.size import query_terminal_size

__all__ = [
    "query_cursor_position",
    "query_terminal_size",
    "raw_input_mode",
    "TerminalModeSnapshot",
    "Cursor",
]
