"""Core value types and protocol constants."""

from termprobe.core.geometry import CursorPosition, TerminalSize

__all__ = ["CursorPosition", "TerminalSize"]
