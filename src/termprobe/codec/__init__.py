"""Decoding of terminal replies."""

from termprobe.codec.cpr_parser import ResponseBuffer, parse_cursor_report

__all__ = ["ResponseBuffer", "parse_cursor_report"]
