"""Shared constants for the cursor position report protocol."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["

# Device Status Report 6: ask the terminal where the cursor is
CPR_REQUEST = b"\x1b[6n"

# Reply grammar: ESC [ <row> ; <column> R
ESC_BYTE = 0x1B
OPEN_MARKER = ord("[")
SEPARATOR = ord(";")
TERMINATOR = ord("R")

# ESC[1;1R is the shortest reply a terminal can send
MIN_RESPONSE_SIZE = 6
DEFAULT_RESPONSE_CAPACITY = 30
