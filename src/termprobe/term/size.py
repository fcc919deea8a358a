"""Terminal size query via the TIOCGWINSZ ioctl."""

from __future__ import annotations

import fcntl
import struct
import sys
import termios
from typing import Optional

from termprobe.core.geometry import TerminalSize
from termprobe.errors import TerminalSizeError
from termprobe.logging import get_logger

logger = get_logger(__name__)

# struct winsize { unsigned short ws_row, ws_col, ws_xpixel, ws_ypixel; }
WINSIZE = struct.Struct("HHHH")


def query_terminal_size(
    fd: Optional[int] = None, *, fallback: Optional[TerminalSize] = None
) -> TerminalSize:
    """
    Return the size of the terminal behind ``fd`` (standard output by default).

    Raises TerminalSizeError when ``fd`` is not a terminal, unless a
    ``fallback`` is given, in which case that is returned instead. A
    terminal reporting 0x0 is returned as-is; check ``is_known``.
    """
    try:
        if fd is None:
            fd = sys.stdout.fileno()
        packed = fcntl.ioctl(fd, termios.TIOCGWINSZ, bytes(WINSIZE.size))
    except (OSError, ValueError) as exc:
        # ValueError: stdout is closed or has no descriptor (StringIO)
        if fallback is not None:
            logger.debug("size.fallback", fd=fd, error=str(exc))
            return fallback
        raise TerminalSizeError(f"cannot query terminal size of fd {fd}: {exc}") from exc

    rows, columns, x_pixels, y_pixels = WINSIZE.unpack(packed)
    return TerminalSize(rows, columns, x_pixels, y_pixels)
