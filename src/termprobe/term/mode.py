"""Terminal line-discipline snapshots and scoped raw input mode (POSIX only)."""

from __future__ import annotations

import sys
import termios
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from termprobe.errors import TerminalModeError
from termprobe.logging import get_logger

logger = get_logger(__name__)

# Indices into the list returned by termios.tcgetattr
LFLAG = 3
CC = 6


@dataclass(frozen=True)
class TerminalModeSnapshot:
    """
    Verbatim copy of one descriptor's termios attributes.

    Owned by whoever captured it; restoring writes back exactly what was
    read, so the terminal ends up bit-identical to the moment of capture.
    """
    fd: int
    attributes: tuple

    @classmethod
    def capture(cls, fd: int) -> TerminalModeSnapshot:
        try:
            attrs = termios.tcgetattr(fd)
        except (termios.error, OSError) as exc:
            raise TerminalModeError(f"cannot read terminal mode of fd {fd}: {exc}") from exc
        # The control character list is mutable, so copy it
        return cls(fd, (*attrs[:CC], tuple(attrs[CC])))

    def as_list(self) -> list:
        """Attributes in the mutable form tcsetattr expects."""
        attrs = list(self.attributes)
        attrs[CC] = list(attrs[CC])
        return attrs

    def raw_input_attributes(self) -> list:
        """
        Attributes with canonical input and echo disabled.

        Reads return as soon as one byte is available (VMIN=1, VTIME=0);
        every other setting is left as captured.
        """
        attrs = self.as_list()
        attrs[LFLAG] &= ~(termios.ICANON | termios.ECHO)
        attrs[CC][termios.VMIN] = 1
        attrs[CC][termios.VTIME] = 0
        return attrs

    def apply(self, attrs: list) -> None:
        """Install ``attrs`` on the snapshot's descriptor immediately."""
        try:
            termios.tcsetattr(self.fd, termios.TCSANOW, attrs)
        except (termios.error, OSError) as exc:
            raise TerminalModeError(f"cannot set terminal mode of fd {self.fd}: {exc}") from exc

    def restore(self) -> None:
        """Put the captured attributes back."""
        self.apply(self.as_list())


def stream_fd(stream: TextIO, name: str) -> int:
    """Descriptor behind a standard stream; TerminalModeError if it has none."""
    try:
        return stream.fileno()
    except (OSError, ValueError) as exc:
        raise TerminalModeError(f"{name} has no file descriptor: {exc}") from exc


@contextmanager
def raw_input_mode(fd: Optional[int] = None) -> Iterator[TerminalModeSnapshot]:
    """
    Disable canonical input and echo for the duration of the block.

    Yields the original snapshot. The original mode is restored on every
    exit path, including exceptions raised inside the block.
    """
    if fd is None:
        fd = stream_fd(sys.stdin, "standard input")

    snapshot = TerminalModeSnapshot.capture(fd)
    snapshot.apply(snapshot.raw_input_attributes())
    logger.debug("mode.raw_input.enter", fd=fd)
    try:
        yield snapshot
    finally:
        snapshot.restore()
        logger.debug("mode.raw_input.restored", fd=fd)
