"""Exception hierarchy for terminal probes."""

from __future__ import annotations


class TermProbeError(Exception):
    """Base class for all termprobe errors."""


class ConfigError(TermProbeError):
    """An environment setting has an invalid value."""


class TerminalSizeError(TermProbeError):
    """The terminal size could not be queried (e.g. output is not a terminal)."""


class CursorQueryError(TermProbeError):
    """
    Base class for cursor position query failures.

    All subclasses are recoverable: the terminal mode has already been
    restored when one of them reaches the caller, so retrying or falling
    back to a default position is safe.
    """


class ReadError(CursorQueryError):
    """The input stream produced no data while a reply was expected."""


class ResponseTimeout(ReadError):
    """The terminal did not finish its reply before the deadline."""

    def __init__(self, timeout: float, received: bytes = b"") -> None:
        super().__init__(f"no cursor position report within {timeout:g}s")
        self.timeout = timeout
        self.received = received


class MalformedResponse(CursorQueryError):
    """The reply does not match ``ESC [ row ; column R``."""

    def __init__(self, reason: str, response: bytes = b"") -> None:
        super().__init__(f"{reason}: {response!r}" if response else reason)
        self.reason = reason
        self.response = response


class TerminalModeError(CursorQueryError):
    """The terminal mode could not be read or written (input is not a terminal)."""
