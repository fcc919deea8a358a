"""Probe settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from termprobe.core.constants import DEFAULT_RESPONSE_CAPACITY, MIN_RESPONSE_SIZE
from termprobe.errors import ConfigError

TIMEOUT_ENV = "TERMPROBE_TIMEOUT"
BUFFER_SIZE_ENV = "TERMPROBE_BUFFER_SIZE"
DEBUG_ENV = "TERMPROBE_DEBUG"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "off"}


@dataclass(frozen=True)
class ProbeSettings:
    """
    Tunables for the cursor position query.

    Example:
        >>> settings = ProbeSettings.from_env().with_overrides(timeout=0.5)
        >>> query_cursor_position(settings.timeout, capacity=settings.capacity)
    """

    timeout: Optional[float] = None  # None = wait for the terminal forever
    capacity: int = DEFAULT_RESPONSE_CAPACITY
    debug: bool = False

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout < 0:
            raise ConfigError(f"timeout must not be negative, got {self.timeout}")
        if self.capacity < MIN_RESPONSE_SIZE:
            raise ConfigError(
                f"buffer size must be at least {MIN_RESPONSE_SIZE}, got {self.capacity}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ProbeSettings:
        """Build settings from TERMPROBE_* variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        return cls(
            timeout=_parse_timeout(env.get(TIMEOUT_ENV)),
            capacity=_parse_capacity(env.get(BUFFER_SIZE_ENV)),
            debug=_parse_flag(env.get(DEBUG_ENV)),
        )

    def with_overrides(self, **changes: object) -> ProbeSettings:
        """Return a copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{TIMEOUT_ENV} must be a number of seconds, got {raw!r}") from None
    # 0 disables the deadline
    return value or None


def _parse_capacity(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_RESPONSE_CAPACITY
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{BUFFER_SIZE_ENV} must be an integer, got {raw!r}") from None


def _parse_flag(raw: Optional[str]) -> bool:
    value = (raw or "").strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{DEBUG_ENV} must be a boolean, got {raw!r}")
