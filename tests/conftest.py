"""Pytest fixtures: pseudo-terminals, pipes, and a termios stand-in."""

import logging
import os
import termios
from typing import Callable, Iterator

import pytest
import structlog


class FakeTerminal:
    """
    Stands in for termios so pipes can play the part of a terminal.

    Keeps one attribute list and records every tcsetattr call.
    """

    def __init__(self) -> None:
        self.attributes = [
            termios.ICRNL,
            termios.OPOST,
            termios.CS8 | termios.CREAD,
            termios.ICANON | termios.ECHO | termios.ISIG,
            termios.B38400,
            termios.B38400,
            [b"\x00"] * 32,
        ]
        self.original = self.snapshot()
        self.history: list[list] = []

    def snapshot(self) -> list:
        return [*self.attributes[:6], list(self.attributes[6])]

    def tcgetattr(self, fd: int) -> list:
        return self.snapshot()

    def tcsetattr(self, fd: int, when: int, attrs: list) -> None:
        self.history.append([*attrs[:6], list(attrs[6])])
        self.attributes = [*attrs[:6], list(attrs[6])]


@pytest.fixture
def fake_terminal(monkeypatch: pytest.MonkeyPatch) -> FakeTerminal:
    """Route termios get/set calls to a FakeTerminal."""
    fake = FakeTerminal()
    monkeypatch.setattr(termios, "tcgetattr", fake.tcgetattr)
    monkeypatch.setattr(termios, "tcsetattr", fake.tcsetattr)
    return fake


@pytest.fixture
def pty_pair() -> Iterator[tuple[int, int]]:
    """A (master, slave) pseudo-terminal pair, closed after the test."""
    master, slave = os.openpty()
    yield master, slave
    for fd in (master, slave):
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.fixture
def make_pipe() -> Iterator[Callable[..., tuple[int, int]]]:
    """
    Factory for pipes preloaded with bytes.

    ``make_pipe(data, close=True)`` returns (read_fd, write_fd); with
    ``close=True`` the write end is already closed so reads hit EOF after
    ``data``, and write_fd is -1.
    """
    opened: list[int] = []

    def factory(data: bytes = b"", close: bool = True) -> tuple[int, int]:
        read_fd, write_fd = os.pipe()
        opened.append(read_fd)
        if data:
            os.write(write_fd, data)
        if close:
            os.close(write_fd)
            return read_fd, -1
        opened.append(write_fd)
        return read_fd, write_fd

    yield factory

    for fd in opened:
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo logging configuration done by CLI invocations."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
