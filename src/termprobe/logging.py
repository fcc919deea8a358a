from __future__ import annotations

import errno
import logging
import sys

import structlog


_CONTROL_ESCAPES = {code: f"\\x{code:02x}" for code in (*range(0x20), 0x7F)}


def escape_control_processor(_, __, event_dict):
    """Processor that escapes control bytes so log lines never drive the terminal."""
    for key, value in event_dict.items():
        if isinstance(value, (bytes, bytearray)):
            event_dict[key] = bytes(value).decode("latin-1").translate(_CONTROL_ESCAPES)
        elif isinstance(value, str):
            event_dict[key] = value.translate(_CONTROL_ESCAPES)
    return event_dict


class SafeStreamHandler(logging.StreamHandler):
    def handleError(self, record: logging.LogRecord) -> None:
        exc = sys.exc_info()[1]
        if isinstance(exc, BrokenPipeError) or (
            isinstance(exc, OSError) and exc.errno == errno.EPIPE
        ):
            try:
                self.stream.close()
            except OSError:
                pass
            return
        super().handleError(record)


def setup_logging(*, debug: bool = False) -> None:
    """Configure structlog on stderr; stdout belongs to the terminal protocol."""

    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            escape_control_processor,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
            if debug
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = SafeStreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        handlers=[handler],
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    # Always backed by stdlib logging: an unconfigured structlog prints to
    # stdout, which would land in the middle of a terminal query.
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )
