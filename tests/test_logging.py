"""Tests for logging helpers."""

import logging

from termprobe.logging import escape_control_processor, get_logger


class TestEscapeControlProcessor:
    def test_escapes_bytes(self) -> None:
        event = {"event": "cursor.response", "response": b"\x1b[12;34R"}
        result = escape_control_processor(None, "debug", event)
        assert result["response"] == "\\x1b[12;34R"

    def test_escapes_strings(self) -> None:
        event = {"event": "bell\x07 and newline\n"}
        result = escape_control_processor(None, "debug", event)
        assert result["event"] == "bell\\x07 and newline\\x0a"

    def test_leaves_other_values(self) -> None:
        event = {"event": "mode.raw_input.enter", "fd": 3}
        assert escape_control_processor(None, "debug", event) == event


class TestGetLogger:
    def test_routes_through_stdlib(self, caplog) -> None:
        logger = get_logger("termprobe.test")
        with caplog.at_level(logging.DEBUG, logger="termprobe.test"):
            logger.debug("probe.event", fd=1)
        assert any("probe.event" in record.getMessage() for record in caplog.records)

    def test_silent_on_stdout_by_default(self, capsys) -> None:
        get_logger("termprobe.quiet").debug("should.not.print")
        assert "should.not.print" not in capsys.readouterr().out
