"""Tests for ProbeSettings."""

import pytest

from termprobe.config import ProbeSettings
from termprobe.errors import ConfigError


class TestProbeSettingsFromEnv:
    """Test ProbeSettings.from_env."""

    def test_defaults(self) -> None:
        settings = ProbeSettings.from_env({})
        assert settings.timeout is None
        assert settings.capacity == 30
        assert settings.debug is False

    def test_reads_variables(self) -> None:
        settings = ProbeSettings.from_env({
            "TERMPROBE_TIMEOUT": "0.5",
            "TERMPROBE_BUFFER_SIZE": "64",
            "TERMPROBE_DEBUG": "yes",
        })
        assert settings.timeout == 0.5
        assert settings.capacity == 64
        assert settings.debug is True

    def test_zero_timeout_means_none(self) -> None:
        assert ProbeSettings.from_env({"TERMPROBE_TIMEOUT": "0"}).timeout is None
        assert ProbeSettings.from_env({"TERMPROBE_TIMEOUT": " "}).timeout is None

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TERMPROBE_TIMEOUT", "2")
        assert ProbeSettings.from_env().timeout == 2.0

    @pytest.mark.parametrize("env", [
        {"TERMPROBE_TIMEOUT": "soon"},
        {"TERMPROBE_TIMEOUT": "-1"},
        {"TERMPROBE_BUFFER_SIZE": "big"},
        {"TERMPROBE_BUFFER_SIZE": "5"},
        {"TERMPROBE_DEBUG": "maybe"},
    ])
    def test_invalid_values(self, env) -> None:
        with pytest.raises(ConfigError):
            ProbeSettings.from_env(env)


class TestProbeSettingsOverrides:
    """Test ProbeSettings.with_overrides."""

    def test_applies_given_values(self) -> None:
        settings = ProbeSettings(timeout=1.0).with_overrides(timeout=0.25, debug=True)
        assert settings.timeout == 0.25
        assert settings.debug is True

    def test_skips_none(self) -> None:
        settings = ProbeSettings(timeout=1.0, capacity=40).with_overrides(timeout=None)
        assert settings.timeout == 1.0
        assert settings.capacity == 40

    def test_validates(self) -> None:
        with pytest.raises(ConfigError):
            ProbeSettings().with_overrides(capacity=2)
