"""Unit tests for environment-driven reporter settings."""

from __future__ import annotations

import pytest

from script_helper.helpers.settings import HelperSettings, load_settings


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_defaults_from_empty_environment(self) -> None:
        assert load_settings({}) == HelperSettings(
            stream_name="stderr",
            color=True,
            fatal_exit_code=1,
        )

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCRIPT_HELPER_STREAM", "stdout")
        assert load_settings().stream_name == "stdout"

    @pytest.mark.parametrize("raw", ["stdout", "STDOUT", " stdout "])
    def test_stream_is_normalized(self, raw: str) -> None:
        assert load_settings({"SCRIPT_HELPER_STREAM": raw}).stream_name == "stdout"

    def test_unknown_stream_rejected(self) -> None:
        with pytest.raises(ValueError, match="SCRIPT_HELPER_STREAM"):
            load_settings({"SCRIPT_HELPER_STREAM": "syslog"})

    def test_no_color_disables_colors(self) -> None:
        assert load_settings({"NO_COLOR": "1"}).color is False

    def test_empty_no_color_keeps_colors(self) -> None:
        assert load_settings({"NO_COLOR": ""}).color is True

    def test_fatal_exit_code(self) -> None:
        env = {"SCRIPT_HELPER_FATAL_EXIT_CODE": "2"}
        assert load_settings(env).fatal_exit_code == 2

    def test_highest_exit_code_accepted(self) -> None:
        env = {"SCRIPT_HELPER_FATAL_EXIT_CODE": "255"}
        assert load_settings(env).fatal_exit_code == 255

    @pytest.mark.parametrize("raw", ["0", "abc", "1.5", "256", "512", "-1"])
    def test_bad_fatal_exit_code_rejected(self, raw: str) -> None:
        with pytest.raises(ValueError, match="SCRIPT_HELPER_FATAL_EXIT_CODE"):
            load_settings({"SCRIPT_HELPER_FATAL_EXIT_CODE": raw})
