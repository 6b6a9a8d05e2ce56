"""Tests for the CLI entry point helpers."""

from __future__ import annotations

import logging

import pytest

from gnomad_mcp import _log_level


class TestLogLevel:
    def test_default_is_info(self, monkeypatch) -> None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert _log_level() == logging.INFO

    def test_name_is_case_insensitive(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert _log_level() == logging.DEBUG

    @pytest.mark.parametrize("value", ["verbose", "", "Level 5"])
    def test_unknown_name_falls_back_to_info(self, monkeypatch, value: str) -> None:
        monkeypatch.setenv("LOG_LEVEL", value)
        assert _log_level() == logging.INFO
