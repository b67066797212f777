"""
test_debug_logger.py
--------------------
Unit tests for console log filtering and formatting.
"""

import pytest

from comet_dodge.core.debug.debug_logger import DebugLogger, LoggerConfig


@pytest.fixture
def loud(monkeypatch):
    """Logging on at INFO with a fresh category table."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", True)
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(LoggerConfig, "CATEGORIES", {"system": True, "input": False})


class Recorder:
    def shout(self):
        DebugLogger.system("hello")


def test_line_names_calling_class(loud, capsys):
    Recorder().shout()

    out = capsys.readouterr().out
    assert "[Recorder][SYSTEM] hello" in out


def test_module_level_caller_uses_module_name(loud, capsys):
    DebugLogger.action("done")

    assert "[TestDebugLogger][ACTION] done" in capsys.readouterr().out


def test_disabled_category_is_silent(loud, capsys):
    DebugLogger.system("pressed", category="input")

    assert capsys.readouterr().out == ""


def test_trace_needs_verbose(loud, capsys):
    DebugLogger.trace("tick", category="system")
    assert capsys.readouterr().out == ""

    DebugLogger.set_level("verbose")
    DebugLogger.trace("tick", category="system")
    assert "[TRACE] tick" in capsys.readouterr().out


def test_level_none_silences_warnings(loud, capsys):
    DebugLogger.set_level("NONE")
    DebugLogger.warn("careful")

    assert capsys.readouterr().out == ""


def test_unknown_level_is_rejected(loud, capsys):
    DebugLogger.set_level("LOUD")

    assert LoggerConfig.LOG_LEVEL == "INFO"
    assert "Unknown log level 'LOUD'" in capsys.readouterr().out


def test_init_entry_aligns_status(loud, capsys):
    DebugLogger.init_entry("DrawManager")

    line = capsys.readouterr().out.rstrip("\n")
    assert line.startswith("\033[97m> DrawManager")
    assert line.endswith("[OK]\033[0m")
    assert "....." in line


def test_master_switch_silences_everything(monkeypatch, capsys):
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)

    DebugLogger.warn("careful")
    DebugLogger.section("Game Loop")
    DebugLogger.init_sub("detail")

    assert capsys.readouterr().out == ""
