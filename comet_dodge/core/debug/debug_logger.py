"""
debug_logger.py
---------------
Console logger for the game, filtered by category and verbosity.

Line format: [HH:MM:SS] [Source][TAG] message
Source is the calling class, or the calling module in CamelCase.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Which categories print, and the most verbose level that does."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Startup and platform
        "system": True,
        "loading": False,
        "input": False,

        # Simulation
        "session": True,
        "spawn": True,
        "collision": True,
        "timing": False,

        # Collaborators
        "persistence": True,
        "render": True,
        "ui": True,
        "event": False,
    }


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger; every method is safe to call before pygame starts."""

    LINE_LENGTH = 59
    STATUS_COLUMN = 30

    LEVEL_VALUES = {
        "NONE": 0,
        "ERROR": 1,
        "WARN": 2,
        "INFO": 3,
        "VERBOSE": 4,
    }

    @staticmethod
    def set_level(level: str):
        """Change the global log level. Unknown names are ignored with a warning."""
        level = str(level).upper()
        if level not in DebugLogger.LEVEL_VALUES:
            DebugLogger.warn(f"Unknown log level '{level}', keeping {LoggerConfig.LOG_LEVEL}")
            return
        LoggerConfig.LOG_LEVEL = level

    # ===========================================================
    # Internals
    # ===========================================================

    @staticmethod
    def _enabled(category: str, level: str) -> bool:
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        wanted = DebugLogger.LEVEL_VALUES[level]
        allowed = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)
        return wanted <= allowed

    @staticmethod
    def _source() -> str:
        """Name of the object or module that called a public log method."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__

        module = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1]
        return "".join(part.capitalize() for part in module[:-3].split("_"))

    @staticmethod
    def _emit(tag: str, message: str, color: str, category: str, level: str):
        if not DebugLogger._enabled(category, level):
            return
        stamp = datetime.now().strftime("%H:%M:%S")
        source = DebugLogger._source()
        print(f"{color}[{stamp}] [{source}][{tag}] {message}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._emit("SYSTEM", msg, Colors.MAGENTA, category, "INFO")

    @staticmethod
    def state(msg: str, category: str = "session"):
        """Session phase and score changes."""
        DebugLogger._emit("STATE", msg, Colors.CYAN, category, "INFO")

    @staticmethod
    def action(msg: str, category: str = "system"):
        """Something the player or a collaborator triggered."""
        DebugLogger._emit("ACTION", msg, Colors.GREEN, category, "INFO")

    @staticmethod
    def trace(msg: str, category: str = "collision"):
        """Per-tick detail, only at VERBOSE."""
        DebugLogger._emit("TRACE", msg, Colors.BLUE, category, "VERBOSE")

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._emit("WARN", msg, Colors.YELLOW, category, "WARN")

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a ruled, centered section header."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        heading = f"[{title}]".center(DebugLogger.LINE_LENGTH)
        print(f"\n{Colors.WHITE}{rule}\n{heading}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str):
        """Print '> Module ....... [OK]' for a component that finished setup."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        label = f"> {module}"
        status = "[OK]"
        pad = max(DebugLogger.STATUS_COLUMN - len(label), 1)
        dots = max(DebugLogger.LINE_LENGTH - (len(label) + pad + 1 + len(status)), 1)
        print(f"{Colors.WHITE}{label}{' ' * pad}{'.' * dots} {Colors.GREEN}{status}{Colors.RESET}")

    @staticmethod
    def init_sub(detail: str):
        """Print an indented bullet under the last init_entry."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"    • {Colors.WHITE}{detail}{Colors.RESET}")
