"""
debug_logger.py
---------------
Console logger for bulletdodge with per-category filtering.

Log lines look like:
    [12:00:01] [GameController][STATE:game_state] IDLE -> PLAYING

Startup diagnostics (section, init_entry, init_sub) bypass the level and
category filters and only honor LoggerConfig.ENABLE_LOGGING.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Which subsystems log, and how verbosely."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Host
        "system": True,
        "loading": False,
        "input": True,
        "timer": False,
        "event_manager": False,

        # Game flow
        "game_state": True,

        # Simulation
        "player": True,
        "spawner": False,
        "bullet": False,
        "collision": True,
    }

    SHOW_TIMESTAMP = True
    SHOW_CATEGORY = True


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
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
    ENTRY_COLUMN = 30

    LEVEL_VALUES = {
        "NONE": 0,
        "WARN": 1,
        "INFO": 2,
        "VERBOSE": 3,
    }

    # tag -> (color, level)
    TAGS = {
        "INIT": (Colors.WHITE, "INFO"),
        "SYSTEM": (Colors.MAGENTA, "INFO"),
        "STATE": (Colors.CYAN, "INFO"),
        "ACTION": (Colors.GREEN, "INFO"),
        "TRACE": (Colors.BLUE, "VERBOSE"),
        "WARN": (Colors.YELLOW, "WARN"),
    }

    # ===========================================================
    # Filtering
    # ===========================================================

    @staticmethod
    def _should_log(category: str, level: str) -> bool:
        if not LoggerConfig.ENABLE_LOGGING:
            return False

        level_val = DebugLogger.LEVEL_VALUES[level]
        if level_val > DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 2):
            return False

        # Warnings are never filtered by category
        if level == "WARN":
            return True
        return LoggerConfig.CATEGORIES.get(category, False)

    @staticmethod
    def _get_caller() -> str:
        """Class name of the calling object, or the module name in CamelCase."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        owner = frame.f_locals.get("self")
        if owner is not None:
            return owner.__class__.__name__

        module = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1]
        return "".join(p.capitalize() for p in module[:-3].split("_"))

    # ===========================================================
    # Output
    # ===========================================================

    @staticmethod
    def _log(tag: str, message: str, category: str):
        color, level = DebugLogger.TAGS[tag]
        if not DebugLogger._should_log(category, level):
            return

        parts = []
        if LoggerConfig.SHOW_TIMESTAMP:
            parts.append(f"[{datetime.now():%H:%M:%S}] ")
        parts.append(f"[{DebugLogger._get_caller()}]")
        parts.append(f"[{tag}:{category}] " if LoggerConfig.SHOW_CATEGORY else f"[{tag}] ")

        print(f"{color}{''.join(parts)}{message}{Colors.RESET}")

    @staticmethod
    def init(msg: str, category: str = "system"):
        DebugLogger._log("INIT", msg, category)

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._log("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "system"):
        """State transition (game flow, player lifecycle, bullet field)."""
        DebugLogger._log("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        """Something the player or the user did."""
        DebugLogger._log("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "collision"):
        """Per-frame detail, only shown at VERBOSE."""
        DebugLogger._log("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, category)

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a ruled section header."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        line = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{Colors.WHITE}{line}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str):
        """Print '> Module ........ [OK]'."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(DebugLogger._render_entry(module))

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"{' ' * (level * 4)}• {Colors.WHITE}{detail}{Colors.RESET}")

    @staticmethod
    def _render_entry(module: str) -> str:
        prefix = f"> {module}"
        status = "[OK]"
        pad = max(DebugLogger.ENTRY_COLUMN - len(prefix), 1)
        dots = max(DebugLogger.LINE_LENGTH - len(prefix) - pad - 1 - len(status), 1)
        return (f"{Colors.WHITE}{prefix}{' ' * pad}{'.' * dots} "
                f"{Colors.GREEN}{status}{Colors.RESET}")
