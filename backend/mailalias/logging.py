"""
Centralized logging configuration for mailalias.

Provides:
- Console logging with colored, prefixed output by service area
- File logging with timestamps for post-mortem analysis
- Logger factory for the different components
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


# ANSI color codes for console output
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    YELLOW = "\033[33m"
    WHITE = "\033[37m"

    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_MAGENTA = "\033[95m"
    BRIGHT_CYAN = "\033[96m"


# Area-specific colors and prefixes
AREA_CONFIG = {
    "main": {"color": Colors.BRIGHT_CYAN, "prefix": "MAILALIAS.main"},
    "dispatcher": {"color": Colors.BRIGHT_GREEN, "prefix": "MAILALIAS.dispatcher"},
    "vault": {"color": Colors.BRIGHT_MAGENTA, "prefix": "MAILALIAS.vault"},
    "provider": {"color": Colors.BRIGHT_YELLOW, "prefix": "MAILALIAS.provider"},
    "provider.generator": {"color": Colors.YELLOW, "prefix": "MAILALIAS.provider.generator"},
}

# Default for unknown areas
DEFAULT_AREA_CONFIG = {"color": Colors.WHITE, "prefix": "MAILALIAS"}


class ColoredConsoleFormatter(logging.Formatter):
    """Adds colors and area prefixes to console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.DIM,
        logging.INFO: Colors.RESET,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BRIGHT_RED + Colors.BOLD,
    }

    def __init__(self, area: str = "main"):
        super().__init__()
        config = AREA_CONFIG.get(area, DEFAULT_AREA_CONFIG)
        self.area_color = config["color"]
        self.area_prefix = config["prefix"]

    def format(self, record: logging.LogRecord) -> str:
        level_color = self.LEVEL_COLORS.get(record.levelno, Colors.RESET)
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        # Format: [MAILALIAS.area] HH:MM:SS LEVEL: message
        prefix = f"{self.area_color}[{self.area_prefix}]{Colors.RESET}"
        time_str = f"{Colors.DIM}{timestamp}{Colors.RESET}"
        level_str = f"{level_color}{record.levelname:<8}{Colors.RESET}"

        return f"{prefix} {time_str} {level_str} {record.getMessage()}"


class FileFormatter(logging.Formatter):
    """Formatter for file output with full timestamps."""

    def __init__(self, area: str = "main"):
        super().__init__()
        config = AREA_CONFIG.get(area, DEFAULT_AREA_CONFIG)
        self.area_prefix = config["prefix"]

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]

        extra = ""
        if hasattr(record, "message_type"):
            extra += f" message_type={record.message_type}"

        return f"{timestamp} [{self.area_prefix}] {record.levelname}: {record.getMessage()}{extra}"


_file_handler: Optional[logging.FileHandler] = None


def setup_logging(
    log_dir: str,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Initialize file logging.

    Args:
        log_dir: Directory for log files
        file_level: Minimum level for file output

    Returns:
        Path to the log directory
    """
    global _file_handler

    _log_dir = Path(log_dir)
    _log_dir.mkdir(parents=True, exist_ok=True)

    log_filename = datetime.now().strftime("mailalias_%Y%m%d_%H%M%S.log")
    log_path = _log_dir / log_filename

    latest_link = _log_dir / "latest.log"
    try:
        if latest_link.is_symlink() or latest_link.exists():
            latest_link.unlink()
        latest_link.symlink_to(log_filename)
    except OSError:
        pass  # Symlinks may not work on all systems

    _file_handler = logging.FileHandler(log_path, encoding="utf-8")
    _file_handler.setLevel(file_level)
    _file_handler.setFormatter(FileFormatter("main"))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    root_logger.addHandler(_file_handler)

    # Area loggers created at import time pick up the file too
    for name in list(logging.root.manager.loggerDict):
        if not name.startswith("mailalias."):
            continue
        logger = logging.getLogger(name)
        if logger.handlers:
            _add_file_handler(logger, name[len("mailalias."):])

    root_logger.info(f"Logging initialized. Log file: {log_path}")

    return _log_dir


def _add_file_handler(logger: logging.Logger, area: str) -> None:
    area_file_handler = logging.FileHandler(
        _file_handler.baseFilename,
        encoding="utf-8"
    )
    area_file_handler.setLevel(logging.DEBUG)
    area_file_handler.setFormatter(FileFormatter(area))
    logger.addHandler(area_file_handler)


def get_logger(area: str = "main") -> logging.Logger:
    """
    Get a logger for a service area.

    Example:
        logger = get_logger("vault")
        logger.info("Session unlocked")
        # Output: [MAILALIAS.vault] 14:32:15 INFO     Session unlocked
    """
    logger = logging.getLogger(f"mailalias.{area}")

    if not logger.handlers:
        logger.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(ColoredConsoleFormatter(area))
        logger.addHandler(console_handler)

        if _file_handler:
            _add_file_handler(logger, area)

        # Don't propagate to root to avoid duplicate logs
        logger.propagate = False

    return logger
