"""
Logging infrastructure for perfect_maze.

Provides structured logging with configurable levels, formatting, optional
file output and colored console output.
"""

from __future__ import annotations

import logging
import sys
import threading
import time
from datetime import datetime
from pathlib import Path
from typing import Any, ClassVar

import colorlog

LOG_FORMAT = "%(asctime)s - %(name)-20s - %(levelname)-8s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class MazeFormatter(logging.Formatter):
    """Formatter for perfect_maze log records with optional colors and source location."""

    def __init__(self, use_colors: bool = False, include_location: bool = False):
        self.use_colors = use_colors
        self.include_location = include_location

        format_str = LOG_FORMAT
        if self.include_location:
            format_str += " [%(filename)s:%(lineno)d]"

        if self.use_colors:
            self.colored_formatter = colorlog.ColoredFormatter(
                "%(log_color)s" + format_str,
                datefmt=DATE_FORMAT,
                log_colors={
                    "DEBUG": "cyan",
                    "INFO": "green",
                    "WARNING": "yellow",
                    "ERROR": "red",
                    "CRITICAL": "red,bg_white",
                },
            )

        super().__init__(format_str, datefmt=DATE_FORMAT)

    def format(self, record):
        if self.use_colors:
            return self.colored_formatter.format(record)
        return super().format(record)


class MazeLogger:
    """
    Central logging manager with process-wide configuration.

    Logger creation uses double-check locking so concurrent callers of
    get_logger() never attach duplicate handlers.
    """

    _instance = None
    _lock: ClassVar[threading.Lock] = threading.Lock()
    _loggers: ClassVar[dict[str, logging.Logger]] = {}
    _log_level = logging.INFO
    _log_to_file = False
    _log_file_path: Path | None = None
    _use_colors = True
    _include_location = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def configure(
        cls,
        level: str | int = "INFO",
        log_to_file: bool = False,
        log_file_path: str | Path | None = None,
        use_colors: bool = True,
        include_location: bool = False,
    ):
        """
        Configure global logging settings.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_to_file: Whether to log to file
            log_file_path: Path to log file (optional)
            use_colors: Use colored terminal output
            include_location: Include file location in log messages
        """
        with cls._lock:
            if isinstance(level, str):
                cls._log_level = getattr(logging, level.upper())
            else:
                cls._log_level = level

            cls._log_to_file = log_to_file
            cls._use_colors = use_colors
            cls._include_location = include_location

            if log_to_file:
                if log_file_path is None:
                    log_dir = Path.cwd() / "logs"
                    log_dir.mkdir(exist_ok=True)
                    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
                    cls._log_file_path = log_dir / f"perfect_maze_{timestamp}.log"
                else:
                    cls._log_file_path = Path(log_file_path)
                    cls._log_file_path.parent.mkdir(parents=True, exist_ok=True)
            else:
                cls._log_file_path = None

            for logger in cls._loggers.values():
                cls._setup_logger(logger)

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Get or create a logger for the specified module.

        Args:
            name: Logger name (typically __name__ from calling module)

        Returns:
            Configured logger instance
        """
        if name in cls._loggers:
            return cls._loggers[name]

        with cls._lock:
            if name not in cls._loggers:
                logger = logging.getLogger(name)
                if not logger.handlers:
                    cls._setup_logger(logger)
                cls._loggers[name] = logger

        return cls._loggers[name]

    @classmethod
    def _setup_logger(cls, logger: logging.Logger):
        """Configure individual logger with current settings."""
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(cls._log_level)

        formatter = MazeFormatter(use_colors=cls._use_colors, include_location=cls._include_location)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(cls._log_level)
        logger.addHandler(console_handler)

        if cls._log_to_file and cls._log_file_path:
            file_handler = logging.FileHandler(cls._log_file_path)
            # File logs never carry color escape codes
            file_handler.setFormatter(MazeFormatter(use_colors=False, include_location=cls._include_location))
            file_handler.setLevel(cls._log_level)
            logger.addHandler(file_handler)

        logger.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logger for the current module.

    Args:
        name: Logger name (if None, uses calling module name)

    Returns:
        Configured logger instance
    """
    if name is None:
        import inspect

        frame = inspect.currentframe()
        if frame and frame.f_back:
            name = frame.f_back.f_globals.get("__name__", "perfect_maze")
        else:
            name = "perfect_maze"

    return MazeLogger.get_logger(name)


def configure_logging(**kwargs):
    """
    Configure global logging settings.

    Keyword Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to log to file
        log_file_path: Path to log file
        use_colors: Use colored terminal output
        include_location: Include file location in messages
    """
    MazeLogger.configure(**kwargs)


def log_generation(
    logger: logging.Logger,
    algorithm: str,
    width: int,
    height: int,
    seed: int | None,
    additional_info: dict[str, Any] | None = None,
):
    """Log a finished maze generation at DEBUG level."""
    msg = f"Generated {width}x{height} maze - algorithm: {algorithm}, seed: {seed or 'entropy'}"
    if additional_info:
        info_str = ", ".join(f"{k}: {v}" for k, v in additional_info.items())
        msg += f" - {info_str}"
    logger.debug(msg)


class LoggedOperation:
    """Context manager for logging timed operations."""

    def __init__(self, logger: logging.Logger, operation_name: str, log_level: int = logging.INFO):
        self.logger = logger
        self.operation_name = operation_name
        self.log_level = log_level
        self.start_time: float | None = None
        self.duration: float | None = None

    def __enter__(self):
        self.logger.log(self.log_level, f"Starting {self.operation_name}")
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - (self.start_time or 0)

        if exc_type is None:
            self.logger.log(self.log_level, f"Completed {self.operation_name} in {self.duration:.3f}s")
        else:
            self.logger.error(f"Failed {self.operation_name} after {self.duration:.3f}s: {exc_val}")

        return False
