"""
Centralized logging configuration with file output support.

Console records go to stderr: stdout carries the streamed model output.
"""

import logging
import sys
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AgentLogger:
    """Centralized logger factory with global level control and file output."""

    _loggers: dict[str, logging.Logger] = {}
    _global_level: Optional[int] = None
    _log_file: Optional[str] = None

    @classmethod
    def set_log_file(cls, log_file: str) -> None:
        """Set log file path for all loggers."""
        cls._log_file = log_file
        for logger in cls._loggers.values():
            cls._update_file_handler(logger)

    @classmethod
    def _update_file_handler(cls, logger: logging.Logger) -> None:
        """Update file handler for logger, removing existing ones first."""
        for handler in logger.handlers[:]:
            if isinstance(handler, logging.FileHandler):
                logger.removeHandler(handler)
                handler.close()

        if not cls._log_file:
            return

        log_dir = os.path.dirname(cls._log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(cls._log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(file_handler)

    @classmethod
    def set_global_level(cls, level: int) -> None:
        """Set global logging level."""
        cls._global_level = level
        for logger in cls._loggers.values():
            logger.setLevel(level)

    @classmethod
    def configure_from_settings(
        cls, log_level: Optional[str] = None, log_file: Optional[str] = None
    ) -> None:
        if log_level:
            cls.set_global_level(getattr(logging, log_level.upper(), logging.INFO))

        if log_file:
            cls.set_log_file(log_file)

    @classmethod
    def get_logger(
        cls, name: str = "career_agent", level: int = logging.WARNING
    ) -> logging.Logger:
        """Get or create a configured logger with global level override."""
        effective_level = cls._global_level if cls._global_level is not None else level

        if name in cls._loggers:
            logger = cls._loggers[name]
            logger.setLevel(effective_level)
            return logger

        logger = logging.getLogger(name)
        logger.setLevel(effective_level)

        if not logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
            logger.addHandler(handler)

            if cls._log_file:
                cls._update_file_handler(logger)

            logger.propagate = False

        cls._loggers[name] = logger
        return logger


# Convenience functions
def get_logger(name: str = "career_agent", level: int = logging.WARNING) -> logging.Logger:
    return AgentLogger.get_logger(name, level)


def configure_logging(settings) -> None:
    """
    Configure logging from a settings object that has LOG_LEVEL and LOG_FILE attributes.
    """
    log_level = getattr(settings, "LOG_LEVEL", None)
    log_file = getattr(settings, "LOG_FILE", None)

    AgentLogger.configure_from_settings(log_level, log_file)
