"""
Ticker List - Logging Utility
=============================

Loguru-based logging setup with:
- Colourised console logging
- Optional rotating file logging
- Named (bound) loggers per module
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


class LoggerSetup:
    """Configure and manage application logging"""

    def __init__(self, config: Optional[Dict[str, Any]] = None, level: Optional[str] = None):
        """
        Initialize logger with configuration

        Args:
            config: The ``logging`` section of settings.yaml
            level: Overrides the configured level when given
        """
        self.config = {**self._default_config(), **(config or {})}
        if level:
            self.config["level"] = level
        self._setup_logger()

    def _default_config(self) -> dict:
        """Default logging configuration"""
        return {
            "level": "INFO",
            "format": DEFAULT_FORMAT,
            "console": {"enabled": True, "colorize": True},
            "file": {
                "enabled": False,
                "path": "./logs/tickerlist.log",
                "rotation": "10 MB",
                "retention": "30 days",
            },
        }

    def _setup_logger(self):
        """Configure loguru logger"""
        logger.remove()

        log_level = str(self.config.get("level", "INFO")).upper()
        log_format = self.config.get("format") or DEFAULT_FORMAT

        console_config = self.config.get("console") or {}
        if console_config.get("enabled", True):
            logger.add(
                sys.stderr,
                format=log_format,
                level=log_level,
                colorize=console_config.get("colorize", True),
                backtrace=False,
                diagnose=False,
            )

        file_config = self.config.get("file") or {}
        if file_config.get("enabled", False):
            log_path = Path(file_config.get("path", "./logs/tickerlist.log"))
            log_path.parent.mkdir(parents=True, exist_ok=True)

            logger.add(
                log_path,
                format=log_format,
                level=log_level,
                rotation=file_config.get("rotation", "10 MB"),
                retention=file_config.get("retention", "30 days"),
                backtrace=False,
                diagnose=False,
            )

    def get_logger(self, name: Optional[str] = None):
        if name:
            return logger.bind(name=name)
        return logger


_logger_setup = None


def setup_logging(level: Optional[str] = None, config: Optional[Dict[str, Any]] = None):
    """
    Initialize logging system

    Args:
        level: Log level name, e.g. ``DEBUG``
        config: The ``logging`` section of settings.yaml
    """
    global _logger_setup
    _logger_setup = LoggerSetup(config, level=level)
    logger.debug("Logging system initialized")


def get_logger(name: Optional[str] = None):
    """
    Get a logger instance

    Example:
        >>> from tickerlist.utils.logger import get_logger
        >>> log = get_logger(__name__)
        >>> log.info("Downloading NSE listing")
    """
    global _logger_setup
    if _logger_setup is None:
        setup_logging()
    return _logger_setup.get_logger(name)
