"""
Error hierarchy for the ticker list pipeline, so every failure reaches the CLI
as a single classified, loggable exception.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class TickerListError(Exception):
    """Base class for all pipeline errors."""

    def __init__(
        self,
        message: str,
        *,
        exchange: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.exchange = exchange
        self.details = details or {}

    def as_dict(self) -> Dict[str, Any]:
        """Serializable representation for logs."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "exchange": self.exchange,
            "details": self.details,
        }


class FetchError(TickerListError):
    """Raised when a listing download fails (network, timeout or bad status)."""

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        **kwargs,
    ) -> None:
        super().__init__(message, **kwargs)
        self.url = url
        self.status_code = status_code
        if url is not None:
            self.details["url"] = url
        if status_code is not None:
            self.details["status_code"] = status_code


class ReadError(TickerListError):
    """Raised when a listing source is missing or unreadable."""

    def __init__(self, message: str, *, path: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.path = path
        if path is not None:
            self.details["path"] = path


class WriteError(TickerListError):
    """Raised when the output directory or a chunk file cannot be written."""

    def __init__(self, message: str, *, path: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.path = path
        if path is not None:
            self.details["path"] = path


class ConfigError(TickerListError):
    """Raised on missing/invalid configuration values."""

    def __init__(self, message: str, *, key: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.key = key
        if key is not None:
            self.details["key"] = key


__all__ = [
    "TickerListError",
    "FetchError",
    "ReadError",
    "WriteError",
    "ConfigError",
]
