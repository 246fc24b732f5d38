"""Normalisation helpers for exchange codes and tickers."""

from __future__ import annotations

import re
from typing import Dict, Optional

TICKER_PATTERN = re.compile(r"[A-Z0-9&.]+")

_EXCHANGE_ALIASES: Dict[str, str] = {
    "NSE": "NSE",
    "NSEI": "NSE",
    "BSE": "BSE",
    "BOMBAY": "BSE",
}

EXCHANGES = frozenset(_EXCHANGE_ALIASES.values())


def normalise_exchange(raw: Optional[str]) -> str:
    if not raw:
        raise ValueError("Exchange code is required")
    token = re.sub(r"[^A-Z]", "", raw.upper())
    try:
        return _EXCHANGE_ALIASES[token]
    except KeyError:
        raise ValueError(f"Unknown exchange: {raw}") from None


def clean_ticker(raw: Optional[str]) -> Optional[str]:
    """Return the stripped ticker if it is a valid symbol, else ``None``.

    Unlike exchange codes, tickers are never upper-cased: a lowercase entry in
    a listing is rejected rather than repaired.
    """
    if raw is None:
        return None
    candidate = raw.strip()
    if candidate and TICKER_PATTERN.fullmatch(candidate):
        return candidate
    return None


def is_valid_ticker(raw: Optional[str]) -> bool:
    return bool(raw) and TICKER_PATTERN.fullmatch(raw) is not None


__all__ = ["EXCHANGES", "TICKER_PATTERN", "clean_ticker", "is_valid_ticker", "normalise_exchange"]
