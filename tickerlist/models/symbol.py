"""Domain model for exchange-prefixed ticker symbols."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from tickerlist.symbols.normalize import is_valid_ticker, normalise_exchange

SEPARATOR = ":"


@dataclass(frozen=True, slots=True)
class Symbol:
    """A ticker tagged with the exchange it was listed on, e.g. ``NSE:TCS``."""

    exchange: str
    ticker: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "exchange", normalise_exchange(self.exchange))
        if not is_valid_ticker(self.ticker):
            raise ValueError(f"Invalid ticker: {self.ticker!r}")

    def __str__(self) -> str:
        return f"{self.exchange}{SEPARATOR}{self.ticker}"

    @classmethod
    def parse(cls, value: str) -> "Symbol":
        exchange, sep, ticker = value.partition(SEPARATOR)
        if not sep:
            raise ValueError(f"Symbol is missing an exchange prefix: {value!r}")
        return cls(exchange=exchange, ticker=ticker)


SymbolLike = Union[Symbol, str]


def bare_ticker(item: SymbolLike) -> str:
    """Ticker with the exchange prefix removed; unprefixed strings pass through."""
    if isinstance(item, Symbol):
        return item.ticker
    _, sep, ticker = item.partition(SEPARATOR)
    return ticker if sep else item


@dataclass(slots=True)
class WrittenChunk:
    file_name: str
    path: Path
    symbol_count: int


@dataclass(slots=True)
class PipelineResult:
    primary_count: int
    secondary_count: int
    secondary_unique_count: int
    chunks: List[WrittenChunk]

    @property
    def merged_count(self) -> int:
        return self.primary_count + self.secondary_unique_count


__all__ = ["Symbol", "SymbolLike", "bare_ticker", "WrittenChunk", "PipelineResult"]
