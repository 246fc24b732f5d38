"""Cross-exchange de-duplication of symbol lists."""

from __future__ import annotations

from typing import List, Sequence, TypeVar

from tickerlist.models.symbol import SymbolLike, bare_ticker

T = TypeVar("T", bound=SymbolLike)


def remove_cross_listed(primary: Sequence[SymbolLike], secondary: Sequence[T]) -> List[T]:
    """Drop secondary entries whose bare ticker is already listed in ``primary``."""
    primary_tickers = {bare_ticker(item) for item in primary}
    return [item for item in secondary if bare_ticker(item) not in primary_tickers]


def merge_symbol_lists(primary: Sequence[SymbolLike], secondary: Sequence[SymbolLike]) -> List[SymbolLike]:
    """Primary symbols first, then the secondary symbols not cross-listed."""
    return [*primary, *remove_cross_listed(primary, secondary)]


__all__ = ["merge_symbol_lists", "remove_cross_listed"]
