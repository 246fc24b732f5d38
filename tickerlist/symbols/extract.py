"""Single-pass symbol extraction from exchange master list files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Set, Union

from tickerlist.core.errors import ReadError
from tickerlist.models.symbol import Symbol
from tickerlist.symbols.normalize import clean_ticker, normalise_exchange
from tickerlist.utils.logger import get_logger

log = get_logger(__name__)


def _iter_first_fields(path: Path) -> Iterator[str]:
    """Yield the first comma-separated field of every line after the header."""
    with path.open("r", encoding="utf-8", newline=None) as handle:
        next(handle, None)
        for line in handle:
            yield line.split(",", 1)[0]


def extract_symbols(source_path: Union[str, Path], prefix: str) -> List[Symbol]:
    """
    Parse a listing file into exchange-prefixed symbols.

    The first line is always treated as a header. Rows whose first column is
    not a valid ticker are skipped, and repeated tickers keep their first
    position.
    """
    exchange = normalise_exchange(prefix)
    path = Path(source_path)

    symbols: List[Symbol] = []
    seen: Set[str] = set()
    try:
        for field in _iter_first_fields(path):
            ticker = clean_ticker(field)
            if ticker is None or ticker in seen:
                continue
            seen.add(ticker)
            symbols.append(Symbol(exchange=exchange, ticker=ticker))
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(
            f"Could not read {exchange} listing {path}: {exc}",
            path=str(path),
            exchange=exchange,
        ) from exc

    log.info(f"{exchange} symbols collected: {len(symbols)}")
    return symbols


__all__ = ["extract_symbols"]
