"""Chunked persistence of merged symbol lists."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Sequence, Union

from tickerlist.core.errors import ConfigError, WriteError
from tickerlist.models.symbol import SymbolLike, WrittenChunk


def chunk_symbols(symbols: Sequence[SymbolLike], chunk_size: int) -> Iterator[Sequence[SymbolLike]]:
    if chunk_size < 1:
        raise ConfigError(f"chunk_size must be at least 1, got {chunk_size}", key="chunk_size")
    for start in range(0, len(symbols), chunk_size):
        yield symbols[start:start + chunk_size]


def write_symbol_chunks(
    symbols: Sequence[SymbolLike],
    chunk_size: int,
    output_dir: Union[str, Path],
) -> List[WrittenChunk]:
    """Write ``symbols`` as ``1.txt``, ``2.txt``, ... with at most ``chunk_size`` lines each.

    Args:
        symbols: Merged symbol list, in output order.
        chunk_size: Maximum number of symbols per file.
        output_dir: Directory to create/populate; existing files are overwritten.

    Returns:
        One ``WrittenChunk`` per file, in write order. Files written before a
        failure are left on disk.
    """
    chunks = list(chunk_symbols(symbols, chunk_size))
    target_dir = Path(output_dir)

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(f"Could not create output directory {target_dir}: {exc}", path=str(target_dir)) from exc

    written: List[WrittenChunk] = []
    for index, chunk in enumerate(chunks, start=1):
        file_name = f"{index}.txt"
        file_path = target_dir / file_name
        try:
            with file_path.open("w", encoding="utf-8", newline="\n") as handle:
                handle.write("\n".join(str(symbol) for symbol in chunk))
        except OSError as exc:
            raise WriteError(f"Could not write {file_path}: {exc}", path=str(file_path)) from exc
        written.append(WrittenChunk(file_name=file_name, path=file_path, symbol_count=len(chunk)))

    return written


__all__ = ["chunk_symbols", "write_symbol_chunks"]
