"""Model exports for the ticker list pipeline."""

from .symbol import PipelineResult, Symbol, SymbolLike, WrittenChunk, bare_ticker

__all__ = [
    "PipelineResult",
    "Symbol",
    "SymbolLike",
    "WrittenChunk",
    "bare_ticker",
]
