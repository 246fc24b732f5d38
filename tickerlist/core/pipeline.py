"""End-to-end NSE + BSE symbol list build."""

from __future__ import annotations

from typing import Optional

import httpx

from tickerlist.core.config import PipelineSettings
from tickerlist.core.fetcher import fetch_listing
from tickerlist.core.storage import write_symbol_chunks
from tickerlist.models.symbol import PipelineResult
from tickerlist.symbols.dedupe import merge_symbol_lists
from tickerlist.symbols.extract import extract_symbols
from tickerlist.utils.headers import get_download_headers
from tickerlist.utils.logger import get_logger

log = get_logger(__name__)


def run_pipeline(
    settings: PipelineSettings,
    *,
    client: Optional[httpx.Client] = None,
    download: bool = True,
) -> PipelineResult:
    """
    Fetch the primary listing, merge it with the local secondary listing and
    write the chunk files. The first failing step aborts the run.

    Args:
        settings: Resolved pipeline settings
        client: Optional HTTP client for the download
        download: When False, reuse the primary file already on disk
    """
    if download:
        fetch_listing(
            settings.nse_url,
            settings.primary_file,
            timeout=settings.timeout,
            headers=get_download_headers(referer=settings.referer, user_agent=settings.user_agent),
            client=client,
        )
    else:
        log.info(f"Skipping download, using existing {settings.primary_file}")

    primary = extract_symbols(settings.primary_file, settings.primary_exchange)
    secondary = extract_symbols(settings.secondary_file, settings.secondary_exchange)

    merged = merge_symbol_lists(primary, secondary)
    secondary_unique_count = len(merged) - len(primary)
    log.info(f"{settings.secondary_exchange} symbols after removing duplicates: {secondary_unique_count}")
    log.info(f"Total merged symbols: {len(merged)}")

    chunks = write_symbol_chunks(merged, settings.chunk_size, settings.output_dir)
    log.info(f"Wrote {len(chunks)} file(s) to {settings.output_dir}")

    return PipelineResult(
        primary_count=len(primary),
        secondary_count=len(secondary),
        secondary_unique_count=secondary_unique_count,
        chunks=chunks,
    )


__all__ = ["run_pipeline"]
