"""
Listing Fetcher
===============

Streams one exchange master list to disk with a single GET request:
- Bounded timeout (15s by default)
- Browser-like headers (the NSE archive rejects default client headers)
- No retries: any failure is reported as one FetchError
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

import httpx

from tickerlist.core.errors import FetchError
from tickerlist.core.config import DEFAULT_TIMEOUT
from tickerlist.utils.headers import get_download_headers
from tickerlist.utils.logger import get_logger

log = get_logger(__name__)


def _stream_to_file(client: httpx.Client, url: str, destination: Path, headers: Dict[str, str]) -> int:
    """Stream into a sibling temp file and only replace ``destination`` once the body is complete."""
    written = 0
    temp_fd, temp_path = tempfile.mkstemp(prefix=f"{destination.name}.", suffix=".part", dir=destination.parent)
    try:
        with os.fdopen(temp_fd, "wb") as sink:
            with client.stream("GET", url, headers=headers) as response:
                response.raise_for_status()
                for chunk in response.iter_bytes():
                    sink.write(chunk)
                    written += len(chunk)
        os.replace(temp_path, destination)
    finally:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
    return written


def fetch_listing(
    url: str,
    destination: Union[str, Path],
    *,
    timeout: float = DEFAULT_TIMEOUT,
    headers: Optional[Dict[str, str]] = None,
    client: Optional[httpx.Client] = None,
) -> Path:
    """
    Download ``url`` into ``destination``, overwriting any existing file.

    Args:
        url: Listing CSV location
        destination: Local file to write
        timeout: Request timeout in seconds
        headers: Request headers; browser-like defaults when omitted
        client: Optional pre-built client (its own timeout applies)

    Returns:
        The destination path
    """
    destination = Path(destination)
    headers = headers or get_download_headers()
    log.info(f"Downloading listing from {url}")

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        if client is not None:
            written = _stream_to_file(client, url, destination, headers)
        else:
            with httpx.Client(timeout=httpx.Timeout(timeout), follow_redirects=True) as own_client:
                written = _stream_to_file(own_client, url, destination, headers)
    except httpx.HTTPStatusError as exc:
        raise FetchError(
            f"Download failed with HTTP {exc.response.status_code}: {url}",
            url=url,
            status_code=exc.response.status_code,
        ) from exc
    except httpx.TimeoutException as exc:
        raise FetchError(f"Download timed out after {timeout:g}s: {url}", url=url) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise FetchError(f"Download failed: {url} ({exc})", url=url) from exc
    except OSError as exc:
        raise FetchError(f"Could not save download to {destination}: {exc}", url=url) from exc

    log.info(f"Listing saved to {destination} ({written} bytes)")
    return destination


__all__ = ["fetch_listing"]
