"""
Browser-like request headers for exchange archive downloads.

The NSE archive rejects requests carrying a default client identification, so
downloads present a desktop browser User-Agent and the exchange home page as
Referer.
"""

from typing import Dict, Optional

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


def get_download_headers(
    referer: Optional[str] = None,
    user_agent: Optional[str] = None,
    additional_headers: Optional[Dict[str, str]] = None,
) -> Dict[str, str]:
    headers = {
        "User-Agent": user_agent or DEFAULT_USER_AGENT,
        "Accept": "*/*",
    }
    if referer:
        headers["Referer"] = referer
    if additional_headers:
        headers.update(additional_headers)
    return headers


__all__ = ["DEFAULT_USER_AGENT", "get_download_headers"]
