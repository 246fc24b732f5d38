from pathlib import Path
from typing import Callable, Iterable, Optional

import httpx
import pytest

from tickerlist.core.config import PipelineSettings
from tickerlist.utils.logger import setup_logging

NSE_HEADER = "SYMBOL,NAME OF COMPANY, SERIES, DATE OF LISTING, PAID UP VALUE, MARKET LOT, ISIN NUMBER, FACE VALUE"
TEST_URL = "https://archives.example.test/content/equities/EQUITY_L.csv"


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep loguru off the console and isolate tests from TICKERLIST_* variables."""
    for var in (
        "TICKERLIST_CONFIG",
        "TICKERLIST_NSE_URL",
        "TICKERLIST_PRIMARY_FILE",
        "TICKERLIST_SECONDARY_FILE",
        "TICKERLIST_OUTPUT_DIR",
        "TICKERLIST_CHUNK_SIZE",
        "TICKERLIST_TIMEOUT",
        "TICKERLIST_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    setup_logging(config={"console": {"enabled": False}})
    yield
    setup_logging(config={"console": {"enabled": False}})


@pytest.fixture
def write_listing(tmp_path) -> Callable[..., Path]:
    """Write a listing CSV with a header line followed by ``rows``."""

    def _write(name: str, rows: Iterable[str], header: str = NSE_HEADER, newline: str = "\n") -> Path:
        path = tmp_path / name
        path.write_bytes(newline.join([header, *rows]).encode("utf-8"))
        return path

    return _write


@pytest.fixture
def nse_csv_body() -> bytes:
    rows = [
        NSE_HEADER,
        "20MICRONS,20 Microns Limited,EQ,06-OCT-2008,5,1,INE144J01027,5",
        "M&M,Mahindra & Mahindra Limited,EQ,01-JAN-1996,5,1,INE101A01026,5",
        "RELIANCE,Reliance Industries Limited,EQ,29-NOV-1995,10,1,INE002A01018,10",
        "TCS,Tata Consultancy Services Limited,EQ,25-AUG-2004,1,1,INE467B01029,1",
    ]
    return ("\n".join(rows) + "\n").encode("utf-8")


@pytest.fixture
def mock_client(nse_csv_body) -> Callable[..., httpx.Client]:
    """Build an httpx client whose transport serves ``body`` (or calls ``handler``)."""

    def _build(handler=None, *, status_code: int = 200, body: Optional[bytes] = None) -> httpx.Client:
        payload = nse_csv_body if body is None else body

        def _default(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, content=payload)

        return httpx.Client(transport=httpx.MockTransport(handler or _default))

    return _build


@pytest.fixture
def settings(tmp_path) -> PipelineSettings:
    return PipelineSettings(
        nse_url=TEST_URL,
        primary_file=tmp_path / "nse.csv",
        secondary_file=tmp_path / "bse.csv",
        output_dir=tmp_path / "files",
    )
