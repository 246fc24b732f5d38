import pytest

from tickerlist.core.errors import ReadError
from tickerlist.models.symbol import Symbol
from tickerlist.symbols.extract import extract_symbols


def _as_strings(symbols):
    return [str(symbol) for symbol in symbols]


def test_duplicates_collapse_and_lowercase_rejected(write_listing):
    path = write_listing("nse.csv", ["TCS,Tata Consultancy", "TCS,Tata Consultancy", "rel,Reliance"])

    symbols = extract_symbols(path, "NSE")

    assert _as_strings(symbols) == ["NSE:TCS"]
    assert symbols == [Symbol("NSE", "TCS")]


def test_header_line_is_always_skipped(write_listing):
    # A header that happens to look like a valid ticker is still dropped.
    path = write_listing("nse.csv", ["INFY,Infosys"], header="HDFCBANK,HDFC Bank")

    assert _as_strings(extract_symbols(path, "NSE")) == ["NSE:INFY"]


def test_first_occurrence_order_is_preserved(write_listing):
    path = write_listing("bse.csv", ["ZEEL,x", "ABB,y", "ZEEL,z", "M&M,w", "ABB,v"])

    assert _as_strings(extract_symbols(path, "BSE")) == ["BSE:ZEEL", "BSE:ABB", "BSE:M&M"]


def test_invalid_character_classes_are_excluded(write_listing):
    rows = [
        "BAJAJ.AUTO,ok",
        "  SBIN  ,padded",
        "TATA STEEL,space",
        "Infy,lowercase",
        "ABC-1,hyphen",
        ",empty",
        "",
        "\"QUOTED\",quotes",
        "ONLYFIELD",
    ]
    path = write_listing("nse.csv", rows)

    assert _as_strings(extract_symbols(path, "NSE")) == ["NSE:BAJAJ.AUTO", "NSE:SBIN", "NSE:ONLYFIELD"]


@pytest.mark.parametrize("newline", ["\n", "\r\n", "\r"])
def test_line_endings_are_handled(write_listing, newline):
    path = write_listing("nse.csv", ["TCS,a", "INFY,b"], newline=newline)

    assert _as_strings(extract_symbols(path, "NSE")) == ["NSE:TCS", "NSE:INFY"]


def test_header_only_source_yields_nothing(write_listing):
    path = write_listing("bse.csv", [])

    assert extract_symbols(path, "BSE") == []


def test_empty_file_yields_nothing(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    assert extract_symbols(path, "NSE") == []


def test_missing_source_raises_read_error(tmp_path):
    missing = tmp_path / "bse.csv"

    with pytest.raises(ReadError) as exc_info:
        extract_symbols(missing, "BSE")

    assert exc_info.value.path == str(missing)
    assert exc_info.value.exchange == "BSE"


def test_undecodable_source_raises_read_error(tmp_path):
    path = tmp_path / "nse.csv"
    path.write_bytes(b"SYMBOL,NAME\nTCS,ok\n\xff\xfe\xfa,bad\n")

    with pytest.raises(ReadError):
        extract_symbols(path, "NSE")


def test_unknown_prefix_is_rejected_before_reading(tmp_path):
    with pytest.raises(ValueError):
        extract_symbols(tmp_path / "does-not-matter.csv", "XYZ")
