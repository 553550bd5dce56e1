"""
parse-coins generator: table parsing, reconciliation, emitted module and CLI.
"""

import logging

import aiohttp
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from slip44.core.registry import CoinType, NotFound, SymbolType
from slip44.scripts import parse_coins
from slip44.scripts.parse_coins import (
    CoinEntry, GenerationError, SLIP_0044_MARKDOWN_HEADER,
    build_entries, check_collisions, check_module, escape_ticker, fetch_markdown,
    merge_entries, original_name_to_short, parse_coin_type,
    parse_markdown_link, parse_rows, render_module, symbol_identifier,
)

ROWS = [
    "| 0          | 0x80000000                    | BTC     | [Bitcoin](https://bitcoin.org/)   |",
    "| 1          | 0x80000001                    |         | Testnet (all coins)               |",
    "| 2          | 0x80000002                    | LTC     | Litecoin                          |",
    "| 3          | 0x80000003                    |         | reserved                          |",
    "| 4          | 0x80000004                    |         |                                   |",
    "| 60         | 0x8000003c                    | ETH     | Ether                             |",
    "| 61         | 0x8000003d                    | ETC     | Ether Classic                     |",
    "| 99         | 0x80000063                    | FOO     | Foocoin                           |",
    "| 100        | 0x80000064                    | FOO     | Foocoin                           |",
    "| 200        | 0x800000c8                    | AAA     | Twin                              |",
    "| 201        | 0x800000c9                    | BBB     | Twin                              |",
    "| 202        | 0x800000ca                    |         | Twin                              |",
    "| 300        | 0x8000012c                    | LTC     | Litecoin Lite                     |",
    "| 457        | 0x800001c9                    | AE      | æternity                          |",
    "| 500        | 0x800001f4                    | $DAG    | Constellation Labs                |",
    "| 700        | 0x800002bc                    | 1ST     | 1stcoin                           |",
    "| abc        | 0x800002bd                    | BAD     | Badcoin                           |",
    "| 800        | 0x80000320                    | WAT     | Wat?coin                          |",
    "| 4294967296 | 0x100000000                   | BIG     | Bigcoin                           |",
    "| 5757       | 0x8000167d                    | STX     | Stacks                            |",
]

MARKDOWN = "\n".join([
    "# SLIP-0044 : Registered coin types for BIP-0044",
    "",
    "All these constants are used as hardened derivation.",
    "",
    SLIP_0044_MARKDOWN_HEADER,
    "| ---------- | ----------------------------- | ------- | --------------------------------- |",
    *ROWS,
    "",
    "Coin types will be added only if there is a wallet implementing the type.",
    "",
])


def _load(source: str) -> dict:
    namespace = {}
    exec(compile(source, "coins.py", "exec"), namespace)
    return namespace


@pytest.fixture
def generated():
    return _load(render_module(build_entries(MARKDOWN)))


# ─── Parsing ─────────────────────────────────────────────────────────

@pytest.mark.unit
def test_missing_header_is_fatal():
    with pytest.raises(GenerationError):
        parse_rows("# nothing here\n| 0 | 0x80000000 | BTC | Bitcoin |\n")


@pytest.mark.unit
def test_parse_rows_skips_unusable_lines():
    names = [e.name for e in parse_rows(MARKDOWN)]
    assert "Bitcoin" in names
    # reserved, empty, bad id, unknown special name, out of range id
    assert "reserved" not in names
    assert "Badcoin" not in names
    assert "Bigcoin" not in names
    assert not any("Wat" in n for n in names)
    assert len(names) == 15


@pytest.mark.unit
def test_parse_rows_reads_columns():
    btc = parse_rows(MARKDOWN)[0]
    assert btc.id == 0
    assert btc.path_component == "0x80000000"
    assert btc.symbol == "BTC"
    assert btc.original_name == "Bitcoin"


@pytest.mark.unit
def test_markdown_link_keeps_label():
    assert parse_markdown_link("[Bitcoin](https://bitcoin.org/)") == (
        "Bitcoin", "https://bitcoin.org/")
    assert parse_markdown_link("Litecoin") == ("Litecoin", None)


@pytest.mark.unit
@pytest.mark.parametrize("original, expected", [
    ("Bitcoin", "Bitcoin"),
    ("Testnet (all coins)", "Testnet"),
    ("Ether", "Ethereum"),
    ("Ether Classic", "EthereumClassic"),
    ("Bitcoin Cash", "BitcoinCash"),
    ("Crypto.org Chain", "CryptoOrgChain"),
    ("HARMONY-ONE", "HarmonyOne"),
    ("æternity", "aeternity"),
    ("θ", "Theta"),
    ("1stcoin", "_1stcoin"),
])
def test_original_name_to_short(original, expected):
    assert original_name_to_short(original) == expected


@pytest.mark.unit
@pytest.mark.parametrize("original", ["Wat?coin", "None", "value", "ids"])
def test_unusable_names_are_rejected(original):
    with pytest.raises(GenerationError):
        original_name_to_short(original)


@pytest.mark.unit
def test_parse_coin_type_bounds():
    assert parse_coin_type(" 0 ") == 0
    assert parse_coin_type("4294967295") == 2**32 - 1
    assert parse_coin_type("4294967296") is None
    assert parse_coin_type("-1") is None
    assert parse_coin_type("+5") is None
    assert parse_coin_type("") is None


@pytest.mark.unit
def test_ticker_escaping():
    assert escape_ticker("BTC") == "BTC"
    assert escape_ticker("$DAG") == "DAG"
    assert escape_ticker("X'Y\"Z") == "XYZ"
    assert escape_ticker("BTC.b") == "BTC.b"
    assert symbol_identifier("BTC.b") == "BTCb"
    assert symbol_identifier("1ST") == "_1ST"
    assert symbol_identifier("...") is None


# ─── Reconciliation ──────────────────────────────────────────────────

@pytest.mark.unit
def test_identical_rows_merge_in_order():
    merged = merge_entries([
        CoinEntry(id=9, path_component="", symbol="X", name="X", original_name="X"),
        CoinEntry(id=3, path_component="", symbol="X", name="X", original_name="X"),
        CoinEntry(id=5, path_component="", symbol="Y", name="Y", original_name="Y"),
    ])
    assert [e.ids for e in merged] == [[9, 3], [5]]


@pytest.mark.unit
def test_duplicate_names_get_suffixed():
    names = {e.name: e.ids for e in build_entries(MARKDOWN)}
    assert names["Twin_AAA"] == [200]
    assert names["Twin_BBB"] == [201]
    assert names["Twin_202"] == [202]
    assert "Twin" not in names


@pytest.mark.unit
def test_entries_sorted_by_primary_id():
    ids = [e.ids[0] for e in build_entries(MARKDOWN)]
    assert ids == sorted(ids)


@pytest.mark.unit
def test_residual_id_collision_is_fatal():
    entries = [
        CoinEntry(id=1, path_component="", symbol=None, name="A", original_name="A", ids=[1]),
        CoinEntry(id=2, path_component="", symbol=None, name="B", original_name="B", ids=[2, 1]),
    ]
    with pytest.raises(GenerationError, match="coin type 1"):
        check_collisions(entries)


@pytest.mark.unit
def test_residual_name_collision_is_fatal():
    entries = [
        CoinEntry(id=1, path_component="", symbol="Z", name="A_Z", original_name="A", ids=[1]),
        CoinEntry(id=2, path_component="", symbol="Z", name="A_Z", original_name="A ", ids=[2]),
    ]
    with pytest.raises(GenerationError, match="duplicate coin name"):
        check_collisions(entries)


# ─── Emitted module ──────────────────────────────────────────────────

@pytest.mark.unit
def test_rendered_module_header():
    source = render_module(build_entries(MARKDOWN))
    assert source.startswith(
        "# Code generated by slip44/scripts/parse_coins.py; DO NOT EDIT.\n")
    assert "    # Coin type: 99, 100\n" in source
    assert "    # Coin: Ether\n" in source


@pytest.mark.unit
def test_rendered_module_builds_enums(generated):
    Coin, Symbol = generated["Coin"], generated["Symbol"]
    assert issubclass(Coin, CoinType)
    assert issubclass(Symbol, SymbolType)

    assert Coin(0).name == "Bitcoin"
    assert Coin(5757).name == "Stacks"
    assert Coin.Ethereum.original_name == "Ether"
    assert Coin.Testnet.ticker is None
    assert Coin.ConstellationLabs.ticker == "DAG"


@pytest.mark.unit
def test_rendered_module_merges_ids(generated):
    Coin = generated["Coin"]
    assert Coin.Foocoin.ids == (99, 100)
    assert Coin.from_id(100) is Coin.Foocoin


@pytest.mark.unit
def test_shared_ticker_belongs_to_lowest_id(generated):
    Coin, Symbol = generated["Coin"], generated["Symbol"]
    assert Symbol.LTC.coin is Coin.Litecoin
    assert Coin.LitecoinLite.ticker == "LTC"
    with pytest.raises(NotFound):
        Symbol.from_coin(Coin.LitecoinLite)


@pytest.mark.unit
def test_rendered_symbols(generated):
    Coin, Symbol = generated["Coin"], generated["Symbol"]
    assert Symbol(0) is Symbol.BTC
    assert Symbol.DAG.coin is Coin.ConstellationLabs
    assert Symbol._1ST.coin is Coin._1stcoin
    assert len(Symbol) == len({s.coin for s in Symbol})


@pytest.mark.unit
def test_render_without_symbols():
    entries = [CoinEntry(id=1, path_component="", symbol=None,
                         name="Only", original_name="Only", ids=[1])]
    ns = _load(render_module(entries))
    assert len(ns["Symbol"]) == 0
    assert ns["Coin"](1).name == "Only"


# ─── Fetch / CLI ─────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_fetch_markdown_returns_body():
    async def handler(request):
        return web.Response(text=MARKDOWN)

    app = web.Application()
    app.router.add_get("/slip-0044.md", handler)
    async with TestServer(app) as server:
        text = await fetch_markdown(str(server.make_url("/slip-0044.md")))
    assert text == MARKDOWN


@pytest.mark.asyncio
async def test_fetch_markdown_raises_on_http_error():
    app = web.Application()
    async with TestServer(app) as server:
        with pytest.raises(aiohttp.ClientResponseError):
            await fetch_markdown(str(server.make_url("/missing.md")))


@pytest.mark.unit
def test_main_writes_output(tmp_path, monkeypatch):
    output = tmp_path / "coins.py"
    monkeypatch.setenv("SLIP44_OUTPUT_PATH", str(output))

    async def fake_fetch(url, timeout_seconds=30):
        return MARKDOWN

    monkeypatch.setattr(parse_coins, "fetch_markdown", fake_fetch)
    assert parse_coins.main() == 0
    ns = _load(output.read_text(encoding="utf-8"))
    assert ns["Coin"](0).name == "Bitcoin"


@pytest.mark.unit
def test_main_reports_fetch_failure(tmp_path, monkeypatch):
    output = tmp_path / "coins.py"
    monkeypatch.setenv("SLIP44_OUTPUT_PATH", str(output))

    async def failing_fetch(url, timeout_seconds=30):
        raise aiohttp.ClientConnectionError("connection refused")

    monkeypatch.setattr(parse_coins, "fetch_markdown", failing_fetch)
    assert parse_coins.main() == 1
    assert not output.exists()


@pytest.mark.unit
def test_main_reports_parse_failure(tmp_path, monkeypatch):
    output = tmp_path / "coins.py"
    monkeypatch.setenv("SLIP44_OUTPUT_PATH", str(output))

    async def fake_fetch(url, timeout_seconds=30):
        return "<html>not the table</html>"

    monkeypatch.setattr(parse_coins, "fetch_markdown", fake_fetch)
    assert parse_coins.main() == 1
    assert not output.exists()


@pytest.mark.unit
def test_load_config_env_override(monkeypatch):
    monkeypatch.setenv("SLIP44_MARKDOWN_URL", "http://localhost/slip.md")
    monkeypatch.delenv("SLIP44_OUTPUT_PATH", raising=False)
    config = parse_coins.load_config()
    assert config["source"]["url"] == "http://localhost/slip.md"
    assert config["output"]["path"].endswith("coins.py")
    assert config["system"]["log_level"] == "INFO"


@pytest.mark.unit
def test_load_config_tolerates_empty_sections(tmp_path, monkeypatch):
    (tmp_path / "parse_coins.yaml").write_text(
        "source:\noutput:\nsystem:\n", encoding="utf-8")
    monkeypatch.setattr(parse_coins, "CONFIG_DIR", tmp_path)
    monkeypatch.delenv("SLIP44_MARKDOWN_URL", raising=False)
    monkeypatch.delenv("SLIP44_OUTPUT_PATH", raising=False)

    config = parse_coins.load_config()
    assert config["source"]["url"] == parse_coins.SLIP_0044_MARKDOWN_URL
    assert config["source"]["timeout_seconds"] == 30
    assert config["output"]["path"].endswith("coins.py")
    assert config["system"] == {}


@pytest.mark.unit
def test_reserved_rows_are_warned(caplog):
    with caplog.at_level(logging.WARNING, logger=parse_coins.__name__):
        parse_rows(MARKDOWN)
    skipped = [r.getMessage() for r in caplog.records
               if "empty or reserved" in r.getMessage()]
    assert len(skipped) == 2


# ─── Punctuated tickers on duplicate names ───────────────────────────

PUNCTUATED = "\n".join([
    SLIP_0044_MARKDOWN_HEADER,
    "| ---------- | ----------------------------- | ------- | --------------------------------- |",
    "| 10         | 0x8000000a                    | TW-A    | Twin                              |",
    "| 11         | 0x8000000b                    | TW-B    | Twin                              |",
    "| 12         | 0x8000000c                    | ...     | Twin                              |",
    "",
])


@pytest.mark.unit
def test_duplicate_name_suffix_uses_identifier_form_of_ticker():
    names = {e.name: e.ids for e in build_entries(PUNCTUATED)}
    assert names == {"Twin_TWA": [10], "Twin_TWB": [11], "Twin_12": [12]}


@pytest.mark.unit
def test_punctuated_duplicates_render_importable_module():
    ns = _load(render_module(build_entries(PUNCTUATED)))
    Coin, Symbol = ns["Coin"], ns["Symbol"]
    assert Coin(10) is Coin.Twin_TWA
    assert Coin.Twin_TWA.ticker == "TW-A"
    assert Symbol.TWB.coin is Coin.Twin_TWB


@pytest.mark.unit
@pytest.mark.parametrize("name", ["Twin_TW-A", "class", "coin", "_x_"])
def test_check_collisions_rejects_unusable_names(name):
    entries = [CoinEntry(id=1, path_component="", symbol=None,
                         name=name, original_name="Twin", ids=[1])]
    with pytest.raises(GenerationError):
        check_collisions(entries)


@pytest.mark.unit
def test_check_module_rejects_broken_source():
    with pytest.raises(GenerationError, match="does not compile"):
        check_module('class Coin:\n    Twin_TW-A = (10,), "Twin"\n', "coins.py")


@pytest.mark.unit
def test_main_keeps_existing_table_when_output_is_broken(tmp_path, monkeypatch):
    output = tmp_path / "coins.py"
    output.write_text("# previous table\n", encoding="utf-8")
    monkeypatch.setenv("SLIP44_OUTPUT_PATH", str(output))

    async def fake_fetch(url, timeout_seconds=30):
        return PUNCTUATED

    monkeypatch.setattr(parse_coins, "fetch_markdown", fake_fetch)
    monkeypatch.setattr(
        parse_coins, "render_module", lambda entries: "Twin_TW-A = 1\n")
    assert parse_coins.main() == 1
    assert output.read_text(encoding="utf-8") == "# previous table\n"


@pytest.mark.unit
def test_main_writes_punctuated_duplicates(tmp_path, monkeypatch):
    output = tmp_path / "coins.py"
    monkeypatch.setenv("SLIP44_OUTPUT_PATH", str(output))

    async def fake_fetch(url, timeout_seconds=30):
        return PUNCTUATED

    monkeypatch.setattr(parse_coins, "fetch_markdown", fake_fetch)
    assert parse_coins.main() == 0
    ns = _load(output.read_text(encoding="utf-8"))
    assert ns["Coin"].from_name("Twin_TWA").id == 10
