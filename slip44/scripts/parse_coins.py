"""
SLIP-0044 registry generator.
Fetches the upstream slip-0044.md table and rewrites slip44/coins.py.

Usage:
    parse-coins
    python -m slip44.scripts.parse_coins
"""

import asyncio
import keyword
import logging
import os
import re
from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import aiohttp
import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).parent.parent
CONFIG_DIR = BASE_DIR / "config"

SLIP_0044_MARKDOWN_URL = (
    "https://raw.githubusercontent.com/satoshilabs/slips/master/slip-0044.md"
)
SLIP_0044_MARKDOWN_HEADER = (
    "| Coin type  | Path component (`coin_type'`) | Symbol  | Coin                              |"
)
GENERATED_BY = "slip44/scripts/parse_coins.py"

MAX_COIN_TYPE = 2**32 - 1

# Upstream labels -> canonical names
NAME_ALIASES = {
    "Ether": "Ethereum",
    "EtherClassic": "EthereumClassic",
}

# Labels with characters that can't appear in an identifier
SPECIAL_NAMES = {
    "Pl^g": "Plug",
    "BitcoinMatteo'sVision": "BitcoinMatteosVision",
    "Crypto.orgChain": "CryptoOrgChain",
    "Cocos-BCX": "CocosBCX",
    "Capricoin+": "CapricoinPlus",
    "Seele-N": "SeeleN",
    "IQ-Cash": "IQCash",
    "XinFin.Network": "XinFinNetwork",
    "Unit-e": "UnitE",
    "HARMONY-ONE": "HarmonyOne",
    "ThePower.io": "ThePower",
    "evan.network": "EvanNetwork",
    "Ether-1": "EtherOne",
    "æternity": "aeternity",
    "θ": "Theta",
}

SYMBOL_ALIASES = {
    "$DAG": "DAG",
}

# Attribute names the enum bases already use
RESERVED_NAMES = {
    "name", "value", "mro",
    "id", "ids", "original_name", "ticker", "coin",
    "from_id", "from_name", "from_symbol", "from_coin",
}

TICKER_PUNCTUATION = set("_ -+.()")


class GenerationError(Exception):
    """The upstream table can't be turned into a consistent registry."""


@dataclass
class CoinEntry:
    id: int
    path_component: str
    symbol: Optional[str]
    name: str
    original_name: str
    ids: list[int] = field(default_factory=list)

    @property
    def key(self) -> tuple:
        return (self.symbol, self.name, self.original_name)


# ─── Config / logging ────────────────────────────────────────────────

def load_config() -> dict:
    with open(CONFIG_DIR / "parse_coins.yaml", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    env_path = CONFIG_DIR / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    source = config["source"] = config.get("source") or {}
    source["url"] = os.getenv(
        "SLIP44_MARKDOWN_URL", source.get("url") or SLIP_0044_MARKDOWN_URL)
    source.setdefault("timeout_seconds", 30)

    output = config["output"] = config.get("output") or {}
    output["path"] = (
        os.getenv("SLIP44_OUTPUT_PATH")
        or output.get("path")
        or str(BASE_DIR / "coins.py")
    )

    config["system"] = config.get("system") or {}
    return config


def setup_logging(config: dict):
    system = config.get("system", {})
    level = getattr(logging, system.get("log_level", "INFO"))
    handlers = [logging.StreamHandler()]

    log_dir = system.get("log_dir")
    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.FileHandler(log_dir / "parse_coins.log", encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-5s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


# ─── Fetch ───────────────────────────────────────────────────────────

async def fetch_markdown(url: str, timeout_seconds: float = 30) -> str:
    timeout = aiohttp.ClientTimeout(total=timeout_seconds)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        async with session.get(url) as resp:
            resp.raise_for_status()
            return await resp.text()


# ─── Parse ───────────────────────────────────────────────────────────

def parse_markdown_link(text: str) -> tuple[str, Optional[str]]:
    """Split ``[label](url)`` into (label, url); plain text has no url."""
    match = re.fullmatch(r"\[([^\]]*)\]\(([^)]*)\)", text)
    if match:
        return match.group(1), match.group(2)
    return text, None


def prepend_underscore(name: str) -> str:
    if name[:1].isdigit():
        return f"_{name}"
    return name


def check_member_name(name: str):
    """Raise GenerationError unless name can be declared as an enum member."""
    if not name.isidentifier() or keyword.iskeyword(name) or name in RESERVED_NAMES:
        raise GenerationError(f"coin name `{name}` is not usable as a member")
    if name.startswith("_") and name.endswith("_"):
        raise GenerationError(f"coin name `{name}` is reserved by enum")


def original_name_to_short(original_name: str) -> str:
    """
    Turn an upstream label into an identifier-safe canonical name.

    Raises GenerationError for labels with special characters that have no
    entry in SPECIAL_NAMES.
    """
    name = original_name.replace(" ", "")
    name = name.split("(", 1)[0]
    name = prepend_underscore(name)
    name = NAME_ALIASES.get(name, name)

    if any(not (ch.isascii() and ch.isalnum()) and ch != "_" for ch in name):
        if name not in SPECIAL_NAMES:
            raise GenerationError(f"unknown original coin name `{name}`")
        name = SPECIAL_NAMES[name]

    check_member_name(name)
    return name


def escape_ticker(text: str) -> str:
    text = re.sub(r"[@^'\"\\$]", "", text)
    return "".join(
        ch for ch in text
        if (ch.isascii() and ch.isalnum()) or ch in TICKER_PUNCTUATION
    )


def parse_symbol(text: str) -> Optional[str]:
    symbol = text.strip()
    if not symbol:
        return None
    symbol = SYMBOL_ALIASES.get(symbol, symbol)
    return prepend_underscore(symbol)


def parse_coin_type(text: str) -> Optional[int]:
    text = text.strip()
    if not re.fullmatch(r"[0-9]+", text):
        return None
    value = int(text)
    if value > MAX_COIN_TYPE:
        return None
    return value


def parse_rows(markdown: str) -> list[CoinEntry]:
    """One CoinEntry per usable table row, in upstream order."""
    lines = markdown.split("\n")
    try:
        start = lines.index(SLIP_0044_MARKDOWN_HEADER)
    except ValueError:
        raise GenerationError("SLIP-0044 table header not found") from None
    logger.info("Found header line, starting processing...")

    entries = []
    # Skip the header and the |---| separator
    for line in lines[start + 2:]:
        columns = line.split("|")
        if len(columns) != 6:
            logger.warning(
                f"Skipping line due to incorrect number of columns: {line!r}")
            continue

        original_name, _ = parse_markdown_link(columns[4].strip())
        if not original_name or original_name == "reserved":
            logger.warning(
                f"Skipping coin due to empty or reserved name: {original_name!r}")
            continue

        try:
            name = original_name_to_short(original_name)
        except GenerationError as e:
            logger.warning(f"Skipping coin due to name error: {e}")
            continue

        coin_type = parse_coin_type(columns[1])
        if coin_type is None:
            logger.warning(f"Skipping coin due to invalid ID: {columns[1]!r}")
            continue

        logger.debug(f"Processing coin: {original_name} (ID: {coin_type})")
        entries.append(CoinEntry(
            id=coin_type,
            path_component=columns[2].strip(),
            symbol=parse_symbol(columns[3]),
            name=name,
            original_name=original_name,
        ))

    return entries


# ─── Reconcile ───────────────────────────────────────────────────────

def merge_entries(entries: list[CoinEntry]) -> list[CoinEntry]:
    """Fold rows sharing (symbol, name, original_name) into one entry."""
    merged: dict[tuple, CoinEntry] = {}
    for entry in entries:
        merged.setdefault(entry.key, entry).ids.append(entry.id)
    return list(merged.values())


def rename_duplicates(entries: list[CoinEntry]) -> list[CoinEntry]:
    by_name: dict[str, list[CoinEntry]] = defaultdict(list)
    for entry in entries:
        by_name[entry.name].append(entry)

    for name, group in by_name.items():
        if len(group) < 2:
            continue
        logger.info(f"Found duplicate coins for name: {name}")
        for entry in group:
            suffix = (
                symbol_identifier(escape_ticker(entry.symbol)) if entry.symbol else None
            ) or "_".join(str(i) for i in entry.ids)
            entry.name = f"{name}_{suffix}"
    return entries


def check_collisions(entries: list[CoinEntry]):
    claimed: dict[int, str] = {}
    names = set()
    for entry in entries:
        check_member_name(entry.name)
        if entry.name in names:
            raise GenerationError(f"duplicate coin name `{entry.name}`")
        names.add(entry.name)
        for coin_type in entry.ids:
            if coin_type in claimed:
                raise GenerationError(
                    f"coin type {coin_type} claimed by both "
                    f"`{claimed[coin_type]}` and `{entry.name}`")
            claimed[coin_type] = entry.name


def build_entries(markdown: str) -> list[CoinEntry]:
    entries = parse_rows(markdown)
    entries = merge_entries(entries)
    logger.info(f"Processing {len(entries)} unique coins...")
    entries = rename_duplicates(entries)
    check_collisions(entries)
    return sorted(entries, key=lambda e: e.ids[0])


# ─── Emit ────────────────────────────────────────────────────────────

def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def symbol_identifier(ticker: str) -> Optional[str]:
    ident = prepend_underscore(re.sub(r"[^A-Za-z0-9_]", "", ticker))
    if not ident or keyword.iskeyword(ident) or ident in RESERVED_NAMES:
        return None
    if ident.startswith("_") and ident.endswith("_"):
        return None
    return ident


def render_module(entries: list[CoinEntry]) -> str:
    lines = [
        f"# Code generated by {GENERATED_BY}; DO NOT EDIT.",
        '"""SLIP-0044 coin types and their ticker symbols."""',
        "",
        "from enum import unique",
        "",
        "from slip44.core.registry import CoinType, SymbolType",
        "",
        "",
        "@unique",
        "class Coin(CoinType):",
    ]

    symbols = []
    seen_symbols = set()
    for i, entry in enumerate(entries):
        ticker = escape_ticker(entry.symbol) if entry.symbol else ""
        if i:
            lines.append("")
        lines.append(f"    # Coin type: {', '.join(str(x) for x in entry.ids)}")
        if entry.symbol:
            lines.append(f"    # Symbol: {entry.symbol}")
        lines.append(f"    # Coin: {entry.original_name}")

        ids = "(" + ", ".join(str(x) for x in entry.ids) + ("," if len(entry.ids) == 1 else "") + ")"
        value = f"{ids}, {_quote(entry.original_name)}"
        if ticker:
            value += f", {_quote(ticker)}"
        lines.append(f"    {entry.name} = {value}")

        ident = symbol_identifier(ticker) if ticker else None
        if ident and ident not in seen_symbols:
            seen_symbols.add(ident)
            symbols.append(f"    {ident} = {entry.ids[0]}, Coin.{entry.name}")

    lines += ["", "", "@unique", "class Symbol(SymbolType):"]
    lines += symbols or ["    pass"]
    lines.append("")
    return "\n".join(lines)


def check_module(source: str, output_path: Path):
    try:
        compile(source, str(output_path), "exec")
    except SyntaxError as e:
        raise GenerationError(f"generated module does not compile: {e}") from e


# ─── Main ────────────────────────────────────────────────────────────

def generate(config: dict) -> int:
    url = config["source"]["url"]
    logger.info(f"Fetching SLIP-0044 markdown from {url}")
    markdown = asyncio.run(
        fetch_markdown(url, config["source"]["timeout_seconds"]))
    logger.info(f"Successfully fetched {len(markdown)} bytes of markdown")

    entries = build_entries(markdown)
    output_path = Path(config["output"]["path"])
    logger.info(f"Writing to: {output_path}")
    source = render_module(entries)
    check_module(source, output_path)
    output_path.write_text(source, encoding="utf-8")
    logger.info(f"Successfully wrote {len(entries)} coins to {output_path}")
    return len(entries)


def main() -> int:
    config = load_config()
    setup_logging(config)
    try:
        generate(config)
    except (aiohttp.ClientError, asyncio.TimeoutError, GenerationError, OSError) as e:
        logger.error(f"parse-coins failed: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
