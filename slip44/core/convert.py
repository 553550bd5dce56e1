"""
Conversions between SLIP-0044 ids, names, coins and symbols.
Every fallible conversion raises NotFound; nothing here has side effects.
"""

from ..coins import Coin, Symbol


def coin_from_id(id: int) -> Coin:
    """Resolve any id of a coin, primary or alias."""
    return Coin.from_id(id)


def coin_from_name(name: str) -> Coin:
    return Coin.from_name(name)


def coin_from_symbol(symbol: Symbol) -> Coin:
    return Coin.from_symbol(symbol)


def symbol_from_id(id: int) -> Symbol:
    """Match against the primary id of the owning coin only."""
    return Symbol.from_id(id)


def symbol_from_name(name: str) -> Symbol:
    return Symbol.from_name(name)


def symbol_from_coin(coin: Coin) -> Symbol:
    return Symbol.from_coin(coin)
