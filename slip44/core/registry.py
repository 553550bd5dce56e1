"""
Enum bases for the SLIP-0044 coin registry.
The members themselves live in slip44/coins.py, which is generated.
"""

from enum import Enum
from typing import Optional


class NotFound(LookupError, ValueError):
    """No coin or symbol matches the requested id, name or coin."""


class CoinType(Enum):
    """
    Base for the generated Coin enum.

    Members are declared as ``Name = (ids...), "original name", "TICKER"``.
    The primary id is the enum value, so ``Coin(0)`` is the plain lookup;
    alias ids go through ``_missing_``.
    """

    def __new__(cls, ids: tuple, original_name: str, ticker: Optional[str] = None):
        obj = object.__new__(cls)
        obj._value_ = ids[0]
        obj._ids = tuple(ids)
        obj.original_name = original_name
        obj.ticker = ticker
        return obj

    @classmethod
    def _missing_(cls, value):
        for member in cls:
            if value in member._ids:
                return member
        raise NotFound(f"no coin with id {value!r}")

    @property
    def id(self) -> int:
        return self._value_

    @property
    def ids(self) -> tuple[int, ...]:
        return self._ids

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_id(cls, id: int):
        return cls(id)

    @classmethod
    def from_name(cls, name: str):
        """Exact, case-sensitive match against the canonical name."""
        try:
            return cls[name]
        except KeyError:
            raise NotFound(f"no coin named {name!r}") from None

    @classmethod
    def from_symbol(cls, symbol: "SymbolType"):
        return symbol.coin


class SymbolType(Enum):
    """
    Base for the generated Symbol enum.

    Members are declared as ``TICKER = primary_id, Coin.Name``; the owning
    coin is bound when the member is created and never changes.
    """

    def __new__(cls, id: int, coin: CoinType):
        obj = object.__new__(cls)
        obj._value_ = id
        obj.coin = coin
        return obj

    @classmethod
    def _missing_(cls, value):
        # Only primary ids carry a symbol; aliases never match.
        raise NotFound(f"no symbol with id {value!r}")

    @property
    def id(self) -> int:
        return self._value_

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_id(cls, id: int):
        return cls(id)

    @classmethod
    def from_name(cls, name: str):
        try:
            return cls[name]
        except KeyError:
            raise NotFound(f"no symbol named {name!r}") from None

    @classmethod
    def from_coin(cls, coin: CoinType):
        for member in cls:
            if member.coin is coin:
                return member
        raise NotFound(f"{coin} has no symbol")
