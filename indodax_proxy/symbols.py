"""Translation between frontend display symbols and upstream pair keys.

The exchange quotes pairs in its native currency (``btcidr``). The frontend
works with display symbols quoted in another currency (``BTCUSDT``). Only the
suffix is renamed; prices are still in the native currency.
"""
from typing import Optional

from indodax_proxy.market import MarketConfig


class SymbolError(ValueError):
    pass


def _split_base(value: str, quote: str) -> str:
    if not value.endswith(quote):
        raise SymbolError(f"{value!r} is not quoted in {quote.upper()}")
    base = value[: -len(quote)]
    if not base or not base.isascii() or not base.isalnum():
        raise SymbolError(f"{value!r} has no valid base currency")
    return base


def to_display_symbol(pair_key: str, market: MarketConfig) -> str:
    """``btcidr`` -> ``BTCUSDT``."""
    base = _split_base(pair_key.strip().lower(), market.native_quote)
    return (base + market.display_quote).upper()


def to_pair_key(symbol: Optional[str], market: MarketConfig) -> str:
    """``BTCUSDT`` -> ``btcidr``. Raises SymbolError for anything else."""
    if not symbol:
        raise SymbolError("symbol is required")
    base = _split_base(symbol.strip().lower(), market.display_quote)
    return base + market.native_quote
