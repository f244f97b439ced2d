"""Immutable market configuration shared by the request handlers."""
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple
from types import MappingProxyType

DEFAULT_TICKER_PAIRS = (
    "btcidr", "ethidr", "bnbidr", "solanaidr", "xpridr", "dogeidr",
    "trxidr", "ltcidr", "adaidr", "dotidr", "maticidr", "avaxidr",
)

# Frontend interval code -> upstream chart timeframe in minutes
DEFAULT_INTERVALS = {
    "15m": "15",
    "1h": "60",
    "4h": "240",
}


@dataclass(frozen=True)
class MarketConfig:
    """Pairs, intervals and quote currencies a proxy instance serves.

    ``ticker_pairs`` is the allow-list returned by the ticker endpoint, in
    output order. Symbols are displayed with ``display_quote`` in place of the
    exchange's ``native_quote`` suffix (``btcidr`` is shown as ``BTCUSDT``).
    """

    ticker_pairs: Tuple[str, ...] = DEFAULT_TICKER_PAIRS
    intervals: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_INTERVALS))
    native_quote: str = "idr"
    display_quote: str = "usdt"

    def __post_init__(self):
        object.__setattr__(self, "ticker_pairs", tuple(p.lower() for p in self.ticker_pairs))
        object.__setattr__(self, "intervals", MappingProxyType(dict(self.intervals)))
        object.__setattr__(self, "native_quote", self.native_quote.lower())
        object.__setattr__(self, "display_quote", self.display_quote.lower())
        if not self.native_quote or not self.display_quote:
            raise ValueError("quote currencies must not be empty")

        from indodax_proxy.symbols import SymbolError, to_display_symbol
        for pair in self.ticker_pairs:
            try:
                to_display_symbol(pair, self)
            except SymbolError as e:
                raise ValueError(f"ticker pair {pair!r} is not quoted in {self.native_quote.upper()}") from e

    @property
    def volume_field(self) -> str:
        return f"volume_{self.native_quote}"

    def upstream_timeframe(self, interval: Optional[str]) -> Optional[str]:
        if interval is None:
            return None
        return self.intervals.get(interval)


default_market = MarketConfig()
