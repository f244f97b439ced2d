"""Reshape raw Indodax payloads into the frontend schemas."""
import math
from datetime import datetime, timezone
from typing import Any, List, Optional

from indodax_proxy.market import MarketConfig
from indodax_proxy.schemas import Candle, TickerSummary
from indodax_proxy.symbols import to_display_symbol


class MalformedPayloadError(ValueError):
    pass


def to_float(value: Any, name: str = "value") -> float:
    """Parse an upstream number or numeric string into a finite float."""
    if isinstance(value, bool) or value is None:
        raise MalformedPayloadError(f"{name} is not numeric: {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise MalformedPayloadError(f"{name} is not numeric: {value!r}")
    if not math.isfinite(number):
        raise MalformedPayloadError(f"{name} is not finite: {value!r}")
    return number


def format_tickers(webdata: Any, market: MarketConfig) -> List[TickerSummary]:
    if not isinstance(webdata, dict) or not isinstance(webdata.get("pairs"), dict):
        return []
    pairs = webdata["pairs"]

    tickers = []
    for pair_key in market.ticker_pairs:
        raw = pairs.get(pair_key)
        if not isinstance(raw, dict):
            continue
        tickers.append(TickerSummary(
            symbol=to_display_symbol(pair_key, market),
            lastPrice=to_float(raw.get("last_price"), f"{pair_key}.last_price"),
            priceChangePercent=to_float(raw.get("percent_change"), f"{pair_key}.percent_change"),
            quoteVolume=to_float(raw.get(market.volume_field), f"{pair_key}.{market.volume_field}"),
        ))
    return tickers


def parse_limit(limit: Optional[str]) -> Optional[int]:
    """Positive integer limit, or None meaning every available candle."""
    if limit is None:
        return None
    limit = limit.strip()
    if not (limit.isascii() and limit.isdigit()):
        return None
    value = int(limit)
    return value if value > 0 else None


def format_candle(raw: Any) -> Candle:
    if not isinstance(raw, dict):
        raise MalformedPayloadError(f"candle is not an object: {raw!r}")
    epoch = to_float(raw.get("time"), "time")
    try:
        open_time = datetime.fromtimestamp(epoch, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise MalformedPayloadError(f"time is out of range: {epoch!r}")
    return Candle(
        openTime=open_time,
        open=to_float(raw.get("open"), "open"),
        high=to_float(raw.get("high"), "high"),
        low=to_float(raw.get("low"), "low"),
        close=to_float(raw.get("close"), "close"),
        volume=to_float(raw.get("volume"), "volume"),
    )


def format_klines(chart: Any, limit: Optional[int] = None) -> List[Candle]:
    data = chart.get("data") if isinstance(chart, dict) else None
    if not data:
        return []
    if not isinstance(data, list):
        raise MalformedPayloadError("chart data is not a list")
    if limit is not None:
        data = data[-limit:]
    return [format_candle(d) for d in data]


def parse_price(ticker: Any) -> Optional[float]:
    """Last trade price from a ticker payload; None when it is missing or unusable."""
    info = ticker.get("ticker") if isinstance(ticker, dict) else None
    if not isinstance(info, dict) or not info.get("last"):
        return None
    try:
        return to_float(info["last"], "last")
    except MalformedPayloadError:
        return None
