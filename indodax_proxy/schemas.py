from datetime import datetime, timezone

from pydantic import BaseModel, field_serializer


class TickerSummary(BaseModel):
    symbol: str
    lastPrice: float
    priceChangePercent: float
    quoteVolume: float


class Candle(BaseModel):
    openTime: datetime
    open: float
    high: float
    low: float
    close: float
    volume: float

    @field_serializer("openTime")
    def _serialize_open_time(self, value: datetime) -> str:
        # Same shape as a JavaScript Date in JSON: 2023-11-14T22:13:20.000Z
        utc = value.astimezone(timezone.utc)
        return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class PriceQuote(BaseModel):
    price: float


class ErrorResponse(BaseModel):
    error: str


class Health(BaseModel):
    status: str
    exchange: str
    version: str
