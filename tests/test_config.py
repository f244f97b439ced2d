import dataclasses

import pytest

from indodax_proxy.config import Settings
from indodax_proxy.market import MarketConfig
from indodax_proxy.results import ErrorKind, Failure, Ok, to_response
from indodax_proxy.schemas import PriceQuote


def test_settings_defaults():
    s = Settings(_env_file=None)
    assert s.PORT == 5000
    assert s.EXCHANGE_NAME == "indodax"
    assert s.allowed_origins == ["http://localhost:3000"]
    assert "*" not in s.allowed_origins
    assert s.UPSTREAM_TIMEOUT_SECONDS > 0


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://app.example.com, http://localhost:5173")
    s = Settings(_env_file=None)
    assert s.PORT == 8080
    assert s.allowed_origins == ["https://app.example.com", "http://localhost:5173"]


def test_market_config_is_immutable():
    market = MarketConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        market.native_quote = "usd"
    with pytest.raises(TypeError):
        market.intervals["1m"] = "1"


def test_market_config_intervals():
    market = MarketConfig(intervals={"1d": "1D"})
    assert market.upstream_timeframe("1d") == "1D"
    assert market.upstream_timeframe("1h") is None
    assert market.upstream_timeframe(None) is None
    assert MarketConfig().upstream_timeframe("4h") == "240"


def test_market_config_rejects_empty_quote():
    with pytest.raises(ValueError):
        MarketConfig(native_quote="")


def test_volume_field_follows_native_quote():
    assert MarketConfig().volume_field == "volume_idr"


@pytest.mark.parametrize("kind,status", [(ErrorKind.VALIDATION, 400), (ErrorKind.NOT_FOUND, 404),
                                         (ErrorKind.UPSTREAM, 500)])
def test_failure_response(kind, status):
    resp = to_response(Failure(kind, "nope"))
    assert resp.status_code == status
    assert resp.body == b'{"error":"nope"}'


def test_ok_response():
    resp = to_response(Ok(PriceQuote(price=1.5)))
    assert resp.status_code == 200
    assert resp.body == b'{"price":1.5}'


def test_to_response_rejects_other_values():
    with pytest.raises(TypeError):
        to_response({"price": 1})


@pytest.mark.parametrize("pairs", [("btcidr", "ethusdt"), ("idr",), ("btc-idr",)])
def test_market_config_rejects_untranslatable_ticker_pairs(pairs):
    with pytest.raises(ValueError, match="ticker pair"):
        MarketConfig(ticker_pairs=pairs)


def test_market_config_checks_pairs_against_native_quote():
    with pytest.raises(ValueError):
        MarketConfig(native_quote="usdt", display_quote="usd")
    assert MarketConfig(ticker_pairs=("btcusdt",), native_quote="usdt", display_quote="usd").ticker_pairs == ("btcusdt",)


def test_entrypoint_logs_bound_address(monkeypatch, caplog):
    import logging

    import indodax_proxy.__main__ as entrypoint

    served = {}
    monkeypatch.setattr(entrypoint.uvicorn, "run", lambda app, host, port: served.update(host=host, port=port))
    with caplog.at_level(logging.INFO, logger="indodax_proxy"):
        entrypoint.main(host="127.0.0.1", port=8123)
    assert served == {"host": "127.0.0.1", "port": 8123}
    assert "http://127.0.0.1:8123" in caplog.text
