import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request

from indodax_proxy.formatting import (
    MalformedPayloadError,
    format_klines,
    format_tickers,
    parse_limit,
    parse_price,
)
from indodax_proxy.market import MarketConfig
from indodax_proxy.results import ErrorKind, Failure, Ok, Result, to_response
from indodax_proxy.schemas import Candle, ErrorResponse, PriceQuote, TickerSummary
from indodax_proxy.symbols import SymbolError, to_pair_key
from indodax_proxy.upstream import IndodaxClient, UpstreamError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_market(request: Request) -> MarketConfig:
    return request.app.state.market


def get_upstream(request: Request) -> IndodaxClient:
    return request.app.state.upstream


async def ticker_result(upstream: IndodaxClient, market: MarketConfig) -> Result:
    try:
        webdata = await upstream.fetch_webdata()
        return Ok(format_tickers(webdata, market))
    except (UpstreamError, MalformedPayloadError) as e:
        logger.error("Error fetching Indodax ticker: %s", e)
        return Failure(ErrorKind.UPSTREAM, "Failed to fetch Indodax ticker data")


async def klines_result(
    upstream: IndodaxClient,
    market: MarketConfig,
    symbol: Optional[str],
    interval: Optional[str],
    limit: Optional[str],
) -> Result:
    timeframe = market.upstream_timeframe(interval)
    try:
        pair = to_pair_key(symbol, market)
    except SymbolError:
        pair = None
    if timeframe is None or pair is None:
        return Failure(ErrorKind.VALIDATION, "Invalid symbol or interval")

    try:
        chart = await upstream.fetch_chart(pair, timeframe)
        return Ok(format_klines(chart, parse_limit(limit)))
    except (UpstreamError, MalformedPayloadError) as e:
        logger.error("Error fetching Indodax klines for %s - %s: %s", symbol, interval, e)
        return Failure(ErrorKind.UPSTREAM, "Failed to fetch Indodax klines data")


async def price_result(upstream: IndodaxClient, market: MarketConfig, symbol: Optional[str]) -> Result:
    try:
        pair = to_pair_key(symbol, market)
    except SymbolError:
        return Failure(ErrorKind.VALIDATION, "Invalid symbol")

    try:
        ticker = await upstream.fetch_ticker(pair)
    except UpstreamError as e:
        logger.error("Error fetching Indodax price for %s: %s", symbol, e)
        return Failure(ErrorKind.UPSTREAM, "Failed to fetch Indodax price")

    price = parse_price(ticker)
    if price is None:
        return Failure(ErrorKind.NOT_FOUND, f"Price not found for symbol {symbol}")
    return Ok(PriceQuote(price=price))


@router.get("/ticker", response_model=List[TickerSummary], responses={500: {"model": ErrorResponse}})
async def get_ticker(
    upstream: IndodaxClient = Depends(get_upstream),
    market: MarketConfig = Depends(get_market),
):
    return to_response(await ticker_result(upstream, market))


@router.get(
    "/klines",
    response_model=List[Candle],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_klines(
    symbol: Optional[str] = None,
    interval: Optional[str] = None,
    limit: Optional[str] = None,
    upstream: IndodaxClient = Depends(get_upstream),
    market: MarketConfig = Depends(get_market),
):
    # limit is parsed leniently; anything but a positive integer means all candles
    return to_response(await klines_result(upstream, market, symbol, interval, limit))


@router.get(
    "/price",
    response_model=PriceQuote,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_price(
    symbol: Optional[str] = None,
    upstream: IndodaxClient = Depends(get_upstream),
    market: MarketConfig = Depends(get_market),
):
    return to_response(await price_result(upstream, market, symbol))
