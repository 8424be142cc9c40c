"""Market Data API endpoints.

Quotes, price history, option chains, movers, market hours and
instrument lookup. Market hours and instrument lookup have always been
sent with Basic auth; the scheme is an explicit ``auth_scheme`` argument
on those calls so it can be switched to Bearer deliberately.
"""

from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Optional, Sequence, Union

import httpx

from src.schwab_api.auth import authorized_request
from src.schwab_api.config import DEFAULT_CONFIG, SchwabApiConfig
from src.schwab_api.exceptions import RequestBuildError
from src.schwab_api.models import (
    ApiRequest,
    AuthScheme,
    ContractType,
    CredentialsLike,
    FrequencyType,
    MarketType,
    MoverSort,
    OptionsChainRequestParams,
    OptionsStrategy,
    PeriodType,
    PriceHistoryRequestParams,
    Projection,
    path_segment,
    to_epoch_millis,
)
from src.schwab_api.transport import send

# Legacy defaults; see module docstring
MARKET_HOURS_AUTH_SCHEME = AuthScheme.BASIC
INSTRUMENTS_AUTH_SCHEME = AuthScheme.BASIC


def create_default_options_chain_request_params(
    symbol: str,
    contract_type: ContractType,
    include_underlying_quote: bool,
    strike_count: int,
    strategy: OptionsStrategy,
) -> OptionsChainRequestParams:
    """Option chain query with range ``SNK`` and standard option type ``S``."""
    return OptionsChainRequestParams(
        symbol=symbol,
        contract_type=contract_type,
        include_underlying_quote=include_underlying_quote,
        strike_count=strike_count,
        strategy=strategy,
        range="SNK",
        option_type="S",
    )


def create_default_price_history_request_params(
    symbol: str,
    start_date: Union[int, datetime, date, None] = None,
    end_date: Union[int, datetime, date, None] = None,
    period_type: PeriodType = PeriodType.YEAR,
    frequency_type: FrequencyType = FrequencyType.DAILY,
    frequency: int = 1,
) -> PriceHistoryRequestParams:
    """Daily candles; ``end_date`` is left unset so the request uses "now"."""
    return PriceHistoryRequestParams(
        symbol=symbol,
        period_type=period_type,
        frequency_type=frequency_type,
        frequency=frequency,
        start_date=to_epoch_millis(start_date) if start_date is not None else None,
        end_date=to_epoch_millis(end_date) if end_date is not None else None,
    )


def _symbols(symbols: Union[str, Sequence[str]]) -> str:
    if isinstance(symbols, str):
        symbols = [symbols]
    joined = ",".join(s.strip() for s in symbols if s and s.strip())
    if not joined:
        raise RequestBuildError("at least one symbol is required", field="symbols")
    return joined


# =====================================================================
# Request builders
# =====================================================================


def build_quotes_request(
    credentials: CredentialsLike,
    symbols: Union[str, Sequence[str]],
    fields: Optional[str] = None,
    indicative: Optional[bool] = None,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    config = config or DEFAULT_CONFIG
    return authorized_request(
        "GET",
        f"{config.marketdata_url}/quotes",
        credentials,
        params={"symbols": _symbols(symbols), "fields": fields, "indicative": indicative},
    )


def build_quote_request(
    credentials: CredentialsLike,
    symbol: str,
    fields: Optional[str] = None,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    config = config or DEFAULT_CONFIG
    url = f"{config.marketdata_url}/{path_segment(symbol, 'symbol')}/quotes"
    return authorized_request("GET", url, credentials, params={"fields": fields})


def build_price_history_request(
    credentials: CredentialsLike,
    params: PriceHistoryRequestParams,
    now: Optional[datetime] = None,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    """Price history request.

    When ``params.end_date`` is unset the current time is used, so this is
    the one builder whose output depends on the clock. ``params`` itself is
    not modified.
    """
    config = config or DEFAULT_CONFIG
    path_segment(params.symbol, "symbol")
    if params.end_date is None:
        params = replace(params, end_date=to_epoch_millis(now or datetime.now(timezone.utc)))
    return authorized_request(
        "GET",
        f"{config.marketdata_url}/pricehistory",
        credentials,
        params=params.to_params(),
    )


def build_option_chain_request(
    credentials: CredentialsLike,
    params: OptionsChainRequestParams,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    config = config or DEFAULT_CONFIG
    path_segment(params.symbol, "symbol")
    return authorized_request(
        "GET",
        f"{config.marketdata_url}/chains",
        credentials,
        params=params.to_params(),
    )


def build_option_expiration_chain_request(
    credentials: CredentialsLike,
    symbol: str,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    config = config or DEFAULT_CONFIG
    path_segment(symbol, "symbol")
    return authorized_request(
        "GET",
        f"{config.marketdata_url}/expirationchain",
        credentials,
        params={"symbol": symbol},
    )


def build_movers_request(
    credentials: CredentialsLike,
    index: str = "$SPX",
    sort: Optional[MoverSort] = None,
    frequency: Optional[int] = None,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    config = config or DEFAULT_CONFIG
    url = f"{config.marketdata_url}/movers/{path_segment(index, 'index')}"
    return authorized_request(
        "GET", url, credentials, params={"sort": sort, "frequency": frequency},
    )


def build_market_hours_request(
    credentials: CredentialsLike,
    markets: Union[MarketType, Sequence[MarketType]] = (MarketType.EQUITY, MarketType.OPTION),
    day: Optional[date] = None,
    auth_scheme: AuthScheme = MARKET_HOURS_AUTH_SCHEME,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    config = config or DEFAULT_CONFIG
    if isinstance(markets, str):
        markets = [markets]
    markets = [MarketType(m) for m in markets]
    if not markets:
        raise RequestBuildError("at least one market is required", field="markets")
    return authorized_request(
        "GET",
        f"{config.marketdata_url}/markets",
        credentials,
        auth_scheme,
        params={"markets": markets, "date": day},
    )


def build_market_hour_request(
    credentials: CredentialsLike,
    market: MarketType,
    day: Optional[date] = None,
    auth_scheme: AuthScheme = MARKET_HOURS_AUTH_SCHEME,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    config = config or DEFAULT_CONFIG
    url = f"{config.marketdata_url}/markets/{path_segment(market, 'market')}"
    return authorized_request("GET", url, credentials, auth_scheme, params={"date": day})


def build_instruments_request(
    credentials: CredentialsLike,
    symbol: str,
    projection: Projection = Projection.SYMBOL_SEARCH,
    auth_scheme: AuthScheme = INSTRUMENTS_AUTH_SCHEME,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    config = config or DEFAULT_CONFIG
    path_segment(symbol, "symbol")
    return authorized_request(
        "GET",
        f"{config.marketdata_url}/instruments",
        credentials,
        auth_scheme,
        params={"symbol": symbol, "projection": projection},
    )


def build_instrument_by_cusip_request(
    credentials: CredentialsLike,
    cusip: str,
    auth_scheme: AuthScheme = INSTRUMENTS_AUTH_SCHEME,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    config = config or DEFAULT_CONFIG
    url = f"{config.marketdata_url}/instruments/{path_segment(cusip, 'cusip')}"
    return authorized_request("GET", url, credentials, auth_scheme)


# =====================================================================
# Senders
# =====================================================================


async def get_quotes(
    credentials: CredentialsLike,
    symbols: Union[str, Sequence[str]],
    fields: Optional[str] = None,
    indicative: Optional[bool] = None,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_quotes_request(credentials, symbols, fields, indicative, config=config)
    return await send(request, config=config, transport=transport)


async def get_quote(
    credentials: CredentialsLike,
    symbol: str,
    fields: Optional[str] = None,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_quote_request(credentials, symbol, fields, config=config)
    return await send(request, config=config, transport=transport)


async def get_price_history(
    credentials: CredentialsLike,
    params: PriceHistoryRequestParams,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_price_history_request(credentials, params, config=config)
    return await send(request, config=config, transport=transport)


async def get_option_chain(
    credentials: CredentialsLike,
    params: OptionsChainRequestParams,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_option_chain_request(credentials, params, config=config)
    return await send(request, config=config, transport=transport)


async def get_option_expiration_chain(
    credentials: CredentialsLike,
    symbol: str,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_option_expiration_chain_request(credentials, symbol, config=config)
    return await send(request, config=config, transport=transport)


async def get_movers(
    credentials: CredentialsLike,
    index: str = "$SPX",
    sort: Optional[MoverSort] = None,
    frequency: Optional[int] = None,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_movers_request(credentials, index, sort, frequency, config=config)
    return await send(request, config=config, transport=transport)


async def get_market_hours(
    credentials: CredentialsLike,
    markets: Union[MarketType, Sequence[MarketType]] = (MarketType.EQUITY, MarketType.OPTION),
    day: Optional[date] = None,
    auth_scheme: AuthScheme = MARKET_HOURS_AUTH_SCHEME,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_market_hours_request(credentials, markets, day, auth_scheme, config=config)
    return await send(request, config=config, transport=transport)


async def get_market_hour(
    credentials: CredentialsLike,
    market: MarketType,
    day: Optional[date] = None,
    auth_scheme: AuthScheme = MARKET_HOURS_AUTH_SCHEME,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_market_hour_request(credentials, market, day, auth_scheme, config=config)
    return await send(request, config=config, transport=transport)


async def get_instruments(
    credentials: CredentialsLike,
    symbol: str,
    projection: Projection = Projection.SYMBOL_SEARCH,
    auth_scheme: AuthScheme = INSTRUMENTS_AUTH_SCHEME,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_instruments_request(credentials, symbol, projection, auth_scheme, config=config)
    return await send(request, config=config, transport=transport)


async def get_instrument_by_cusip(
    credentials: CredentialsLike,
    cusip: str,
    auth_scheme: AuthScheme = INSTRUMENTS_AUTH_SCHEME,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_instrument_by_cusip_request(credentials, cusip, auth_scheme, config=config)
    return await send(request, config=config, transport=transport)
