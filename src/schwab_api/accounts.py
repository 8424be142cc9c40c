"""Account endpoints of the Trader API.

Accounts are addressed by their hash value (see ``get_account_numbers``),
never by the raw account number.
"""

from datetime import datetime
from typing import Optional, Sequence, Union

import httpx

from src.schwab_api.auth import authorized_request
from src.schwab_api.config import DEFAULT_CONFIG, SchwabApiConfig
from src.schwab_api.models import (
    ApiRequest,
    CredentialsLike,
    TransactionType,
    path_segment,
)
from src.schwab_api.transport import send


# -- Builders ----------------------------------------------------------


def build_account_numbers_request(
    credentials: CredentialsLike,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    config = config or DEFAULT_CONFIG
    return authorized_request("GET", f"{config.trader_url}/accounts/accountNumbers", credentials)


def build_accounts_request(
    credentials: CredentialsLike,
    fields: Optional[str] = None,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    config = config or DEFAULT_CONFIG
    url = f"{config.trader_url}/accounts"
    return authorized_request("GET", url, credentials, params={"fields": fields})


def build_account_request(
    credentials: CredentialsLike,
    account_hash: str,
    fields: Optional[str] = None,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    config = config or DEFAULT_CONFIG
    account = path_segment(account_hash, "account_hash")
    url = f"{config.trader_url}/accounts/{account}"
    return authorized_request("GET", url, credentials, params={"fields": fields})


def build_positions_request(
    credentials: CredentialsLike,
    account_hash: str,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    """Positions come back inside the account payload."""
    return build_account_request(credentials, account_hash, fields="positions", config=config)


def build_user_preference_request(
    credentials: CredentialsLike,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    config = config or DEFAULT_CONFIG
    return authorized_request("GET", f"{config.trader_url}/userPreference", credentials)


def build_transactions_request(
    credentials: CredentialsLike,
    account_hash: str,
    start_date: datetime,
    end_date: datetime,
    types: Union[TransactionType, Sequence[TransactionType]] = TransactionType.TRADE,
    symbol: Optional[str] = None,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    config = config or DEFAULT_CONFIG
    account = path_segment(account_hash, "account_hash")
    if isinstance(types, str):
        types = [types]
    types = [TransactionType(t) for t in types]
    return authorized_request(
        "GET",
        f"{config.trader_url}/accounts/{account}/transactions",
        credentials,
        params={
            "startDate": start_date,
            "endDate": end_date,
            "types": types,
            "symbol": symbol,
        },
    )


# -- Senders -----------------------------------------------------------


async def get_account_numbers(
    credentials: CredentialsLike,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    """List account numbers with their hash values."""
    request = build_account_numbers_request(credentials, config=config)
    return await send(request, config=config, transport=transport)


async def get_accounts(
    credentials: CredentialsLike,
    fields: Optional[str] = None,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_accounts_request(credentials, fields, config=config)
    return await send(request, config=config, transport=transport)


async def get_account(
    credentials: CredentialsLike,
    account_hash: str,
    fields: Optional[str] = None,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_account_request(credentials, account_hash, fields, config=config)
    return await send(request, config=config, transport=transport)


async def get_positions(
    credentials: CredentialsLike,
    account_hash: str,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_positions_request(credentials, account_hash, config=config)
    return await send(request, config=config, transport=transport)


async def get_user_preference(
    credentials: CredentialsLike,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_user_preference_request(credentials, config=config)
    return await send(request, config=config, transport=transport)


async def get_transactions(
    credentials: CredentialsLike,
    account_hash: str,
    start_date: datetime,
    end_date: datetime,
    types: Union[TransactionType, Sequence[TransactionType]] = TransactionType.TRADE,
    symbol: Optional[str] = None,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_transactions_request(
        credentials, account_hash, start_date, end_date, types, symbol, config=config,
    )
    return await send(request, config=config, transport=transport)
