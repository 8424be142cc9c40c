"""Order endpoints of the Trader API.

Order payloads are passed through as opaque JSON; building a valid order
body is the caller's job.
"""

from datetime import datetime
from typing import Optional

import httpx

from src.schwab_api.auth import authorized_request
from src.schwab_api.config import DEFAULT_CONFIG, SchwabApiConfig
from src.schwab_api.exceptions import RequestBuildError
from src.schwab_api.models import (
    ApiRequest,
    CredentialsLike,
    JsonValue,
    OrderStatus,
    path_segment,
)
from src.schwab_api.transport import send


def orders_url(account_hash: str, config: Optional[SchwabApiConfig] = None) -> str:
    """``{trader}/accounts/{accountHash}/orders``"""
    config = config or DEFAULT_CONFIG
    return f"{config.trader_url}/accounts/{path_segment(account_hash, 'account_hash')}/orders"


def _order_url(account_hash: str, order_id, config: Optional[SchwabApiConfig]) -> str:
    return f"{orders_url(account_hash, config)}/{path_segment(order_id, 'order_id')}"


def _require_payload(order: JsonValue) -> JsonValue:
    if order is None:
        raise RequestBuildError("order payload is required", field="order")
    return order


# -- Builders ----------------------------------------------------------


def build_place_order_request(
    credentials: CredentialsLike,
    account_hash: str,
    order: JsonValue,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    return authorized_request(
        "POST", orders_url(account_hash, config), credentials, json=_require_payload(order),
    )


def build_orders_request(
    credentials: CredentialsLike,
    account_hash: str,
    from_entered_time: datetime,
    to_entered_time: datetime,
    status: Optional[OrderStatus] = None,
    max_results: Optional[int] = None,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    return authorized_request(
        "GET",
        orders_url(account_hash, config),
        credentials,
        params={
            "fromEnteredTime": from_entered_time,
            "toEnteredTime": to_entered_time,
            "status": status,
            "maxResults": max_results,
        },
    )


def build_order_request(
    credentials: CredentialsLike,
    account_hash: str,
    order_id,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    return authorized_request("GET", _order_url(account_hash, order_id, config), credentials)


def build_cancel_order_request(
    credentials: CredentialsLike,
    account_hash: str,
    order_id,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    return authorized_request("DELETE", _order_url(account_hash, order_id, config), credentials)


def build_replace_order_request(
    credentials: CredentialsLike,
    account_hash: str,
    order_id,
    order: JsonValue,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    return authorized_request(
        "PUT",
        _order_url(account_hash, order_id, config),
        credentials,
        json=_require_payload(order),
    )


# -- Senders -----------------------------------------------------------


async def place_order(
    credentials: CredentialsLike,
    account_hash: str,
    order: JsonValue,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    """Submit an order.

    A successful response has an empty body; the new order's URL is in the
    ``Location`` header.
    """
    request = build_place_order_request(credentials, account_hash, order, config=config)
    return await send(request, config=config, transport=transport)


async def get_orders(
    credentials: CredentialsLike,
    account_hash: str,
    from_entered_time: datetime,
    to_entered_time: datetime,
    status: Optional[OrderStatus] = None,
    max_results: Optional[int] = None,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_orders_request(
        credentials, account_hash, from_entered_time, to_entered_time, status, max_results,
        config=config,
    )
    return await send(request, config=config, transport=transport)


async def get_order(
    credentials: CredentialsLike,
    account_hash: str,
    order_id,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_order_request(credentials, account_hash, order_id, config=config)
    return await send(request, config=config, transport=transport)


async def cancel_order(
    credentials: CredentialsLike,
    account_hash: str,
    order_id,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_cancel_order_request(credentials, account_hash, order_id, config=config)
    return await send(request, config=config, transport=transport)


async def replace_order(
    credentials: CredentialsLike,
    account_hash: str,
    order_id,
    order: JsonValue,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_replace_order_request(credentials, account_hash, order_id, order, config=config)
    return await send(request, config=config, transport=transport)
