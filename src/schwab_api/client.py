"""Schwab REST API Client.

``SchwabClient`` binds a ``SchwabApiConfig`` and an optional httpx
transport once and exposes every endpoint as a method. It holds no
credentials and no tokens: pass them on every call, exactly as with the
module-level functions it delegates to.
"""

from typing import Any, Optional

import httpx

from src.schwab_api import accounts, auth, market_data, orders
from src.schwab_api.config import DEFAULT_CONFIG, SchwabApiConfig
from src.schwab_api.models import CredentialsLike, JsonValue


class SchwabClient:
    """Stateless facade over the endpoint functions.

    Example:
        client = SchwabClient(SchwabApiConfig.from_settings())
        resp = await client.get_account_numbers(access_token)
        account_hash = resp.json()[0]["hashValue"]
        await client.place_order(access_token, account_hash, order)
    """

    def __init__(
        self,
        config: Optional[SchwabApiConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._config = config or DEFAULT_CONFIG
        self._transport = transport

    @property
    def config(self) -> SchwabApiConfig:
        return self._config

    def _bound(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        kwargs.setdefault("config", self._config)
        kwargs.setdefault("transport", self._transport)
        return kwargs

    # -- OAuth -------------------------------------------------------------

    async def authorize(self, app_key: str, callback_url: str, **kwargs) -> httpx.Response:
        return await auth.authorize(app_key, callback_url, **self._bound(kwargs))

    async def get_access_token(
        self, app_key: str, app_secret: str, code: str, redirect_uri: str, **kwargs,
    ) -> httpx.Response:
        return await auth.get_access_token(
            app_key, app_secret, code, redirect_uri, **self._bound(kwargs),
        )

    async def refresh_access_token(
        self, app_key: str, app_secret: str, refresh_token: str, **kwargs,
    ) -> httpx.Response:
        return await auth.refresh_access_token(
            app_key, app_secret, refresh_token, **self._bound(kwargs),
        )

    # -- Accounts ----------------------------------------------------------

    async def get_account_numbers(self, credentials: CredentialsLike, **kwargs) -> httpx.Response:
        return await accounts.get_account_numbers(credentials, **self._bound(kwargs))

    async def get_accounts(self, credentials: CredentialsLike, **kwargs) -> httpx.Response:
        return await accounts.get_accounts(credentials, **self._bound(kwargs))

    async def get_account(
        self, credentials: CredentialsLike, account_hash: str, **kwargs,
    ) -> httpx.Response:
        return await accounts.get_account(credentials, account_hash, **self._bound(kwargs))

    async def get_positions(
        self, credentials: CredentialsLike, account_hash: str, **kwargs,
    ) -> httpx.Response:
        return await accounts.get_positions(credentials, account_hash, **self._bound(kwargs))

    async def get_user_preference(self, credentials: CredentialsLike, **kwargs) -> httpx.Response:
        return await accounts.get_user_preference(credentials, **self._bound(kwargs))

    async def get_transactions(
        self, credentials: CredentialsLike, account_hash: str, start_date, end_date, **kwargs,
    ) -> httpx.Response:
        return await accounts.get_transactions(
            credentials, account_hash, start_date, end_date, **self._bound(kwargs),
        )

    # -- Market Data -------------------------------------------------------

    async def get_quotes(self, credentials: CredentialsLike, symbols, **kwargs) -> httpx.Response:
        return await market_data.get_quotes(credentials, symbols, **self._bound(kwargs))

    async def get_quote(self, credentials: CredentialsLike, symbol: str, **kwargs) -> httpx.Response:
        return await market_data.get_quote(credentials, symbol, **self._bound(kwargs))

    async def get_price_history(self, credentials: CredentialsLike, params, **kwargs) -> httpx.Response:
        return await market_data.get_price_history(credentials, params, **self._bound(kwargs))

    async def get_option_chain(self, credentials: CredentialsLike, params, **kwargs) -> httpx.Response:
        return await market_data.get_option_chain(credentials, params, **self._bound(kwargs))

    async def get_option_expiration_chain(
        self, credentials: CredentialsLike, symbol: str, **kwargs,
    ) -> httpx.Response:
        return await market_data.get_option_expiration_chain(
            credentials, symbol, **self._bound(kwargs),
        )

    async def get_movers(self, credentials: CredentialsLike, **kwargs) -> httpx.Response:
        return await market_data.get_movers(credentials, **self._bound(kwargs))

    async def get_market_hours(self, credentials: CredentialsLike, **kwargs) -> httpx.Response:
        return await market_data.get_market_hours(credentials, **self._bound(kwargs))

    async def get_market_hour(self, credentials: CredentialsLike, market, **kwargs) -> httpx.Response:
        return await market_data.get_market_hour(credentials, market, **self._bound(kwargs))

    async def get_instruments(
        self, credentials: CredentialsLike, symbol: str, **kwargs,
    ) -> httpx.Response:
        return await market_data.get_instruments(credentials, symbol, **self._bound(kwargs))

    async def get_instrument_by_cusip(
        self, credentials: CredentialsLike, cusip: str, **kwargs,
    ) -> httpx.Response:
        return await market_data.get_instrument_by_cusip(credentials, cusip, **self._bound(kwargs))

    # -- Orders ------------------------------------------------------------

    async def place_order(
        self, credentials: CredentialsLike, account_hash: str, order: JsonValue, **kwargs,
    ) -> httpx.Response:
        return await orders.place_order(credentials, account_hash, order, **self._bound(kwargs))

    async def get_orders(
        self,
        credentials: CredentialsLike,
        account_hash: str,
        from_entered_time,
        to_entered_time,
        **kwargs,
    ) -> httpx.Response:
        return await orders.get_orders(
            credentials, account_hash, from_entered_time, to_entered_time, **self._bound(kwargs),
        )

    async def get_order(
        self, credentials: CredentialsLike, account_hash: str, order_id, **kwargs,
    ) -> httpx.Response:
        return await orders.get_order(credentials, account_hash, order_id, **self._bound(kwargs))

    async def cancel_order(
        self, credentials: CredentialsLike, account_hash: str, order_id, **kwargs,
    ) -> httpx.Response:
        return await orders.cancel_order(credentials, account_hash, order_id, **self._bound(kwargs))

    async def replace_order(
        self, credentials: CredentialsLike, account_hash: str, order_id, order: JsonValue, **kwargs,
    ) -> httpx.Response:
        return await orders.replace_order(
            credentials, account_hash, order_id, order, **self._bound(kwargs),
        )
