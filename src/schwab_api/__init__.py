"""Schwab API client.

Thin, stateless wrapper around Charles Schwab's Trader and Market Data
REST APIs. Every endpoint has a pure ``build_*`` function returning an
``ApiRequest`` and an async sender that issues it once and returns the
raw ``httpx.Response``. Credentials and tokens are supplied by the caller
on every call and never stored.

Example:
    from src.schwab_api import get_access_token, get_account_numbers

    resp = await get_access_token(app_key, app_secret, code, callback_url)
    token = resp.json()["access_token"]
    accounts = await get_account_numbers(token)
"""

from src.schwab_api.accounts import (
    build_account_numbers_request,
    build_account_request,
    build_accounts_request,
    build_positions_request,
    build_transactions_request,
    build_user_preference_request,
    get_account,
    get_account_numbers,
    get_accounts,
    get_positions,
    get_transactions,
    get_user_preference,
)
from src.schwab_api.auth import (
    authorization_header,
    authorize,
    build_access_token_request,
    build_authorize_request,
    build_refresh_token_request,
    build_token_request,
    get_access_token,
    get_authorization,
    refresh_access_token,
    request_token,
)
from src.schwab_api.client import SchwabClient
from src.schwab_api.config import DEFAULT_CONFIG, SchwabApiConfig, SchwabApiSettings, get_settings
from src.schwab_api.exceptions import RequestBuildError, SchwabApiError
from src.schwab_api.market_data import (
    build_instrument_by_cusip_request,
    build_instruments_request,
    build_market_hour_request,
    build_market_hours_request,
    build_movers_request,
    build_option_chain_request,
    build_option_expiration_chain_request,
    build_price_history_request,
    build_quote_request,
    build_quotes_request,
    create_default_options_chain_request_params,
    create_default_price_history_request_params,
    get_instrument_by_cusip,
    get_instruments,
    get_market_hour,
    get_market_hours,
    get_movers,
    get_option_chain,
    get_option_expiration_chain,
    get_price_history,
    get_quote,
    get_quotes,
)
from src.schwab_api.models import (
    ApiRequest,
    ApiResponse,
    AuthScheme,
    ContractType,
    Credentials,
    FrequencyType,
    GrantType,
    MarketType,
    MoverSort,
    OptionsChainRequestParams,
    OptionsStrategy,
    OrderStatus,
    PeriodType,
    PriceHistoryRequestParams,
    Projection,
    TransactionType,
)
from src.schwab_api.orders import (
    build_cancel_order_request,
    build_order_request,
    build_orders_request,
    build_place_order_request,
    build_replace_order_request,
    cancel_order,
    get_order,
    get_orders,
    place_order,
    replace_order,
)
from src.schwab_api.transport import send

__all__ = [
    # Client
    "SchwabClient",
    "send",
    # Config
    "DEFAULT_CONFIG",
    "SchwabApiConfig",
    "SchwabApiSettings",
    "get_settings",
    # Errors
    "SchwabApiError",
    "RequestBuildError",
    # Models
    "ApiRequest",
    "ApiResponse",
    "AuthScheme",
    "ContractType",
    "Credentials",
    "FrequencyType",
    "GrantType",
    "MarketType",
    "MoverSort",
    "OptionsChainRequestParams",
    "OptionsStrategy",
    "OrderStatus",
    "PeriodType",
    "PriceHistoryRequestParams",
    "Projection",
    "TransactionType",
    # OAuth
    "authorization_header",
    "authorize",
    "build_access_token_request",
    "build_authorize_request",
    "build_refresh_token_request",
    "build_token_request",
    "get_access_token",
    "get_authorization",
    "refresh_access_token",
    "request_token",
    # Accounts
    "build_account_numbers_request",
    "build_account_request",
    "build_accounts_request",
    "build_positions_request",
    "build_transactions_request",
    "build_user_preference_request",
    "get_account",
    "get_account_numbers",
    "get_accounts",
    "get_positions",
    "get_transactions",
    "get_user_preference",
    # Market data
    "build_instrument_by_cusip_request",
    "build_instruments_request",
    "build_market_hour_request",
    "build_market_hours_request",
    "build_movers_request",
    "build_option_chain_request",
    "build_option_expiration_chain_request",
    "build_price_history_request",
    "build_quote_request",
    "build_quotes_request",
    "create_default_options_chain_request_params",
    "create_default_price_history_request_params",
    "get_instrument_by_cusip",
    "get_instruments",
    "get_market_hour",
    "get_market_hours",
    "get_movers",
    "get_option_chain",
    "get_option_expiration_chain",
    "get_price_history",
    "get_quote",
    "get_quotes",
    # Orders
    "build_cancel_order_request",
    "build_order_request",
    "build_orders_request",
    "build_place_order_request",
    "build_replace_order_request",
    "cancel_order",
    "get_order",
    "get_orders",
    "place_order",
    "replace_order",
]
