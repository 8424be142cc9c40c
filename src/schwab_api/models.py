"""Request and response models for the Schwab API client.

Request descriptors are transient: built by the ``build_*`` functions,
sent once, discarded. Parameter structs cover the documented fields of
endpoints with many query options; opaque payloads (order bodies, raw
responses) stay as plain JSON values.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Optional, Union
from urllib.parse import quote

import httpx

from src.schwab_api.exceptions import RequestBuildError

JsonValue = Union[dict, list, str, int, float, bool, None]


# =====================================================================
# Enumerations
# =====================================================================


class AuthScheme(str, Enum):
    """Authorization header scheme."""
    BASIC = "Basic"
    BEARER = "Bearer"


class GrantType(str, Enum):
    """OAuth grant types accepted by the token endpoint."""
    AUTHORIZATION_CODE = "authorization_code"
    REFRESH_TOKEN = "refresh_token"


class ContractType(str, Enum):
    """Option contract type filter."""
    CALL = "CALL"
    PUT = "PUT"
    ALL = "ALL"


class OptionsStrategy(str, Enum):
    """Option chain strategy."""
    SINGLE = "SINGLE"
    ANALYTICAL = "ANALYTICAL"
    COVERED = "COVERED"
    VERTICAL = "VERTICAL"
    CALENDAR = "CALENDAR"
    STRANGLE = "STRANGLE"
    STRADDLE = "STRADDLE"
    BUTTERFLY = "BUTTERFLY"
    CONDOR = "CONDOR"
    DIAGONAL = "DIAGONAL"
    COLLAR = "COLLAR"
    ROLL = "ROLL"


class PeriodType(str, Enum):
    DAY = "day"
    MONTH = "month"
    YEAR = "year"
    YTD = "ytd"


class FrequencyType(str, Enum):
    MINUTE = "minute"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class MarketType(str, Enum):
    """Markets accepted by the market hours endpoint."""
    EQUITY = "equity"
    OPTION = "option"
    BOND = "bond"
    FUTURE = "future"
    FOREX = "forex"


class Projection(str, Enum):
    """Instrument search projection."""
    SYMBOL_SEARCH = "symbol-search"
    SYMBOL_REGEX = "symbol-regex"
    DESC_SEARCH = "desc-search"
    DESC_REGEX = "desc-regex"
    SEARCH = "search"
    FUNDAMENTAL = "fundamental"


class MoverSort(str, Enum):
    VOLUME = "VOLUME"
    TRADES = "TRADES"
    PERCENT_CHANGE_UP = "PERCENT_CHANGE_UP"
    PERCENT_CHANGE_DOWN = "PERCENT_CHANGE_DOWN"


class TransactionType(str, Enum):
    TRADE = "TRADE"
    RECEIVE_AND_DELIVER = "RECEIVE_AND_DELIVER"
    DIVIDEND_OR_INTEREST = "DIVIDEND_OR_INTEREST"
    ACH_RECEIPT = "ACH_RECEIPT"
    ACH_DISBURSEMENT = "ACH_DISBURSEMENT"
    CASH_RECEIPT = "CASH_RECEIPT"
    CASH_DISBURSEMENT = "CASH_DISBURSEMENT"
    ELECTRONIC_FUND = "ELECTRONIC_FUND"
    WIRE_OUT = "WIRE_OUT"
    WIRE_IN = "WIRE_IN"
    JOURNAL = "JOURNAL"
    MEMORANDUM = "MEMORANDUM"
    MARGIN_CALL = "MARGIN_CALL"
    MONEY_MARKET = "MONEY_MARKET"
    SMA_ADJUSTMENT = "SMA_ADJUSTMENT"


class OrderStatus(str, Enum):
    """Order status filter for order queries."""
    AWAITING_PARENT_ORDER = "AWAITING_PARENT_ORDER"
    AWAITING_CONDITION = "AWAITING_CONDITION"
    AWAITING_STOP_CONDITION = "AWAITING_STOP_CONDITION"
    AWAITING_MANUAL_REVIEW = "AWAITING_MANUAL_REVIEW"
    ACCEPTED = "ACCEPTED"
    AWAITING_UR_OUT = "AWAITING_UR_OUT"
    PENDING_ACTIVATION = "PENDING_ACTIVATION"
    QUEUED = "QUEUED"
    WORKING = "WORKING"
    REJECTED = "REJECTED"
    PENDING_CANCEL = "PENDING_CANCEL"
    CANCELED = "CANCELED"
    PENDING_REPLACE = "PENDING_REPLACE"
    REPLACED = "REPLACED"
    FILLED = "FILLED"
    EXPIRED = "EXPIRED"
    NEW = "NEW"
    AWAITING_RELEASE_TIME = "AWAITING_RELEASE_TIME"
    PENDING_ACKNOWLEDGEMENT = "PENDING_ACKNOWLEDGEMENT"
    PENDING_RECALL = "PENDING_RECALL"
    UNKNOWN = "UNKNOWN"


# =====================================================================
# Helpers
# =====================================================================


def to_epoch_millis(value: Union[int, datetime, date]) -> int:
    """Convert a datetime/date (naive values are treated as UTC) to epoch ms."""
    if isinstance(value, bool) or not isinstance(value, (int, date)):
        raise RequestBuildError(
            f"expected epoch milliseconds, datetime or date, got {type(value).__name__}",
            field="date",
        )
    if isinstance(value, int):
        return value
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def _query_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ",".join(str(_query_value(v)) for v in value)
    return value


def clean_params(params: dict) -> dict:
    """Drop unset query parameters and serialize enums, dates and lists."""
    return {k: _query_value(v) for k, v in params.items() if v is not None}


def path_segment(value: Any, name: str) -> str:
    """Percent-encode one URL path segment; empty values are rejected."""
    text = str(_query_value(value)).strip() if value is not None else ""
    if not text:
        raise RequestBuildError(f"{name} must not be empty", field=name)
    return quote(text, safe="$")


# =====================================================================
# Credentials
# =====================================================================


@dataclass(frozen=True)
class Credentials:
    """Caller-supplied OAuth credentials. Never persisted."""
    app_key: str = ""
    app_secret: str = ""
    access_token: str = ""

    def __repr__(self) -> str:
        return f"Credentials(app_key={self.app_key!r}, app_secret='***', access_token='***')"


# A bare string is taken as an access token
CredentialsLike = Union[Credentials, str]


# =====================================================================
# Request descriptor
# =====================================================================


@dataclass(frozen=True)
class ApiRequest:
    """A single outbound HTTP request."""
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, Any] = field(default_factory=dict)
    data: Optional[dict[str, str]] = None
    json: JsonValue = None

    @property
    def full_url(self) -> str:
        """URL with the encoded query string appended."""
        return str(httpx.URL(self.url, params=self.params or None))


# =====================================================================
# Parameter structs
# =====================================================================


@dataclass
class OptionsChainRequestParams:
    """Query parameters for the option chains endpoint."""
    symbol: str
    contract_type: Optional[ContractType] = None
    include_underlying_quote: Optional[bool] = None
    strike_count: Optional[int] = None
    strategy: Optional[OptionsStrategy] = None
    range: Optional[str] = None
    option_type: Optional[str] = None
    interval: Optional[float] = None
    strike: Optional[float] = None
    from_date: Optional[date] = None
    to_date: Optional[date] = None
    volatility: Optional[float] = None
    underlying_price: Optional[float] = None
    interest_rate: Optional[float] = None
    days_to_expiration: Optional[int] = None
    exp_month: Optional[str] = None
    entitlement: Optional[str] = None

    def to_params(self) -> dict[str, Any]:
        return clean_params({
            "symbol": self.symbol,
            "contractType": self.contract_type,
            "strikeCount": self.strike_count,
            "includeUnderlyingQuote": self.include_underlying_quote,
            "strategy": self.strategy,
            "interval": self.interval,
            "strike": self.strike,
            "range": self.range,
            "fromDate": self.from_date,
            "toDate": self.to_date,
            "volatility": self.volatility,
            "underlyingPrice": self.underlying_price,
            "interestRate": self.interest_rate,
            "daysToExpiration": self.days_to_expiration,
            "expMonth": self.exp_month,
            "optionType": self.option_type,
            "entitlement": self.entitlement,
        })


@dataclass
class PriceHistoryRequestParams:
    """Query parameters for the price history endpoint.

    Dates go out as epoch milliseconds; datetimes and dates are converted.
    """
    symbol: str
    period_type: Optional[PeriodType] = None
    period: Optional[int] = None
    frequency_type: Optional[FrequencyType] = None
    frequency: Optional[int] = None
    start_date: Union[int, datetime, date, None] = None
    end_date: Union[int, datetime, date, None] = None
    need_extended_hours_data: Optional[bool] = None
    need_previous_close: Optional[bool] = None

    def to_params(self) -> dict[str, Any]:
        return clean_params({
            "symbol": self.symbol,
            "periodType": self.period_type,
            "period": self.period,
            "frequencyType": self.frequency_type,
            "frequency": self.frequency,
            "startDate": to_epoch_millis(self.start_date) if self.start_date is not None else None,
            "endDate": to_epoch_millis(self.end_date) if self.end_date is not None else None,
            "needExtendedHoursData": self.need_extended_hours_data,
            "needPreviousClose": self.need_previous_close,
        })


# =====================================================================
# Response envelope
# =====================================================================


@dataclass
class ApiResponse:
    """Loosely typed view of an HTTP response.

    Header names are lower-cased. ``data`` is the decoded JSON body, the
    raw text when the body is not JSON, or None when it is empty.
    """
    status_code: int = 0
    status_text: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    data: JsonValue = None

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "ApiResponse":
        data: JsonValue = None
        if response.content:
            try:
                data = response.json()
            except ValueError:
                data = response.text
        return cls(
            status_code=response.status_code,
            status_text=response.reason_phrase,
            headers={k.lower(): v for k, v in response.headers.items()},
            data=data,
        )
