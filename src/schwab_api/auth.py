"""OAuth endpoints and Authorization header assembly.

The token endpoint always uses Basic auth built from ``app_key:app_secret``.
Tokens returned by it are handed back to the caller; nothing is cached.
"""

import base64
from typing import Any, Optional

import httpx

from src.schwab_api.config import DEFAULT_CONFIG, SchwabApiConfig
from src.schwab_api.exceptions import RequestBuildError
from src.schwab_api.models import (
    ApiRequest,
    AuthScheme,
    Credentials,
    CredentialsLike,
    GrantType,
    JsonValue,
    clean_params,
)
from src.schwab_api.transport import send

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def get_authorization(app_key: str, app_secret: str) -> str:
    """Base64 of the literal ``"{app_key}:{app_secret}"``."""
    return base64.b64encode(f"{app_key}:{app_secret}".encode("utf-8")).decode("ascii")


def as_credentials(credentials: CredentialsLike) -> Credentials:
    """Accept a bare access token wherever credentials are expected."""
    if isinstance(credentials, str):
        return Credentials(access_token=credentials)
    return credentials


def authorization_header(
    credentials: CredentialsLike,
    scheme: AuthScheme = AuthScheme.BEARER,
) -> dict[str, str]:
    """Build the ``Authorization`` header for ``scheme``.

    Raises:
        RequestBuildError: the credentials needed by ``scheme`` are missing.
    """
    credentials = as_credentials(credentials)
    scheme = AuthScheme(scheme)

    if scheme == AuthScheme.BASIC:
        if not credentials.app_key or not credentials.app_secret:
            raise RequestBuildError("Basic auth requires app_key and app_secret", field="credentials")
        token = get_authorization(credentials.app_key, credentials.app_secret)
    else:
        if not credentials.access_token:
            raise RequestBuildError("Bearer auth requires an access_token", field="credentials")
        token = credentials.access_token

    return {"Authorization": f"{scheme.value} {token}"}


def authorized_request(
    method: str,
    url: str,
    credentials: CredentialsLike,
    scheme: AuthScheme = AuthScheme.BEARER,
    params: Optional[dict[str, Any]] = None,
    json: JsonValue = None,
) -> ApiRequest:
    """Request descriptor for an authenticated API endpoint."""
    return ApiRequest(
        method=method,
        url=url,
        headers=authorization_header(credentials, scheme),
        params=clean_params(params or {}),
        json=json,
    )


# =====================================================================
# Request builders
# =====================================================================


def build_authorize_request(
    app_key: str,
    callback_url: str,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    config = config or DEFAULT_CONFIG
    return ApiRequest(
        method="GET",
        url=f"{config.oauth_url}/authorize",
        params={"client_id": app_key, "redirect_uri": callback_url},
    )


def build_token_request(
    app_key: str,
    app_secret: str,
    grant_type: GrantType,
    value: str,
    redirect_uri: Optional[str] = None,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    """Token endpoint request for either grant type.

    ``value`` is the authorization code or the refresh token, depending
    on ``grant_type``. ``redirect_uri`` is only sent with an authorization
    code.
    """
    config = config or DEFAULT_CONFIG
    grant_type = GrantType(grant_type)

    if grant_type == GrantType.AUTHORIZATION_CODE:
        data = {"grant_type": grant_type.value, "code": value}
        if redirect_uri is not None:
            data["redirect_uri"] = redirect_uri
    else:
        data = {"grant_type": grant_type.value, "refresh_token": value}

    headers = {"Content-Type": FORM_CONTENT_TYPE}
    headers.update(authorization_header(Credentials(app_key, app_secret), AuthScheme.BASIC))
    return ApiRequest(
        method="POST",
        url=f"{config.oauth_url}/token",
        headers=headers,
        data=data,
    )


def build_access_token_request(
    app_key: str,
    app_secret: str,
    code: str,
    redirect_uri: str,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    return build_token_request(
        app_key, app_secret, GrantType.AUTHORIZATION_CODE, code, redirect_uri, config=config,
    )


def build_refresh_token_request(
    app_key: str,
    app_secret: str,
    refresh_token: str,
    config: Optional[SchwabApiConfig] = None,
) -> ApiRequest:
    return build_token_request(
        app_key, app_secret, GrantType.REFRESH_TOKEN, refresh_token, config=config,
    )


# =====================================================================
# Senders
# =====================================================================


async def authorize(
    app_key: str,
    callback_url: str,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    """Hit the authorize endpoint; the response is normally a redirect to the login page."""
    request = build_authorize_request(app_key, callback_url, config=config)
    return await send(request, config=config, transport=transport)


async def request_token(
    app_key: str,
    app_secret: str,
    grant_type: GrantType,
    value: str,
    redirect_uri: Optional[str] = None,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_token_request(
        app_key, app_secret, grant_type, value, redirect_uri, config=config,
    )
    return await send(request, config=config, transport=transport)


async def get_access_token(
    app_key: str,
    app_secret: str,
    code: str,
    redirect_uri: str,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    """Exchange an authorization code for access and refresh tokens.

    The caller is responsible for persisting the returned tokens.
    """
    request = build_access_token_request(app_key, app_secret, code, redirect_uri, config=config)
    return await send(request, config=config, transport=transport)


async def refresh_access_token(
    app_key: str,
    app_secret: str,
    refresh_token: str,
    *,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    request = build_refresh_token_request(app_key, app_secret, refresh_token, config=config)
    return await send(request, config=config, transport=transport)
