"""HTTP transport: issues exactly one request per ``ApiRequest``.

No retries and no error translation. A 4xx/5xx response is raised as
``httpx.HTTPStatusError`` (the untouched response is on ``exc.response``);
transport failures propagate as httpx raises them.
"""

import logging
from typing import Optional

import httpx

from src.logging_config import RequestContext, log_performance, redact_headers
from src.schwab_api.config import DEFAULT_CONFIG, SchwabApiConfig
from src.schwab_api.models import ApiRequest

logger = logging.getLogger(__name__)


@log_performance()
async def send(
    request: ApiRequest,
    config: Optional[SchwabApiConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    """Send ``request`` and return the raw response.

    Args:
        request: Descriptor produced by one of the ``build_*`` functions.
        config: Timeout and redirect policy. Defaults to DEFAULT_CONFIG.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
    """
    config = config or DEFAULT_CONFIG
    endpoint = httpx.URL(request.url).path

    with RequestContext(method=request.method, endpoint=endpoint):
        logger.debug(
            f"{request.method} {endpoint}",
            extra={"url": request.full_url, "extra_data": redact_headers(request.headers)},
        )
        async with httpx.AsyncClient(
            timeout=config.request_timeout,
            follow_redirects=config.follow_redirects,
            transport=transport,
        ) as client:
            response = await client.request(
                request.method,
                request.url,
                params=request.params or None,
                headers=request.headers,
                data=request.data,
                json=request.json,
            )

        if response.is_error:
            logger.warning(
                f"{request.method} {endpoint} returned {response.status_code}",
                extra={"status_code": response.status_code},
            )
            response.raise_for_status()

    return response
