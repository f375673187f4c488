"""Proxied HTTP transport for the projections feed."""

from __future__ import annotations

from typing import Any, cast

import httpx
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from prizepicks_ingest.settings import Settings


def build_http_client(
    settings: Settings, *, transport: httpx.BaseTransport | None = None
) -> httpx.Client:
    """Build an httpx client routed through the authenticated proxy.

    The proxy terminates and re-signs TLS, so certificate verification is off
    on the proxied route. An explicit ``transport`` replaces the proxy route.
    """
    headers = {"User-Agent": settings.user_agent, "Accept": "application/json"}
    timeout = httpx.Timeout(settings.timeout_s)
    if transport is not None:
        return httpx.Client(transport=transport, headers=headers, timeout=timeout)
    return httpx.Client(
        proxy=settings.proxy_url(),
        verify=False,
        headers=headers,
        timeout=timeout,
    )


def get_with_connect_retry(
    client: httpx.Client,
    url: str,
    *,
    params: dict[str, Any] | None = None,
    attempts: int = 2,
) -> httpx.Response:
    """GET ``url``, retrying only connection failures.

    Timeouts and HTTP statuses are returned or raised on the first attempt.
    """
    response: httpx.Response | None = None
    for attempt in Retrying(
        stop=stop_after_attempt(max(1, attempts)),
        retry=retry_if_exception_type(httpx.ConnectError),
        wait=wait_exponential(multiplier=0.5, max=4.0),
        reraise=True,
    ):
        with attempt:
            response = client.get(url, params=params)
    return cast(httpx.Response, response)
