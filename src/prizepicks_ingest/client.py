"""HTTP client for the PrizePicks projections feed."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx

from prizepicks_ingest.errors import ConfigurationError, UpstreamError
from prizepicks_ingest.settings import Settings
from prizepicks_ingest.transport import build_http_client, get_with_connect_retry


@dataclass(frozen=True)
class RawSnapshot:
    """Projections plus the shared resource pool from one feed response."""

    projections: list[dict[str, Any]] = field(default_factory=list)
    included: list[dict[str, Any]] = field(default_factory=list)


def _dict_items(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def parse_snapshot(payload: Any) -> RawSnapshot:
    """Split a decoded feed document into its ``data`` and ``included`` lists."""
    if not isinstance(payload, dict):
        raise UpstreamError("PrizePicks API returned a non-object payload")
    return RawSnapshot(
        projections=_dict_items(payload.get("data")),
        included=_dict_items(payload.get("included")),
    )


class PrizePicksClient:
    """Thin HTTP client around the PrizePicks projections endpoint."""

    def __init__(
        self, settings: Settings, *, transport: httpx.BaseTransport | None = None
    ) -> None:
        if not settings.zyte_api_key.strip():
            raise ConfigurationError(
                "missing proxy API key; set ZYTE_API_KEY or PP_INGEST_ZYTE_API_KEY"
            )
        self.settings = settings
        self._http = build_http_client(settings, transport=transport)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> PrizePicksClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def fetch_snapshot(self) -> RawSnapshot:
        """Fetch the full projection catalog in a single request."""
        try:
            response = get_with_connect_retry(
                self._http,
                self.settings.api_url,
                params=self.settings.projection_params(),
                attempts=self.settings.connect_attempts,
            )
        except httpx.TimeoutException as exc:
            raise UpstreamError(
                f"PrizePicks API timed out after {self.settings.timeout_s:g}s",
                reason="timeout",
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamError(
                f"PrizePicks API transport error: {exc}", reason="transport"
            ) from exc

        if not response.is_success:
            raise UpstreamError(
                f"PrizePicks API {response.status_code}: {response.reason_phrase}",
                status_code=response.status_code,
                reason=response.reason_phrase,
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamError(
                "PrizePicks API returned invalid JSON",
                status_code=response.status_code,
                reason=response.reason_phrase,
            ) from exc
        return parse_snapshot(payload)
