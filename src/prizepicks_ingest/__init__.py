"""PrizePicks projection ingestion: resolve, normalize and tier-dedupe."""

from prizepicks_ingest.errors import ConfigurationError, PrizePicksError, UpstreamError
from prizepicks_ingest.pipeline import fetch_all_projections, hydrate

__all__ = [
    "ConfigurationError",
    "PrizePicksError",
    "UpstreamError",
    "fetch_all_projections",
    "hydrate",
]
