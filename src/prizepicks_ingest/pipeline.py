"""Public entry points: resolved snapshot and deduplicated props."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from prizepicks_ingest.client import PrizePicksClient
from prizepicks_ingest.dedupe import LogFn, dedupe_tiers
from prizepicks_ingest.normalize import NormalizedProp, normalize_projections
from prizepicks_ingest.resources import ResourceGraph, build_resource_graph
from prizepicks_ingest.settings import Settings


@dataclass(frozen=True)
class ResolvedSnapshot:
    """Raw projections plus the lookup tables built from ``included``."""

    projections: list[dict[str, Any]]
    graph: ResourceGraph = field(default_factory=ResourceGraph)

    @property
    def players(self) -> dict[str, dict[str, Any]]:
        return self.graph.players

    @property
    def games(self) -> dict[str, dict[str, Any]]:
        return self.graph.games

    @property
    def leagues(self) -> dict[str, dict[str, Any]]:
        return self.graph.leagues

    @property
    def stat_types(self) -> dict[str, dict[str, Any]]:
        return self.graph.stat_types


def fetch_all_projections(
    settings: Settings | None = None,
    *,
    log: LogFn | None = None,
    client: PrizePicksClient | None = None,
) -> ResolvedSnapshot:
    """Fetch one full snapshot and index its included resources."""
    log = log or print
    if client is None:
        with PrizePicksClient(settings or Settings()) as owned:
            raw = owned.fetch_snapshot()
    else:
        raw = client.fetch_snapshot()

    graph = build_resource_graph(raw.included)
    log(
        f"[PP] Fetched {len(raw.projections)} projections, "
        f"{len(graph.players)} players, {len(graph.games)} games"
    )
    return ResolvedSnapshot(projections=raw.projections, graph=graph)


def hydrate(
    settings: Settings | None = None,
    *,
    log: LogFn | None = None,
    client: PrizePicksClient | None = None,
    now: str | None = None,
) -> list[NormalizedProp]:
    """Fetch, normalize and tier-dedupe the current projection board."""
    log = log or print
    snapshot = fetch_all_projections(settings, log=log, client=client)
    props = normalize_projections(snapshot.projections, snapshot.graph, now=now)
    return dedupe_tiers(props, log=log)
