"""Typed lookup tables over the feed's shared ``included`` resources."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from prizepicks_ingest.util.parsing import safe_str

ResourceKind = Literal["player", "game", "league", "stat_type"]

RESOURCE_KINDS: tuple[ResourceKind, ...] = ("player", "game", "league", "stat_type")

# Provider type tags routed into each lookup table; other tags are ignored.
RESOURCE_TAGS: dict[str, ResourceKind] = {
    "new_player": "player",
    "player": "player",
    "game": "game",
    "league": "league",
    "stat_type": "stat_type",
}


@dataclass(frozen=True)
class ResourceGraph:
    """Per-kind ``id -> attributes`` maps built from one snapshot."""

    players: dict[str, dict[str, Any]] = field(default_factory=dict)
    games: dict[str, dict[str, Any]] = field(default_factory=dict)
    leagues: dict[str, dict[str, Any]] = field(default_factory=dict)
    stat_types: dict[str, dict[str, Any]] = field(default_factory=dict)

    def table(self, kind: ResourceKind) -> dict[str, dict[str, Any]]:
        return {
            "player": self.players,
            "game": self.games,
            "league": self.leagues,
            "stat_type": self.stat_types,
        }[kind]

    def lookup(self, kind: ResourceKind, resource_id: Any) -> dict[str, Any]:
        """Return attributes for ``resource_id``, or an empty map when unknown."""
        key = safe_str(resource_id)
        if not key:
            return {}
        return self.table(kind).get(key, {})

    def counts(self) -> dict[str, int]:
        return {kind: len(self.table(kind)) for kind in RESOURCE_KINDS}


def build_resource_graph(included: Iterable[Any]) -> ResourceGraph:
    """Index included resources by kind and id; later duplicates win."""
    graph = ResourceGraph()
    for item in included:
        if not isinstance(item, Mapping):
            continue
        kind = RESOURCE_TAGS.get(safe_str(item.get("type")))
        if kind is None:
            continue
        resource_id = safe_str(item.get("id"))
        if not resource_id:
            continue
        attributes = item.get("attributes")
        graph.table(kind)[resource_id] = dict(attributes) if isinstance(attributes, Mapping) else {}
    return graph
