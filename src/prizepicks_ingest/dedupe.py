"""Collapse provider difficulty tiers to one canonical line per identity."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from prizepicks_ingest.normalize import NormalizedProp

LogFn = Callable[[str], None]

TierKey = tuple[str, str, str, str]


def group_tiers(props: Iterable[NormalizedProp]) -> dict[TierKey, list[NormalizedProp]]:
    """Group props by (player, stat type, sport, game label)."""
    groups: dict[TierKey, list[NormalizedProp]] = {}
    for prop in props:
        groups.setdefault(prop.tier_key(), []).append(prop)
    return groups


def pick_canonical(entries: list[NormalizedProp]) -> NormalizedProp:
    """Pick the canonical tier from one identity group.

    Tiers order goblin < base < demon by line, so with three tiers index 1 after
    an ascending sort is the base line. With two tiers this keeps the larger
    line, and with four or more the second-smallest; the feed carries no tier
    label to select by name.
    """
    if len(entries) == 1:
        return entries[0]
    return sorted(entries, key=lambda prop: prop.stat_value)[1]


def dedupe_tiers(props: list[NormalizedProp], *, log: LogFn | None = None) -> list[NormalizedProp]:
    """Return one record per tier group and log the raw/kept/removed counts."""
    log = log or print
    deduped = [pick_canonical(entries) for entries in group_tiers(props).values()]
    removed = len(props) - len(deduped)
    log(
        f"[PP] Normalized {len(props)} raw props -> {len(deduped)} base lines "
        f"(deduped from {removed} goblin/demon variants)"
    )
    return deduped
