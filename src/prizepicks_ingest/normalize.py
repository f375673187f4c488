"""Join sparse projections against the resource graph into flat prop rows."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import asdict, dataclass
from typing import Any, Literal

from prizepicks_ingest.resources import ResourceGraph
from prizepicks_ingest.sports import normalize_sport
from prizepicks_ingest.time_utils import utc_now_str
from prizepicks_ingest.util.parsing import safe_float, safe_str

SOURCE = "prizepicks"
ID_PREFIX = "pp-"
UNKNOWN = "Unknown"

Source = Literal["projection", "player", "game", "league"]
ExtractionRule = tuple[Source, str]

# Relationship names that may point at the player resource, in lookup order.
PLAYER_RELATIONSHIPS: tuple[str, ...] = ("new_player", "player")

PLAYER_NAME_RULES: tuple[ExtractionRule, ...] = (
    ("player", "display_name"),
    ("player", "name"),
)
STAT_TYPE_RULES: tuple[ExtractionRule, ...] = (
    ("projection", "stat_type"),
    ("projection", "stat_display_name"),
)
GAME_LABEL_RULES: tuple[ExtractionRule, ...] = (
    ("projection", "description"),
    ("game", "name"),
)
START_TIME_RULES: tuple[ExtractionRule, ...] = (
    ("projection", "start_time"),
    ("game", "start_time"),
)


@dataclass(frozen=True)
class NormalizedProp:
    """One denormalized projection line ready for ingestion."""

    id: str
    player_name: str
    sport_id: str
    stat_type: str
    stat_value: float
    game_display: str
    updated_at: str
    start_time: str | None = None
    over_price: int | None = None
    under_price: int | None = None
    over_decimal: float | None = None
    under_decimal: float | None = None
    source: str = SOURCE

    def tier_key(self) -> tuple[str, str, str, str]:
        """Identity shared by every difficulty tier of the same line."""
        return (self.player_name, self.stat_type, self.sport_id, self.game_display)

    def as_row(self) -> dict[str, Any]:
        return asdict(self)


def first_value(
    sources: Mapping[Source, Mapping[str, Any]],
    rules: Sequence[ExtractionRule],
    default: Any = None,
) -> Any:
    """Return the first non-empty attribute named by ``rules``, else ``default``."""
    for source, attribute in rules:
        value = sources.get(source, {}).get(attribute)
        if value is None or value == "":
            continue
        return value
    return default


def relationship_id(projection: Mapping[str, Any], name: str) -> str:
    """Resolve ``relationships.<name>.data.id``; tolerates bare ids and nulls."""
    relationships = projection.get("relationships")
    if not isinstance(relationships, Mapping):
        return ""
    related = relationships.get(name)
    if isinstance(related, Mapping):
        data = related.get("data")
        return safe_str(data.get("id")) if isinstance(data, Mapping) else ""
    return safe_str(related)


def first_relationship_id(projection: Mapping[str, Any], names: Sequence[str]) -> str:
    """Return the first non-empty id among relationships ``names``."""
    for name in names:
        resource_id = relationship_id(projection, name)
        if resource_id:
            return resource_id
    return ""


def _attributes(projection: Mapping[str, Any]) -> Mapping[str, Any]:
    attributes = projection.get("attributes")
    return attributes if isinstance(attributes, Mapping) else {}


def normalize_projection(
    projection: Mapping[str, Any], graph: ResourceGraph, *, now: str | None = None
) -> NormalizedProp | None:
    """Resolve one projection; returns None when it carries no line."""
    attrs = _attributes(projection)
    line = safe_float(attrs.get("line_score"))
    if line is None:
        return None

    player = graph.lookup("player", first_relationship_id(projection, PLAYER_RELATIONSHIPS))
    game = graph.lookup("game", relationship_id(projection, "game"))
    league = graph.lookup("league", relationship_id(projection, "league"))
    sources: dict[Source, Mapping[str, Any]] = {
        "projection": attrs,
        "player": player,
        "game": game,
        "league": league,
    }

    game_display = first_value(sources, GAME_LABEL_RULES)
    if game_display is None:
        game_display = f"{player.get('team') or ''} Game"
    start_time = first_value(sources, START_TIME_RULES)

    return NormalizedProp(
        id=f"{ID_PREFIX}{safe_str(projection.get('id'))}",
        player_name=str(first_value(sources, PLAYER_NAME_RULES, UNKNOWN)),
        sport_id=normalize_sport(str(league.get("name") or "")),
        stat_type=str(first_value(sources, STAT_TYPE_RULES, UNKNOWN)),
        stat_value=line,
        game_display=str(game_display),
        start_time=str(start_time) if start_time is not None else None,
        updated_at=now or utc_now_str(),
    )


def normalize_projections(
    projections: Iterable[Mapping[str, Any]], graph: ResourceGraph, *, now: str | None = None
) -> list[NormalizedProp]:
    """Normalize every projection, silently dropping those without a line."""
    stamp = now or utc_now_str()
    props: list[NormalizedProp] = []
    for projection in projections:
        prop = normalize_projection(projection, graph, now=stamp)
        if prop is not None:
            props.append(prop)
    return props
