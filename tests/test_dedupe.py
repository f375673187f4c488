from prizepicks_ingest.dedupe import dedupe_tiers, group_tiers, pick_canonical
from prizepicks_ingest.normalize import NormalizedProp


def _prop(prop_id: str, line: float, *, player: str = "Jane Doe", stat: str = "Points"):
    return NormalizedProp(
        id=prop_id,
        player_name=player,
        sport_id="NBA",
        stat_type=stat,
        stat_value=line,
        game_display="AAA vs BBB",
        updated_at="2026-10-18T16:00:00.000Z",
    )


def test_pick_canonical_three_tiers_keeps_middle() -> None:
    entries = [_prop("a", 20), _prop("b", 10), _prop("c", 15)]
    assert pick_canonical(entries).stat_value == 15


def test_pick_canonical_two_tiers_keeps_larger() -> None:
    entries = [_prop("a", 8), _prop("b", 12)]
    assert pick_canonical(entries).stat_value == 12


def test_pick_canonical_singleton() -> None:
    assert pick_canonical([_prop("a", 7)]).stat_value == 7


def test_pick_canonical_four_tiers_keeps_second_smallest() -> None:
    entries = [_prop("a", 30), _prop("b", 10), _prop("c", 25), _prop("d", 15)]
    assert pick_canonical(entries).stat_value == 15


def test_dedupe_tiers_one_record_per_group() -> None:
    props = [
        _prop("a", 10),
        _prop("b", 15),
        _prop("c", 20),
        _prop("d", 5.5, stat="Assists"),
        _prop("e", 8, player="John Roe"),
        _prop("f", 12, player="John Roe"),
    ]
    messages: list[str] = []

    deduped = dedupe_tiers(props, log=messages.append)

    kept = {(prop.player_name, prop.stat_type): prop.stat_value for prop in deduped}
    assert kept == {
        ("Jane Doe", "Points"): 15,
        ("Jane Doe", "Assists"): 5.5,
        ("John Roe", "Points"): 12,
    }
    assert len(deduped) == len(group_tiers(props))
    assert messages == [
        "[PP] Normalized 6 raw props -> 3 base lines (deduped from 3 goblin/demon variants)"
    ]


def test_group_tiers_covers_every_record() -> None:
    props = [_prop("a", 1), _prop("b", 2), _prop("c", 3, stat="Rebounds")]
    groups = group_tiers(props)

    assert sum(len(entries) for entries in groups.values()) == len(props)
    assert {prop.id for entries in groups.values() for prop in entries} == {"a", "b", "c"}


def test_dedupe_tiers_empty_input() -> None:
    messages: list[str] = []
    assert dedupe_tiers([], log=messages.append) == []
    assert messages == ["[PP] Normalized 0 raw props -> 0 base lines (deduped from 0 goblin/demon variants)"]
