"""Tests for the dataset loader and the graph data model."""

from pathlib import Path

import pytest

from matchup_graph.parser.loader import load_dataset, load_dataset_file
from matchup_graph.parser.model import (
    Dataset,
    EdgeFilter,
    Game,
    Subgraph,
    Team,
    edge_key,
    split_edge_key,
)

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


def _dataset(*games: Game) -> Dataset:
    dataset = Dataset()
    for tid in ("a", "b", "c"):
        dataset.add_team(Team(id=tid, label=tid.upper()))
    for game in games:
        dataset.add_game(game)
    return dataset


def test_edge_key_is_order_independent():
    assert edge_key("osu", "mich") == "mich__osu"
    assert edge_key("mich", "osu") == "mich__osu"


def test_split_edge_key():
    assert split_edge_key("mich__osu") == ("mich", "osu")


@pytest.mark.parametrize("key", ["mich", "a__b__c", "__osu", "mich__", ""])
def test_split_edge_key_malformed(key):
    assert split_edge_key(key) is None


def test_load_minimal():
    dataset = load_dataset(
        '{"teams": [{"id": "a", "name": "Alpha"}, {"id": "b"}],'
        ' "games": [{"id": "g1", "home": "a", "away": "b", "leverage": 0.5, "type": "CONFERENCE"}]}'
    )
    assert dataset.teams["a"].label == "Alpha"
    # Missing name falls back to the id
    assert dataset.teams["b"].label == "b"
    assert len(dataset.games) == 1
    assert dataset.games[0].leverage == 0.5
    assert dataset.games[0].category == "CONFERENCE"


def test_load_nested_team_refs():
    dataset = load_dataset(
        '{"teams": [{"id": "a"}, {"id": "b"}],'
        ' "games": [{"home": {"id": "a"}, "away": {"id": "b"}}]}'
    )
    game = dataset.games[0]
    assert (game.home, game.away) == ("a", "b")
    assert game.leverage == 0.0
    assert game.category == "UNKNOWN"


def test_load_drops_games_with_unknown_teams():
    dataset = load_dataset(
        '{"teams": [{"id": "a"}], "games": [{"home": "a", "away": "zzz"}]}'
    )
    assert dataset.games == []


def test_load_invalid_json():
    with pytest.raises(ValueError, match="not valid JSON"):
        load_dataset("{not json")


@pytest.mark.parametrize("text", ['{"teams": []}', '{"games": []}', "[]"])
def test_load_missing_arrays(text):
    with pytest.raises(ValueError):
        load_dataset(text)


def test_load_game_without_team():
    with pytest.raises(ValueError, match="home and an away"):
        load_dataset('{"teams": [{"id": "a"}], "games": [{"id": "g", "home": "a"}]}')


def test_load_bad_leverage():
    with pytest.raises(ValueError, match="non-numeric leverage"):
        load_dataset(
            '{"teams": [{"id": "a"}, {"id": "b"}],'
            ' "games": [{"id": "g", "home": "a", "away": "b", "leverage": "high"}]}'
        )


def test_load_example_file():
    dataset = load_dataset_file(EXAMPLES_DIR / "minnesota_notre_dame.json")
    assert len(dataset.teams) == 10
    assert len(dataset.games) == 10
    assert dataset.categories() == ["CONFERENCE", "NON_CONFERENCE"]


def test_edge_universe_deduplicates_pairs():
    """Games between the same pair collapse to one edge in either direction."""
    dataset = _dataset(
        Game(id="1", home="a", away="b", leverage=0.2),
        Game(id="2", home="b", away="a", leverage=0.6),
    )
    edges = dataset.edge_universe()
    assert list(edges) == ["a__b"]
    edge = edges["a__b"]
    assert (edge.a, edge.b) == ("a", "b")
    assert len(edge.games) == 2
    assert edge.mean_leverage == pytest.approx(0.4)
    assert edge.weight == pytest.approx(2.5)


def test_edge_weight_floor():
    """Zero leverage still gives a finite, positive weight."""
    dataset = _dataset(Game(id="1", home="a", away="b", leverage=0.0))
    weight = dataset.edge_universe()["a__b"].weight
    assert weight > 0
    assert weight == pytest.approx(1e6)


def test_edge_filter_category_and_leverage():
    dataset = _dataset(
        Game(id="1", home="a", away="b", leverage=0.9, category="CONFERENCE"),
        Game(id="2", home="b", away="c", leverage=0.9, category="NON_CONFERENCE"),
        Game(id="3", home="a", away="c", leverage=0.1, category="CONFERENCE"),
    )
    assert set(dataset.edge_universe()) == {"a__b", "b__c", "a__c"}
    assert set(dataset.edge_universe(EdgeFilter(category="CONFERENCE"))) == {"a__b", "a__c"}
    assert set(dataset.edge_universe(EdgeFilter(min_leverage=0.5))) == {"a__b", "b__c"}


def test_edge_filter_averages_only_accepted_games():
    dataset = _dataset(
        Game(id="1", home="a", away="b", leverage=0.9),
        Game(id="2", home="a", away="b", leverage=0.1),
    )
    edge = dataset.edge_universe(EdgeFilter(min_leverage=0.5))["a__b"]
    assert edge.mean_leverage == pytest.approx(0.9)


def test_self_games_ignored():
    dataset = _dataset(Game(id="1", home="a", away="a", leverage=0.9))
    assert dataset.edge_universe() == {}


def test_subgraph_empty_sentinel():
    sub = Subgraph.empty("a", "b", 3)
    assert sub.is_empty
    assert sub.edges == frozenset()
    assert sub.shortest_path == ()
    assert sub.path_hops == 0


def test_subgraph_adjacency_skips_malformed_keys():
    sub = Subgraph(
        source="a",
        destination="c",
        max_degree=2,
        nodes=frozenset({"a", "b", "c"}),
        edges=frozenset({"a__b", "b__c", "garbage", "a__b__c"}),
        shortest_path=("a", "b", "c"),
    )
    assert sub.adjacency() == {"a": {"b"}, "b": {"a", "c"}, "c": {"b"}}
    assert sub.path_edges() == frozenset({"a__b", "b__c"})


def test_dataset_conferences():
    dataset = load_dataset_file(EXAMPLES_DIR / "minnesota_notre_dame.json")
    conferences = dataset.conferences()
    assert conferences["min"] == "b1g"
    assert conferences["nd"] == "ind"
    assert conferences["bama"] == "sec"


def test_load_nested_conference_and_missing_conference():
    dataset = load_dataset(
        '{"teams": [{"id": "a", "conference": {"id": "acc"}}, {"id": "b"}], "games": []}'
    )
    assert dataset.conferences() == {"a": "acc", "b": None}


def test_edge_total_leverage():
    dataset = _dataset(
        Game(id="1", home="a", away="b", leverage=0.25),
        Game(id="2", home="a", away="b", leverage=0.5),
    )
    assert dataset.edge_universe()["a__b"].total_leverage == pytest.approx(0.75)
