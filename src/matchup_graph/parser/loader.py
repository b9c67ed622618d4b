"""Loader for JSON matchup datasets.

The expected document has a ``teams`` array and a ``games`` array::

    {"teams": [{"id": "osu", "name": "Ohio State"}],
     "games": [{"id": "g1", "home": "osu", "away": "mich",
                "leverage": 0.8, "type": "CONFERENCE"}]}

``home`` and ``away`` may also be objects carrying an ``id`` (the shape
produced by the GraphQL schema).
"""

from __future__ import annotations

import json
from pathlib import Path

from matchup_graph.parser.model import Dataset, Game, Team


def _team_ref(value) -> str | None:
    """Resolve a home/away reference to a team id."""
    if isinstance(value, dict):
        value = value.get("id")
    if value is None:
        return None
    return str(value)


def _conference_ref(value) -> str | None:
    if isinstance(value, dict):
        value = value.get("id")
    return str(value) if value is not None else None


def _parse_leverage(raw, game_id: str) -> float:
    if raw is None:
        return 0.0
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Game '{game_id}' has a non-numeric leverage: {raw!r}")


def load_dataset(text: str) -> Dataset:
    """Parse a JSON dataset document into a Dataset."""
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Dataset is not valid JSON: {e}") from e

    if not isinstance(doc, dict):
        raise ValueError("Dataset must be a JSON object with 'teams' and 'games'")
    for name in ("teams", "games"):
        if not isinstance(doc.get(name), list):
            raise ValueError(f"Dataset is missing a '{name}' array")

    dataset = Dataset()
    for raw in doc["teams"]:
        if not isinstance(raw, dict) or raw.get("id") is None:
            raise ValueError(f"Team entry without an id: {raw!r}")
        tid = str(raw["id"])
        dataset.add_team(
            Team(
                id=tid,
                label=str(raw.get("name") or tid),
                conference=_conference_ref(raw.get("conference") or raw.get("conferenceId")),
            )
        )

    for i, raw in enumerate(doc["games"]):
        if not isinstance(raw, dict):
            raise ValueError(f"Game entry {i} is not an object: {raw!r}")
        game_id = str(raw.get("id", f"game-{i}"))
        home = _team_ref(raw.get("home", raw.get("homeTeamId")))
        away = _team_ref(raw.get("away", raw.get("awayTeamId")))
        if home is None or away is None:
            raise ValueError(f"Game '{game_id}' must reference both a home and an away team")

        # Games against teams outside the dataset cannot be drawn
        if home not in dataset.teams or away not in dataset.teams:
            continue

        dataset.add_game(
            Game(
                id=game_id,
                home=home,
                away=away,
                leverage=_parse_leverage(raw.get("leverage"), game_id),
                category=str(raw.get("type") or "UNKNOWN"),
                date=raw.get("date"),
            )
        )

    return dataset


def load_dataset_file(path: Path) -> Dataset:
    """Read and parse a JSON dataset file."""
    return load_dataset(Path(path).read_text())
