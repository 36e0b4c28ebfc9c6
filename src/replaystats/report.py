"""JSON-ready report dicts for finalized players."""

from __future__ import annotations

from typing import Any

from .errors import ReplayStatsError
from .player.aggregate import PlayerAggregate, Race
from .version import get_schema_version


def _race_letter(race: Race | None) -> str | None:
    return race.value if race is not None else None


def build_player_report(player: PlayerAggregate) -> dict[str, Any]:
    """Build the report dict for a finalized player.

    Raises:
        ReplayStatsError: If the player has not been finalized yet
    """
    if not player.finalized:
        raise ReplayStatsError(
            f"Player {player.id} must be finalized before reporting",
            {"player_id": player.id, "suggested_action": "Call finalize() first"},
        )

    return {
        "schema_version": get_schema_version(),
        "id": player.id,
        "name": player.name,
        "teamid": player.team_id,
        "color": player.color,
        "race": _race_letter(player.race),
        "raceDetected": _race_letter(player.race_detected),
        "units": player.units.to_dict(),
        "items": player.items.to_dict(),
        "buildings": player.buildings.to_dict(),
        "upgrades": player.upgrades.to_dict(),
        "heroes": [hero.to_dict() for hero in player.heroes],
        "actions": {
            "timed": list(player.activity.samples),
            **{category.value: count for category, count in player.actions.items()},
        },
        "apm": player.apm,
        "currentTimePlayed": player.time_played,
    }


def build_replay_report(players: list[PlayerAggregate]) -> dict[str, Any]:
    """Bundle finalized players in declaration order."""
    return {
        "schema_version": get_schema_version(),
        "players": [build_player_report(player) for player in players],
    }
