"""Test builder functions for creating synthetic players, tables and actions.

These functions provide a consistent API for building test fixtures
across all test files, reducing duplication and ensuring consistency.
"""

from __future__ import annotations

from replaystats.actions.constants import (
    CHANGE_SELECTION,
    SELECT_MODE_ADD,
    UNIT_ORDER,
    UNIT_ORDER_TARGET,
)
from replaystats.actions.types import ActionEvent, ObjectId
from replaystats.config import EngineConfig
from replaystats.engine import PlayerEngine
from replaystats.player.aggregate import PlayerAggregate
from replaystats.tables import ReferenceTables


def create_test_tables() -> ReferenceTables:
    """Create a small set of human/orc/night elf/undead reference tables.

    Hero ``H1`` owns abilities ``A1`` and ``A2``; hero ``H2`` owns ``A3``.
    ``Hamg`` owns the archmage abilities ``AHbz`` and ``AHwe``.
    """
    return ReferenceTables.build(
        units=["hfoo", "hpea", "hkni", "ewsp", "opeo", "uaco", "Hamg"],
        items=["bspd", "tret", "pghe"],
        buildings=["htow", "hbar", "halt", "etol", "ogre", "unpl"],
        upgrades=["Rhme", "Rhar", "Rora"],
        ability_to_hero={
            "A1": "H1",
            "A2": "H1",
            "A3": "H2",
            "AHbz": "Hamg",
            "AHwe": "Hamg",
        },
    )


def create_test_player(
    id: int = 1,
    name: str = "Grubby",
    team_id: int = 0,
    color: int = 1,
    race: str | None = "O",
) -> PlayerAggregate:
    """Create a PlayerAggregate with sensible defaults."""
    return PlayerAggregate.create(id, name, team_id, color, race)


def create_test_engine(
    tables: ReferenceTables | None = None,
    config: EngineConfig | None = None,
    **player_kwargs,
) -> PlayerEngine:
    """Create a PlayerEngine over a fresh test player."""
    if tables is None:
        tables = create_test_tables()
    return PlayerEngine(create_test_player(**player_kwargs), tables, config)


def unit_order(value: str, time: int = 0, opcode: int = UNIT_ORDER) -> ActionEvent:
    """Create an order carrying a string-encoded object id."""
    return ActionEvent(opcode=opcode, time=time, object_id=ObjectId.string(value))


def byte_order(
    order: int,
    subcode: int = 0,
    opcode: int = UNIT_ORDER_TARGET,
    time: int = 0,
) -> ActionEvent:
    """Create an order carrying an alphanumeric (byte pair) object id."""
    return ActionEvent(
        opcode=opcode, time=time, object_id=ObjectId.alphanumeric(order, subcode)
    )


def selection(
    mode: int = SELECT_MODE_ADD, counts: bool = True, time: int = 0
) -> ActionEvent:
    """Create a selection change."""
    return ActionEvent(
        opcode=CHANGE_SELECTION,
        time=time,
        select_mode=mode,
        counts_toward_activity=counts,
    )


def bare_action(opcode: int, time: int = 0) -> ActionEvent:
    """Create an action with no payload."""
    return ActionEvent(opcode=opcode, time=time)
