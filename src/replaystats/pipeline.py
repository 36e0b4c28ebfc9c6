# src/replaystats/pipeline.py
"""Replay-level driver for per-player action statistics.

The decoder hands over a sequence of time slots. Each slot advances the game
clock and carries command blocks, one per player that acted during the slot.
This module:
1. Advances the clock and closes APM intervals on a fixed cadence
2. Stamps every action with the current game time
3. Detects retraining tomes and deliberate selections
4. Routes actions to the owning player's engine
5. Finalizes every player once the stream ends
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from .actions.constants import CHANGE_SELECTION, SELECT_MODE_REMOVE, UNIT_ORDER
from .actions.types import ActionEvent
from .config import EngineConfig
from .engine import PlayerEngine
from .errors import AlreadyFinalizedError, UnknownPlayerError
from .player.aggregate import PlayerAggregate, Race
from .tables import ReferenceTables

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerSlot:
    """A participant as declared in the replay header."""

    id: int
    name: str
    team_id: int
    color: int
    race: Race | str | None = None


@dataclass(frozen=True)
class CommandBlock:
    """Actions issued by one player within a time slot."""

    player_id: int
    actions: list[ActionEvent] = field(default_factory=list)


@dataclass(frozen=True)
class TimeSlot:
    """A clock advance followed by the commands issued during it."""

    time_increment: int
    commands: list[CommandBlock] = field(default_factory=list)


class ReplayStatsPipeline:
    """Drives one PlayerEngine per participant through a replay's time slots."""

    def __init__(
        self,
        players: Iterable[PlayerSlot],
        tables: ReferenceTables | None = None,
        config: EngineConfig | None = None,
    ):
        self.config = config or EngineConfig()
        if tables is None:
            tables = self.config.load_tables()
        self.tables = tables
        self.engines: dict[int, PlayerEngine] = {}
        for slot in players:
            player = PlayerAggregate.create(
                slot.id, slot.name, slot.team_id, slot.color, slot.race
            )
            self.engines[slot.id] = PlayerEngine(player, tables, self.config)

        self.total_time = 0
        self.segment_time = 0
        self.finished = False

    def engine_for(self, player_id: int) -> PlayerEngine:
        engine = self.engines.get(player_id)
        if engine is None:
            raise UnknownPlayerError(player_id, list(self.engines))
        return engine

    def process_time_slot(self, slot: TimeSlot) -> None:
        """Advance the clock by ``slot.time_increment`` and apply its commands."""
        if self.finished:
            raise AlreadyFinalizedError("Replay pipeline")

        self.total_time += slot.time_increment
        self.segment_time += slot.time_increment
        if self.segment_time > self.config.interval_ms:
            logger.debug(f"Closing activity interval at {self.total_time} ms")
            for engine in self.engines.values():
                engine.open_new_interval(self.config.interval_ms)
            self.segment_time = 0

        for block in slot.commands:
            self.process_command_block(block)

    def process_command_block(self, block: CommandBlock) -> None:
        engine = self.engines.get(block.player_id)
        if engine is None:
            logger.warning(f"Skipping command block for unknown player {block.player_id}")
            return

        player = engine.player
        player.time_played = self.total_time
        player.last_action_was_deselect = False

        for action in block.actions:
            event = replace(action, time=self.total_time)

            if event.opcode == UNIT_ORDER and self._is_retraining(event):
                engine.request_retraining(self.total_time)
            elif event.opcode == CHANGE_SELECTION:
                event = self._attribute_selection(player, event)

            engine.handle(event)

    def process(self, slots: Iterable[TimeSlot]) -> list[PlayerAggregate]:
        """Process every slot and finalize. Returns players in declaration order."""
        for slot in slots:
            self.process_time_slot(slot)
        return self.finish()

    def finish(self) -> list[PlayerAggregate]:
        """Close the trailing partial interval and finalize every player."""
        if self.finished:
            raise AlreadyFinalizedError("Replay pipeline")

        players = []
        for engine in self.engines.values():
            if self.segment_time > 0:
                engine.open_new_interval(self.segment_time)
            players.append(engine.finalize())

        self.finished = True
        logger.info(
            f"Finalized {len(players)} players after {self.total_time} ms of game time"
        )
        return players

    def _is_retraining(self, event: ActionEvent) -> bool:
        obj = event.object_id
        if obj is None or obj.is_alphanumeric:
            return False
        return obj.value in self.config.retraining_item_ids

    def _attribute_selection(
        self, player: PlayerAggregate, event: ActionEvent
    ) -> ActionEvent:
        """A deselect always counts; the reselect right after one does not."""
        if event.select_mode == SELECT_MODE_REMOVE:
            player.last_action_was_deselect = True
            return replace(event, counts_toward_activity=True)

        counts = not player.last_action_was_deselect
        player.last_action_was_deselect = False
        return replace(event, counts_toward_activity=counts)
