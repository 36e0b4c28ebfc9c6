"""Action classification and per-player aggregation.

``PlayerEngine`` consumes one player's decoded actions in time order and
updates the player's aggregate:
- Unit orders feed the unit/item/building/upgrade ledgers and hero abilities
- Every recognized action lands in exactly one category counter (or none,
  for the uncategorized opcodes) and counts toward APM
- Interval boundaries are driven from outside via ``open_new_interval``

Unknown identifiers, unmapped hero abilities and unhandled opcodes are
dropped without error so new game content never breaks a stream.

Example:
    from replaystats.engine import PlayerEngine
    from replaystats.player import PlayerAggregate

    engine = PlayerEngine(PlayerAggregate.create(1, "Grubby", 0, 1, "O"), tables)
    for event in events:
        engine.handle(event)
    engine.open_new_interval()
    player = engine.finalize()
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from .actions.constants import (
    ABILITY_SENTINEL,
    ASSIGN_GROUP,
    CHANGE_SELECTION,
    ESCAPE,
    HERO_ABILITY_PREFIX,
    ITEM_USE,
    NO_ACTIVITY_APM,
    RACE_PREFIXES,
    REMOVE_UNIT,
    RIGHT_CLICK_ORDER,
    SELECT_GROUP_HOTKEY,
    UNCATEGORIZED_ACTIVITY,
    UNIT_ORDER,
    UNIT_ORDER_POINT,
    UNIT_ORDER_TARGET,
    UNIT_ORDER_TWO_TARGETS,
)
from .actions.types import ActionEvent, ObjectId
from .config import EngineConfig
from .errors import AlreadyFinalizedError
from .player.aggregate import ActionCategory, PlayerAggregate, Race
from .tables import ReferenceTables, resolve_domain

logger = logging.getLogger(__name__)

# Opcodes that map 1:1 onto a category counter
_DIRECT_CATEGORIES: dict[int, ActionCategory] = {
    ITEM_USE: ActionCategory.ITEM,
    ASSIGN_GROUP: ActionCategory.ASSIGN_GROUP,
    SELECT_GROUP_HOTKEY: ActionCategory.SELECT_HOTKEY,
    REMOVE_UNIT: ActionCategory.REMOVE_UNIT,
    ESCAPE: ActionCategory.ESC,
}


class PlayerEngine:
    """Stateful classifier for a single player's action stream."""

    def __init__(
        self,
        player: PlayerAggregate,
        tables: ReferenceTables,
        config: EngineConfig | None = None,
    ):
        self.player = player
        self.tables = tables
        self.config = config or EngineConfig()
        self._handlers: dict[int, Callable[[ActionEvent], None]] = {
            UNIT_ORDER: self._handle_unit_order,
            UNIT_ORDER_POINT: self._handle_point_order,
            UNIT_ORDER_TARGET: self._handle_target_order,
            UNIT_ORDER_TWO_TARGETS: self._handle_target_order,
            CHANGE_SELECTION: self._handle_selection,
        }

    # ------------------------------------------------------------------
    # Event intake
    # ------------------------------------------------------------------

    def handle(self, event: ActionEvent) -> None:
        """Classify one action and update the aggregate."""
        self._check_open()

        handler = self._handlers.get(event.opcode)
        if handler is not None:
            handler(event)
            return

        category = _DIRECT_CATEGORIES.get(event.opcode)
        if category is not None:
            self.player.count(category)
            self.player.activity.record()
        elif event.opcode in UNCATEGORIZED_ACTIVITY:
            self.player.activity.record()

    def handle_all(self, events: Iterable[ActionEvent]) -> None:
        for event in events:
            self.handle(event)

    def request_retraining(self, time: int) -> None:
        """Mark a retraining at ``time``; resolved on the next ability learned."""
        self._check_open()
        self.player.hero_tracker.request_retraining(time)

    def open_new_interval(self, interval_ms: int | None = None) -> int:
        """Close the current APM interval and return its per-minute sample."""
        self._check_open()
        if interval_ms is None:
            interval_ms = self.config.interval_ms
        return self.player.activity.close(interval_ms)

    # ------------------------------------------------------------------
    # Finalization
    # ------------------------------------------------------------------

    def finalize(self) -> PlayerAggregate:
        """Compute APM and the ordered hero list. Can only run once."""
        self._check_open()
        player = self.player

        apm = player.activity.rate()
        if apm is None:
            logger.debug(f"Player {player.id} closed no activity intervals")
            apm = NO_ACTIVITY_APM

        player.apm = apm
        player.heroes = player.hero_tracker.finalize()
        player.finalized = True

        logger.debug(
            f"Finalized player {player.id} ({player.name}): apm={player.apm}, "
            f"heroes={len(player.heroes)}"
        )
        return player

    # ------------------------------------------------------------------
    # Opcode handlers
    # ------------------------------------------------------------------

    def _handle_unit_order(self, event: ActionEvent) -> None:
        obj = event.object_id
        if obj is None:
            return

        prefix = obj.prefix
        if prefix == HERO_ABILITY_PREFIX:
            self._handle_hero_skill(obj.value, event.time)
        else:
            # Upgrade ids ("R...") take the same lookup path as everything else
            if prefix in RACE_PREFIXES and self.player.race_detected is None:
                self.player.race_detected = Race(RACE_PREFIXES[prefix])
            self._record_identifier(obj, event.time)

        if prefix != ABILITY_SENTINEL:
            self.player.count(ActionCategory.BUILD_TRAIN)
        else:
            self.player.count(ActionCategory.ABILITY)
        self.player.activity.record()

    def _handle_point_order(self, event: ActionEvent) -> None:
        obj = event.object_id
        if obj is None:
            return

        self.player.activity.record()
        if obj.is_alphanumeric:
            if self._is_basic(obj):
                self.player.count(ActionCategory.BASIC)
            else:
                self.player.count(ActionCategory.ABILITY)
        else:
            self._record_identifier(obj, event.time)

    def _handle_target_order(self, event: ActionEvent) -> None:
        obj = event.object_id
        if obj is None:
            return

        if self._is_right_click(obj):
            self.player.count(ActionCategory.RIGHT_CLICK)
        elif self._is_basic(obj):
            self.player.count(ActionCategory.BASIC)
        else:
            self.player.count(ActionCategory.ABILITY)
        self.player.activity.record()

    def _handle_selection(self, event: ActionEvent) -> None:
        if event.counts_toward_activity:
            self.player.count(ActionCategory.SELECT)
            self.player.activity.record()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _handle_hero_skill(self, ability_id: str, time: int) -> None:
        hero_id = self.tables.hero_for_ability(ability_id)
        if hero_id is None:
            return
        self.player.hero_tracker.record_ability_use(hero_id, ability_id, time)

    def _record_identifier(self, obj: ObjectId, time: int) -> None:
        ledger = self.player.ledger(resolve_domain(obj.value, self.tables))
        if ledger is not None:
            ledger.record(obj.value, time)

    def _is_right_click(self, obj: ObjectId) -> bool:
        return obj.is_alphanumeric and tuple(obj.value) == RIGHT_CLICK_ORDER

    def _is_basic(self, obj: ObjectId) -> bool:
        if not obj.is_alphanumeric:
            return False
        order, subcode = obj.value
        return order <= self.config.basic_action_threshold and subcode == 0

    def _check_open(self) -> None:
        if self.player.finalized:
            raise AlreadyFinalizedError(f"Player {self.player.id}")
