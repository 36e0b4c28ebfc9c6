"""Hero ability tracking with retraining support.

Heroes are created lazily on the first ability learned for them and keep a
creation index so the final hero list follows the order in which the player
first used each hero.

Retraining is requested per player and resolved lazily: the pending retraining
time is applied to whichever hero learns the next ability, not to every hero
at the moment of the request. Only one retraining can be pending; a second
request before resolution replaces the first.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class AbilityEntry:
    """An ability was learned."""

    time: int
    value: str

    @property
    def type(self) -> str:
        return "ability"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "time": self.time, "value": self.value}


@dataclass(frozen=True)
class RetrainingEntry:
    """The hero's abilities were reset."""

    time: int

    @property
    def type(self) -> str:
        return "retraining"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "time": self.time}


AbilityOrderEntry = AbilityEntry | RetrainingEntry


@dataclass(frozen=True)
class RetrainingSnapshot:
    """Ability counts a hero had right before a retraining."""

    time: int
    abilities: Mapping[str, int]

    def to_dict(self) -> dict[str, Any]:
        return {"time": self.time, "abilities": dict(self.abilities)}


@dataclass
class HeroState:
    """Mutable per-hero state while the stream is being processed."""

    id: str
    order: int
    abilities: dict[str, int] = field(default_factory=dict)
    ability_order: list[AbilityOrderEntry] = field(default_factory=list)
    retraining_history: list[RetrainingSnapshot] = field(default_factory=list)

    @property
    def level(self) -> int:
        return sum(self.abilities.values())

    def learn(self, ability_id: str, time: int) -> None:
        self.abilities[ability_id] = self.abilities.get(ability_id, 0) + 1
        self.ability_order.append(AbilityEntry(time=time, value=ability_id))

    def retrain(self, time: int) -> None:
        """Snapshot current abilities under ``time`` and start from zero."""
        snapshot = MappingProxyType(dict(self.abilities))
        self.retraining_history.append(RetrainingSnapshot(time=time, abilities=snapshot))
        self.abilities = {}
        self.ability_order.append(RetrainingEntry(time=time))


@dataclass(frozen=True)
class FinalizedHero:
    """Reported hero shape; the creation index is not part of it."""

    id: str
    level: int
    abilities: dict[str, int]
    ability_order: list[AbilityOrderEntry]
    retraining_history: list[RetrainingSnapshot]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "level": self.level,
            "abilities": dict(self.abilities),
            "abilityOrder": [entry.to_dict() for entry in self.ability_order],
            "retrainingHistory": [snap.to_dict() for snap in self.retraining_history],
        }


class HeroTracker:
    """Per-player hero collector and pending retraining slot."""

    def __init__(self) -> None:
        self.heroes: dict[str, HeroState] = {}
        self.hero_count = 0
        self.pending_retraining = 0

    def record_ability_use(self, hero_id: str, ability_id: str, time: int) -> HeroState:
        """Record ``ability_id`` learned by ``hero_id`` at ``time``.

        A pending retraining is resolved against this hero before the new
        ability is counted.
        """
        hero = self.heroes.get(hero_id)
        if hero is None:
            self.hero_count += 1
            hero = HeroState(id=hero_id, order=self.hero_count)
            self.heroes[hero_id] = hero

        if self.pending_retraining > 0:
            hero.retrain(self.pending_retraining)
            self.pending_retraining = 0

        hero.learn(ability_id, time)
        return hero

    def request_retraining(self, time: int) -> None:
        self.pending_retraining = time

    def finalize(self) -> list[FinalizedHero]:
        """Return heroes in creation order with computed levels."""
        ordered = sorted(self.heroes.values(), key=lambda h: h.order)
        return [
            FinalizedHero(
                id=hero.id,
                level=hero.level,
                abilities=hero.abilities,
                ability_order=hero.ability_order,
                retraining_history=hero.retraining_history,
            )
            for hero in ordered
        ]
