"""Per-player aggregate state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..colors import player_color
from ..tables import Domain
from .activity import ActivityWindow
from .heroes import FinalizedHero, HeroState, HeroTracker
from .ledger import DomainLedger


class Race(Enum):
    """Race letters as they appear in replays."""

    HUMAN = "H"
    ORC = "O"
    NIGHT_ELF = "N"
    UNDEAD = "U"
    RANDOM = "R"


class ActionCategory(Enum):
    """Mutually exclusive action counters."""

    RIGHT_CLICK = "rightclick"
    BASIC = "basic"
    BUILD_TRAIN = "buildtrain"
    ABILITY = "ability"
    ITEM = "item"
    SELECT = "select"
    REMOVE_UNIT = "removeunit"
    SUBGROUP = "subgroup"
    ASSIGN_GROUP = "assigngroup"
    SELECT_HOTKEY = "selecthotkey"
    ESC = "esc"


def _zeroed_counters() -> dict[ActionCategory, int]:
    return {category: 0 for category in ActionCategory}


@dataclass
class PlayerAggregate:
    """Everything tracked for one participant.

    Owned by a single engine while the stream is processed; ``apm`` and
    ``heroes`` are only meaningful after finalization.
    """

    id: int
    name: str
    team_id: int
    color: str
    race: Race | None = None
    race_detected: Race | None = None

    units: DomainLedger = field(default_factory=DomainLedger)
    items: DomainLedger = field(default_factory=DomainLedger)
    buildings: DomainLedger = field(default_factory=DomainLedger)
    upgrades: DomainLedger = field(default_factory=DomainLedger)

    hero_tracker: HeroTracker = field(default_factory=HeroTracker)
    actions: dict[ActionCategory, int] = field(default_factory=_zeroed_counters)
    activity: ActivityWindow = field(default_factory=ActivityWindow)

    last_action_was_deselect: bool = False
    time_played: int = 0

    apm: int = 0
    heroes: list[FinalizedHero] = field(default_factory=list)
    finalized: bool = False

    @classmethod
    def create(
        cls,
        id: int,
        name: str,
        team_id: int,
        color: int,
        race: Race | str | None = None,
    ) -> PlayerAggregate:
        """Create a player from a numeric color code and race letter."""
        if isinstance(race, str):
            race = Race(race)
        return cls(id=id, name=name, team_id=team_id, color=player_color(color), race=race)

    @property
    def hero_collector(self) -> dict[str, HeroState]:
        return self.hero_tracker.heroes

    @property
    def pending_retraining(self) -> int:
        return self.hero_tracker.pending_retraining

    def ledger(self, domain: Domain) -> DomainLedger | None:
        """Ledger for ``domain``; None for ``Domain.UNKNOWN``."""
        if domain is Domain.UNKNOWN:
            return None
        return getattr(self, domain.value)

    def count(self, category: ActionCategory) -> None:
        self.actions[category] += 1
