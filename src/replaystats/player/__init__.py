"""Per-player state: ledgers, heroes, activity and the aggregate itself."""

from .activity import ActivityWindow
from .aggregate import ActionCategory, PlayerAggregate, Race
from .heroes import (
    AbilityEntry,
    FinalizedHero,
    HeroState,
    HeroTracker,
    RetrainingEntry,
    RetrainingSnapshot,
)
from .ledger import DomainLedger, LedgerEntry

__all__ = [
    "ActivityWindow",
    "ActionCategory",
    "PlayerAggregate",
    "Race",
    "AbilityEntry",
    "FinalizedHero",
    "HeroState",
    "HeroTracker",
    "RetrainingEntry",
    "RetrainingSnapshot",
    "DomainLedger",
    "LedgerEntry",
]
