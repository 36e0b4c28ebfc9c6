"""Domain ledgers for units, items, buildings and upgrades."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class LedgerEntry:
    """One identifier occurrence at a point in time."""

    id: str
    ms: int


@dataclass
class DomainLedger:
    """Arrival-ordered history plus a per-identifier count index.

    ``order`` is append-only and never re-sorted; ``summary`` is updated in the
    same call so ``summary[x]`` always equals the number of ``x`` entries in
    ``order``.
    """

    summary: dict[str, int] = field(default_factory=dict)
    order: list[LedgerEntry] = field(default_factory=list)

    def record(self, identifier: str, time: int) -> None:
        self.summary[identifier] = self.summary.get(identifier, 0) + 1
        self.order.append(LedgerEntry(id=identifier, ms=time))

    def __len__(self) -> int:
        return len(self.order)

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": dict(self.summary),
            "order": [{"id": entry.id, "ms": entry.ms} for entry in self.order],
        }
