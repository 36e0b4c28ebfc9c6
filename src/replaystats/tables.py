"""Reference tables and identifier domain resolution.

The tables classify 4-character object identifiers (``"hfoo"``, ``"Rhme"``,
``"AHbz"``) into units, items, buildings and upgrades, and map hero ability
ids to the hero that owns them. They are built once, never mutated, and may be
shared by every player engine in a replay.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .errors import ReferenceTableError


class Domain(Enum):
    """Ledger domain an identifier belongs to."""

    UNIT = "units"
    ITEM = "items"
    BUILDING = "buildings"
    UPGRADE = "upgrades"
    UNKNOWN = "unknown"


_TABLE_KEYS = ("units", "items", "buildings", "upgrades")


@dataclass(frozen=True)
class ReferenceTables:
    """Immutable identifier membership tables."""

    units: frozenset[str] = frozenset()
    items: frozenset[str] = frozenset()
    buildings: frozenset[str] = frozenset()
    upgrades: frozenset[str] = frozenset()
    ability_to_hero: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def build(
        cls,
        units: Iterable[str] = (),
        items: Iterable[str] = (),
        buildings: Iterable[str] = (),
        upgrades: Iterable[str] = (),
        ability_to_hero: Mapping[str, str] | None = None,
    ) -> ReferenceTables:
        """Build tables from any iterables, freezing every collection."""
        return cls(
            units=frozenset(units),
            items=frozenset(items),
            buildings=frozenset(buildings),
            upgrades=frozenset(upgrades),
            ability_to_hero=MappingProxyType(dict(ability_to_hero or {})),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReferenceTables:
        """Build tables from a plain dict (e.g. parsed JSON).

        Table values may be lists of identifiers or objects keyed by
        identifier (display names are ignored).
        """
        return cls.build(
            units=data.get("units", ()),
            items=data.get("items", ()),
            buildings=data.get("buildings", ()),
            upgrades=data.get("upgrades", ()),
            ability_to_hero=data.get("ability_to_hero", {}),
        )

    def hero_for_ability(self, ability_id: str) -> str | None:
        """Return the hero owning ``ability_id``, or None if unmapped."""
        return self.ability_to_hero.get(ability_id)


def resolve_domain(identifier: Any, tables: ReferenceTables) -> Domain:
    """Resolve which ledger domain an identifier belongs to.

    Tables are checked in the order unit, item, building, upgrade and the
    first match wins. Anything else, including non-string identifiers, is
    ``Domain.UNKNOWN``.
    """
    if not isinstance(identifier, str):
        return Domain.UNKNOWN
    if identifier in tables.units:
        return Domain.UNIT
    if identifier in tables.items:
        return Domain.ITEM
    if identifier in tables.buildings:
        return Domain.BUILDING
    if identifier in tables.upgrades:
        return Domain.UPGRADE
    return Domain.UNKNOWN


def load_reference_tables(path: Path) -> ReferenceTables:
    """Load reference tables from a JSON file.

    Args:
        path: Path to a JSON object with ``units``, ``items``, ``buildings``,
            ``upgrades`` and ``ability_to_hero`` entries

    Returns:
        Frozen ReferenceTables

    Raises:
        ReferenceTableError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    if not path.exists():
        raise ReferenceTableError(str(path), "file not found")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ReferenceTableError(str(path), f"invalid JSON: {e.msg}") from e
    except OSError as e:
        raise ReferenceTableError(str(path), str(e)) from e

    if not isinstance(data, dict):
        raise ReferenceTableError(str(path), "top level must be an object")

    for key in _TABLE_KEYS:
        value = data.get(key, [])
        if not isinstance(value, (list, dict)):
            raise ReferenceTableError(str(path), f"'{key}' must be a list or object")

    if not isinstance(data.get("ability_to_hero", {}), dict):
        raise ReferenceTableError(str(path), "'ability_to_hero' must be an object")

    return ReferenceTables.from_dict(data)
