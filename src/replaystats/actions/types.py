"""Action event type definitions.

This module contains the dataclasses used to represent decoded player
actions handed to the classification engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ObjectIdKind(Enum):
    """How an object id was encoded in the action payload."""

    STRING_ENCODED = "stringencoded"  # 4-char identifier, e.g. "hfoo"
    ALPHANUMERIC = "alphanumeric"  # raw order byte pair, e.g. (0x03, 0x00)


@dataclass(frozen=True)
class ObjectId:
    """Object id carried by unit orders."""

    kind: ObjectIdKind
    value: str | tuple[int, int]

    @classmethod
    def string(cls, value: str) -> ObjectId:
        return cls(ObjectIdKind.STRING_ENCODED, value)

    @classmethod
    def alphanumeric(cls, order: int, subcode: int = 0) -> ObjectId:
        return cls(ObjectIdKind.ALPHANUMERIC, (order, subcode))

    @property
    def is_alphanumeric(self) -> bool:
        return self.kind is ObjectIdKind.ALPHANUMERIC

    @property
    def prefix(self) -> str | None:
        """First character of a string-encoded id, None otherwise."""
        if self.is_alphanumeric or not self.value:
            return None
        return self.value[0]


@dataclass(frozen=True)
class ActionEvent:
    """A single decoded player action.

    ``time`` is the in-game time in milliseconds. ``counts_toward_activity`` is
    only consulted for selection changes, where the decoder decides whether the
    selection was deliberate player input.
    """

    opcode: int
    time: int = 0
    object_id: ObjectId | None = None
    select_mode: int | None = None
    counts_toward_activity: bool = True
