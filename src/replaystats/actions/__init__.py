"""Decoded action events and opcode constants."""

from .types import ActionEvent, ObjectId, ObjectIdKind
from .constants import (
    UNIT_ORDER,
    UNIT_ORDER_POINT,
    UNIT_ORDER_TARGET,
    ITEM_USE,
    UNIT_ORDER_TWO_TARGETS,
    CHANGE_SELECTION,
    ASSIGN_GROUP,
    SELECT_GROUP_HOTKEY,
    SELECT_GROUND_ITEM,
    CANCEL_HERO_REVIVAL,
    REMOVE_UNIT,
    ESCAPE,
    ENTER_HERO_SKILL_MENU,
    ENTER_BUILDING_MENU,
    SELECT_MODE_ADD,
    SELECT_MODE_REMOVE,
    ACTIVITY_INTERVAL_MS,
    NO_ACTIVITY_APM,
    RETRAINING_ITEM_IDS,
)

__all__ = [
    "ActionEvent",
    "ObjectId",
    "ObjectIdKind",
    "UNIT_ORDER",
    "UNIT_ORDER_POINT",
    "UNIT_ORDER_TARGET",
    "ITEM_USE",
    "UNIT_ORDER_TWO_TARGETS",
    "CHANGE_SELECTION",
    "ASSIGN_GROUP",
    "SELECT_GROUP_HOTKEY",
    "SELECT_GROUND_ITEM",
    "CANCEL_HERO_REVIVAL",
    "REMOVE_UNIT",
    "ESCAPE",
    "ENTER_HERO_SKILL_MENU",
    "ENTER_BUILDING_MENU",
    "SELECT_MODE_ADD",
    "SELECT_MODE_REMOVE",
    "ACTIVITY_INTERVAL_MS",
    "NO_ACTIVITY_APM",
    "RETRAINING_ITEM_IDS",
]
