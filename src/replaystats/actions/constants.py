"""Action opcodes and classification thresholds.

All numeric constants used by the action classifier are centralized here.
"""

from __future__ import annotations

# =============================================================================
# Unit orders
# =============================================================================
UNIT_ORDER = 0x10  # order with object id, no target
UNIT_ORDER_POINT = 0x11  # immediate order with point target
UNIT_ORDER_TARGET = 0x12  # order with target point and object
ITEM_USE = 0x13  # give / drop item
UNIT_ORDER_TWO_TARGETS = 0x14  # targeted variant with two object ids

# =============================================================================
# Selection and groups
# =============================================================================
CHANGE_SELECTION = 0x16
ASSIGN_GROUP = 0x17
SELECT_GROUP_HOTKEY = 0x18
SELECT_GROUND_ITEM = 0x1C
CANCEL_HERO_REVIVAL = 0x1D
REMOVE_UNIT = 0x1E
ESCAPE = 0x61
ENTER_HERO_SKILL_MENU = 0x66
ENTER_BUILDING_MENU = 0x67

# Opcodes that count toward APM without a dedicated category counter
UNCATEGORIZED_ACTIVITY = frozenset(
    {SELECT_GROUND_ITEM, CANCEL_HERO_REVIVAL, ENTER_HERO_SKILL_MENU, ENTER_BUILDING_MENU}
)

# Selection modes
SELECT_MODE_ADD = 0x01
SELECT_MODE_REMOVE = 0x02

# =============================================================================
# Classification
# =============================================================================
RIGHT_CLICK_ORDER = (0x03, 0x00)
BASIC_ACTION_THRESHOLD = 0x19  # alphanumeric orders at or below this are basic
ABILITY_SENTINEL = "0"  # unit-order ids starting with this are ability casts
HERO_ABILITY_PREFIX = "A"

# Identifier prefix -> race letter
RACE_PREFIXES: dict[str, str] = {
    "e": "N",
    "o": "O",
    "h": "H",
    "u": "U",
}

# =============================================================================
# Activity tracking
# =============================================================================
ACTIVITY_INTERVAL_MS = 60000
NO_ACTIVITY_APM = 0  # reported when no interval was ever closed

# Tome of retraining item ids
RETRAINING_ITEM_IDS = ("tret", "tert")
