"""Shared test fixtures and builders for replaystats tests."""

from .builders import (
    bare_action,
    byte_order,
    create_test_engine,
    create_test_player,
    create_test_tables,
    selection,
    unit_order,
)

__all__ = [
    "bare_action",
    "byte_order",
    "create_test_engine",
    "create_test_player",
    "create_test_tables",
    "selection",
    "unit_order",
]
