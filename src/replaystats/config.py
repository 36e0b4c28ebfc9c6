# src/replaystats/config.py
"""Configuration management for replaystats."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import tomllib

from .actions.constants import (
    ACTIVITY_INTERVAL_MS,
    BASIC_ACTION_THRESHOLD,
    RETRAINING_ITEM_IDS,
)
from .errors import ConfigError
from .tables import ReferenceTables, load_reference_tables


@dataclass(frozen=True)
class EngineConfig:
    interval_ms: int = ACTIVITY_INTERVAL_MS
    basic_action_threshold: int = BASIC_ACTION_THRESHOLD
    retraining_item_ids: tuple[str, ...] = RETRAINING_ITEM_IDS
    tables_path: Path | None = field(default=None, compare=False)

    def validate(self) -> None:
        """Validate configuration, raising ConfigError if invalid."""
        for name in ("interval_ms", "basic_action_threshold"):
            value = getattr(self, name)
            # bool is an int subclass
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(
                    f"Invalid {name} {value!r}. Must be an integer, "
                    f"got {type(value).__name__}"
                )

        if self.interval_ms <= 0:
            raise ConfigError(
                f"Invalid interval_ms {self.interval_ms}. Must be a positive number "
                "of milliseconds"
            )

        # Order bytes are single bytes
        if not 0 <= self.basic_action_threshold <= 0xFF:
            raise ConfigError(
                f"Invalid basic_action_threshold {self.basic_action_threshold}. "
                "Must be between 0 and 255"
            )

        for item_id in self.retraining_item_ids:
            if not isinstance(item_id, str):
                raise ConfigError(
                    f"Invalid retraining item id {item_id!r}. Must be a string"
                )
            if not item_id:
                raise ConfigError("retraining item_ids cannot contain empty strings")

    def load_tables(self) -> ReferenceTables:
        """Load reference tables from ``tables_path``, or empty tables."""
        if self.tables_path is None:
            return ReferenceTables()
        return load_reference_tables(self.tables_path)


def load_config(config_path: Path) -> EngineConfig:
    """Load configuration from TOML file."""
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}", str(config_path))

    with open(config_path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_path}: {e}", str(config_path)) from e

    activity_data = data.get("activity", {})
    classification_data = data.get("classification", {})
    retraining_data = data.get("retraining", {})
    tables_data = data.get("tables", {})

    item_ids = retraining_data.get("item_ids", RETRAINING_ITEM_IDS)
    if not isinstance(item_ids, (list, tuple)):
        raise ConfigError(
            f"Invalid retraining item_ids {item_ids!r}. Must be a list of strings",
            str(config_path),
        )

    tables_path = tables_data.get("path")
    if tables_path is not None:
        tables_path = Path(tables_path).expanduser()
        if not tables_path.is_absolute():
            tables_path = config_path.parent / tables_path

    config = EngineConfig(
        interval_ms=activity_data.get("interval_ms", ACTIVITY_INTERVAL_MS),
        basic_action_threshold=classification_data.get(
            "basic_action_threshold", BASIC_ACTION_THRESHOLD
        ),
        retraining_item_ids=tuple(item_ids),
        tables_path=tables_path,
    )
    config.validate()
    return config
