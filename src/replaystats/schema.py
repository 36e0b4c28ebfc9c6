"""JSON Schema validation for player reports."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import Draft7Validator

from .version import get_schema_version, is_schema_compatible

_SCHEMA_PATH = Path(__file__).parent / "schemas" / "player_report.schema.json"


def _load_schema() -> dict[str, Any]:
    """Load the player report JSON schema bundled with the package.

    Raises:
        FileNotFoundError: If schema file is missing.
        json.JSONDecodeError: If schema file is invalid JSON.
    """
    if not _SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found: {_SCHEMA_PATH}")

    with open(_SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


@lru_cache(maxsize=1)
def _create_validator() -> Draft7Validator:
    return Draft7Validator(_load_schema())


def _format_validation_error(error: jsonschema.ValidationError) -> str:
    """Format a validation error into a clear, actionable message.

    Args:
        error: The validation error from jsonschema.

    Returns:
        Formatted error message with path and context.
    """
    path_str = ""
    if error.absolute_path:
        path_parts = []
        for part in error.absolute_path:
            if isinstance(part, int):
                path_parts.append(f"[{part}]")
            elif path_parts:
                path_parts.append(f".{part}")
            else:
                path_parts.append(str(part))
        path_str = f" at path '{''.join(path_parts)}'"

    if error.validator == "required":
        missing_props = error.message.split("'")[1::2]
        return f"Missing required field(s): {', '.join(missing_props)}{path_str}"

    elif error.validator == "enum":
        allowed_values = list(error.validator_value)
        return (f"Invalid value{path_str}. Allowed values: {allowed_values}. "
                f"Got: {error.instance}")

    elif error.validator == "type":
        expected_type = error.validator_value
        actual_type = type(error.instance).__name__
        return (f"Invalid type{path_str}. Expected {expected_type}, "
                f"got {actual_type}: {error.instance}")

    elif error.validator == "pattern":
        return (f"Value does not match required pattern{path_str}. "
                f"Pattern: {error.validator_value}, Got: {error.instance}")

    elif error.validator in ("minimum", "maximum"):
        op = ">=" if error.validator == "minimum" else "<="
        return f"Value{path_str} must be {op} {error.validator_value}. Got: {error.instance}"

    elif error.validator == "additionalProperties":
        return f"Additional properties not allowed{path_str}: {error.message}"

    else:
        return f"{error.message}{path_str}"


def _check_schema_version(obj: dict[str, Any]) -> None:
    version = obj.get("schema_version")
    if not is_schema_compatible(version):
        raise jsonschema.ValidationError(
            f"Incompatible schema_version {version!r}. "
            f"Expected major version of {get_schema_version()}"
        )


def validate_player_report(obj: dict[str, Any]) -> None:
    """Validate a player report dict against the JSON schema.

    Raises:
        jsonschema.ValidationError: If the report is invalid, with a message
            naming the offending path and the expected value, or if its
            schema_version has a different major version.
        TypeError: If obj is not a dictionary.
    """
    if not isinstance(obj, dict):
        raise TypeError(f"Report must be a dictionary, got {type(obj).__name__}")

    try:
        _create_validator().validate(obj)
    except jsonschema.ValidationError as e:
        raise jsonschema.ValidationError(_format_validation_error(e)) from e

    _check_schema_version(obj)


def validate_replay_report(obj: dict[str, Any]) -> None:
    """Validate a replay report's version and every player entry."""
    if not isinstance(obj, dict):
        raise TypeError(f"Report must be a dictionary, got {type(obj).__name__}")

    players = obj.get("players")
    if not isinstance(players, list):
        raise jsonschema.ValidationError("Missing required field(s): players")

    _check_schema_version(obj)
    for player in players:
        validate_player_report(player)
