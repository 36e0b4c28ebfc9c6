"""Custom exceptions for replaystats with structured error information."""


class ReplayStatsError(Exception):
    """Base exception for all replaystats errors.

    Provides structured error information with actionable messages.
    """

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


class ConfigError(ReplayStatsError):
    """Raised when engine configuration is missing or invalid."""

    def __init__(self, message: str, path: str = None):
        details = {
            "path": path,
            "suggested_action": "Fix the value in the configuration file",
        }
        super().__init__(message, details)


class ReferenceTableError(ReplayStatsError):
    """Raised when reference tables cannot be loaded."""

    def __init__(self, path: str, reason: str = None):
        base_message = f"Invalid reference tables: {path}"
        if reason:
            message = f"{base_message} ({reason})"
        else:
            message = base_message

        details = {
            "path": path,
            "reason": reason,
            "suggested_action": (
                "Tables must be a JSON object with 'units', 'items', 'buildings', "
                "'upgrades' lists and an 'ability_to_hero' object"
            ),
        }
        super().__init__(message, details)


class AlreadyFinalizedError(ReplayStatsError):
    """Raised when a finalized player receives events or is finalized again."""

    def __init__(self, subject: str):
        message = f"{subject} has already been finalized"
        details = {
            "subject": subject,
            "suggested_action": "Create a new engine to process another stream",
        }
        super().__init__(message, details)


class UnknownPlayerError(ReplayStatsError):
    """Raised when a player id is looked up that was never declared."""

    def __init__(self, player_id: int, known_ids: list = None):
        known = known_ids or []
        message = f"Unknown player id: {player_id}"
        details = {
            "player_id": player_id,
            "known_ids": known,
            "suggested_action": f"Use one of the declared player ids: {known}",
        }
        super().__init__(message, details)
