"""replaystats: per-player action statistics from decoded replay actions."""

from .engine import PlayerEngine
from .pipeline import CommandBlock, PlayerSlot, ReplayStatsPipeline, TimeSlot
from .report import build_player_report, build_replay_report
from .schema import validate_player_report, validate_replay_report
from .tables import ReferenceTables, load_reference_tables
from .version import get_package_version

__version__ = get_package_version()
__author__ = "replaystats contributors"
__description__ = "Per-player action statistics from decoded replay actions"

__all__ = [
    "PlayerEngine",
    "ReplayStatsPipeline",
    "PlayerSlot",
    "CommandBlock",
    "TimeSlot",
    "ReferenceTables",
    "load_reference_tables",
    "build_player_report",
    "build_replay_report",
    "validate_player_report",
    "validate_replay_report",
]
