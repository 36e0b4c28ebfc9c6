"""Tests for report building and JSON Schema validation."""

import jsonschema
import pytest

from replaystats.actions.constants import ESCAPE, ITEM_USE
from replaystats.errors import ReplayStatsError
from replaystats.report import build_player_report, build_replay_report
from replaystats.schema import validate_player_report, validate_replay_report
from replaystats.version import get_schema_version

from fixtures.builders import (
    bare_action,
    byte_order,
    create_test_engine,
    unit_order,
)


@pytest.fixture
def finalized_player():
    """A player with ledger entries, a retrained hero and two intervals."""
    engine = create_test_engine()
    engine.handle(unit_order("hpea", time=100))
    engine.handle(unit_order("htow", time=200))
    engine.handle(unit_order("A1", time=300))
    engine.handle(byte_order(0x03, time=400))
    engine.open_new_interval()
    engine.request_retraining(61000)
    engine.handle(unit_order("A2", time=62000))
    engine.handle(bare_action(ITEM_USE, time=63000))
    engine.handle(bare_action(ESCAPE, time=64000))
    engine.open_new_interval()
    return engine.finalize()


class TestBuildPlayerReport:
    def test_report_shape(self, finalized_player):
        report = build_player_report(finalized_player)

        assert report["schema_version"] == get_schema_version()
        assert report["id"] == 1
        assert report["name"] == "Grubby"
        assert report["race"] == "O"
        assert report["raceDetected"] == "H"
        assert report["units"] == {
            "summary": {"hpea": 1},
            "order": [{"id": "hpea", "ms": 100}],
        }
        assert report["buildings"]["summary"] == {"htow": 1}
        assert report["items"] == {"summary": {}, "order": []}
        assert report["apm"] == 4
        assert report["actions"]["timed"] == [4, 3]
        assert report["actions"]["buildtrain"] == 4
        assert report["actions"]["rightclick"] == 1
        assert report["actions"]["subgroup"] == 0

    def test_report_heroes(self, finalized_player):
        heroes = build_player_report(finalized_player)["heroes"]

        assert len(heroes) == 1
        assert heroes[0]["id"] == "H1"
        assert heroes[0]["level"] == 1
        assert heroes[0]["retrainingHistory"] == [
            {"time": 61000, "abilities": {"A1": 1}}
        ]

    def test_report_validates(self, finalized_player):
        validate_player_report(build_player_report(finalized_player))

    def test_empty_player_validates(self):
        engine = create_test_engine(race=None)
        report = build_player_report(engine.finalize())

        validate_player_report(report)
        assert report["race"] is None
        assert report["heroes"] == []

    def test_unfinalized_player_rejected(self):
        engine = create_test_engine()
        with pytest.raises(ReplayStatsError, match="finalized"):
            build_player_report(engine.player)

    def test_replay_report(self, finalized_player):
        other = create_test_engine(id=2, name="Moon").finalize()
        report = build_replay_report([finalized_player, other])

        assert [p["id"] for p in report["players"]] == [1, 2]
        validate_replay_report(report)


class TestSchemaValidation:
    def test_missing_field(self, finalized_player):
        report = build_player_report(finalized_player)
        del report["apm"]

        with pytest.raises(jsonschema.ValidationError, match="Missing required field"):
            validate_player_report(report)

    def test_wrong_type(self, finalized_player):
        report = build_player_report(finalized_player)
        report["apm"] = "fast"

        with pytest.raises(jsonschema.ValidationError, match="Invalid type"):
            validate_player_report(report)

    def test_invalid_race(self, finalized_player):
        report = build_player_report(finalized_player)
        report["raceDetected"] = "X"

        with pytest.raises(jsonschema.ValidationError, match="raceDetected"):
            validate_player_report(report)

    def test_negative_counter(self, finalized_player):
        report = build_player_report(finalized_player)
        report["actions"]["esc"] = -1

        with pytest.raises(jsonschema.ValidationError, match="actions.esc"):
            validate_player_report(report)

    def test_unknown_field(self, finalized_player):
        report = build_player_report(finalized_player)
        report["extra"] = True

        with pytest.raises(jsonschema.ValidationError, match="Additional properties"):
            validate_player_report(report)

    def test_non_dict_rejected(self):
        with pytest.raises(TypeError):
            validate_player_report(["not", "a", "report"])

    def test_replay_report_requires_players(self):
        with pytest.raises(jsonschema.ValidationError, match="players"):
            validate_replay_report({"schema_version": "1.0.0"})

    def test_minor_schema_bump_accepted(self, finalized_player):
        report = build_player_report(finalized_player)
        report["schema_version"] = "1.4.2"

        validate_player_report(report)

    def test_other_major_schema_version_rejected(self, finalized_player):
        report = build_player_report(finalized_player)
        report["schema_version"] = "2.0.0"

        with pytest.raises(jsonschema.ValidationError, match="Incompatible schema_version"):
            validate_player_report(report)

    def test_replay_report_major_version_checked(self, finalized_player):
        report = build_replay_report([finalized_player])
        report["schema_version"] = "0.1.0"

        with pytest.raises(jsonschema.ValidationError, match="Incompatible schema_version"):
            validate_replay_report(report)
