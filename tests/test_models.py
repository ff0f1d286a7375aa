"""Tests for gear and activity records."""

from datetime import datetime, timezone

import pytest

from gearsync.activity_type import ActivityType, InvalidActivityType
from gearsync.sync.models import Activity, Gear, InvalidGearPayload

CREATED_ON = datetime(2026, 3, 1, 8, 0, tzinfo=timezone.utc)


class TestGear:
    """Tests for Gear."""

    def test_create_from_payload(self):
        gear = Gear.create(
            gear_id="b123",
            data={"name": "Canyon", "distance": 5000, "converted_distance": 5.0},
            distance_in_meter=5000,
            created_on=CREATED_ON,
        )

        assert gear.gear_id == "b123"
        assert gear.name == "Canyon"
        assert gear.distance_in_meter == 5000
        assert gear.converted_distance == 5.0
        assert gear.is_retired is False
        assert gear.created_on == CREATED_ON

    def test_create_without_name_uses_id(self):
        gear = Gear.create("g9", {"converted_distance": 1}, 1000, CREATED_ON)

        assert gear.name == "g9"

    def test_create_without_converted_distance_uses_distance(self):
        gear = Gear.create("b1", {}, 1200, CREATED_ON)

        assert gear.converted_distance == 1200

    def test_create_rejects_negative_distance(self):
        with pytest.raises(InvalidGearPayload):
            Gear.create("b1", {"converted_distance": 1}, -1, CREATED_ON)

    @pytest.mark.parametrize("value", [None, "5000", True])
    def test_create_rejects_non_numeric_distance(self, value):
        with pytest.raises(InvalidGearPayload):
            Gear.create("b1", {"converted_distance": 1}, value, CREATED_ON)

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_create_rejects_non_finite_distance(self, value):
        with pytest.raises(InvalidGearPayload):
            Gear.create("b1", {"converted_distance": 1}, value, CREATED_ON)

    @pytest.mark.parametrize("value", [float("inf"), float("nan")])
    def test_update_rejects_non_finite_distance(self, value):
        gear = Gear.create("b1", {"converted_distance": 5.0}, 5000, CREATED_ON)

        with pytest.raises(InvalidGearPayload):
            gear.update_distance(value, 5.0)
        with pytest.raises(InvalidGearPayload):
            gear.update_distance(5200, value)

        assert gear.distance_in_meter == 5000
        assert gear.converted_distance == 5.0

    def test_update_distance(self):
        gear = Gear.create("b1", {"converted_distance": 5.0}, 5000, CREATED_ON)

        gear.update_distance(5200, 5.2)

        assert gear.distance_in_meter == 5200
        assert gear.converted_distance == 5.2

    def test_update_distance_keeps_converted_when_missing(self):
        gear = Gear.create("b1", {"converted_distance": 5.0}, 5000, CREATED_ON)

        gear.update_distance(5200)

        assert gear.converted_distance == 5.0

    def test_invalid_update_leaves_gear_untouched(self):
        gear = Gear.create("b1", {"converted_distance": 5.0}, 5000, CREATED_ON)

        with pytest.raises(InvalidGearPayload):
            gear.update_distance(5200, -3)

        assert gear.distance_in_meter == 5000
        assert gear.converted_distance == 5.0

    def test_update_is_retired(self):
        gear = Gear.create("b1", {}, 10, CREATED_ON)

        gear.update_is_retired(True)

        assert gear.is_retired is True


class TestActivity:
    """Tests for Activity.from_strava()."""

    def test_from_strava(self):
        activity = Activity.from_strava(
            {
                "id": 987,
                "name": "Morning Ride",
                "sport_type": "Ride",
                "start_date": "2026-02-18T07:30:00Z",
                "gear_id": "b123",
            }
        )

        assert activity.activity_id == "987"
        assert activity.activity_type is ActivityType.RIDE
        assert activity.start_date == datetime(2026, 2, 18, 7, 30, tzinfo=timezone.utc)
        assert activity.gear_id == "b123"

    def test_from_strava_falls_back_to_type(self):
        activity = Activity.from_strava(
            {"id": 1, "type": "Run", "start_date": "2026-02-18T07:30:00Z"}
        )

        assert activity.activity_type is ActivityType.RUN
        assert activity.gear_id is None

    def test_from_strava_unknown_type(self):
        with pytest.raises(InvalidActivityType):
            Activity.from_strava(
                {"id": 1, "sport_type": "Swim", "start_date": "2026-02-18T07:30:00Z"}
            )
