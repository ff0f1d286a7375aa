"""Tests for activity type classification."""

import pytest

from gearsync.activity_type import (
    ActivityType,
    InvalidActivityType,
    is_ride,
    is_run,
    is_virtual,
    supports_reverse_geocoding,
    supports_weather,
)


class TestActivityTypeParsing:
    """Tests for ActivityType.from_label()."""

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("Ride", ActivityType.RIDE),
            ("VirtualRide", ActivityType.VIRTUAL_RIDE),
            ("Run", ActivityType.RUN),
        ],
    )
    def test_recognized_labels(self, label, expected):
        assert ActivityType.from_label(label) is expected

    @pytest.mark.parametrize("label", ["Swim", "ride", "", None, "EBikeRide"])
    def test_unrecognized_label_raises(self, label):
        with pytest.raises(InvalidActivityType) as exc_info:
            ActivityType.from_label(label)

        assert exc_info.value.label == label

    def test_invalid_type_is_value_error(self):
        with pytest.raises(ValueError):
            ActivityType.from_label("Walk")

    def test_closed_set(self):
        assert {t.value for t in ActivityType} == {"Ride", "VirtualRide", "Run"}


class TestCapabilities:
    """Tests for the derived capability predicates."""

    def test_outdoor_types_support_weather_and_geocoding(self):
        for activity_type in (ActivityType.RIDE, ActivityType.RUN):
            assert supports_weather(activity_type) is True
            assert supports_reverse_geocoding(activity_type) is True

    def test_virtual_ride_has_no_weather_or_geocoding(self):
        assert supports_weather(ActivityType.VIRTUAL_RIDE) is False
        assert supports_reverse_geocoding(ActivityType.VIRTUAL_RIDE) is False

    def test_is_virtual(self):
        assert is_virtual(ActivityType.VIRTUAL_RIDE) is True
        assert is_virtual(ActivityType.RIDE) is False
        assert is_virtual(ActivityType.RUN) is False

    def test_is_ride(self):
        assert is_ride(ActivityType.RIDE) is True
        assert is_ride(ActivityType.VIRTUAL_RIDE) is True
        assert is_ride(ActivityType.RUN) is False

    def test_is_run(self):
        assert is_run(ActivityType.RUN) is True
        assert is_run(ActivityType.RIDE) is False
        assert is_run(ActivityType.VIRTUAL_RIDE) is False
