"""Unit tests for the ride value object."""

import dataclasses
import io

import pytest

from ridefare.domain.entities import InvalidRideDataError, Ride, format_miles
from ridefare.domain.enums import RideType


class TestRideFare:
    def test_standard_fare(self, standard_ride, engine):
        assert standard_ride.fare(engine) == pytest.approx(24.14)

    def test_premium_fare(self, premium_ride, engine):
        assert premium_ride.fare(engine) == pytest.approx(27.8875)

    def test_default_ride_type(self, engine):
        ride = Ride(1, "A", "B", 10.0)
        assert ride.ride_type == RideType.DEFAULT
        assert ride.fare(engine) == pytest.approx(15.0)

    def test_fare_is_deterministic(self, premium_ride, engine):
        assert premium_ride.fare(engine) == premium_ride.fare(engine)

    def test_fare_uses_configured_engine_by_default(self, standard_ride):
        assert standard_ride.fare() == pytest.approx(24.14)


class TestRideValidation:
    def test_negative_distance_rejected(self):
        with pytest.raises(InvalidRideDataError):
            Ride(1, "A", "B", -0.5, RideType.STANDARD)

    def test_nan_distance_rejected(self):
        with pytest.raises(InvalidRideDataError):
            Ride(1, "A", "B", float("nan"))

    def test_infinite_distance_rejected(self):
        with pytest.raises(InvalidRideDataError):
            Ride(1, "A", "B", float("inf"))

    def test_blank_pickup_rejected(self):
        with pytest.raises(InvalidRideDataError):
            Ride(1, "  ", "B", 1.0)

    def test_invalid_data_is_value_error(self):
        with pytest.raises(ValueError):
            Ride(1, "A", "", 1.0)

    def test_zero_distance_accepted(self):
        assert Ride(1, "A", "B", 0.0).distance_miles == 0.0

    def test_ride_is_immutable(self, standard_ride):
        with pytest.raises(dataclasses.FrozenInstanceError):
            standard_ride.distance_miles = 1.0


class TestRideDescribe:
    def test_standard_details(self, standard_ride, engine):
        assert standard_ride.details(engine) == (
            "[Standard] Ride ID: 101 | Pickup: Downtown | Dropoff: Airport"
            " | Distance: 12.3 miles | Fare: $24.14"
        )

    def test_premium_tag_is_aligned(self, premium_ride, engine):
        assert premium_ride.details(engine).startswith("[Premium]  Ride ID: 102 |")
        assert premium_ride.details(engine).endswith("Distance: 5.5 miles | Fare: $27.89")

    def test_default_ride_has_no_tag(self, engine):
        ride = Ride(7, "A", "B", 10.0)
        assert ride.details(engine) == (
            "Ride ID: 7 | Pickup: A | Dropoff: B | Distance: 10 miles | Fare: $15.00"
        )

    def test_describe_writes_to_stdout(self, standard_ride, capsys):
        standard_ride.describe()
        assert capsys.readouterr().out == standard_ride.details() + "\n"

    def test_describe_writes_to_stream(self, premium_ride, engine):
        buf = io.StringIO()
        premium_ride.describe(buf, engine)
        assert buf.getvalue() == premium_ride.details(engine) + "\n"

    def test_large_distance_is_not_abbreviated(self, engine):
        ride = Ride(8, "A", "B", 1234567.0)
        assert "| Distance: 1234567 miles |" in ride.details(engine)

    def test_precise_distance_keeps_all_digits(self, engine):
        ride = Ride(9, "A", "B", 3.1415926)
        assert "| Distance: 3.1415926 miles |" in ride.details(engine)


class TestFormatMiles:
    def test_trims_trailing_zeros(self):
        assert format_miles(10.0) == "10"
        assert format_miles(8.75) == "8.75"

    def test_integer_distance(self):
        assert format_miles(0) == "0"

    def test_no_scientific_notation(self):
        assert format_miles(1e-7) == "0.0000001"
        assert format_miles(2e16) == "20000000000000000"
