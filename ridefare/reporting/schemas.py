"""Pydantic models for the machine-readable (JSON) report."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ridefare.domain.entities import Driver, Ride, Rider
from ridefare.domain.pricing import PricingEngine


class RideSummary(BaseModel):
    ride_id: int
    ride_type: str
    pickup: str
    dropoff: str
    distance_miles: float = Field(..., ge=0)
    fare: float = Field(..., ge=0)

    @classmethod
    def from_ride(cls, ride: Ride, engine: PricingEngine | None = None) -> RideSummary:
        return cls(
            ride_id=ride.ride_id,
            ride_type=ride.ride_type.value,
            pickup=ride.pickup,
            dropoff=ride.dropoff,
            distance_miles=ride.distance_miles,
            fare=round(ride.fare(engine), 2),
        )


class DriverReport(BaseModel):
    driver_id: int
    name: str
    rating: float
    rides: list[RideSummary] = []
    average_earnings: float = 0.0

    @classmethod
    def from_driver(
        cls, driver: Driver, engine: PricingEngine | None = None
    ) -> DriverReport:
        return cls(
            driver_id=driver.driver_id,
            name=driver.name,
            rating=driver.rating,
            rides=[RideSummary.from_ride(r, engine) for r in driver.rides],
            average_earnings=round(driver.average_earnings(engine), 2),
        )


class RiderReport(BaseModel):
    rider_id: int
    name: str
    rides: list[RideSummary] = []

    @classmethod
    def from_rider(cls, rider: Rider, engine: PricingEngine | None = None) -> RiderReport:
        return cls(
            rider_id=rider.rider_id,
            name=rider.name,
            rides=[RideSummary.from_ride(r, engine) for r in rider.rides],
        )


class DemoReport(BaseModel):
    rides: list[RideSummary]
    drivers: list[DriverReport]
    riders: list[RiderReport]
