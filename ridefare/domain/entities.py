"""
Domain entities with business logic.

Patterns used
-------------
- ``Ride`` is an immutable value object tagged with a ``RideType``; its
  fare comes from the ``PricingEngine`` formula table for that tag.
- ``Driver`` and ``Rider`` hold shared ride handles in private lists that
  only grow through ``assign_ride`` / ``request_ride``.
"""

from __future__ import annotations

import logging
import math
import sys
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, TextIO

from .enums import RideType
from .pricing import PricingEngine, get_pricing_engine

logger = logging.getLogger(__name__)


class InvalidRideDataError(ValueError):
    """Raised when a ride is built from invalid trip data."""


def format_miles(distance_miles: float) -> str:
    """Shortest fixed-point text for a distance: ``12.3``, ``10``, ``1234567``."""
    text = format(Decimal(repr(float(distance_miles))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


# ── Value Object ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Ride:
    ride_id: int
    pickup: str
    dropoff: str
    distance_miles: float
    ride_type: RideType = RideType.DEFAULT

    def __post_init__(self) -> None:
        if not math.isfinite(self.distance_miles) or self.distance_miles < 0:
            raise InvalidRideDataError(
                f"Ride {self.ride_id}: distance must be a non-negative number, "
                f"got {self.distance_miles!r}"
            )
        if not self.pickup.strip() or not self.dropoff.strip():
            raise InvalidRideDataError(
                f"Ride {self.ride_id}: pickup and dropoff must not be blank"
            )

    def fare(self, engine: Optional[PricingEngine] = None) -> float:
        """Fare for this ride under *engine* (the configured one by default)."""
        engine = engine or get_pricing_engine()
        return engine.fare(self.ride_type, self.distance_miles)

    def details(self, engine: Optional[PricingEngine] = None) -> str:
        line = (
            f"Ride ID: {self.ride_id}"
            f" | Pickup: {self.pickup}"
            f" | Dropoff: {self.dropoff}"
            f" | Distance: {format_miles(self.distance_miles)} miles"
            f" | Fare: ${self.fare(engine):.2f}"
        )
        tag = self.ride_type.tag
        return f"{tag:<10} {line}" if tag else line

    def describe(
        self, file: Optional[TextIO] = None, engine: Optional[PricingEngine] = None
    ) -> None:
        print(self.details(engine), file=file or sys.stdout)


# ── Entities ──────────────────────────────────────────────────────────


@dataclass
class Driver:
    driver_id: int
    name: str
    rating: float = 5.0
    _rides: list[Ride] = field(default_factory=list, init=False, repr=False)

    @property
    def rides(self) -> tuple[Ride, ...]:
        return tuple(self._rides)

    def assign_ride(self, ride: Ride) -> None:
        self._rides.append(ride)
        logger.debug("Ride %d assigned to driver %d", ride.ride_id, self.driver_id)

    def total_earnings(self, engine: Optional[PricingEngine] = None) -> float:
        return sum(ride.fare(engine) for ride in self._rides)

    def average_earnings(self, engine: Optional[PricingEngine] = None) -> float:
        """Mean fare per assigned ride, 0.0 when nothing is assigned."""
        if not self._rides:
            return 0.0
        return self.total_earnings(engine) / len(self._rides)

    def report_info(
        self, file: Optional[TextIO] = None, engine: Optional[PricingEngine] = None
    ) -> None:
        out = file or sys.stdout
        print(
            f"Driver ID: {self.driver_id} | Name: {self.name}"
            f" | Rating: {self.rating:.2f}",
            file=out,
        )
        print(f"Assigned rides: {len(self._rides)}", file=out)
        for ride in self._rides:
            ride.describe(out, engine)


@dataclass
class Rider:
    rider_id: int
    name: str
    _rides: list[Ride] = field(default_factory=list, init=False, repr=False)

    @property
    def rides(self) -> tuple[Ride, ...]:
        return tuple(self._rides)

    def request_ride(self, ride: Ride) -> None:
        self._rides.append(ride)
        logger.debug("Ride %d requested by rider %d", ride.ride_id, self.rider_id)

    def report_history(
        self, file: Optional[TextIO] = None, engine: Optional[PricingEngine] = None
    ) -> None:
        out = file or sys.stdout
        print(f"Rider ID: {self.rider_id} | Name: {self.name}", file=out)
        print(f"Requested rides: {len(self._rides)}", file=out)
        for ride in self._rides:
            ride.describe(out, engine)
