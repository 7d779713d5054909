"""
Repository Pattern -- keeps ride storage out of the domain objects.

``RideRepository`` is an in-memory arena keyed by ride id.  Drivers and
riders hold handles to the frozen ``Ride`` values it stores, so a ride
is created once and shared read-only by every holder.
"""

from __future__ import annotations

import logging
from typing import Optional

from ridefare.domain.entities import Ride

logger = logging.getLogger(__name__)


class DuplicateRideError(ValueError):
    """Raised when a ride id is already present in the repository."""


class RideRepository:
    def __init__(self) -> None:
        self._rides: dict[int, Ride] = {}

    def add(self, ride: Ride) -> Ride:
        if ride.ride_id in self._rides:
            raise DuplicateRideError(f"Ride {ride.ride_id} already exists")
        self._rides[ride.ride_id] = ride
        logger.debug("Stored ride %d (%s)", ride.ride_id, ride.ride_type.value)
        return ride

    def get_by_id(self, ride_id: int) -> Optional[Ride]:
        return self._rides.get(ride_id)

    def get_all(self) -> list[Ride]:
        """All rides in insertion order."""
        return list(self._rides.values())

    def __len__(self) -> int:
        return len(self._rides)

    def __contains__(self, ride_id: object) -> bool:
        return ride_id in self._rides
