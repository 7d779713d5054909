"""
Demonstration scenario
======================

Builds four sample rides, assigns two to a driver and has a rider request
the other two, then prints every ride, the driver report with average
earnings, and the rider history.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from ridefare.config import settings
from ridefare.domain.entities import Driver, Ride, Rider
from ridefare.domain.enums import RideType
from ridefare.infrastructure.repositories import RideRepository
from ridefare.reporting.schemas import (
    DemoReport,
    DriverReport,
    RiderReport,
    RideSummary,
)

logger = logging.getLogger(__name__)


SAMPLE_RIDES = [
    {"ride_id": 101, "ride_type": RideType.STANDARD, "pickup": "Downtown", "dropoff": "Airport", "distance_miles": 12.3},
    {"ride_id": 102, "ride_type": RideType.PREMIUM, "pickup": "Home", "dropoff": "Office", "distance_miles": 5.5},
    {"ride_id": 103, "ride_type": RideType.STANDARD, "pickup": "Mall", "dropoff": "Train Station", "distance_miles": 3.2},
    {"ride_id": 104, "ride_type": RideType.PREMIUM, "pickup": "Hotel", "dropoff": "Beach", "distance_miles": 8.75},
]

DRIVER = {"driver_id": 1, "name": "Asha Kumar", "rating": 4.92}
DRIVER_RIDE_IDS = (101, 103)

RIDER = {"rider_id": 5001, "name": "Jordan Reddy"}
RIDER_RIDE_IDS = (102, 104)


def build_sample_rides(repo: RideRepository) -> list[Ride]:
    for r in SAMPLE_RIDES:
        repo.add(Ride(**r))
    return repo.get_all()


def build_scenario() -> tuple[RideRepository, Driver, Rider]:
    """Populate a repository and wire the sample driver and rider to it."""
    repo = RideRepository()
    build_sample_rides(repo)

    driver = Driver(**DRIVER)
    for ride_id in DRIVER_RIDE_IDS:
        driver.assign_ride(repo.get_by_id(ride_id))

    rider = Rider(**RIDER)
    for ride_id in RIDER_RIDE_IDS:
        rider.request_ride(repo.get_by_id(ride_id))

    return repo, driver, rider


def run_demo(file: Optional[TextIO] = None) -> None:
    out = file or sys.stdout
    repo, driver, rider = build_scenario()

    print("=== All rides ===", file=out)
    for ride in repo.get_all():
        ride.describe(out)

    print("\n=== Driver info and rides ===", file=out)
    driver.report_info(out)
    print(f"Average earnings per ride: ${driver.average_earnings():.2f}", file=out)

    print("\n=== Rider ride history ===", file=out)
    rider.report_history(out)


def build_report() -> DemoReport:
    repo, driver, rider = build_scenario()
    return DemoReport(
        rides=[RideSummary.from_ride(r) for r in repo.get_all()],
        drivers=[DriverReport.from_driver(driver)],
        riders=[RiderReport.from_rider(rider)],
    )


def main() -> int:
    logging.basicConfig(level=settings.log_level)
    logger.info("Running demo (format=%s)", settings.report_format)

    if settings.report_format == "json":
        print(build_report().model_dump_json(indent=2))
    else:
        run_demo()

    logger.info("Demo finished")
    return 0
