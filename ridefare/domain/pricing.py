"""
Fare Engine  (Strategy Pattern)
===============================

Formulas
--------
* **Default**  = Rate_Per_Mile x Distance
* **Standard** = Base_Fee + Rate_Per_Mile x Distance
* **Premium**  = (Base_Fee + Rate_Per_Mile x Distance) x Premium_Multiplier

Each ride type maps to a ``FareRule`` (strategy + rates) in the engine's
formula table.  New ride types are added with ``PricingEngine.register``.

Complexity: O(1) per fare calculation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

from .enums import RideType

if TYPE_CHECKING:
    from ridefare.config import Settings


class UnknownRideTypeError(KeyError):
    """Raised when no fare rule is registered for a ride type."""


class ReadOnlyEngineError(RuntimeError):
    """Raised when registering a rule on the shared, read-only engine."""


# ── Strategy hierarchy ────────────────────────────────────────────────


class FareStrategy(ABC):
    @abstractmethod
    def calculate(
        self, distance_miles: float, base_fee: float, rate_per_mile: float
    ) -> float: ...


class StandardPricing(FareStrategy):
    def calculate(
        self, distance_miles: float, base_fee: float, rate_per_mile: float
    ) -> float:
        return base_fee + rate_per_mile * distance_miles


class PremiumPricing(FareStrategy):
    """Standard formula scaled by a premium multiplier."""

    def __init__(self, multiplier: float = 1.0):
        self.multiplier = multiplier

    def calculate(
        self, distance_miles: float, base_fee: float, rate_per_mile: float
    ) -> float:
        return (base_fee + rate_per_mile * distance_miles) * self.multiplier


# ── Formula table ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class FareRule:
    strategy: FareStrategy
    base_fee: float = 0.0
    rate_per_mile: float = 0.0

    def fare(self, distance_miles: float) -> float:
        return self.strategy.calculate(
            distance_miles, self.base_fee, self.rate_per_mile
        )


# ── Engine facade ─────────────────────────────────────────────────────


class PricingEngine:
    """High-level API used by rides and reports."""

    def __init__(
        self,
        rules: dict[RideType, FareRule] | None = None,
        read_only: bool = False,
    ):
        self._rules: dict[RideType, FareRule] = dict(rules or {})
        self.read_only = read_only

    @classmethod
    def from_settings(
        cls, settings: Settings, read_only: bool = False
    ) -> PricingEngine:
        standard = StandardPricing()
        return cls(
            {
                RideType.DEFAULT: FareRule(
                    standard, 0.0, settings.default_rate_per_mile
                ),
                RideType.STANDARD: FareRule(
                    standard,
                    settings.standard_base_fee,
                    settings.standard_rate_per_mile,
                ),
                RideType.PREMIUM: FareRule(
                    PremiumPricing(settings.premium_multiplier),
                    settings.premium_base_fee,
                    settings.premium_rate_per_mile,
                ),
            },
            read_only=read_only,
        )

    def register(self, ride_type: RideType, rule: FareRule) -> None:
        """Add or replace the fare rule for *ride_type*."""
        if self.read_only:
            raise ReadOnlyEngineError(
                "The shared engine cannot be changed; build one with "
                "PricingEngine.from_settings and register rules on that"
            )
        self._rules[ride_type] = rule

    def rule_for(self, ride_type: RideType) -> FareRule:
        try:
            return self._rules[ride_type]
        except KeyError:
            raise UnknownRideTypeError(ride_type) from None

    def fare(self, ride_type: RideType, distance_miles: float) -> float:
        return self.rule_for(ride_type).fare(distance_miles)


@lru_cache(maxsize=1)
def get_pricing_engine() -> PricingEngine:
    """
    Process-wide engine built from the loaded settings.

    Every ``Ride.fare()`` call without an explicit engine shares it, so it
    is read-only: ``register`` raises ``ReadOnlyEngineError``.
    """
    from ridefare.config import settings

    return PricingEngine.from_settings(settings, read_only=True)
