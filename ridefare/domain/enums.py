"""Domain enumerations."""

import enum


class RideType(str, enum.Enum):
    DEFAULT = "DEFAULT"
    STANDARD = "STANDARD"
    PREMIUM = "PREMIUM"

    @property
    def tag(self) -> str:
        """Prefix shown in front of a ride's details line."""
        return RIDE_TAGS[self]


# Default rides are printed without a tag
RIDE_TAGS: dict[RideType, str] = {
    RideType.DEFAULT: "",
    RideType.STANDARD: "[Standard]",
    RideType.PREMIUM: "[Premium]",
}
