import math

from features.common.models.query_types import UnitSystem

METERS_PER_KILOMETER = 1000.0
METERS_PER_MILE = 1609.344  # international mile, used for radius and display alike

class UnitConversions:
    """Centralized utility for distance unit conversions."""

    @staticmethod
    def meters_per_unit(units: UnitSystem) -> float:
        """Meters in one kilometer or one mile."""
        if units == UnitSystem.IMPERIAL:
            return METERS_PER_MILE
        return METERS_PER_KILOMETER

    @staticmethod
    def to_meters(value: float, units: UnitSystem) -> float:
        """Convert kilometers or miles to meters."""
        return value * UnitConversions.meters_per_unit(units)

    @staticmethod
    def from_meters(meters: float, units: UnitSystem) -> int:
        """Convert meters to whole kilometers or miles, rounded up for display."""
        # Round off float noise first so a radius converted back displays as itself
        value = round(meters / UnitConversions.meters_per_unit(units), 9)
        return math.ceil(value)
