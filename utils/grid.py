import math

from features.common.models.query_types import Coordinate

EARTH_RADIUS_M = 6371008.8  # mean earth radius in meters

class GridUtils:
    @staticmethod
    def to_radians(degrees: float) -> float:
        """Convert degrees to radians."""
        return degrees * math.pi / 180

    @staticmethod
    def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """
        Calculate the great circle distance between two points.

        Args:
            lat1: Latitude of first point
            lon1: Longitude of first point
            lat2: Latitude of second point
            lon2: Longitude of second point

        Returns:
            Distance in meters
        """
        d_lat = GridUtils.to_radians(lat2 - lat1)
        d_lon = GridUtils.to_radians(lon2 - lon1)

        a = (math.sin(d_lat / 2) * math.sin(d_lat / 2) +
             math.cos(GridUtils.to_radians(lat1)) *
             math.cos(GridUtils.to_radians(lat2)) *
             math.sin(d_lon / 2) * math.sin(d_lon / 2))

        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return EARTH_RADIUS_M * c

    @staticmethod
    def distance(a: Coordinate, b: Coordinate) -> float:
        """Great circle distance in meters between two coordinates."""
        return GridUtils.calculate_distance(a.latitude, a.longitude, b.latitude, b.longitude)

    @staticmethod
    def within_radius(distance_m: float, radius_m: float) -> bool:
        """Whether a distance falls inside a radius, boundary included."""
        return distance_m <= radius_m
