"""
Node models for the road network graph.
Defines geographic coordinates, graph vertices and the great-circle distance.
"""

from dataclasses import dataclass
from typing import Generic, Optional, Tuple, TypeVar

from ..config import EARTH_RADIUS_M
from .numeric import Numeric, PYTHON_FLOAT, numeric_for


T = TypeVar('T')


@dataclass(frozen=True)
class Coord(Generic[T]):
    """A point in decimal degrees (WGS84 assumed, not checked)."""
    lon: T
    lat: T

    @property
    def pos(self) -> Tuple[T, T]:
        """Return the position as a (lon, lat) tuple."""
        return (self.lon, self.lat)


@dataclass
class Node(Generic[T]):
    """A vertex of the road graph."""
    id: int
    coord: Coord[T]
    uses: int = 0  # Maintained by topology building, stored as is

    @classmethod
    def new(cls, numeric: Numeric = PYTHON_FLOAT) -> 'Node':
        """Create the zero node: id 0 at (0, 0), never used."""
        zero = numeric.from_literal(0.0)
        return cls(id=0, coord=Coord(lon=zero, lat=zero), uses=0)

    def distance_to(self, other: 'Node[T]') -> T:
        """Great-circle distance to another node in meters."""
        return distance(self.coord, other.coord)


def distance(start: Coord[T], end: Coord[T],
             numeric: Optional[Numeric] = None) -> T:
    """
    Great-circle distance between two coordinates in meters.

    Haversine formula on a sphere of radius EARTH_RADIUS_M. The atan2 form
    stays accurate for coincident and antipodal points. Invalid input
    (NaN, |lat| > 90) yields NaN instead of raising.

    Args:
        start: First coordinate
        end: Second coordinate
        numeric: Number capability; resolved from start.lon when omitted

    Returns:
        Distance in the coordinates' number type.
    """
    if numeric is None:
        numeric = numeric_for(start.lon)

    r = numeric.from_literal(EARTH_RADIUS_M)
    one = numeric.from_literal(1.0)
    two = numeric.from_literal(2.0)

    d_lon = numeric.to_radians(end.lon - start.lon)
    d_lat = numeric.to_radians(end.lat - start.lat)
    lat1 = numeric.to_radians(start.lat)
    lat2 = numeric.to_radians(end.lat)

    sin_dlat = numeric.sin(d_lat / two)
    sin_dlon = numeric.sin(d_lon / two)
    # cos product first so that swapping start and end gives the same bits
    cos_lat = numeric.cos(lat1) * numeric.cos(lat2)

    a = sin_dlat * sin_dlat + sin_dlon * sin_dlon * cos_lat
    c = two * numeric.atan2(numeric.sqrt(a), numeric.sqrt(one - a))

    return r * c
