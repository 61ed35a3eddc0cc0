"""
Edge model for the road network graph.
Represents a road segment between two nodes with its shape and attributes.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, TypeVar

from .node import Coord, distance
from .numeric import Numeric, PYTHON_FLOAT, numeric_for


T = TypeVar('T')

# Attributes attached by the road classifier. Stored, never read.
EdgeProperties = Any


@dataclass
class Edge(Generic[T]):
    """A road segment of the network."""
    id: int
    source: int  # Node id
    target: int  # Node id
    geometry: List[Coord[T]] = field(default_factory=list)  # source to target
    properties: EdgeProperties = None

    def _numeric(self, numeric: Optional[Numeric]) -> Numeric:
        if numeric is not None:
            return numeric
        if not self.geometry:
            return PYTHON_FLOAT
        return numeric_for(self.geometry[0].lon)

    def length(self, numeric: Optional[Numeric] = None) -> T:
        """
        Length of the edge in meters.

        Sum of the great-circle distances between consecutive points of the
        geometry. Zero when the geometry has fewer than two points.
        """
        numeric = self._numeric(numeric)
        return numeric.sum(
            distance(start, end, numeric)
            for start, end in zip(self.geometry, self.geometry[1:])
        )

    def as_wkt(self, numeric: Optional[Numeric] = None) -> str:
        """Geometry in the well-known text format, e.g. LINESTRING(lon lat, ...)."""
        numeric = self._numeric(numeric)
        coords = [
            f"{numeric.format(coord.lon)} {numeric.format(coord.lat)}"
            for coord in self.geometry
        ]
        return f"LINESTRING({', '.join(coords)})"
