"""
Model package for the road network graph.
"""

from .numeric import (
    Numeric, PythonFloat, NumpyFloat, NumericCapabilityError,
    PYTHON_FLOAT, FLOAT32, FLOAT64, numeric_for, register_numeric
)
from .node import Coord, Node, distance
from .edge import Edge, EdgeProperties
from .network import RoadNetwork, NetworkStats

__all__ = [
    'Numeric', 'PythonFloat', 'NumpyFloat', 'NumericCapabilityError',
    'PYTHON_FLOAT', 'FLOAT32', 'FLOAT64', 'numeric_for', 'register_numeric',
    'Coord', 'Node', 'distance',
    'Edge', 'EdgeProperties',
    'RoadNetwork', 'NetworkStats'
]
