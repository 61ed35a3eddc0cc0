"""
roadgraph - Road network graph model

Nodes and edges of a routable road graph, great-circle edge lengths
and WKT serialization of edge shapes.
"""

import logging

from . import config

__version__ = '1.0.0'
__author__ = 'roadgraph contributors'

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
_logger.setLevel(config.LOG_LEVEL)
