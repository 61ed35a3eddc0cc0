"""
Constants shared by the road graph models.
"""

import os

# Spherical Earth radius used by distance(), in meters
EARTH_RADIUS_M = 6378100.0

# Digits after the decimal point in WKT coordinates
WKT_DECIMALS = 7

# Literals every numeric capability must convert exactly
NUMERIC_LITERALS = (0.0, 1.0, 2.0, EARTH_RADIUS_M)

# Level of the "roadgraph" logger (can be overridden by environment variable)
LOG_LEVEL = os.getenv('ROADGRAPH_LOG_LEVEL', 'WARNING').upper()
