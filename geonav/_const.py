"""
Constants declarations for geonav
"""

# Mean Earth Radius (spherical model)
EARTH_RADIUS_MILES = 3956.0
EARTH_RADIUS_KILOMETERS = 6367.0
EARTH_RADIUS_METERS = EARTH_RADIUS_KILOMETERS * 1000
