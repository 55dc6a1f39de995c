"""
Constants declarations for faultoffset
"""

# GRS80 Ellipsoid Constants
GRS80_A = 6378137.0  # Major axis (meters)
GRS80_F = 1 / 298.257222101  # Flattening
GRS80_E2 = GRS80_F * (2 - GRS80_F)  # First eccentricity squared

# Mean Earth Radius, used only when projecting along a bearing
EARTH_RADIUS_KM = 6371.0
