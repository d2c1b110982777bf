"""Coordinate Reference System (CRS) constants used throughout rdnap.

- RD_CRS: Amersfoort / RD New planar coordinates (EPSG:28992)
- ETRS89_CRS: ETRS89 geographic coordinates (EPSG:4258)
"""

from pyproj import CRS

# Dutch national grid (Rijksdriehoeksmeting), Bessel 1841 ellipsoid
# Coordinates are in meters (easting, northing); rdnap's public API uses kilometers
RD_CRS = CRS(28992)

# ETRS89 latitude/longitude, the frame every transformation result is given in
# Fixed to the Eurasian plate; differs from WGS84 by a few decimeters
ETRS89_CRS = CRS(4258)
