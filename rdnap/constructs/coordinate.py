from __future__ import annotations

import math
from typing import Any, NamedTuple, Tuple

from pyproj import CRS, Transformer
from pyproj.exceptions import ProjError
from shapely.geometry import Point

from rdnap.utils.crs import ETRS89_CRS, RD_CRS


class PlanarCoordinate(NamedTuple):
    """
    A point in the Dutch national grid (RD) with an optional height above NAP.

    The horizontal position is expressed in kilometers, which is the unit the
    approximate RD to ETRS89 transformation is defined in. The height is given
    in meters above Normaal Amsterdams Peil (NAP).

    Attributes:
        x: The RD x coordinate (easting) in kilometers
        y: The RD y coordinate (northing) in kilometers
        h: The height above NAP in meters. Default is 0.
        coordinate_id: An optional identifier for the point (any hashable value)

    Examples:
        >>> from rdnap.constructs.coordinate import PlanarCoordinate
        >>> # The church tower of Amersfoort, the origin of the RD grid
        >>> origin = PlanarCoordinate(155.0, 463.0)
        >>> origin.geom.x, origin.geom.y
        (155000.0, 463000.0)

        >>> # Most Dutch datasets use meters
        >>> dam = PlanarCoordinate.from_meters(121687, 487484)
        >>> dam.x
        121.687
    """

    x: float
    y: float
    h: float = 0.0
    coordinate_id: Any = None

    def __repr__(self):
        return (
            f"PlanarCoordinate(coordinate_id={self.coordinate_id}, "
            f"x={self.x}, y={self.y}, h={self.h})"
        )

    @classmethod
    def from_meters(
        cls, x: float, y: float, h: float = 0.0, coordinate_id: Any = None
    ) -> PlanarCoordinate:
        """
        Create a coordinate from RD values in meters, as used by EPSG:28992.

        Args:
            x: The RD x coordinate in meters
            y: The RD y coordinate in meters
            h: The height above NAP in meters. Default is 0.
            coordinate_id: An optional identifier for the point

        Returns:
            A new PlanarCoordinate with x and y converted to kilometers
        """
        return cls(x / 1000, y / 1000, h, coordinate_id)

    @property
    def geom(self) -> Point:
        """The horizontal position as a shapely Point in RD meters."""
        return Point(self.x * 1000, self.y * 1000)

    @property
    def crs(self) -> CRS:
        return RD_CRS


class GeodeticCoordinate(NamedTuple):
    """
    A point on the ETRS89 ellipsoid: latitude and longitude in degrees plus height in meters.

    This is the output of every RD transformation. Note that the height is measured
    above the ETRS89 ellipsoid, not above NAP; in the Netherlands the two differ by
    roughly 40 meters.

    Attributes:
        latitude: The ETRS89 latitude in decimal degrees
        longitude: The ETRS89 longitude in decimal degrees
        height: The height above the ETRS89 ellipsoid in meters
        coordinate_id: The identifier carried over from the input PlanarCoordinate

    Examples:
        >>> from rdnap import from_rd
        >>> from rdnap.constructs.coordinate import GeodeticCoordinate
        >>> coord = GeodeticCoordinate(*from_rd(155.0, 463.0))
        >>> web_mercator = coord.project('EPSG:3857')
    """

    latitude: float
    longitude: float
    height: float = 0.0
    coordinate_id: Any = None

    def __repr__(self):
        return (
            f"GeodeticCoordinate(coordinate_id={self.coordinate_id}, "
            f"latitude={self.latitude}, longitude={self.longitude}, height={self.height})"
        )

    @property
    def geom(self) -> Point:
        """The horizontal position as a shapely Point (longitude, latitude)."""
        return Point(self.longitude, self.latitude)

    @property
    def crs(self) -> CRS:
        return ETRS89_CRS

    def to_tuple(self) -> Tuple[float, float, float]:
        return self.latitude, self.longitude, self.height

    def project(self, new_crs: Any) -> Point:
        """
        Reproject the horizontal position of this coordinate to another CRS.

        The height is not transformed. Axis order is always (x, y), i.e.
        (longitude, latitude) for geographic target systems.

        Args:
            new_crs: The target CRS. Can be a pyproj.CRS object, an EPSG code as a string
                (e.g., 'EPSG:3857'), an integer EPSG code, or any CRS format that pyproj.CRS() accepts

        Returns:
            A shapely Point in the target CRS

        Raises:
            ValueError: If the new_crs cannot be parsed into a valid CRS, or if the
                transformation results in infinite coordinate values

        Examples:
            >>> coord = GeodeticCoordinate(52.1551722293, 5.3872035237, 43.348)
            >>> point = coord.project(3857)
        """
        # convert the incoming crs to an pyproj.crs.CRS object; this could fail
        try:
            new_crs = CRS(new_crs)
        except ProjError as e:
            raise ValueError(
                f"Could not parse incoming `new_crs` parameter: {new_crs}"
            ) from e

        if new_crs == self.crs:
            return self.geom

        transformer = Transformer.from_crs(self.crs, new_crs, always_xy=True)
        new_x, new_y = transformer.transform(self.longitude, self.latitude)

        if math.isinf(new_x) or math.isinf(new_y):
            raise ValueError(
                f"Unable to convert {self.crs} ({self.longitude}, {self.latitude}) -> {new_crs} ({new_x}, {new_y})"
            )

        return Point(new_x, new_y)


class CartesianCoordinate(NamedTuple):
    """
    A geocentric (earth-centred, earth-fixed) position in meters.

    The frame is implied by the ellipsoid and datum that produced it.
    """

    x: float
    y: float
    z: float
