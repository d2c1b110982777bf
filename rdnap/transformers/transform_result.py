from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import geopandas as gpd
import pandas as pd

from rdnap.constructs.coordinate import GeodeticCoordinate
from rdnap.utils.crs import ETRS89_CRS
from rdnap.utils.exceptions import InvalidArgument


@dataclass
class TransformResult:
    coordinates: List[GeodeticCoordinate]

    @property
    def crs(self):
        return ETRS89_CRS

    def __len__(self):
        return len(self.coordinates)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Convert the transformed coordinates to a pandas DataFrame.

        Each row represents one input point. The coordinate ids of the input survey
        are kept in the coordinate_id column.

        Returns:
            A pandas DataFrame with columns coordinate_id, latitude, longitude and height

        Examples:
            >>> result = transformer.transform_survey(survey)
            >>> df = result.to_dataframe()
            >>> df.to_csv('etrs89.csv', index=False)
        """
        df = pd.DataFrame(
            [c._asdict() for c in self.coordinates],
            columns=["coordinate_id", "latitude", "longitude", "height"],
        )

        return df

    def to_geodataframe(self) -> gpd.GeoDataFrame:
        """
        Convert the transformed coordinates to a GeoDataFrame with point geometries.

        Returns:
            A GeoDataFrame with the columns of to_dataframe and a point geometry
            (longitude, latitude) in ETRS89 (EPSG:4258)

        Examples:
            >>> gdf = transformer.transform_survey(survey).to_geodataframe()
            >>> gdf.to_file('etrs89.geojson', driver='GeoJSON')
        """
        df = self.to_dataframe()
        gdf = gpd.GeoDataFrame(
            df,
            geometry=gpd.points_from_xy(df["longitude"], df["latitude"]),
            crs=self.crs,
        )

        return gdf


@dataclass
class ConversionResult:
    """
    The outcome of converting a single RD coordinate: either a coordinate or an error.

    Exactly one of coordinate and error is set. Callers can inspect the structured
    fields of the error (coordinate, value, valid_range) instead of catching exceptions.

    Examples:
        >>> from rdnap import try_from_rd
        >>> result = try_from_rd(400.0, 463.0)
        >>> if result.is_failure():
        ...     print(result.error.coordinate, result.error.value)
        x 400.0
    """

    coordinate: Optional[GeodeticCoordinate] = None
    error: Optional[InvalidArgument] = None

    @classmethod
    def success(cls, coordinate: GeodeticCoordinate) -> ConversionResult:
        return cls(coordinate=coordinate)

    @classmethod
    def failure(cls, error: InvalidArgument) -> ConversionResult:
        return cls(error=error)

    def is_success(self) -> bool:
        return self.error is None

    def is_failure(self) -> bool:
        return self.error is not None

    def unwrap(self) -> GeodeticCoordinate:
        """
        Get the converted coordinate.

        Raises:
            InvalidArgument: The stored error, if the conversion failed
        """
        if self.error is not None:
            raise self.error
        return self.coordinate
