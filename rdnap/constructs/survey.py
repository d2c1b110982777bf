from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import List, Optional, Union

import numpy as np
import pandas as pd
from geopandas import GeoDataFrame, points_from_xy
from pyproj import CRS

from rdnap.constructs.coordinate import PlanarCoordinate
from rdnap.utils.crs import RD_CRS
from rdnap.utils.keys import DEFAULT_H_COLUMN, DEFAULT_X_COLUMN, DEFAULT_Y_COLUMN


class Survey:
    """
    A collection of points in the Dutch national grid (RD) with heights above NAP.

    A Survey wraps a GeoDataFrame of point geometries in RD meters (EPSG:28992)
    with a height column, and is the batch input for RD transformations.

    The underlying GeoDataFrame must have unique indices - duplicate indices will raise
    an IndexError during initialization. The index values are used as coordinate ids.

    Attributes:
        coords: A list of PlanarCoordinate objects, one per point, in kilometers
        crs: The coordinate reference system of the survey (always RD New)
        index: The pandas Index from the underlying GeoDataFrame

    Examples:
        >>> import pandas as pd
        >>> from rdnap.constructs.survey import Survey
        >>>
        >>> df = pd.DataFrame({
        ...     'x': [121.687, 92.565, 176.331],
        ...     'y': [487.484, 437.428, 317.462],
        ... }, index=['amsterdam', 'rotterdam', 'maastricht'])
        >>> survey = Survey.from_dataframe(df)
        >>> survey.coords[0].coordinate_id
        'amsterdam'
    """

    _frame: GeoDataFrame

    def __init__(self, frame: GeoDataFrame):
        if frame.index.has_duplicates:
            duplicates = frame.index[frame.index.duplicated()].values
            raise IndexError(
                f"Survey cannot have duplicates in the index but found {duplicates}"
            )
        if DEFAULT_H_COLUMN not in frame.columns:
            raise ValueError(f"Survey frame needs a '{DEFAULT_H_COLUMN}' column")
        self._frame = frame

    def __getitem__(self, i) -> Survey:
        if isinstance(i, int):
            i = [i]
        new_frame = self._frame.iloc[i]
        return Survey(new_frame)

    def __add__(self, other: Survey) -> Survey:
        new_frame = pd.concat([self._frame, other._frame])
        return Survey(new_frame)

    def __len__(self):
        """Number of points."""
        return len(self._frame)

    def __str__(self):
        output_lines = [
            "rdnap Survey object",
            f"frame: {self._frame}",
        ]
        return "\n".join(output_lines)

    def __repr__(self):
        return self.__str__()

    @property
    def index(self) -> pd.Index:
        """Get index to underlying GeoDataFrame."""
        return self._frame.index

    @property
    def crs(self) -> CRS:
        """Get Coordinate Reference System(CRS) to underlying GeoDataFrame."""
        return self._frame.crs

    @property
    def x(self) -> np.ndarray:
        """RD x coordinates in kilometers."""
        return self._frame.geometry.x.to_numpy() / 1000

    @property
    def y(self) -> np.ndarray:
        """RD y coordinates in kilometers."""
        return self._frame.geometry.y.to_numpy() / 1000

    @property
    def h(self) -> np.ndarray:
        """Heights above NAP in meters."""
        return self._frame[DEFAULT_H_COLUMN].to_numpy(dtype=float)

    @cached_property
    def coords(self) -> List[PlanarCoordinate]:
        """
        Get all points in the survey as PlanarCoordinate objects.

        The index values are preserved as coordinate ids. The result is cached.

        Returns:
            A list of PlanarCoordinate objects in kilometers, ordered by the survey index
        """
        coords_list = [
            PlanarCoordinate(x, y, h, i)
            for i, x, y, h in zip(self._frame.index, self.x, self.y, self.h)
        ]
        return coords_list

    @classmethod
    def from_coordinates(cls, coords: List[PlanarCoordinate]) -> Survey:
        """
        Create a survey from a list of PlanarCoordinate objects.

        Coordinate ids become the index; if none of the coordinates carry an id,
        a simple range index is used.

        Args:
            coords: The points to include

        Returns:
            A new Survey instance
        """
        ids = [c.coordinate_id for c in coords]
        index = None if all(i is None for i in ids) else ids
        frame = GeoDataFrame(
            {DEFAULT_H_COLUMN: [float(c.h) for c in coords]},
            geometry=[c.geom for c in coords],
            index=index,
            crs=RD_CRS,
        )
        return Survey(frame)

    @classmethod
    def from_dataframe(
        cls,
        dataframe: pd.DataFrame,
        x_column: str = DEFAULT_X_COLUMN,
        y_column: str = DEFAULT_Y_COLUMN,
        h_column: Optional[str] = None,
        kilometers: bool = True,
    ) -> Survey:
        """
        Create a survey from a pandas DataFrame with RD x/y columns.

        Args:
            dataframe: A pandas DataFrame containing RD coordinates
            x_column: The name of the column containing x values. Default is "x".
            y_column: The name of the column containing y values. Default is "y".
            h_column: The name of the column containing heights above NAP in meters. If None, a "h" column is used when present, otherwise heights default to 0.
            kilometers: If True, x and y are given in kilometers; if False, in meters (EPSG:28992). Default is True.

        Returns:
            A new Survey instance

        Raises:
            ValueError: If the x, y or requested height column is missing

        Examples:
            >>> df = pd.DataFrame({'X': [121687.0], 'Y': [487484.0]})
            >>> survey = Survey.from_dataframe(df, x_column='X', y_column='Y', kilometers=False)
        """
        missing = [c for c in (x_column, y_column) if c not in dataframe.columns]
        if h_column is not None and h_column not in dataframe.columns:
            missing.append(h_column)
        if missing:
            raise ValueError(f"Could not find columns {missing} in the dataframe")

        if h_column is None and DEFAULT_H_COLUMN in dataframe.columns:
            h_column = DEFAULT_H_COLUMN

        scale = 1000 if kilometers else 1
        if h_column is None:
            heights = np.zeros(len(dataframe))
        else:
            heights = dataframe[h_column].to_numpy(dtype=float)

        frame = GeoDataFrame(
            {DEFAULT_H_COLUMN: heights},
            geometry=points_from_xy(
                dataframe[x_column] * scale, dataframe[y_column] * scale
            ),
            index=dataframe.index,
            crs=RD_CRS,
        )

        return Survey(frame)

    @classmethod
    def from_csv(
        cls,
        file: Union[str, Path],
        x_column: str = DEFAULT_X_COLUMN,
        y_column: str = DEFAULT_Y_COLUMN,
        h_column: Optional[str] = None,
        kilometers: bool = True,
    ) -> Survey:
        """
        Create a survey from a CSV file containing RD coordinates.

        Args:
            file: Path to the CSV file (as string or Path object)
            x_column: The name of the column containing x values. Default is "x".
            y_column: The name of the column containing y values. Default is "y".
            h_column: The name of the column containing heights above NAP. See from_dataframe.
            kilometers: If True, x and y are given in kilometers; if False, in meters. Default is True.

        Returns:
            A new Survey instance with points from the CSV file

        Raises:
            FileNotFoundError: If the specified file does not exist
            TypeError: If the file does not have a .csv extension
            ValueError: If the specified columns are not found in the CSV

        Examples:
            >>> survey = Survey.from_csv('benchmarks.csv', x_column='rd_x', y_column='rd_y', h_column='nap')
        """
        filepath = Path(file)
        if not filepath.is_file():
            raise FileNotFoundError(file)
        elif not filepath.suffix == ".csv":
            raise TypeError(
                f"file of type {filepath.suffix} does not appear to be a csv file"
            )

        df = pd.read_csv(filepath)
        return Survey.from_dataframe(df, x_column, y_column, h_column, kilometers)
