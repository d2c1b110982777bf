from typing import Tuple

from rdnap.constructs.coordinate import PlanarCoordinate
from rdnap.transformers.approximate.approximate import ApproximateTransformer
from rdnap.transformers.transform_result import ConversionResult
from rdnap.utils.exceptions import InvalidArgument

_transformer = ApproximateTransformer()


def from_rd(x: float, y: float, h: float = 0.0) -> Tuple[float, float, float]:
    """
    Convert RD/NAP coordinates to ETRS89 latitude, longitude and height.

    Args:
        x: The RD x coordinate in kilometers, between -7 and 300
        y: The RD y coordinate in kilometers, between 289 and 629
        h: The height above NAP in meters. Default is 0.

    Returns:
        A tuple (latitude, longitude, height): ETRS89 degrees and meters above the ETRS89 ellipsoid

    Raises:
        InvalidArgument: If x or y is outside its valid range

    Examples:
        >>> from rdnap import from_rd
        >>> lat, lon, h = from_rd(150, 480, -2.75)
    """
    return _transformer.transform(PlanarCoordinate(x, y, h)).to_tuple()


def try_from_rd(x: float, y: float, h: float = 0.0) -> ConversionResult:
    """
    Convert RD/NAP coordinates to ETRS89, returning validation failures instead of raising them.

    Args:
        x: The RD x coordinate in kilometers
        y: The RD y coordinate in kilometers
        h: The height above NAP in meters. Default is 0.

    Returns:
        A ConversionResult holding either the GeodeticCoordinate or the InvalidArgument error
    """
    try:
        coord = _transformer.transform(PlanarCoordinate(x, y, h))
    except InvalidArgument as e:
        return ConversionResult.failure(e)

    return ConversionResult.success(coord)
