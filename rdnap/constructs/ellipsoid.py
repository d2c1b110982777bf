from typing import NamedTuple

from rdnap.constructs.coordinate import CartesianCoordinate


class EllipsoidParameters(NamedTuple):
    """
    The shape of a reference ellipsoid.

    Attributes:
        semi_major_axis: The equatorial radius in meters
        eccentricity_squared: The square of the first eccentricity
        inverse_flattening: 1/f; informational, the conversions only use the two values above
    """

    semi_major_axis: float
    eccentricity_squared: float
    inverse_flattening: float


class HelmertParameters(NamedTuple):
    """
    A linearised 7-parameter similarity transformation between two geocentric frames.

    The rotation and scale terms are small (parts per million), which is what
    allows the transformation to be applied without trigonometry.

    Attributes:
        tx: Translation along the X axis in meters
        ty: Translation along the Y axis in meters
        tz: Translation along the Z axis in meters
        a: Rotation about the X axis (dimensionless small angle)
        b: Rotation about the Y axis (dimensionless small angle)
        c: Rotation about the Z axis (dimensionless small angle)
        d: Scale correction (dimensionless)
        centre: The centre of rotation, expressed in the source frame
    """

    tx: float
    ty: float
    tz: float
    a: float
    b: float
    c: float
    d: float
    centre: CartesianCoordinate
