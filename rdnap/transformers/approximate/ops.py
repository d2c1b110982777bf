import logging
from typing import Mapping, Tuple

import numpy as np

from rdnap.constructs.coordinate import CartesianCoordinate
from rdnap.constructs.ellipsoid import EllipsoidParameters, HelmertParameters
from rdnap.transformers.approximate.constants import (
    LATITUDE_COEFFICIENTS,
    LATITUDE_ORIGIN,
    LONGITUDE_COEFFICIENTS,
    LONGITUDE_ORIGIN,
    X_ORIGIN,
    Y_ORIGIN,
)
from rdnap.utils.exceptions import ConvergenceError

log = logging.getLogger(__name__)

# Every stage accepts python floats as well as numpy arrays of equal shape.


def normalize_rd(x, y):
    """
    Convert RD kilometers into the offsets the polynomial series is defined on.

    Args:
        x: The RD x coordinate in kilometers
        y: The RD y coordinate in kilometers

    Returns:
        A tuple (x', y') of offsets from the RD origin in units of 100 km
    """
    return x / 100 - X_ORIGIN / 100, y / 100 - Y_ORIGIN / 100


def _evaluate_series(origin: float, coefficients: Mapping[Tuple[int, int], float], x, y):
    total = origin
    for (m, n), c in coefficients.items():
        total = total + c * x**m * y**n

    return total


def rd_to_bessel(
    x,
    y,
    latitude_coefficients: Mapping[Tuple[int, int], float] = LATITUDE_COEFFICIENTS,
    longitude_coefficients: Mapping[Tuple[int, int], float] = LONGITUDE_COEFFICIENTS,
):
    """
    Approximate the Bessel latitude and longitude of a normalised RD position.

    Each coefficient table maps an exponent pair (m, n) to the coefficient of
    the term x'^m * y'^n. The terms are added to the latitude/longitude of the
    RD origin in the iteration order of the tables.

    Args:
        x: The normalised x offset, see normalize_rd
        y: The normalised y offset, see normalize_rd
        latitude_coefficients: The latitude series. Defaults to the published table.
        longitude_coefficients: The longitude series. Defaults to the published table.

    Returns:
        A tuple (latitude, longitude) on the Bessel ellipsoid, in arc-seconds
    """
    latitude = _evaluate_series(LATITUDE_ORIGIN, latitude_coefficients, x, y)
    longitude = _evaluate_series(LONGITUDE_ORIGIN, longitude_coefficients, x, y)

    return latitude, longitude


def ellipsoid_to_cartesian(
    latitude, longitude, height, ellipsoid: EllipsoidParameters
) -> CartesianCoordinate:
    """
    Convert ellipsoidal coordinates to geocentric cartesian coordinates.

    Args:
        latitude: The latitude in degrees
        longitude: The longitude in degrees
        height: The height above the ellipsoid in meters
        ellipsoid: The ellipsoid the latitude and longitude refer to

    Returns:
        The geocentric position in meters
    """
    phi = np.radians(latitude)
    lam = np.radians(longitude)
    sinphi = np.sin(phi)
    cosphi = np.cos(phi)

    e2 = ellipsoid.eccentricity_squared
    n = ellipsoid.semi_major_axis / np.sqrt(1 - e2 * sinphi * sinphi)

    return CartesianCoordinate(
        x=(n + height) * cosphi * np.cos(lam),
        y=(n + height) * cosphi * np.sin(lam),
        z=(n * (1 - e2) + height) * sinphi,
    )


def transform_datum(
    coord: CartesianCoordinate, params: HelmertParameters
) -> CartesianCoordinate:
    """
    Apply a small-angle Helmert transformation around the parameter set's centre.

    Only valid for rotations and scale differences in the order of parts per
    million; do not use this for large rotations.

    Args:
        coord: The geocentric position in the source frame
        params: The transformation parameters, including the centre of rotation

    Returns:
        The geocentric position in the target frame
    """
    dx = coord.x - params.centre.x
    dy = coord.y - params.centre.y
    dz = coord.z - params.centre.z

    return CartesianCoordinate(
        x=coord.x + params.d * dx + params.c * dy - params.b * dz + params.tx,
        y=coord.y - params.c * dx + params.d * dy + params.a * dz + params.ty,
        z=coord.z + params.b * dx - params.a * dy + params.d * dz + params.tz,
    )


def solve_latitude(
    z,
    r,
    ellipsoid: EllipsoidParameters,
    tolerance: float = 1e-8,
    max_iterations: int = 100,
):
    """
    Find the geodetic latitude of a geocentric position by fixed-point iteration.

    Starting from latitude 0, the estimate is refined until it changes by no more
    than `tolerance` radians. For array input every element has to settle.

    Args:
        z: The geocentric Z coordinate in meters
        r: The distance to the polar axis, sqrt(x² + y²), in meters
        ellipsoid: The ellipsoid to solve on
        tolerance: The convergence threshold in radians. Default is 1e-8.
        max_iterations: The maximum number of iterations. Default is 100.

    Returns:
        A tuple (phi, n, iterations): the latitude in radians, the prime vertical
        radius of curvature at that latitude, and the number of iterations used

    Raises:
        ConvergenceError: If the latitude did not settle within max_iterations
    """
    a = ellipsoid.semi_major_axis
    e2 = ellipsoid.eccentricity_squared

    phi = np.zeros_like(r)
    n_sinphi = z
    residual = np.inf

    for iteration in range(1, max_iterations + 1):
        previous = phi
        phi = np.arctan2(z + e2 * n_sinphi, r)
        sinphi = np.sin(phi)
        n = a / np.sqrt(1 - e2 * sinphi * sinphi)
        n_sinphi = n * sinphi

        residual = np.max(np.abs(phi - previous))
        if residual <= tolerance:
            log.debug(f"latitude converged after {iteration} iterations")
            return phi, n, iteration

    raise ConvergenceError(max_iterations, float(residual))


def cartesian_to_ellipsoid(
    coord: CartesianCoordinate,
    ellipsoid: EllipsoidParameters,
    tolerance: float = 1e-8,
    max_iterations: int = 100,
):
    """
    Convert geocentric cartesian coordinates to ellipsoidal coordinates.

    The longitude follows directly; the latitude is found iteratively with
    solve_latitude.

    Args:
        coord: The geocentric position in meters
        ellipsoid: The ellipsoid to express the result on
        tolerance: The convergence threshold of the latitude solver, in radians
        max_iterations: The iteration cap of the latitude solver

    Returns:
        A tuple (latitude, longitude, height): degrees, degrees, meters above the ellipsoid

    Raises:
        ConvergenceError: If the latitude solver did not settle
    """
    longitude = np.arctan2(coord.y, coord.x)
    r = np.sqrt(coord.x * coord.x + coord.y * coord.y)

    phi, n, _ = solve_latitude(coord.z, r, ellipsoid, tolerance, max_iterations)

    height = r / np.cos(phi) - n

    return np.degrees(phi), np.degrees(longitude), height
