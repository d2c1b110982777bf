"""Fixed parameters of the approximate RD to ETRS89 transformation.

Source: rdnap.nl, "Transformatie tussen ETRS89 en RD/NAP" (rdnaptrans.pdf).
The polynomial coefficients are the result of a least-squares fit and must be
reproduced exactly.
"""

from types import MappingProxyType

from rdnap.constructs.coordinate import CartesianCoordinate
from rdnap.constructs.ellipsoid import EllipsoidParameters, HelmertParameters
from rdnap.utils.geo import dms_to_arcseconds

# Valid input domain in kilometers, bounds inclusive
X_RANGE = (-7.0, 300.0)
Y_RANGE = (289.0, 629.0)

# RD origin (Onze Lieve Vrouwetoren, Amersfoort) in kilometers, used to normalise input
X_ORIGIN = 155.0
Y_ORIGIN = 463.0

# Bessel latitude/longitude of the RD origin in arc-seconds
LATITUDE_ORIGIN = dms_to_arcseconds(52, 9, 22.178)
LONGITUDE_ORIGIN = dms_to_arcseconds(5, 23, 15.5)

# (m, n) -> coefficient of x'^m * y'^n, in arc-seconds
LATITUDE_COEFFICIENTS = MappingProxyType(
    {
        (0, 1): 3236.0331637,
        (2, 0): -32.5915821,
        (0, 2): -0.2472814,
        (2, 1): -0.8501341,
        (0, 3): -0.0655238,
        (2, 2): -0.0171137,
        (4, 0): 0.0052771,
        (2, 3): -0.0003859,
        (4, 1): 0.0003314,
        (0, 4): 0.0000371,
        (4, 2): 0.0000143,
        (2, 4): -0.0000090,
    }
)

LONGITUDE_COEFFICIENTS = MappingProxyType(
    {
        (1, 0): 5261.3028966,
        (1, 1): 105.9780241,
        (1, 2): 2.4576469,
        (3, 0): -0.8192156,
        (3, 1): -0.0560092,
        (1, 3): 0.0560089,
        (3, 2): -0.0025614,
        (1, 4): 0.0012770,
        (5, 0): 0.0002574,
        (3, 3): -0.0000973,
        (5, 1): 0.0000293,
        (1, 5): 0.0000291,
    }
)

BESSEL_1841 = EllipsoidParameters(
    semi_major_axis=6377397.155,
    eccentricity_squared=6674372e-9,
    inverse_flattening=299.1528128,
)

ETRS89 = EllipsoidParameters(
    semi_major_axis=6378137.0,
    eccentricity_squared=6694380e-9,
    inverse_flattening=298.257222101,
)

# Geocentric position of Amersfoort on the Bessel ellipsoid
AMERSFOORT_BESSEL = CartesianCoordinate(3903453.148, 368135.313, 5012970.306)

BESSEL_TO_ETRS89 = HelmertParameters(
    tx=593.032,
    ty=26.0,
    tz=478.741,
    a=1.9848e-6,
    b=-1.7439e-6,
    c=9.0587e-6,
    d=4.0772e-6,
    centre=AMERSFOORT_BESSEL,
)
