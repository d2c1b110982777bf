import random
from types import MappingProxyType
from unittest import TestCase

import numpy as np

from rdnap.constructs.coordinate import CartesianCoordinate
from rdnap.transformers.approximate.constants import (
    AMERSFOORT_BESSEL,
    BESSEL_1841,
    BESSEL_TO_ETRS89,
    ETRS89,
    LATITUDE_COEFFICIENTS,
    LATITUDE_ORIGIN,
    LONGITUDE_COEFFICIENTS,
    LONGITUDE_ORIGIN,
)
from rdnap.transformers.approximate.ops import (
    cartesian_to_ellipsoid,
    ellipsoid_to_cartesian,
    normalize_rd,
    rd_to_bessel,
    solve_latitude,
    transform_datum,
)
from rdnap.utils.exceptions import ConvergenceError

MAX_EXPECTED_ITERATIONS = 10


class TestConstants(TestCase):
    def test_origin_offsets(self):
        self.assertAlmostEqual(LATITUDE_ORIGIN, 187762.178, places=6)
        self.assertAlmostEqual(LONGITUDE_ORIGIN, 19395.5, places=6)

    def test_coefficient_tables(self):
        self.assertEqual(len(LATITUDE_COEFFICIENTS), 12)
        self.assertEqual(len(LONGITUDE_COEFFICIENTS), 12)
        self.assertEqual(LATITUDE_COEFFICIENTS[(0, 1)], 3236.0331637)
        self.assertEqual(LONGITUDE_COEFFICIENTS[(1, 0)], 5261.3028966)

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            LATITUDE_COEFFICIENTS[(9, 9)] = 1.0  # type: ignore


class TestPolynomial(TestCase):
    def test_normalize(self):
        self.assertEqual(normalize_rd(155.0, 463.0), (0.0, 0.0))
        x, y = normalize_rd(255.0, 363.0)
        self.assertAlmostEqual(x, 1.0)
        self.assertAlmostEqual(y, -1.0)

    def test_origin_maps_to_base_offsets(self):
        # every term has a non-zero exponent, so only the base offsets remain
        lat, lon = rd_to_bessel(0.0, 0.0)

        self.assertEqual(lat, LATITUDE_ORIGIN)
        self.assertEqual(lon, LONGITUDE_ORIGIN)

    def test_single_term(self):
        lat, lon = rd_to_bessel(
            0.0,
            2.0,
            latitude_coefficients={(0, 3): 1.5},
            longitude_coefficients={(0, 0): 4.0},
        )

        self.assertEqual(lat, LATITUDE_ORIGIN + 12.0)
        # zero exponents contribute a factor of exactly 1, even for a zero base
        self.assertEqual(lon, LONGITUDE_ORIGIN + 4.0)

    def test_summation_order_does_not_matter(self):
        rng = random.Random(28992)
        reversed_lat = MappingProxyType(dict(reversed(list(LATITUDE_COEFFICIENTS.items()))))
        reversed_lon = MappingProxyType(dict(reversed(list(LONGITUDE_COEFFICIENTS.items()))))
        shuffled = list(LATITUDE_COEFFICIENTS.items())
        rng.shuffle(shuffled)
        shuffled_lat = dict(shuffled)

        for x, y in [(-7, 289), (300, 629), (121.687, 487.484), (92.565, 437.428)]:
            xn, yn = normalize_rd(x, y)
            lat, lon = rd_to_bessel(xn, yn)
            lat_r, lon_r = rd_to_bessel(xn, yn, reversed_lat, reversed_lon)
            lat_s, _ = rd_to_bessel(xn, yn, shuffled_lat)
            with self.subTest(x=x, y=y):
                self.assertAlmostEqual(lat, lat_r, delta=1e-9)
                self.assertAlmostEqual(lon, lon_r, delta=1e-9)
                self.assertAlmostEqual(lat, lat_s, delta=1e-9)

    def test_every_term_is_applied_once(self):
        xn, yn = normalize_rd(250.0, 600.0)
        lat, lon = rd_to_bessel(xn, yn)

        expected_lat = LATITUDE_ORIGIN + sum(
            c * xn**m * yn**n for (m, n), c in LATITUDE_COEFFICIENTS.items()
        )
        expected_lon = LONGITUDE_ORIGIN + sum(
            c * xn**m * yn**n for (m, n), c in LONGITUDE_COEFFICIENTS.items()
        )

        self.assertAlmostEqual(lat, expected_lat, delta=1e-9)
        self.assertAlmostEqual(lon, expected_lon, delta=1e-9)

    def test_accepts_arrays(self):
        xs = np.array([-7.0, 155.0, 300.0])
        ys = np.array([289.0, 463.0, 629.0])
        lat, lon = rd_to_bessel(*normalize_rd(xs, ys))

        for i in range(3):
            lat_i, lon_i = rd_to_bessel(*normalize_rd(xs[i], ys[i]))
            self.assertAlmostEqual(lat[i], lat_i, delta=1e-9)
            self.assertAlmostEqual(lon[i], lon_i, delta=1e-9)


class TestEllipsoidConversions(TestCase):
    def test_equator_prime_meridian(self):
        coord = ellipsoid_to_cartesian(0.0, 0.0, 0.0, ETRS89)

        self.assertAlmostEqual(coord.x, ETRS89.semi_major_axis, places=6)
        self.assertAlmostEqual(coord.y, 0.0, places=6)
        self.assertAlmostEqual(coord.z, 0.0, places=6)

    def test_height_extends_along_normal(self):
        base = ellipsoid_to_cartesian(0.0, 90.0, 0.0, BESSEL_1841)
        raised = ellipsoid_to_cartesian(0.0, 90.0, 10.0, BESSEL_1841)

        self.assertAlmostEqual(raised.y - base.y, 10.0, places=6)

    def test_round_trip(self):
        for lat, lon, h in [(52.156, 5.388, 0.0), (50.5, 3.1, 120.0), (53.6, 7.6, -30.0)]:
            with self.subTest(lat=lat, lon=lon, h=h):
                coord = ellipsoid_to_cartesian(lat, lon, h, ETRS89)
                lat2, lon2, h2 = cartesian_to_ellipsoid(coord, ETRS89)
                self.assertAlmostEqual(lat2, lat, delta=1e-7)
                self.assertAlmostEqual(lon2, lon, delta=1e-10)
                self.assertAlmostEqual(h2, h, delta=1e-2)

    def test_convergence_error(self):
        coord = ellipsoid_to_cartesian(52.0, 5.0, 0.0, ETRS89)

        with self.assertRaises(ConvergenceError) as ctx:
            cartesian_to_ellipsoid(coord, ETRS89, max_iterations=1)

        self.assertEqual(ctx.exception.iterations, 1)
        self.assertIsInstance(ctx.exception, RuntimeError)


class TestSolveLatitude(TestCase):
    def test_converges_over_valid_domain(self):
        # sweep the valid RD rectangle and check the iteration count of the last stage
        xs, ys = np.meshgrid(np.linspace(-7, 300, 25), np.linspace(289, 629, 25))
        lat, lon = rd_to_bessel(*normalize_rd(xs.ravel(), ys.ravel()))
        for h in (-50.0, 0.0, 500.0):
            bessel = ellipsoid_to_cartesian(lat / 3600, lon / 3600, h, BESSEL_1841)
            etrs = transform_datum(bessel, BESSEL_TO_ETRS89)
            r = np.sqrt(etrs.x * etrs.x + etrs.y * etrs.y)
            for z_i, r_i in zip(etrs.z, r):
                _, _, iterations = solve_latitude(z_i, r_i, ETRS89)
                self.assertLessEqual(iterations, MAX_EXPECTED_ITERATIONS)

    def test_vectorised_solve_matches_scalar(self):
        coord = ellipsoid_to_cartesian(
            np.array([50.6, 52.2, 53.6]), np.array([3.1, 5.4, 7.6]), 0.0, ETRS89
        )
        r = np.sqrt(coord.x * coord.x + coord.y * coord.y)

        phi, _, _ = solve_latitude(coord.z, r, ETRS89)

        for i in range(3):
            phi_i, _, _ = solve_latitude(coord.z[i], r[i], ETRS89)
            self.assertAlmostEqual(phi[i], phi_i, delta=1e-10)


class TestTransformDatum(TestCase):
    def test_centre_is_only_translated(self):
        shifted = transform_datum(AMERSFOORT_BESSEL, BESSEL_TO_ETRS89)

        self.assertAlmostEqual(shifted.x - AMERSFOORT_BESSEL.x, BESSEL_TO_ETRS89.tx, places=6)
        self.assertAlmostEqual(shifted.y - AMERSFOORT_BESSEL.y, BESSEL_TO_ETRS89.ty, places=6)
        self.assertAlmostEqual(shifted.z - AMERSFOORT_BESSEL.z, BESSEL_TO_ETRS89.tz, places=6)

    def test_rotation_and_scale(self):
        params = BESSEL_TO_ETRS89._replace(tx=0.0, ty=0.0, tz=0.0)
        centre = params.centre
        coord = CartesianCoordinate(centre.x + 1000.0, centre.y, centre.z)

        shifted = transform_datum(coord, params)

        self.assertAlmostEqual(shifted.x - coord.x, params.d * 1000.0, places=6)
        self.assertAlmostEqual(shifted.y - coord.y, -params.c * 1000.0, places=6)
        self.assertAlmostEqual(shifted.z - coord.z, params.b * 1000.0, places=6)
