import unittest

import numpy as np

from arcbathy.coords import (
    MEAN_EARTH_RADIUS,
    depth_from_radial,
    radial_from_depth,
    to_colatitude,
    to_geodetic,
    to_spherical,
)


class TestCoords(unittest.TestCase):
    def test_colatitude_convention(self):
        self.assertAlmostEqual(float(to_colatitude(90.0)), 0.0)
        self.assertAlmostEqual(float(to_colatitude(0.0)), np.pi / 2)
        self.assertAlmostEqual(float(to_colatitude(-90.0)), np.pi)

    def test_flat_surface_when_radius_zero(self):
        theta, phi, rho = to_spherical(26.0, -80.0, 100.0, 0.0)
        self.assertAlmostEqual(float(theta), np.radians(64.0))
        self.assertAlmostEqual(float(phi), np.radians(-80.0))
        self.assertEqual(float(rho), -100.0)

    def test_radial_below_sphere(self):
        _, _, rho = to_spherical(26.0, -80.0, 100.0, MEAN_EARTH_RADIUS)
        self.assertEqual(float(rho), MEAN_EARTH_RADIUS - 100.0)

    def test_vectorised(self):
        depth = np.array([[1.0, 2.0], [3.0, 4.0]])
        np.testing.assert_allclose(radial_from_depth(depth, 1000.0), 1000.0 - depth)
        np.testing.assert_allclose(radial_from_depth(depth, 0.0), -depth)

    def test_negative_radius_rejected(self):
        with self.assertRaises(ValueError):
            radial_from_depth(1.0, -1.0)
        with self.assertRaises(ValueError):
            depth_from_radial(1.0, -1.0)

    def test_non_finite_radius_rejected(self):
        for bad in (float("nan"), float("inf")):
            with self.subTest(radius=bad):
                with self.assertRaises(ValueError):
                    radial_from_depth(1.0, bad)
                with self.assertRaises(ValueError):
                    to_spherical(26.0, -80.0, 1.0, bad)

    def test_geodetic_inverse(self):
        for radius in (0.0, MEAN_EARTH_RADIUS):
            theta, phi, rho = to_spherical(-33.5, 151.25, 4200.0, radius)
            lat, lon, depth = to_geodetic(theta, phi, rho, radius)
            self.assertAlmostEqual(float(lat), -33.5)
            self.assertAlmostEqual(float(lon), 151.25)
            self.assertAlmostEqual(float(depth), 4200.0, places=6)


if __name__ == '__main__':
    unittest.main()
