import unittest

import numpy as np

from arcbathy.core.axes import build_axes
from arcbathy.io.header import ArcHeader


class TestBuildAxes(unittest.TestCase):
    def test_cell_center_axes(self):
        axes = build_axes(ArcHeader(3, 2, -80.0, 26.0, 1.0, 999999.0))
        np.testing.assert_allclose(axes.longitudes, [-80.0, -79.0, -78.0])
        np.testing.assert_allclose(axes.latitudes, [26.0, 27.0])

    def test_strictly_increasing_with_constant_step(self):
        h = ArcHeader(601, 1201, -80.25, 26.0, 0.00083333, 999999.0)
        axes = build_axes(h)
        self.assertEqual(axes.longitudes.size, h.ncols)
        self.assertEqual(axes.latitudes.size, h.nrows)
        for axis in (axes.longitudes, axes.latitudes):
            step = np.diff(axis)
            self.assertTrue(np.all(step > 0))
            np.testing.assert_allclose(step, h.cellsize, rtol=1e-6)

    def test_single_cell(self):
        axes = build_axes(ArcHeader(1, 1, 10.0, 20.0, 0.5, -9999.0))
        np.testing.assert_array_equal(axes.longitudes, [10.0])
        np.testing.assert_array_equal(axes.latitudes, [20.0])

    def test_axes_read_only(self):
        axes = build_axes(ArcHeader(3, 2, -80.0, 26.0, 1.0, 999999.0))
        with self.assertRaises(ValueError):
            axes.latitudes[0] = 0.0


if __name__ == '__main__':
    unittest.main()
