import os
import tempfile
import unittest

import numpy as np

from arcbathy.coords import MEAN_EARTH_RADIUS, to_geodetic
from arcbathy.io.arc_ascii import load_arc_bathy


def _plane(lat, lon):
    return 1000.0 + 40.0 * (lat - 26.0) - 25.0 * (lon + 80.25)


class TestIntegrationLoadAndQuery(unittest.TestCase):
    def test_planar_seafloor_round_trip(self):
        ncols, nrows, cell = 41, 31, 0.05
        lons = -80.25 + cell * np.arange(ncols)
        lats = 26.0 + cell * np.arange(nrows)
        depth = _plane(lats[:, None], lons[None, :])
        depth[5, 7] = 999999.0

        with tempfile.TemporaryDirectory() as td:
            path = os.path.join(td, 'crm.asc')
            with open(path, 'w', encoding='utf-8') as f:
                f.write(f"NCOLS {ncols}\nNROWS {nrows}\nXLLCENTER -80.25\nYLLCENTER 26.0\n"
                        f"CELLSIZE {cell}\nNODATA_VALUE 999999\n")
                for row in depth[::-1]:
                    f.write(' '.join(f"{v:.6f}" for v in row) + '\n')
            grid = load_arc_bathy(path, MEAN_EARTH_RADIUS)

        self.assertEqual(grid.shape, (nrows, ncols))
        self.assertTrue(grid.depth.mask[5, 7])
        self.assertEqual(int(grid.depth.mask.sum()), 1)
        np.testing.assert_allclose(grid.latitudes, lats)

        rng = np.random.default_rng(0)
        qlat = rng.uniform(lats[10], lats[-1], 50)
        qlon = rng.uniform(lons[10], lons[-1], 50)
        np.testing.assert_allclose(grid.depth_at(qlat, qlon), _plane(qlat, qlon), atol=1e-4)

        # spherical query agrees with the geodetic one
        theta = np.radians(90.0 - qlat)
        phi = np.radians(qlon)
        _, _, d = to_geodetic(theta, phi, grid.radius_at(theta, phi), grid.earth_radius)
        np.testing.assert_allclose(d, _plane(qlat, qlon), atol=1e-4)

        stats = grid.get_statistics()
        self.assertEqual(stats['count'], nrows * ncols - 1)
        self.assertLess(stats['max'], 999999.0)


if __name__ == '__main__':
    unittest.main()
