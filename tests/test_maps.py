import os
import tempfile
import unittest

import matplotlib

matplotlib.use('Agg')

import matplotlib.pyplot as plt

from arcbathy.io.arc_ascii import load_arc_bathy
from arcbathy.viz.maps import make_depth_cmap, plot_bathymetry


class TestMaps(unittest.TestCase):
    def test_plot_runs_without_gui(self):
        with tempfile.TemporaryDirectory() as td:
            path = os.path.join(td, 'grid.asc')
            with open(path, 'w', encoding='utf-8') as f:
                f.write("NCOLS 3\nNROWS 2\nXLLCENTER -80\nYLLCENTER 26\nCELLSIZE 1\n"
                        "NODATA_VALUE 999999\n-2 999999 3\n4 5 6\n")
            grid = load_arc_bathy(path, 0.0)
        fig, ax = plot_bathymetry(grid, title="crm")
        self.assertEqual(ax.get_title(), "crm")
        self.assertEqual(ax.get_xlim(), (-80.5, -77.5))
        plt.close(fig)

    def test_depth_cmap_land_and_water(self):
        cmap, norm = make_depth_cmap(-10.0, 30.0)
        self.assertEqual((norm.vmin, norm.vmax), (-10.0, 30.0))
        self.assertNotEqual(cmap(0.0), cmap(1.0))

    def test_depth_cmap_all_water(self):
        cmap, _ = make_depth_cmap(5.0, 50.0)
        self.assertNotEqual(cmap(0.0), cmap(1.0))


if __name__ == '__main__':
    unittest.main()
