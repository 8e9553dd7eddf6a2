#!/usr/bin/env python
from __future__ import annotations

import argparse
import logging

from arcbathy.io.arc_ascii import load_arc_bathy, load_from_config
from arcbathy.io.config import load_config


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Summarise an ARC ASCII bathymetry grid")
    p.add_argument('path', nargs='?', help='Path to the .asc file')
    p.add_argument('-c', '--config', help='Path to config.json (bath_path, earth_radius, ...)')
    p.add_argument('-r', '--earth-radius', type=float, default=None,
                   help='Earth radius in meters (0 keeps depths surface-relative); required with a path')
    p.add_argument('--method', default='linear', help='Interpolation method (nearest, linear, slinear, cubic)')
    p.add_argument('--missing', default='nan', choices=['nan', 'nearest'], help='Policy for NODATA cells')
    p.add_argument('-q', '--query', nargs=2, type=float, action='append', metavar=('LAT', 'LON'),
                   default=[], help='Print interpolated depth at LAT LON (repeatable)')
    p.add_argument('--plot', default=None, help='Save a depth map to this image path')
    p.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    args = p.parse_args(argv)
    if bool(args.path) == bool(args.config):
        p.error('give either a grid path or --config')
    if args.path and args.earth_radius is None:
        p.error('--earth-radius is required when loading from a path')
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    if args.config:
        grid = load_from_config(load_config(args.config))
    else:
        grid = load_arc_bathy(args.path, args.earth_radius,
                              method=args.method, missing=args.missing)

    h = grid.header
    print(f"Grid: {h.ncols} cols x {h.nrows} rows, cellsize {h.cellsize:g} deg")
    min_lon, min_lat, max_lon, max_lat = grid.bounds
    print(f"Longitude {min_lon:.6f} .. {max_lon:.6f}, latitude {min_lat:.6f} .. {max_lat:.6f}")
    print(f"Earth radius: {grid.earth_radius:g} m")
    stats = grid.get_statistics()
    if stats:
        for key, value in stats.items():
            print(f"  {key}: {value:g}")
    else:
        print("  no valid cells")

    for lat, lon in args.query:
        print(f"depth({lat:.6f}, {lon:.6f}) = {grid.depth_at(lat, lon):.3f} m")

    if args.plot:
        import matplotlib
        matplotlib.use('Agg')
        from arcbathy.viz.maps import plot_bathymetry

        fig, _ = plot_bathymetry(grid, title=str(grid.source_path.name))
        fig.savefig(args.plot)
        print(f"Saved map to {args.plot}")


if __name__ == '__main__':
    main()
