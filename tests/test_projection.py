# -*- coding: utf-8 -*-
import unittest
import concurrent.futures

import mlbrot as mb
from mlbrot.projection import Plane_grid, pixel_to_plane, scale_factor
import test_config


class Test_pixel_to_plane(unittest.TestCase):

    def setUp(self):
        self.grid = Plane_grid(nx=31, ny=21, min_re=-2., max_re=1.,
                               min_im=-1.2)

    def test_derived_max_im(self):
        grid = Plane_grid(nx=800, ny=800)
        self.assertAlmostEqual(grid.max_im, 1.8)
        grid = Plane_grid(nx=800, ny=400)
        self.assertAlmostEqual(grid.max_im, 0.3)
        self.assertEqual(grid.size, 320000)
        self.assertEqual(grid.shape, (400, 800))

    def test_corners(self):
        grid = self.grid
        top_left = grid.pixel_to_plane(0, 0)
        self.assertAlmostEqual(top_left.real, grid.min_re)
        self.assertAlmostEqual(top_left.imag, grid.max_im)

        bottom_right = grid.pixel_to_plane(grid.ny - 1, grid.nx - 1)
        self.assertAlmostEqual(bottom_right.real, grid.max_re)
        self.assertAlmostEqual(bottom_right.imag, grid.min_im)

    def test_axis_orientation(self):
        # columns increase to the right, rows go downward
        grid = self.grid
        c00 = grid.pixel_to_plane(0, 0)
        c01 = grid.pixel_to_plane(0, 1)
        c10 = grid.pixel_to_plane(1, 0)
        self.assertAlmostEqual(c01.real - c00.real, grid.re_factor)
        self.assertAlmostEqual(c01.imag, c00.imag)
        self.assertAlmostEqual(c00.imag - c10.imag, grid.im_factor)
        self.assertAlmostEqual(c10.real, c00.real)
        self.assertAlmostEqual(grid.re_factor, 0.1)

    def test_module_function(self):
        grid = self.grid
        for (row, col) in [(0, 0), (3, 7), (20, 30), (10, 15)]:
            with self.subTest(row=row, col=col):
                self.assertEqual(
                    grid.pixel_to_plane(row, col),
                    pixel_to_plane(row, col, grid.nx, grid.ny, grid.min_re,
                                   grid.max_re, grid.min_im, grid.max_im)
                )

    def test_deterministic(self):
        grid = self.grid
        ref = [grid.pixel_to_plane(*pix) for pix in grid.pixels()]
        self.assertEqual(
            ref, [grid.pixel_to_plane(*pix) for pix in grid.pixels()]
        )
        with concurrent.futures.ThreadPoolExecutor(max_workers=8
                    ) as threadpool:
            res = list(threadpool.map(
                lambda pix: grid.pixel_to_plane(*pix), grid.pixels()
            ))
        self.assertEqual(ref, res)

    def test_degenerate(self):
        self.assertEqual(scale_factor(3., 1), 0.)
        # single row
        grid = Plane_grid(nx=5, ny=1, min_re=-2., max_re=1., min_im=-1.2)
        self.assertEqual(grid.im_factor, 0.)
        for col in range(5):
            self.assertEqual(grid.pixel_to_plane(0, col).imag, grid.max_im)
        # single column
        grid = Plane_grid(nx=1, ny=5, min_re=-2., max_re=1., min_im=-1.2)
        self.assertEqual(grid.re_factor, 0.)
        for row in range(5):
            self.assertEqual(grid.pixel_to_plane(row, 0).real, -2.)
        # single pixel
        grid = Plane_grid(nx=1, ny=1)
        self.assertEqual(grid.pixel_to_plane(0, 0),
                         complex(grid.min_re, grid.max_im))

    def test_invalid(self):
        for (nx, ny) in [(0, 10), (10, 0), (-1, 5)]:
            with self.subTest(nx=nx, ny=ny):
                with self.assertRaises(ValueError):
                    Plane_grid(nx=nx, ny=ny)

    def test_pixels_row_major(self):
        grid = Plane_grid(nx=3, ny=2)
        self.assertEqual(
            list(grid.pixels()),
            [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
        )

    def test_default_grid(self):
        with test_config.settings_override(nx=40, ny=20, min_re=-1.):
            grid = mb.default_grid()
        self.assertEqual((grid.nx, grid.ny, grid.min_re), (40, 20, -1.))


if __name__ == "__main__":
    full_test = True
    runner = unittest.TextTestRunner(verbosity=2)
    if full_test:
        runner.run(test_config.suite([Test_pixel_to_plane]))
    else:
        suite = unittest.TestSuite()
        suite.addTest(Test_pixel_to_plane("test_degenerate"))
        runner.run(suite)
