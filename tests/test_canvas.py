# -*- coding: utf-8 -*-
import os
import unittest
import concurrent.futures

import numpy as np
import PIL.Image

import mlbrot as mb
from mlbrot.canvas import (
    Canvas, MEMBER_COLOR, NON_MEMBER_COLOR, BACKGROUND_COLOR, verdict_color
)
import test_config


class Test_canvas(unittest.TestCase):

    def setUp(self):
        self.canvas_dir = test_config.temporary_dir("_canvas_dir")

    def test_palette(self):
        self.assertEqual(verdict_color(True), MEMBER_COLOR)
        self.assertEqual(verdict_color(False), NON_MEMBER_COLOR)
        self.assertEqual(
            len({MEMBER_COLOR, NON_MEMBER_COLOR, BACKGROUND_COLOR}), 3
        )

    def test_init(self):
        canvas = Canvas(nx=7, ny=3)
        self.assertEqual(canvas.shape, (3, 7, 4))
        self.assertEqual(canvas.get((2, 6)), BACKGROUND_COLOR)
        self.assertFalse(canvas.is_complete())

    def test_set(self):
        canvas = Canvas(nx=4, ny=2)
        canvas.set((1, 3), MEMBER_COLOR)
        canvas.set((0, 2), NON_MEMBER_COLOR)
        self.assertEqual(canvas.get((1, 3)), MEMBER_COLOR)
        self.assertEqual(canvas.get((0, 2)), NON_MEMBER_COLOR)
        self.assertEqual(canvas.get((0, 3)), BACKGROUND_COLOR)

        snapshot = canvas.snapshot()
        self.assertEqual(tuple(snapshot[1, 3]), MEMBER_COLOR)
        # A copy: later writes are not seen
        canvas.set((0, 0), MEMBER_COLOR)
        self.assertEqual(tuple(snapshot[0, 0]), BACKGROUND_COLOR)

    def test_concurrent_set(self):
        nx, ny = 64, 48
        canvas = Canvas(nx, ny)
        pixels = [(row, col) for row in range(ny) for col in range(nx)]

        def paint(pixel):
            row, col = pixel
            canvas.set(pixel, verdict_color((row + col) % 2 == 0))

        with concurrent.futures.ThreadPoolExecutor(max_workers=16
                    ) as threadpool:
            for fut in concurrent.futures.as_completed(
                threadpool.submit(paint, pix) for pix in pixels
            ):
                fut.result()

        self.assertTrue(canvas.is_complete())
        arr = canvas.snapshot()
        rows, cols = np.indices((ny, nx))
        is_member = ((rows + cols) % 2 == 0)
        self.assertTrue(np.all(arr[is_member] == MEMBER_COLOR))
        self.assertTrue(np.all(arr[~is_member] == NON_MEMBER_COLOR))

    def test_save_png(self):
        canvas = Canvas(nx=5, ny=3)
        for row in range(3):
            for col in range(5):
                canvas.set((row, col), verdict_color(col == row))
        im = canvas.to_image()
        self.assertEqual(im.size, (5, 3))
        self.assertEqual(im.mode, "RGBA")

        im_path = os.path.join(self.canvas_dir, "canvas.png")
        canvas.save_png(im_path)
        with PIL.Image.open(im_path) as reloaded:
            self.assertEqual(reloaded.mode, "RGBA")
            self.assertEqual(reloaded.getpixel((2, 2)), MEMBER_COLOR)
            self.assertEqual(reloaded.getpixel((4, 0)), NON_MEMBER_COLOR)
            np.testing.assert_array_equal(
                np.asarray(reloaded), canvas.snapshot()
            )

    def test_save_png_failure(self):
        canvas = Canvas(nx=2, ny=2)
        im_path = os.path.join(self.canvas_dir, "missing_dir", "canvas.png")
        with self.assertRaises(OSError):
            canvas.save_png(im_path)

    def test_exported(self):
        self.assertIs(mb.Canvas, Canvas)


if __name__ == "__main__":
    full_test = True
    runner = unittest.TextTestRunner(verbosity=2)
    if full_test:
        runner.run(test_config.suite([Test_canvas]))
    else:
        suite = unittest.TestSuite()
        suite.addTest(Test_canvas("test_save_png"))
        runner.run(suite)
