# -*- coding: utf-8 -*-
import os

import mlbrot as mb
import mlbrot.settings


def plot():
    """========================================================================
    Run the script to generate the classic Mandelbrot set image,
    z(n+1) <- zn**2 + c (c = pixel), classified by the escape-time test.
    User-input needed : the target *directory*
    ========================================================================"""
    directory = os.path.join(os.path.dirname(__file__), "output")

    mb.settings.log_directory = directory
    mb.set_log_handlers(verbosity="debug @ console + log")

    #==========================================================================
    #  Parameters
    mb.settings.nx = 800
    mb.settings.ny = 800
    mb.settings.bailout_iteration = 30
    mb.settings.concurrency_level = 20
    mb.settings.max_lines_to_write = 10000

    #==========================================================================
    #  Calculations & plot
    mb.run(directory, method="classic")


if __name__ == "__main__":
    plot()
