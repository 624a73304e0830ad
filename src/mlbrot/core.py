# -*- coding: utf-8 -*-
import os
import logging
import textwrap
import time

import mlbrot as mb
import mlbrot.settings
import mlbrot.utils
import mlbrot.models

from mlbrot.projection import Plane_grid
from mlbrot.canvas import Canvas, verdict_color
from mlbrot.datalog import Result_log
from mlbrot.progress import Progress_counter, Progress_reporter
from mlbrot.mthreading import Bounded_scheduler


logger = logging.getLogger(__name__)


def default_grid():
    """ The grid defined by the current `mlbrot.settings` """
    s = mb.settings
    return Plane_grid(
        nx=s.nx, ny=s.ny, min_re=s.min_re, max_re=s.max_re, min_im=s.min_im
    )


class Renderer:
    def __init__(self,
        grid,
        classifier,
        concurrency=None,
        result_log=None,
        progress_interval=None
    ):
        """
        Classifies each pixel of a grid and paints the result on a `Canvas`.

        Parameters
        ----------
        grid: `mlbrot.projection.Plane_grid`
            The pixel grid and the region of the complex plane it covers
        classifier: `mlbrot.models.Classifier`
            The membership test
        concurrency: int
            Maximal number of classifications in flight. Defaults to
            `mlbrot.settings.concurrency_level`
        result_log: `mlbrot.datalog.Result_log`, optional
            Where the (re, im, verdict) records are written
        progress_interval: float
            Time interval between progress reports in seconds. Defaults to
            `mlbrot.settings.progress_interval`
        """
        if concurrency is None:
            concurrency = mb.settings.concurrency_level
        if progress_interval is None:
            progress_interval = mb.settings.progress_interval

        self.grid = grid
        self.classifier = classifier
        self.concurrency = concurrency
        self.result_log = result_log
        self.progress_interval = progress_interval
        self.canvas = None
        self.counter = None

    def info_str(self):
        return textwrap.dedent(f"""\
            Rendering:
                {self.grid.info_str()}
                {self.classifier.info_str()}
                Concurrency level: {self.concurrency}""")

    def on_result(self, pixel, c, verdict):
        """ Write side of a pixel task """
        self.canvas.set(pixel, verdict_color(verdict))
        if self.result_log is not None:
            self.result_log.record(c.real, c.imag, verdict)

    def render(self):
        """
        Runs the full scan.

        Returns
        -------
        canvas: `mlbrot.canvas.Canvas`
            The fully painted canvas
        """
        grid = self.grid
        logger.info(self.info_str())

        self.canvas = Canvas(grid.nx, grid.ny)
        self.counter = Progress_counter(grid.size)
        scheduler = Bounded_scheduler(self.concurrency)

        t0 = time.time()
        with Progress_reporter(self.counter, self.progress_interval):
            scheduler.run_scan(
                grid, self.classifier, self.on_result,
                on_dispatch=self.counter.incr
            )
        logger.info(
            f"Rendering done: {self.counter.report_str()} in "
            f"{time.time() - t0:.2f} s"
        )
        return self.canvas


def run(directory,
    method=None,
    concurrency=None,
    max_lines=None,
    predictor=None,
    grid=None
):
    """
    Renders an image and saves it to `directory`, together with the csv data
    file.

    Parameters
    ----------
    directory: str
        Output directory, created if needed
    method: "classic" | "ml"
        The coloring method. Defaults to `mlbrot.settings.coloring_method`
    concurrency: int
        Defaults to `mlbrot.settings.concurrency_level`
    max_lines: int
        Cap on the csv records (0: no data file, negative: no cap). Defaults
        to `mlbrot.settings.max_lines_to_write`
    predictor: optional
        The remote predictor for the "ml" method
    grid: `mlbrot.projection.Plane_grid`, optional
        Defaults to the grid defined by `mlbrot.settings`

    Returns
    -------
    (image_path, data_path): data_path is None if no data file is written

    Any failure to write the output files is propagated to the caller.
    """
    if method is None:
        method = mb.settings.coloring_method
    if concurrency is None:
        concurrency = mb.settings.concurrency_level
    if max_lines is None:
        max_lines = mb.settings.max_lines_to_write
    if grid is None:
        grid = default_grid()

    logger.info(f"coloring method: {method}")
    logger.info(f"concurrency level: {concurrency}")

    classifier = mb.models.get_classifier(method, predictor)
    mb.utils.mkdir_p(directory)
    stamp = time.time_ns()

    data_path = None
    if max_lines != 0:
        data_path = os.path.join(
            directory, mb.utils.timestamped_name("data", "csv", stamp)
        )

    with Result_log.open(data_path, max_lines) as result_log:
        renderer = Renderer(
            grid, classifier,
            concurrency=concurrency,
            result_log=result_log
        )
        canvas = renderer.render()

    image_path = os.path.join(
        directory, mb.utils.timestamped_name(f"out_{method}", "png", stamp)
    )
    canvas.save_png(image_path)
    return image_path, data_path
