# -*- coding: utf-8 -*-
import logging
import threading
import concurrent.futures

import mlbrot as mb
import mlbrot.settings


logger = logging.getLogger(__name__)


class Bounded_scheduler:
    def __init__(self, concurrency, veto_parallel=False):
        """
Runs one classification task per pixel of a grid, with at most
`concurrency` classifications in flight.

Parameters:
-----------
concurrency : int
    the number of admission slots (and of worker threads)
veto_parallel : bool
    if True, defaults to normal iteration without multi-threading

Usage:
------
def on_result(pixel, c, verdict):
    (... write the result ...)

scheduler = Bounded_scheduler(20)
scheduler.run_scan(grid, classifier, on_result)

Notes:
------
The dispatching loop (caller thread) walks the grid in row-major order and
blocks while all the slots are taken. A task gives back its slot as soon as
the classification is done, before calling `on_result`.
"""
        if concurrency < 1:
            raise ValueError(f"Expected concurrency >= 1, got {concurrency}")
        self.concurrency = concurrency
        self.veto_parallel = veto_parallel

    @property
    def parallel(self):
        return mb.settings.enable_multithreading and not self.veto_parallel

    def run_scan(self, grid, classifier, on_result, on_dispatch=None):
        """
        Classifies all the pixels of `grid` ; returns once all tasks, including
        their `on_result` calls, are completed.

        Parameters
        ----------
        grid: `mlbrot.projection.Plane_grid`
            The scanned grid
        classifier: `mlbrot.models.Classifier`
            The membership test
        on_result: callable (pixel, c, verdict) -> None
            Called from the worker thread with the classification result
        on_dispatch: callable () -> None, optional
            Called by the dispatching loop after each dispatched pixel

        Raises
        ------
        The first exception raised by a task. No further pixel is dispatched
        after a failure.
        """
        if self.parallel:
            self.call_multi_thread(grid, classifier, on_result, on_dispatch)
        else:
            self.call_std(grid, classifier, on_result, on_dispatch)

    def call_multi_thread(self, grid, classifier, on_result, on_dispatch):
        """ Parallel (multi-threading) loop

        Classifications run on a pool of `concurrency` threads ; the write
        sides (`on_result`) are handed over to a second pool, so that a
        classification thread is free again as soon as it releases its slot.
        """
        slots = threading.BoundedSemaphore(self.concurrency)
        errors = []

        def check_done(fut):
            exc = fut.exception()
            if exc is not None:
                errors.append(exc)

        with concurrent.futures.ThreadPoolExecutor(
            max_workers=self.concurrency,
            thread_name_prefix="mlbrot-writer"
        ) as writepool:

            def task(pixel, c):
                try:
                    verdict = classifier.classify(c)
                finally:
                    slots.release()
                fut = writepool.submit(on_result, pixel, c, verdict)
                fut.add_done_callback(check_done)

            with concurrent.futures.ThreadPoolExecutor(
                max_workers=self.concurrency,
                thread_name_prefix="mlbrot-worker"
            ) as threadpool:
                for pixel in grid.pixels():
                    if errors:
                        logger.error(
                            f"Scan aborted at pixel {pixel}: {errors[0]!r}"
                        )
                        break
                    c = grid.pixel_to_plane(*pixel)
                    slots.acquire()
                    fut = threadpool.submit(task, pixel, c)
                    fut.add_done_callback(check_done)
                    if on_dispatch is not None:
                        on_dispatch()

                # Drain: wait until all slots are free again
                for _ in range(self.concurrency):
                    slots.acquire()
                logger.debug("All classification slots released")
            # Leaving the pools: all tasks then all write sides are done

        if errors:
            raise errors[0]

    def call_std(self, grid, classifier, on_result, on_dispatch):
        """ Standard loop """
        for pixel in grid.pixels():
            c = grid.pixel_to_plane(*pixel)
            verdict = classifier.classify(c)
            on_result(pixel, c, verdict)
            if on_dispatch is not None:
                on_dispatch()
