# -*- coding: utf-8 -*-
import logging
import threading


logger = logging.getLogger(__name__)


class Progress_counter:
    def __init__(self, total):
        """
        Number of pixels dispatched so far, out of `total`.

        Only the dispatching thread increments the counter ; other threads
        read it without locking (a stale value is acceptable).
        """
        self.total = total
        self.value = 0

    def incr(self):
        if self.value < self.total:
            self.value += 1

    @property
    def fraction(self):
        if self.total == 0:
            return 1.
        return self.value / self.total

    def report_str(self):
        return (
            f"{100. * self.fraction:.2f}% complete "
            f"({self.value}/{self.total})"
        )


class Progress_reporter:
    def __init__(self, counter, interval=1.):
        """
        Background thread logging the progress of a scan every `interval`
        seconds, until stopped.

        Parameters
        ----------
        counter: Progress_counter
            The polled counter
        interval: float
            Time between 2 reports, in seconds
        """
        self.counter = counter
        self.interval = interval
        self.last_report = None
        self.n_reports = 0
        self._stop_evt = threading.Event()
        self._thread = None

    def start(self):
        if self._thread is not None:
            raise RuntimeError("Progress_reporter already started")
        self._thread = threading.Thread(
            target=self._run, name="mlbrot-progress", daemon=True
        )
        self._thread.start()

    def stop(self):
        """ Stops the reporting thread and waits for it """
        self._stop_evt.set()
        if self._thread is not None:
            self._thread.join()

    @property
    def running(self):
        return self._thread is not None and self._thread.is_alive()

    def report(self):
        str_val = self.counter.report_str()
        self.last_report = str_val
        self.n_reports += 1
        logger.info(str_val)

    def _run(self):
        # wait returns True once stop is requested
        while not self._stop_evt.wait(self.interval):
            self.report()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.stop()
