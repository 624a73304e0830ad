# -*- coding: utf-8 -*-
import logging
import threading


logger = logging.getLogger(__name__)

HEADER = ("real", "imag", "result")


class Result_log:
    def __init__(self, stream, max_lines=0):
        """
        Csv sink for the classification results, shared by the worker
        threads.

        Parameters
        ----------
        stream: text file-like object
            The output stream. Can be None if `max_lines` is 0.
        max_lines: int
            Cap on the number of records:

              - 0: nothing is written (not even the header)
              - negative: no cap
              - n > 0: only the first n records received are written

        Notes
        -----
        Records are written in the order threads acquire the lock, which is
        not the pixel order.
        """
        self.stream = stream
        self.max_lines = max_lines
        self._records_written = 0
        self._lock = threading.Lock()
        if self.enabled:
            self.stream.write(",".join(HEADER) + "\n")

    @classmethod
    def open(cls, path, max_lines=0):
        """ A `Result_log` writing to file `path`. No file is created if
        logging is suppressed (`max_lines` == 0) """
        if max_lines == 0:
            logger.info("No data file will be written")
            return cls(None, max_lines)
        logger.info(f"Writing data file: {path}")
        return cls(open(path, "w", newline=""), max_lines)

    @property
    def enabled(self):
        return self.max_lines != 0

    @property
    def unlimited(self):
        return self.max_lines < 0

    @property
    def records_written(self):
        return self._records_written

    @staticmethod
    def format_record(re, im, verdict):
        return f"{re:f},{im:f},{'true' if verdict else 'false'}\n"

    def record(self, re, im, verdict):
        """ Appends a record - no-op if the cap has been reached """
        if not self.enabled:
            return
        line = self.format_record(re, im, verdict)
        with self._lock:
            if (not self.unlimited) and (
                self._records_written >= self.max_lines
            ):
                return
            self.stream.write(line)
            self._records_written += 1

    def close(self):
        """ Flushes and closes the underlying stream """
        if self.stream is None:
            return
        with self._lock:
            self.stream.flush()
            self.stream.close()
        logger.debug(f"Data file closed: {self._records_written} records")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
