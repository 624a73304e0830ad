# -*- coding: utf-8 -*-
import logging
import threading

import numpy as np
import PIL
import PIL.Image


logger = logging.getLogger(__name__)

# RGBA palette
MEMBER_COLOR = (0, 0, 0, 255)
NON_MEMBER_COLOR = (255, 255, 255, 255)
BACKGROUND_COLOR = (0, 0, 0, 0)


def verdict_color(verdict):
    """ The color of a pixel given its classification """
    return MEMBER_COLOR if verdict else NON_MEMBER_COLOR


class Canvas:
    def __init__(self, nx, ny):
        """
        A RGBA image buffer written pixel by pixel from several threads.

        Parameters
        ----------
        nx: int
            width in pixels
        ny: int
            height in pixels

        Notes
        -----
        The buffer is a (ny, nx, 4) uint8 array initialized to
        BACKGROUND_COLOR. Each pixel is written once ; reads (`snapshot`,
        `to_image`) are only meaningful once all writers are done.
        """
        self.nx = nx
        self.ny = ny
        self._arr = np.empty((ny, nx, 4), dtype=np.uint8)
        self._arr[:, :] = BACKGROUND_COLOR
        self._lock = threading.Lock()

    @property
    def shape(self):
        return self._arr.shape

    def set(self, pixel, color):
        """
        Parameters
        ----------
        pixel: (int, int)
            (row, col) indices
        color: 4-uple
            RGBA color
        """
        row, col = pixel
        with self._lock:
            self._arr[row, col] = color

    def get(self, pixel):
        row, col = pixel
        return tuple(int(v) for v in self._arr[row, col])

    def snapshot(self):
        """ Returns a copy of the full buffer """
        with self._lock:
            return self._arr.copy()

    def is_complete(self):
        """ True if no pixel is left to the background color """
        background = np.all(self._arr == BACKGROUND_COLOR, axis=-1)
        return not np.any(background)

    def to_image(self):
        return PIL.Image.fromarray(self.snapshot())

    def save_png(self, im_path):
        """ Encodes the canvas as a png image """
        self.to_image().save(im_path, format="png")
        logger.info(f"Image saved: {im_path}")
