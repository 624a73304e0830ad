# -*- coding: utf-8 -*-
import dataclasses


def scale_factor(span, npix):
    """ Distance between 2 adjacent pixels along an axis of `npix` pixels.
    A single-pixel axis has a null scale factor (all pixels map to the edge).
    """
    if npix <= 1:
        return 0.
    return span / (npix - 1)


def pixel_to_plane(row, col, nx, ny, min_re, max_re, min_im, max_im):
    """
    Maps a pixel to a point of the complex plane.

    The x-axis is mapped linearly from `min_re` (col 0) to `max_re`
    (col nx - 1). Image rows increase downward whereas the imaginary axis
    increases upward: row 0 is mapped to `max_im`, row ny - 1 to `min_im`.

    Parameters
    ----------
    row, col: int
        The pixel indices, 0 <= row < ny, 0 <= col < nx
    nx, ny: int
        The image width and height in pixels
    min_re, max_re, min_im, max_im: float
        The bounds of the mapped region

    Returns
    -------
    c: complex
    """
    re = min_re + col * scale_factor(max_re - min_re, nx)
    im = max_im - row * scale_factor(max_im - min_im, ny)
    return complex(re, im)


@dataclasses.dataclass(frozen=True)
class Plane_grid:
    """
    A rectangular pixel grid laid over a region of the complex plane.

    Parameters
    ----------
    nx: int
        number of pixels along the x-axis (width)
    ny: int
        number of pixels along the y-axis (height)
    min_re: float
        real part of the left edge
    max_re: float
        real part of the right edge
    min_im: float
        imaginary part of the bottom edge

    The top edge `max_im` is derived so that the region has the same
    width-to-height proportions as the grid.
    """
    nx: int
    ny: int
    min_re: float = -2.
    max_re: float = 1.
    min_im: float = -1.2

    def __post_init__(self):
        if self.nx < 1 or self.ny < 1:
            raise ValueError(
                f"Invalid grid dimensions: nx={self.nx}, ny={self.ny}"
            )

    @property
    def max_im(self):
        return self.min_im + (self.max_re - self.min_re) * self.ny / self.nx

    @property
    def re_factor(self):
        return scale_factor(self.max_re - self.min_re, self.nx)

    @property
    def im_factor(self):
        return scale_factor(self.max_im - self.min_im, self.ny)

    @property
    def size(self):
        """ Total number of pixels """
        return self.nx * self.ny

    @property
    def shape(self):
        """ (rows, cols) """
        return (self.ny, self.nx)

    def pixel_to_plane(self, row, col):
        return pixel_to_plane(
            row, col, self.nx, self.ny,
            self.min_re, self.max_re, self.min_im, self.max_im
        )

    def pixels(self):
        """ Yields successive (row, col) pixels in row-major order """
        for row in range(self.ny):
            for col in range(self.nx):
                yield (row, col)

    def info_str(self):
        return (
            f"Grid {self.nx} x {self.ny} pixels over "
            f"[{self.min_re}, {self.max_re}] x "
            f"[{self.min_im}, {self.max_im}]"
        )
