# -*- coding: utf-8 -*-
import numba

from mlbrot.models.classifier import Classifier


class Escape_time_classifier(Classifier):
    def __init__(self, max_iter=30, radius=2.):
        """
        The classic escape-time test for the Mandelbrot set.

        Iterates z(n+1) <- zn**2 + c from z0 = 0 ; c is a member of the set
        if abs(zn) stays below `radius` for `max_iter` iterations.

        Parameters
        ==========
        max_iter : int
            the bailout iteration number
        radius : float
            The diverging radius
        """
        if max_iter < 0:
            raise ValueError(f"Expected max_iter >= 0, got {max_iter}")
        self.max_iter = max_iter
        self.radius = radius

    @property
    def radius_sq(self):
        return float(self.radius) ** 2

    def escape_iter(self, c):
        """ Number of iterations performed before escaping (or `max_iter`
        if c did not escape) """
        return numba_escape_iter(
            float(c.real), float(c.imag), int(self.max_iter), self.radius_sq
        )

    def classify(self, c):
        return self.escape_iter(c) == self.max_iter

    def info_str(self):
        return (
            f"Classifier: escape-time, max_iter={self.max_iter}, "
            f"radius={self.radius}"
        )


@numba.njit(nogil=True)
def numba_escape_iter(c_re, c_im, max_iter, radius_sq):
    # nogil: worker threads run this loop in parallel
    z_re = 0.
    z_im = 0.
    n_iter = 0
    while n_iter < max_iter:
        if z_re * z_re + z_im * z_im > radius_sq:
            break
        # both parts from the previous iterate
        z_re, z_im = (
            z_re * z_re - z_im * z_im + c_re,
            2. * z_re * z_im + c_im
        )
        n_iter += 1
    return n_iter
