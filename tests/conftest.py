"""
Shared fixtures and test doubles for scalepyramid tests.

SigmaImage / SigmaTrackingFilter replace real pixels with a single number:
the effective blur of the image.  Filtering composes sigmas in quadrature,
exactly what GaussianFilter does to real images, so octave construction can
be checked algebraically.
"""
from __future__ import annotations

import math

import numpy as np
import pytest

from scalepyramid import Image


def analytic_gaussian_1d(x, sigma: float):
    """Continuous 1-D Gaussian density evaluated at x."""
    x = np.asarray(x, dtype=np.float64)
    return np.exp(-(x * x) / (2.0 * sigma * sigma)) / math.sqrt(2.0 * math.pi * sigma * sigma)


class SigmaImage(Image):
    """10x10 blank image that remembers its blur level."""

    __slots__ = ("sigma", "pair")

    def __init__(self, sigma: float, pair=None):
        super().__init__(np.zeros((10, 10), dtype=np.float32))
        self.sigma = sigma
        self.pair = pair

    def subtract(self, other):
        # DoG records (upper, lower) so tests can see which levels were paired
        return SigmaImage(self.sigma - other.sigma, pair=(self.sigma, other.sigma))


class SigmaTrackingFilter:
    """Quadrature-composition LowPassFilter over SigmaImage."""

    def __init__(self):
        self.calls = []

    def filter(self, image, sigma):
        self.calls.append((image.sigma, sigma))
        return SigmaImage(math.hypot(image.sigma, sigma))

    def sigma_difference(self, sigma_from, sigma_to):
        return math.sqrt(sigma_to * sigma_to - sigma_from * sigma_from)


class LinearSigmaFilter:
    """
    Non-physical filter with a different composition law:
    filter adds half the increment, sigma_difference doubles the gap.
    Octave construction must only rely on the two methods agreeing.
    """

    def filter(self, image, sigma):
        return SigmaImage(image.sigma + sigma / 2.0)

    def sigma_difference(self, sigma_from, sigma_to):
        return 2.0 * (sigma_to - sigma_from)


@pytest.fixture
def tracking_filter():
    return SigmaTrackingFilter()


@pytest.fixture
def four_by_one():
    """Four 1x1 scale images and three 1x1 DoG images with distinct values."""
    scales = [Image([[v]]) for v in (1.0, 2.0, 3.0, 4.0)]
    dogs = [Image([[v]]) for v in (5.0, 6.0, 7.0)]
    return scales, dogs


@pytest.fixture
def noise_image():
    """64x64 uniform noise image."""
    rng = np.random.default_rng(42)
    return Image(rng.random((64, 64)).astype(np.float32))
