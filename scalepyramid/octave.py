"""
Octave — one doubling of scale in a Gaussian scale space.

An octave holds n = s + 3 blurred images (s = scales per octave) at absolute
blur levels

    T_i = sigma_0 * 2^(i / s),   i = 0 .. s + 2

plus the n - 1 Difference-of-Gaussian images DoG_i = G_{i+1} - G_i.

Each level is derived from the previous one by applying only the incremental
blur sqrt(T_i² - T_{i-1}²), so every convolution kernel stays small.  Levels
are therefore built strictly in sequence.
"""
from __future__ import annotations

import logging
import math
from typing import Sequence, Tuple

import numpy as np

from .image import Image
from .lowpass import LowPassFilter

logger = logging.getLogger(__name__)

MIN_SCALE_IMAGES = 4


def scale_sigmas(scales_per_octave: int, initial_blur: float) -> Tuple[float, ...]:
    """
    Absolute blur levels of the scale images of one octave.

    Parameters
    ----------
    scales_per_octave : int
        Number of steps taken to double sigma (>= 1).
    initial_blur : float
        Blur of the first scale image (> 0).

    Returns
    -------
    tuple of float, length scales_per_octave + 3
    """
    if scales_per_octave < 1:
        raise ValueError(f"scales_per_octave must be >= 1, got {scales_per_octave}")
    if not (initial_blur > 0 and math.isfinite(initial_blur)):
        raise ValueError(f"initial_blur must be positive and finite, got {initial_blur}")
    return tuple(
        initial_blur * 2.0 ** (i / scales_per_octave)
        for i in range(scales_per_octave + 3)
    )


class Octave:
    """
    Immutable scale images + DoG images of one octave.

    Parameters
    ----------
    scale_images : sequence of Image, length n >= 4
    dog_images : sequence of Image, length n - 1
        All images must share the dimensions of scale_images[0].
    """

    __slots__ = ("_scale_images", "_dog_images")

    def __init__(self, scale_images: Sequence[Image], dog_images: Sequence[Image]):
        if scale_images is None:
            raise TypeError("scale_images must not be None")
        if dog_images is None:
            raise TypeError("dog_images must not be None")

        scales = tuple(scale_images)
        dogs = tuple(dog_images)

        if len(scales) < MIN_SCALE_IMAGES:
            raise ValueError(
                f"Need at least {MIN_SCALE_IMAGES} scale images, got {len(scales)}"
            )
        if len(dogs) != len(scales) - 1:
            raise ValueError(
                f"Expected {len(scales) - 1} DoG images for {len(scales)} "
                f"scale images, got {len(dogs)}"
            )
        shape = scales[0].shape
        for kind, images in (("scale", scales), ("DoG", dogs)):
            for i, img in enumerate(images):
                if img is None:
                    raise TypeError(f"{kind} image {i} is None")
                if img.shape != shape:
                    raise ValueError(
                        f"{kind} image {i} has shape {img.shape}, expected {shape}"
                    )

        self._scale_images = scales
        self._dog_images = dogs

    @classmethod
    def create(
        cls,
        seed: Image,
        scales_per_octave: int,
        initial_blur: float,
        low_pass: LowPassFilter,
    ) -> "Octave":
        """
        Build an octave from a seed image.

        Parameters
        ----------
        seed : Image
            Already blurred to exactly `initial_blur`; used as scale image 0
            without further filtering.
        scales_per_octave : int
            Steps per doubling of sigma (>= 1).
        initial_blur : float
            Blur level of `seed` (> 0).
        low_pass : LowPassFilter
            Supplies the incremental sigmas and performs the blurring.
        """
        if seed is None:
            raise TypeError("seed must not be None")
        if low_pass is None:
            raise TypeError("low_pass must not be None")
        sigmas = scale_sigmas(scales_per_octave, initial_blur)

        logger.debug("Building octave: %d scales/octave, sigma %.4f -> %.4f",
                     scales_per_octave, sigmas[0], sigmas[-1])

        scales = [seed]
        for i in range(1, len(sigmas)):
            d = low_pass.sigma_difference(sigmas[i - 1], sigmas[i])
            scales.append(low_pass.filter(scales[i - 1], d))

        dogs = [scales[i + 1].subtract(scales[i]) for i in range(len(scales) - 1)]
        return cls(scales, dogs)

    @property
    def scale_images(self) -> Tuple[Image, ...]:
        return self._scale_images

    @property
    def difference_of_gaussians(self) -> Tuple[Image, ...]:
        return self._dog_images

    @property
    def scales_per_octave(self) -> int:
        return len(self._scale_images) - 3

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width) shared by every image in the octave."""
        return self._scale_images[0].shape

    def dog_stack(self) -> np.ndarray:
        """DoG images as a new float32 array of shape (n - 1, height, width)."""
        return np.stack([img.data for img in self._dog_images]).astype(np.float32)

    def __repr__(self) -> str:
        h, w = self.shape
        return (f"Octave(scales_per_octave={self.scales_per_octave}, "
                f"width={w}, height={h})")
