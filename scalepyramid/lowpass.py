"""
LowPassFilter — the blur capability octave construction depends on.

Anything with these two methods can drive `Octave.create`: the production
`GaussianFilter`, or a lightweight double that tracks sigma symbolically.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .image import Image


@runtime_checkable
class LowPassFilter(Protocol):
    """Blurs images and computes the sigma increment between blur levels."""

    def filter(self, image: "Image", sigma: float) -> "Image":
        """
        Blur `image` with an isotropic Gaussian of standard deviation `sigma`.

        `sigma` is the width of the kernel applied, usually the increment
        returned by `sigma_difference`.
        """
        ...

    def sigma_difference(self, sigma_from: float, sigma_to: float) -> float:
        """
        Sigma of the extra blur that takes an image already at `sigma_from`
        to an effective blur of `sigma_to` (requires sigma_to > sigma_from).
        """
        ...
