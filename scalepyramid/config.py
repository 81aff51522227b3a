"""
OctaveConfig — tunable parameters for octave construction in one dataclass.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

from .gaussian import DEFAULT_TRUNCATE


@dataclass
class OctaveConfig:
    # ------------------------------------------------------------------ #
    # Scale progression
    # ------------------------------------------------------------------ #
    scales_per_octave: int = 3    # steps per doubling of sigma
    initial_blur: float = 1.6     # blur of the seed image (px)

    # ------------------------------------------------------------------ #
    # Gaussian kernel
    # ------------------------------------------------------------------ #
    truncate: float = DEFAULT_TRUNCATE   # kernel radius in units of sigma

    def __post_init__(self):
        if self.scales_per_octave < 1:
            raise ValueError("scales_per_octave must be >= 1")
        if not (self.initial_blur > 0 and math.isfinite(self.initial_blur)):
            raise ValueError("initial_blur must be positive and finite")
        if self.truncate <= 0:
            raise ValueError("truncate must be positive")

    @property
    def n_scales(self) -> int:
        """Number of scale images per octave (the DoG count is one less)."""
        return self.scales_per_octave + 3
