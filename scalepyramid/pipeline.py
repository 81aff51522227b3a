"""
Convenience entry point: seed image + config -> Octave.
"""
from __future__ import annotations

from typing import Optional, Union

import numpy as np

from .config import OctaveConfig
from .gaussian import GaussianFilter
from .image import Image
from .lowpass import LowPassFilter
from .octave import Octave


def build_octave(
    seed: Union[Image, np.ndarray],
    cfg: Optional[OctaveConfig] = None,
    low_pass: Optional[LowPassFilter] = None,
) -> Octave:
    """
    Build one octave from `seed` using the parameters in `cfg`.

    Parameters
    ----------
    seed : Image or ndarray, shape (ny, nx)
        Seed image, assumed already blurred to cfg.initial_blur.
    cfg : OctaveConfig, optional
        Defaults to OctaveConfig().
    low_pass : LowPassFilter, optional
        Defaults to GaussianFilter(truncate=cfg.truncate).

    Returns
    -------
    Octave
    """
    if seed is None:
        raise TypeError("seed must not be None")
    if cfg is None:
        cfg = OctaveConfig()
    if low_pass is None:
        low_pass = GaussianFilter(truncate=cfg.truncate)
    if not isinstance(seed, Image):
        seed = Image(seed)
    return Octave.create(seed, cfg.scales_per_octave, cfg.initial_blur, low_pass)
