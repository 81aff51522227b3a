"""
scalepyramid — Gaussian scale-space octaves and Difference-of-Gaussian stacks.

Quick start:
    import numpy as np
    from scalepyramid import GaussianFilter, Image, Octave

    seed = Image(np.random.default_rng(0).random((128, 128)))
    octave = Octave.create(seed, scales_per_octave=3, initial_blur=1.6,
                           low_pass=GaussianFilter())
    octave.scale_images              # 6 progressively blurred Images
    octave.difference_of_gaussians   # 5 DoG Images
    stack = octave.dog_stack()       # ndarray (5, 128, 128)
"""

__version__ = "0.1.0"

from .config import OctaveConfig
from .gaussian import GaussianFilter, gaussian_kernel_1d, sigma_difference
from .image import Image
from .lowpass import LowPassFilter
from .octave import Octave, scale_sigmas
from .pipeline import build_octave

__all__ = [
    "GaussianFilter",
    "Image",
    "LowPassFilter",
    "Octave",
    "OctaveConfig",
    "build_octave",
    "gaussian_kernel_1d",
    "scale_sigmas",
    "sigma_difference",
    "__version__",
]
