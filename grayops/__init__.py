from .errors import GrayopsError, ImageIOError, InvalidInputError
from .raster import Raster, MODE_GRAY, MODE_RGB
from .image_ops import to_grayscale
from .histogram import (
    compute_histogram,
    cumulative_histogram,
    contrast_stretch,
    histogram_equalize,
)
from .processors import PROCESSORS, get_processor
from .pipeline import PipelineConfig, run, run_config

__version__ = "0.1.0"

__all__ = [
    "GrayopsError",
    "ImageIOError",
    "InvalidInputError",
    "Raster",
    "MODE_GRAY",
    "MODE_RGB",
    "to_grayscale",
    "compute_histogram",
    "cumulative_histogram",
    "contrast_stretch",
    "histogram_equalize",
    "PROCESSORS",
    "get_processor",
    "PipelineConfig",
    "run",
    "run_config",
]
