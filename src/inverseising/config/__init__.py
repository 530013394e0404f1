from inverseising.config.presets import (
    default_fit_options,
    quick_anneal_options,
    sampling_anneal_options,
)
from inverseising.config.schemas import AnnealOptions, FitOptions

__all__ = [
    "AnnealOptions",
    "FitOptions",
    "default_fit_options",
    "quick_anneal_options",
    "sampling_anneal_options",
]
