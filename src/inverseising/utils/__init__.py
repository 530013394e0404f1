from inverseising.utils.checks import (
    DimensionMismatch,
    EmptyResult,
    TypeMismatch,
    check_spin_values,
    require_finite,
    require_homogeneous_types,
    require_shape,
)
from inverseising.utils.convert import decode, heaviside, logcosh, symmetrize, trans
from inverseising.utils.display import dprint, format_mapping
from inverseising.utils.io import ensure_dir, save_json
from inverseising.utils.logging import configure_logging, log_event
from inverseising.utils.rng import make_rng

__all__ = [
    "DimensionMismatch",
    "EmptyResult",
    "TypeMismatch",
    "check_spin_values",
    "configure_logging",
    "decode",
    "dprint",
    "ensure_dir",
    "format_mapping",
    "heaviside",
    "log_event",
    "logcosh",
    "make_rng",
    "require_finite",
    "require_homogeneous_types",
    "require_shape",
    "save_json",
    "symmetrize",
    "trans",
]
