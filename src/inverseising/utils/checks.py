from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)


class TypeMismatch(TypeError):
    """Node identifiers of one problem do not share a single concrete type."""


class DimensionMismatch(ValueError):
    """Array shape disagrees with the unit count of a model."""


class EmptyResult(RuntimeError):
    """A result was requested from a run that produced no reads."""


def require_shape(name: str, array: np.ndarray, expected: tuple[int, ...]) -> None:
    """Raise a clear error if an array shape differs from expectations."""

    if array.shape != expected:
        raise DimensionMismatch(
            f"{name} shape mismatch: expected {expected}, received {array.shape}"
        )


def require_finite(name: str, array: np.ndarray) -> None:
    """Guard against NaN/Inf propagation during optimization."""

    if not np.all(np.isfinite(array)):
        raise ValueError(f"{name} contains NaN or Inf values")


def check_spin_values(name: str, array: np.ndarray) -> bool:
    """Warn (without raising) when an array holds values outside {-1, +1}."""

    ok = bool(np.all(np.isin(array, (-1, 1))))
    if not ok:
        logger.warning("Elements of %s must be spin values: {1, -1}", name)
    return ok


def require_homogeneous_types(keys: Iterable[Any]) -> None:
    """Fail fast when node identifiers mix concrete types (e.g. ``1`` and ``"a"``)."""

    kinds = {type(key) for key in keys}
    if len(kinds) > 1:
        names = ", ".join(sorted(kind.__name__ for kind in kinds))
        raise TypeMismatch(f"node identifiers must share one type, received: {names}")
