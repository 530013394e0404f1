"""Conversions between sparse bond mappings and dense symmetric matrices.

Pair keys use unit numbers starting at ``base`` (1 by default), so that
matrix row ``0`` corresponds to unit ``1``.
"""

from __future__ import annotations

from collections.abc import Mapping

import numpy as np

from inverseising.types import FloatArray, IntArray


def symmetrize(arr: np.ndarray) -> FloatArray:
    """Return ``(A + A^T) / 2``."""

    arr = np.asarray(arr, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise ValueError(f"symmetrize expects a square matrix, received shape {arr.shape}")
    return 0.5 * (arr + arr.T)


def heaviside(arr: np.ndarray) -> IntArray:
    """Sign step: ``+1`` where positive, ``-1`` where negative, ``0`` elsewhere."""

    arr = np.asarray(arr)
    return (arr > 0.0).astype(np.int64) - (arr < 0.0).astype(np.int64)


def logcosh(x: np.ndarray) -> FloatArray:
    """Overflow-free ``log(cosh(x))``."""

    x = np.asarray(x, dtype=np.float64)
    return np.logaddexp(x, -x) - np.log(2.0)


def decode(arr: np.ndarray, base: int = 1) -> dict[tuple[int, int], float | int]:
    """Read the strict upper triangle of a square matrix into a sorted pair mapping.

    >>> decode(np.arange(1, 10).reshape(3, 3).T)
    {(1, 2): 4, (1, 3): 7, (2, 3): 8}
    """

    arr = np.asarray(arr)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise ValueError(f"decode expects a square matrix, received shape {arr.shape}")

    rows, cols = np.triu_indices(arr.shape[0], k=1)
    return {
        (int(i) + base, int(j) + base): arr[i, j].item()
        for i, j in zip(rows, cols)
    }


def trans(
    mapping: Mapping[tuple[int, int], float],
    length: int | None = None,
    base: int = 1,
) -> FloatArray:
    """Build a dense symmetric ``length x length`` matrix from a pair mapping.

    Each ``(i, j) -> v`` entry is written at ``(i, j)`` and mirrored at
    ``(j, i)``. Without ``length`` the size is the largest unit number found
    in the keys.
    """

    if length is None:
        if not mapping:
            raise ValueError("cannot infer matrix size from an empty mapping")
        length = max(max(key) for key in mapping) - base + 1
    if length < 0:
        raise ValueError("length must be non-negative")

    arr = np.zeros((length, length), dtype=np.float64)
    for key, value in mapping.items():
        if len(key) != 2:
            raise ValueError(f"pair keys must have two entries, received {key!r}")
        i, j = key[0] - base, key[1] - base
        if not (0 <= i < length and 0 <= j < length):
            raise ValueError(f"pair {key!r} is outside units {base}..{length + base - 1}")
        arr[i, j] = value
        arr[j, i] = value
    return arr
