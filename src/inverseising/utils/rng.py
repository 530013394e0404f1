from __future__ import annotations

import numpy as np


def make_rng(seed: int | np.random.Generator | None = None) -> np.random.Generator:
    """Return a numpy generator, reusing one that is passed in.

    A single generator drives every random draw of one call so results are
    reproducible under a fixed seed.
    """

    if isinstance(seed, np.random.Generator):
        return seed
    if seed is not None and seed < 0:
        raise ValueError("seed must be non-negative")
    return np.random.default_rng(seed)
