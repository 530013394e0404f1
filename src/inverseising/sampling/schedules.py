from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from inverseising.types import FloatArray


@dataclass(frozen=True)
class AnnealSchedule:
    """Linearly spaced inverse temperatures from ``beta_min`` to ``beta_max``."""

    beta_min: float
    beta_max: float
    n_sweep: int

    def __post_init__(self) -> None:
        if self.n_sweep < 1:
            raise ValueError("n_sweep must be >= 1")
        if self.beta_min < 0.0:
            raise ValueError("beta_min must be >= 0")
        if self.beta_min > self.beta_max:
            raise ValueError("beta_min must be <= beta_max")

    @property
    def betas(self) -> FloatArray:
        return np.linspace(self.beta_min, self.beta_max, num=self.n_sweep, dtype=np.float64)
