from __future__ import annotations

from inverseising.config.schemas import AnnealOptions, FitOptions


def quick_anneal_options(seed: int | None = 0) -> AnnealOptions:
    """Short schedule for CI and interactive checks."""

    return AnnealOptions(beta_min=1.0, beta_max=10.0, n_sweep=200, n_read=10, seed=seed)


def sampling_anneal_options(n_read: int = 1000, seed: int | None = 0) -> AnnealOptions:
    """Many checkpointed reads at the default schedule, used to draw training samples."""

    return AnnealOptions(n_read=n_read, seed=seed)


def default_fit_options() -> FitOptions:
    """Hyperparameters of the reference inverse-Ising fit."""

    return FitOptions(alpha=0.01, beta=1.0, lr=1.0, epochs=20, n_iter=100)
