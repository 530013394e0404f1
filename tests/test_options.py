from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from inverseising.config.presets import default_fit_options, quick_anneal_options
from inverseising.config.schemas import AnnealOptions, FitOptions
from inverseising.sampling.annealer import anneal


def test_defaults() -> None:
    a = AnnealOptions()
    f = FitOptions()

    assert (a.beta_min, a.beta_max, a.n_sweep, a.n_read) == (5.0, 15.0, 1000, 1)
    assert a.seed is None
    assert not a.restart_each_read
    assert (f.alpha, f.beta, f.lr, f.epochs, f.n_iter) == (0.01, 1.0, 1.0, 20, 100)
    assert default_fit_options() == f


def test_unknown_keys_warn_and_are_ignored(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="inverseising.config.schemas"):
        opts = FitOptions.resolve(lr=0.5, momentum=0.9)

    assert opts.lr == 0.5
    assert not hasattr(opts, "momentum")
    assert "momentum" in caplog.text


def test_fit_keys_are_not_anneal_keys(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="inverseising.config.schemas"):
        res = anneal({1: -1}, {(1, 2): 1}, n_sweep=200, epochs=3, seed=0)

    assert "epochs" in caplog.text
    assert len(res.states) == 1


def test_resolve_applies_overrides_to_instance() -> None:
    base = quick_anneal_options(seed=4)

    assert AnnealOptions.resolve(base) is base
    merged = AnnealOptions.resolve(base, n_read=3)
    assert merged.n_read == 3
    assert merged.n_sweep == base.n_sweep
    assert merged.seed == 4


def test_out_of_range_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        AnnealOptions(beta_min=10.0, beta_max=1.0)
    with pytest.raises(ValidationError):
        AnnealOptions(n_sweep=0)
    with pytest.raises(ValidationError):
        AnnealOptions(seed=-1)
    with pytest.raises(ValidationError):
        FitOptions(lr=0.0)
    with pytest.raises(ValidationError):
        FitOptions(epochs=0)
