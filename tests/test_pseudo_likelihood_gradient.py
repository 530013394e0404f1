from __future__ import annotations

import jax
import jax.numpy as jnp
import numpy as np

from inverseising.config.schemas import FitOptions
from inverseising.model.gbm import GBM, calc_grad, pseudo_likelihood, update
from inverseising.utils.convert import symmetrize

jax.config.update("jax_enable_x64", True)


def _jax_pseudo_likelihood(W, b, X, alpha: float, beta: float):
    m = X.shape[0]
    H = jnp.trace(X @ W @ X.T) + jnp.sum(X @ b)
    tmp = jnp.sum(jnp.log(jnp.cosh(beta * (W @ X.T + b[:, None]))))
    return (beta * H - tmp) / m - alpha * jnp.sum(jnp.abs(W))


def _dense_model(rng: np.random.Generator, n_unit: int) -> GBM:
    model = GBM(n_unit, rng=rng)
    # nonzero everywhere so that sign(W) is the derivative of |W|
    magnitudes = rng.uniform(0.1, 0.6, size=(n_unit, n_unit))
    signs = rng.choice([-1.0, 1.0], size=(n_unit, n_unit))
    model.W = symmetrize(magnitudes * signs)
    model.b = rng.normal(scale=0.3, size=n_unit)
    return model


def test_analytic_gradient_matches_autodiff() -> None:
    rng = np.random.default_rng(17)
    model = _dense_model(rng, n_unit=5)
    X = rng.choice([-1.0, 1.0], size=(40, 5))
    opts = FitOptions(alpha=0.03, beta=0.7)

    dW, db = calc_grad(model, X, opts)
    gW, gb = jax.grad(_jax_pseudo_likelihood, argnums=(0, 1))(
        jnp.asarray(model.W), jnp.asarray(model.b), jnp.asarray(X), opts.alpha, opts.beta
    )

    np.testing.assert_allclose(dW, symmetrize(np.asarray(gW)), rtol=1.0e-10, atol=1.0e-12)
    np.testing.assert_allclose(db, np.asarray(gb), rtol=1.0e-10, atol=1.0e-12)


def test_pseudo_likelihood_matches_direct_formula() -> None:
    rng = np.random.default_rng(23)
    model = _dense_model(rng, n_unit=4)
    X = rng.choice([-1.0, 1.0], size=(30, 4))
    opts = FitOptions(alpha=0.02, beta=1.3)

    expected = float(
        _jax_pseudo_likelihood(
            jnp.asarray(model.W), jnp.asarray(model.b), jnp.asarray(X), opts.alpha, opts.beta
        )
    )
    assert np.isclose(pseudo_likelihood(model, X, opts), expected, rtol=1.0e-12, atol=1.0e-12)


def test_small_ascent_step_increases_unpenalized_likelihood() -> None:
    rng = np.random.default_rng(29)
    model = GBM(4, rng=rng)
    X = rng.choice([-1.0, 1.0], size=(60, 4))
    opts = FitOptions(alpha=0.0, lr=0.05)

    before = pseudo_likelihood(model, X, opts)
    update(model, calc_grad(model, X, opts), opts)

    assert pseudo_likelihood(model, X, opts) > before
