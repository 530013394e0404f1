"""General Boltzmann machine fitted by L1-regularized pseudo-likelihood.

The objective maximized by :func:`fit` is (A. Hyvärinen, Neural Comput. 18,
2283 (2006); E. Aurell & M. Ekeberg, PRL 108, 090201 (2012))::

    PL(W, b) = [beta * (tr(X W X^T) + sum(X b))
                - sum(log cosh(beta * (W X^T + b)))] / m
               - alpha * sum(|W|)

for ``m`` spin samples stacked as rows of ``X``. Weights whose magnitude
stays below ``delta`` are periodically removed from the decimation mask.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from inverseising.config.schemas import FitOptions
from inverseising.types import FloatArray, IntArray
from inverseising.utils.checks import (
    DimensionMismatch,
    check_spin_values,
    require_finite,
)
from inverseising.utils.convert import heaviside, logcosh, symmetrize
from inverseising.utils.logging import log_event
from inverseising.utils.rng import make_rng

logger = logging.getLogger(__name__)

# relative tolerance of the likelihood-plateau stopping rule
_PL_RTOL = math.sqrt(float(np.finfo(np.float64).eps))


class GBM:
    """Weights ``W``, biases ``b`` and a symmetric 0/1 decimation mask.

    ``W`` is kept symmetric with a zero diagonal; the mask starts with every
    off-diagonal bond active. Both are updated in place by :func:`fit` and
    persist across repeated fits.
    """

    def __init__(self, n_unit: int, rng: int | np.random.Generator | None = None) -> None:
        if n_unit < 1:
            raise ValueError(f"n_unit must be positive, got {n_unit}")

        gen = make_rng(rng)
        W = symmetrize(gen.random((n_unit, n_unit)))
        np.fill_diagonal(W, 0.0)

        self.W: FloatArray = W
        self.b: FloatArray = gen.random(n_unit)
        self.mask: IntArray = np.ones((n_unit, n_unit), dtype=np.int64) - np.eye(
            n_unit, dtype=np.int64
        )
        self._grad_buffer: FloatArray | None = None

    @property
    def n_unit(self) -> int:
        return int(self.W.shape[0])

    @property
    def active_bonds(self) -> int:
        return int(np.triu(self.mask, 1).sum())

    def grad_buffer(self, shape: tuple[int, ...]) -> FloatArray:
        """Scratch array for the weight gradient, reallocated only on shape change."""

        if self._grad_buffer is None or self._grad_buffer.shape != shape:
            self._grad_buffer = np.empty(shape, dtype=np.float64)
        return self._grad_buffer

    def __repr__(self) -> str:
        return f"GBM(n_unit={self.n_unit}, active_bonds={self.active_bonds})"


Model = GBM


@dataclass(frozen=True)
class IterationMetrics:
    """Per-iteration diagnostics of the pseudo-likelihood ascent."""

    iteration: int
    pseudo_likelihood: float
    active_bonds: int


@dataclass(frozen=True)
class FitContext:
    """Resolved options and convergence record of one :func:`fit` call."""

    options: FitOptions
    delta: float
    iterations: int
    converged: bool
    history: list[IterationMetrics] = field(default_factory=list)

    @property
    def final_pseudo_likelihood(self) -> float:
        if not self.history:
            raise ValueError("fit history is empty")
        return self.history[-1].pseudo_likelihood


def _activations(model: GBM, X: FloatArray, beta: float) -> FloatArray:
    return beta * (model.W @ X.T + model.b[:, None])


def pseudo_likelihood(model: GBM, X: FloatArray, options: FitOptions) -> float:
    """L1-penalized log-pseudo-likelihood of samples ``X`` (shape ``(m, n)``)."""

    m = X.shape[0]
    H = float(np.einsum("ki,ij,kj->", X, model.W, X)) + float(np.sum(X @ model.b))
    tmp = float(np.sum(logcosh(_activations(model, X, options.beta))))
    PL = (options.beta * H - tmp) / m
    return PL - options.alpha * float(np.sum(np.abs(model.W)))


def calc_grad(model: GBM, X: FloatArray, options: FitOptions) -> tuple[FloatArray, FloatArray]:
    """Ascent direction ``(dW, db)`` of :func:`pseudo_likelihood`.

    ``dW`` lives in the model's scratch buffer and is overwritten by the next
    call.
    """

    m = X.shape[0]
    dev = X.T - np.tanh(_activations(model, X, options.beta))

    dW = model.grad_buffer(model.W.shape)
    np.matmul(dev, X, out=dW)
    dW *= options.beta / m
    dW[...] = symmetrize(dW)
    dW -= options.alpha * np.sign(model.W)

    db = options.beta * np.mean(dev, axis=1)
    return dW, db


def update(model: GBM, grads: tuple[FloatArray, FloatArray], options: FitOptions) -> None:
    """Take one gradient-ascent step and re-apply symmetry and the mask."""

    dW, db = grads
    model.W += options.lr * dW
    model.W[...] = symmetrize(model.W)
    model.W *= model.mask
    model.b += options.lr * db


def decimate(model: GBM, delta: float) -> int:
    """Prune bonds with ``|W_ij| < delta`` symmetrically; returns active bond count."""

    model.mask[np.abs(model.W) < delta] = 0
    model.mask = model.mask * model.mask.T
    model.W *= model.mask
    return model.active_bonds


def _prepare_samples(model: GBM, X: Any) -> FloatArray:
    X_train = np.asarray(X, dtype=np.float64)
    if X_train.ndim != 2:
        raise DimensionMismatch(f"samples must be rank-2 (m, n), received shape {X_train.shape}")
    if X_train.shape[1] != model.n_unit:
        raise DimensionMismatch(
            f"samples have {X_train.shape[1]} columns but the model has {model.n_unit} units"
        )
    if X_train.shape[0] == 0:
        raise DimensionMismatch("samples must contain at least one row")
    require_finite("samples", X_train)
    check_spin_values("samples", X_train)
    return X_train


def fit(
    model: GBM,
    X: Any,
    delta: float = 0.1,
    options: FitOptions | None = None,
    **opts: Any,
) -> FitContext:
    """Fit ``model`` to spin samples ``X`` by pseudo-likelihood ascent.

    Every ``epochs`` iterations weights below ``delta`` in magnitude are
    decimated. The loop stops early once an update leaves the
    pseudo-likelihood unchanged within floating-point tolerance, and
    otherwise runs ``n_iter`` iterations.

    Example: two anti-correlated samples give antiferromagnetic bonds
    between unit 1 and the other two units::

        model = GBM(3)
        fit(model, [[1, -1, -1], [-1, 1, 1]])
        decode(infer(model))  # {(1, 2): -1, (1, 3): -1, (2, 3): 1}
    """

    ctx = FitOptions.resolve(options, **opts)
    if delta < 0.0:
        raise ValueError("delta must be non-negative")
    X_train = _prepare_samples(model, X)

    history: list[IterationMetrics] = []
    converged = False
    step = 0

    for step in range(1, ctx.n_iter + 1):
        old_likelihood = pseudo_likelihood(model, X_train, ctx)
        update(model, calc_grad(model, X_train, ctx), ctx)

        if step % ctx.epochs == 0:
            active = decimate(model, delta)
            log_event(
                logger,
                "fit_decimation",
                level=logging.DEBUG,
                iteration=step,
                active_bonds=active,
            )

        likelihood = pseudo_likelihood(model, X_train, ctx)
        history.append(
            IterationMetrics(
                iteration=step,
                pseudo_likelihood=likelihood,
                active_bonds=model.active_bonds,
            )
        )
        log_event(
            logger,
            "fit_iteration",
            level=logging.DEBUG,
            iteration=step,
            pseudo_likelihood=likelihood,
            active_bonds=model.active_bonds,
        )

        if math.isclose(likelihood, old_likelihood, rel_tol=_PL_RTOL, abs_tol=0.0):
            converged = True
            break

    log_event(
        logger,
        "fit_done",
        iterations=step,
        converged=converged,
        pseudo_likelihood=history[-1].pseudo_likelihood if history else None,
        active_bonds=model.active_bonds,
    )
    return FitContext(
        options=ctx,
        delta=float(delta),
        iterations=step,
        converged=converged,
        history=history,
    )


def coef(model: GBM) -> FloatArray:
    """Copy of the weight matrix with ``-0.0`` normalized to ``0.0``."""

    W = np.array(model.W, copy=True)
    W[W == 0.0] = 0.0
    return W


weights = coef


def infer(model: GBM) -> IntArray:
    """Sign-encoded adjacency matrix: ``+1`` ferromagnetic, ``-1`` antiferromagnetic, ``0`` absent."""

    return heaviside(coef(model)).astype(np.int64)
