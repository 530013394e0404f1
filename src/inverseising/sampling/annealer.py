"""Single-spin-flip Metropolis annealing for the forward Ising problem.

Energy of a configuration ``s``::

    E(s) = -b·s - 0.5 * s^T triu(W, 1) s

so every undirected bond is counted once.
"""

from __future__ import annotations

import logging
import math
from typing import Any

import numpy as np

from inverseising.config.schemas import AnnealOptions
from inverseising.sampling.response import Response, create_response
from inverseising.sampling.schedules import AnnealSchedule
from inverseising.types import BiasMap, FloatArray, InteractionMap
from inverseising.utils.checks import EmptyResult
from inverseising.utils.logging import log_event
from inverseising.utils.rng import make_rng

logger = logging.getLogger(__name__)


def get_energy(resp: Response, state: np.ndarray) -> float:
    """Energy of ``state`` under the couplings and field held by ``resp``."""

    s = np.asarray(state, dtype=np.float64)
    linear = float(np.dot(resp.b, s))
    quad = float(s @ np.triu(resp.W, 1) @ s)
    return -linear - 0.5 * quad


def accept_rate(dE: float, beta: float) -> float:
    """Metropolis acceptance ``min(1, exp(-beta * dE))``."""

    return math.exp(min(0.0, -beta * dE))


def coupling_matrix(W: FloatArray) -> FloatArray:
    """Symmetric zero-diagonal couplings built from the strict upper triangle of ``W``."""

    upper = np.triu(np.asarray(W, dtype=np.float64), 1)
    return upper + upper.T


def flip_energy_delta(
    couplings: FloatArray,
    field: FloatArray,
    state: FloatArray,
    index: int,
) -> float:
    """``E(s with s_i flipped) - E(s)`` using only the local field of spin ``i``."""

    local = field[index] + 0.5 * float(couplings[index] @ state)
    return 2.0 * float(state[index]) * float(local)


def anneal(
    bias: BiasMap,
    interactions: InteractionMap,
    options: AnnealOptions | None = None,
    **opts: Any,
) -> Response:
    """Solve the forward Ising problem given by ``bias`` and ``interactions``.

    Runs ``n_read`` annealing reads of ``n_sweep`` Metropolis steps each, with
    the inverse temperature rising linearly from ``beta_min`` to ``beta_max``.
    Unless ``restart_each_read`` is set, each read continues from the final
    configuration of the previous one; the very first read starts from all
    ``+1``.
    """

    ctx = AnnealOptions.resolve(options, **opts)
    resp = create_response(bias, interactions)
    if ctx.n_read == 0:
        raise EmptyResult("anneal requires n_read >= 1")

    schedule = AnnealSchedule(beta_min=ctx.beta_min, beta_max=ctx.beta_max, n_sweep=ctx.n_sweep)
    betas = schedule.betas.tolist()
    rng = make_rng(ctx.seed)

    n_unit = resp.n_unit
    couplings = coupling_matrix(resp.W)
    field = resp.b
    state = np.ones(n_unit, dtype=np.float64)

    for read in range(ctx.n_read):
        if ctx.restart_each_read:
            state.fill(1.0)

        if n_unit > 0:
            sites = rng.integers(0, n_unit, size=ctx.n_sweep).tolist()
            draws = rng.random(ctx.n_sweep).tolist()
            for beta, i, u in zip(betas, sites, draws):
                dE = flip_energy_delta(couplings, field, state, i)
                if u < accept_rate(dE, beta):
                    state[i] = -state[i]

        energy = get_energy(resp, state)
        resp.append(state, energy)
        log_event(logger, "anneal_read", level=logging.DEBUG, read=read, energy=energy)

    log_event(
        logger,
        "anneal_done",
        n_unit=n_unit,
        n_read=ctx.n_read,
        best_energy=resp.best_energy,
    )
    return resp
