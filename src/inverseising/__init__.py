"""Forward (simulated annealing) and inverse (pseudo-likelihood) Ising problems."""

from inverseising.config.schemas import AnnealOptions, FitOptions
from inverseising.model.gbm import GBM, FitContext, Model, coef, fit, infer, weights
from inverseising.sampling.annealer import anneal
from inverseising.sampling.response import Response
from inverseising.utils.checks import DimensionMismatch, EmptyResult, TypeMismatch
from inverseising.utils.convert import decode, trans
from inverseising.utils.display import dprint

__all__ = [
    "AnnealOptions",
    "DimensionMismatch",
    "EmptyResult",
    "FitContext",
    "FitOptions",
    "GBM",
    "Model",
    "Response",
    "TypeMismatch",
    "anneal",
    "coef",
    "decode",
    "dprint",
    "fit",
    "infer",
    "trans",
    "weights",
]
