from inverseising.model.gbm import (
    GBM,
    FitContext,
    IterationMetrics,
    Model,
    calc_grad,
    coef,
    decimate,
    fit,
    infer,
    pseudo_likelihood,
    update,
    weights,
)

__all__ = [
    "GBM",
    "FitContext",
    "IterationMetrics",
    "Model",
    "calc_grad",
    "coef",
    "decimate",
    "fit",
    "infer",
    "pseudo_likelihood",
    "update",
    "weights",
]
