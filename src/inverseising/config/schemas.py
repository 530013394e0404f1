from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)

_OptionsT = TypeVar("_OptionsT", bound="_Options")


class _Options(BaseModel):
    """Option set that warns about, then drops, unrecognized keys."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _warn_unknown_keys(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            for key in data:
                if key not in cls.model_fields:
                    logger.warning("Keyword '%s' is an invalid optional entry, ignoring", key)
        return data

    @classmethod
    def resolve(
        cls: type[_OptionsT],
        options: _OptionsT | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> _OptionsT:
        """Merge an optional base option set with keyword overrides."""

        if options is None:
            return cls.model_validate(overrides)
        if isinstance(options, Mapping):
            return cls.model_validate({**options, **overrides})
        if not overrides:
            return options
        return cls.model_validate({**options.model_dump(), **overrides})


class AnnealOptions(_Options):
    """Linear simulated-annealing schedule for the forward problem."""

    beta_min: float = Field(default=5.0, ge=0.0)
    beta_max: float = Field(default=15.0, ge=0.0)
    n_sweep: int = Field(default=1000, ge=1)
    n_read: int = Field(default=1, ge=0)
    seed: Annotated[int, Field(ge=0)] | None = None
    restart_each_read: bool = False

    @model_validator(mode="after")
    def _check_beta_bounds(self) -> AnnealOptions:
        if self.beta_min > self.beta_max:
            raise ValueError("beta_min must be <= beta_max")
        return self


class FitOptions(_Options):
    """Pseudo-likelihood gradient-ascent hyperparameters for the inverse problem."""

    alpha: float = Field(default=0.01, ge=0.0)
    beta: float = Field(default=1.0, gt=0.0)
    lr: float = Field(default=1.0, gt=0.0)
    epochs: int = Field(default=20, ge=1)
    n_iter: int = Field(default=100, ge=1)
