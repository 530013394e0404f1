from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from inverseising.sampling.indexing import index_problem
from inverseising.types import BiasMap, FloatArray, InteractionMap, SpinArray, SpinBatch
from inverseising.utils.checks import EmptyResult, require_shape
from inverseising.utils.convert import trans


@dataclass
class Response:
    """Outcome of one annealing run.

    ``states[i]`` and ``energies[i]`` describe the same read. ``sample`` is
    derived from the lowest-energy read each time it is accessed.
    """

    W: FloatArray
    b: FloatArray
    indices: tuple[Any, ...]
    states: list[SpinArray] = field(default_factory=list)
    energies: list[float] = field(default_factory=list)

    @property
    def n_unit(self) -> int:
        return len(self.indices)

    def append(self, state: SpinArray, energy: float) -> None:
        state = np.asarray(state)
        require_shape("state", state, (self.n_unit,))
        self.states.append(np.asarray(state, dtype=np.int8).copy())
        self.energies.append(float(energy))

    @property
    def best_index(self) -> int:
        if not self.energies:
            raise EmptyResult("response holds no completed reads")
        return int(np.argmin(self.energies))

    @property
    def sample(self) -> dict[Any, int]:
        best = self.states[self.best_index]
        return {key: int(spin) for key, spin in zip(self.indices, best)}

    @property
    def best_energy(self) -> float:
        return self.energies[self.best_index]

    def as_matrix(self) -> SpinBatch:
        """Stack reads into an ``(n_read, n_unit)`` spin matrix."""

        if not self.states:
            raise EmptyResult("response holds no completed reads")
        return np.vstack(self.states).astype(np.int8)


def create_response(bias: BiasMap, interactions: InteractionMap) -> Response:
    """Index the problem and build the dense field vector and coupling matrix.

    Nodes without an entry in ``bias`` get zero field.
    """

    mapping, relabelled_bias, relabelled_quad = index_problem(bias, interactions)
    n_unit = mapping.n_unit

    field_vec = np.zeros(n_unit, dtype=np.float64)
    for unit, value in relabelled_bias.items():
        field_vec[unit - 1] = value

    return Response(
        W=trans(relabelled_quad, n_unit),
        b=field_vec,
        indices=mapping.indices,
    )
