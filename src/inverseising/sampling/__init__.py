from inverseising.sampling.annealer import (
    accept_rate,
    anneal,
    coupling_matrix,
    flip_energy_delta,
    get_energy,
)
from inverseising.sampling.indexing import (
    IndexMapping,
    build_index_mapping,
    index_problem,
    relabel,
)
from inverseising.sampling.response import Response, create_response
from inverseising.sampling.schedules import AnnealSchedule

__all__ = [
    "AnnealSchedule",
    "IndexMapping",
    "Response",
    "accept_rate",
    "anneal",
    "build_index_mapping",
    "coupling_matrix",
    "create_response",
    "flip_energy_delta",
    "get_energy",
    "index_problem",
    "relabel",
]
