from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any

from inverseising.types import BiasMap, InteractionMap
from inverseising.utils.checks import require_homogeneous_types


@dataclass(frozen=True)
class IndexMapping:
    """Bijection between node identifiers and unit numbers ``1..n``."""

    indices: tuple[Any, ...]

    @property
    def n_unit(self) -> int:
        return len(self.indices)

    @property
    def table(self) -> dict[Any, int]:
        return {key: pos for pos, key in enumerate(self.indices, start=1)}

    def label(self, unit: int) -> Any:
        if unit < 1 or unit > self.n_unit:
            raise ValueError(f"unit out of bounds: {unit}")
        return self.indices[unit - 1]


def _pair(key: Any) -> tuple[Hashable, Hashable]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise ValueError(f"interaction keys must be node pairs, received {key!r}")
    return key


def build_index_mapping(bias: BiasMap, interactions: InteractionMap) -> IndexMapping:
    """Collect every node identifier and sort them into a deterministic order.

    Identifiers must all share one concrete type; mixing e.g. ``int`` and
    ``str`` raises :class:`~inverseising.utils.checks.TypeMismatch`.
    """

    nodes: set[Any] = set(bias.keys())
    for key in interactions:
        nodes.update(_pair(key))

    require_homogeneous_types(nodes)
    return IndexMapping(indices=tuple(sorted(nodes)))


def relabel(
    mapping: IndexMapping,
    bias: BiasMap,
    interactions: InteractionMap,
) -> tuple[dict[int, float], dict[tuple[int, int], float]]:
    """Rewrite bias and interaction keys into unit numbers of ``mapping``."""

    table = mapping.table
    relabelled_bias = {table[key]: float(value) for key, value in bias.items()}

    relabelled_quad: dict[tuple[int, int], float] = {}
    for key, value in interactions.items():
        a, b = _pair(key)
        if a == b:
            raise ValueError(f"self-interaction of node {a!r} is not a pairwise bond")
        pair = (table[a], table[b])
        if pair in relabelled_quad or pair[::-1] in relabelled_quad:
            raise ValueError(f"interaction between {a!r} and {b!r} given more than once")
        relabelled_quad[pair] = float(value)

    return relabelled_bias, relabelled_quad


def index_problem(
    bias: BiasMap,
    interactions: InteractionMap,
) -> tuple[IndexMapping, dict[int, float], dict[tuple[int, int], float]]:
    """Build the index mapping and relabel both maps in one step."""

    mapping = build_index_mapping(bias, interactions)
    relabelled_bias, relabelled_quad = relabel(mapping, bias, interactions)
    return mapping, relabelled_bias, relabelled_quad

