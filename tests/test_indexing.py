from __future__ import annotations

import pytest

from inverseising.sampling.indexing import build_index_mapping, index_problem, relabel
from inverseising.utils.checks import TypeMismatch


def test_identifiers_are_sorted_into_units() -> None:
    mapping = build_index_mapping({"c": 1.0}, {("b", "a"): -1.0, ("a", "c"): 2.0})

    assert mapping.indices == ("a", "b", "c")
    assert mapping.n_unit == 3
    assert mapping.table == {"a": 1, "b": 2, "c": 3}
    assert mapping.label(2) == "b"


def test_relabel_rewrites_both_maps() -> None:
    bias = {30: 0.5}
    quad = {(10, 30): -1.0, (20, 10): 2.0}

    mapping, rel_bias, rel_quad = index_problem(bias, quad)

    assert mapping.indices == (10, 20, 30)
    assert rel_bias == {3: 0.5}
    assert rel_quad == {(1, 3): -1.0, (2, 1): 2.0}


def test_mixed_types_are_rejected() -> None:
    with pytest.raises(TypeMismatch):
        build_index_mapping({1: 1.0}, {(1, "two"): 1.0})


def test_bool_and_int_labels_do_not_mix() -> None:
    with pytest.raises(TypeMismatch):
        build_index_mapping({True: 1.0}, {(1, 2): 1.0})


def test_both_orderings_of_one_pair_are_rejected() -> None:
    mapping = build_index_mapping({}, {("a", "b"): 1.0, ("b", "a"): 1.0})

    with pytest.raises(ValueError, match="more than once"):
        relabel(mapping, {}, {("a", "b"): 1.0, ("b", "a"): 1.0})


def test_non_pair_keys_are_rejected() -> None:
    with pytest.raises(ValueError, match="node pairs"):
        build_index_mapping({}, {(1, 2, 3): 1.0})


def test_self_interaction_is_rejected() -> None:
    with pytest.raises(ValueError, match="self-interaction"):
        index_problem({}, {(1, 1): 1.0})
