from __future__ import annotations

import copy

import pytest

from remote_configs.domain.errors import MergeDepthError
from remote_configs.resolution.merge import deep_merge


def test_nested_mappings_merge_key_wise() -> None:
    # Overlapping nested mappings combine at every depth.
    base = {"db": {"host": "a", "pool": {"min": 1, "max": 5}}, "debug": False}
    override = {"db": {"pool": {"max": 10}}, "debug": True}
    assert deep_merge(base, override) == {
        "db": {"host": "a", "pool": {"min": 1, "max": 10}},
        "debug": True,
    }


def test_lists_and_scalars_are_replaced() -> None:
    base = {"hosts": ["a", "b"], "retries": 3}
    override = {"hosts": ["c"], "retries": 5}
    assert deep_merge(base, override) == {"hosts": ["c"], "retries": 5}


def test_override_can_change_value_shape() -> None:
    # A mapping over a scalar (or vice versa) simply wins.
    assert deep_merge({"a": 1}, {"a": {"b": 2}}) == {"a": {"b": 2}}
    assert deep_merge({"a": {"b": 2}}, {"a": 1}) == {"a": 1}


def test_inputs_are_not_mutated() -> None:
    base = {"db": {"host": "a"}, "tags": ["x"]}
    override = {"db": {"port": 1}}
    base_before = copy.deepcopy(base)
    override_before = copy.deepcopy(override)

    merged = deep_merge(base, override)
    merged["db"]["host"] = "changed"
    merged["tags"].append("y")

    assert base == base_before
    assert override == override_before


def test_cyclic_input_hits_depth_bound() -> None:
    # Self-referencing data must fail fast instead of recursing forever.
    cyclic: dict[str, object] = {}
    cyclic["self"] = cyclic
    with pytest.raises(MergeDepthError):
        deep_merge({}, cyclic)


def test_depth_bound_is_configurable() -> None:
    data = {"a": {"b": {"c": 1}}}
    assert deep_merge({}, data, max_depth=3) == data
    with pytest.raises(MergeDepthError):
        deep_merge({}, data, max_depth=1)
