from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy

from remote_configs.domain.errors import MergeDepthError

# Configuration trees are shallow in practice; anything deeper is treated as cyclic/malformed.
DEFAULT_MAX_DEPTH = 32


def deep_merge(
    base: Mapping[object, object],
    override: Mapping[object, object],
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> dict[object, object]:
    """Combine two mappings into a new dict.

    Nested mappings present on both sides are merged key-wise; any other
    overlapping value (scalars, lists) is taken from ``override``. Inputs are
    never mutated and leaves are deep-copied so callers cannot reach back into
    the source data.
    """
    return _merge(base, override, depth=0, max_depth=max_depth)


def _merge(
    base: Mapping[object, object],
    override: Mapping[object, object],
    *,
    depth: int,
    max_depth: int,
) -> dict[object, object]:
    if depth > max_depth:
        raise MergeDepthError(f"Mapping nesting exceeds max depth {max_depth}")

    result: dict[object, object] = {}
    for key, value in base.items():
        result[key] = _clone(value, depth=depth + 1, max_depth=max_depth)

    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = _merge(current, value, depth=depth + 1, max_depth=max_depth)
            continue
        result[key] = _clone(value, depth=depth + 1, max_depth=max_depth)
    return result


def _clone(value: object, *, depth: int, max_depth: int) -> object:
    # Mappings are rebuilt through _merge so the depth bound also covers one-sided branches.
    if isinstance(value, Mapping):
        return _merge(value, {}, depth=depth, max_depth=max_depth)
    return deepcopy(value)
