import copy
from collections.abc import Mapping
from typing import Any

JObject = dict[str, Any]


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> JObject:
    """Merge ``override`` on top of ``base`` without mutating either.

    Nested mappings are merged recursively; any other value in ``override``
    (scalars and lists alike) replaces the value in ``base``. The result shares
    no nested containers with either input.
    """
    merged = {key: copy.deepcopy(value) for key, value in base.items()}
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def merge_all(layers: list[Mapping[str, Any]]) -> JObject:
    """Deep-merge ``layers`` in order, each one over the accumulated result."""
    merged: JObject = {}
    for layer in layers:
        merged = deep_merge(merged, layer)
    return merged
