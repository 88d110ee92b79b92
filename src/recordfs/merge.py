"""Merge strategies applied by ``update``."""

from __future__ import annotations

import copy
from typing import Any, Mapping

from .errors import InvalidMergeStrategyError
from .keys import Key, key_to_dict
from .models import MergeStrategy, Record, UpdateOptions


def resolve_merge_strategy(options: UpdateOptions | None) -> MergeStrategy:
    """Pick the strategy named by ``options``; ``replace_all`` forces ``replace``."""

    if options is None:
        return MergeStrategy.DEEP
    if options.replace_all:
        return MergeStrategy.REPLACE
    strategy = options.merge_strategy
    if strategy is None:
        return MergeStrategy.DEEP
    try:
        return MergeStrategy(strategy)
    except ValueError as exc:
        raise InvalidMergeStrategyError(
            strategy, allowed=[member.value for member in MergeStrategy]
        ) from exc


def deep_merge(existing: Mapping[str, Any], incoming: Mapping[str, Any]) -> Record:
    """Recursively merge mappings; lists and scalars from ``incoming`` replace outright."""

    merged: Record = {field: copy.deepcopy(value) for field, value in existing.items()}
    for field, value in incoming.items():
        current = merged.get(field)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[field] = deep_merge(current, value)
        else:
            merged[field] = copy.deepcopy(value)
    return merged


def shallow_merge(existing: Mapping[str, Any], incoming: Mapping[str, Any]) -> Record:
    return {**existing, **incoming}


def apply_merge(
    strategy: MergeStrategy,
    existing: Mapping[str, Any],
    incoming: Mapping[str, Any],
    key: Key,
) -> Record:
    """Combine ``existing`` and ``incoming``, then force the identity from ``key``."""

    if strategy is MergeStrategy.DEEP:
        merged = deep_merge(existing, incoming)
    elif strategy is MergeStrategy.SHALLOW:
        merged = shallow_merge(existing, incoming)
    elif strategy is MergeStrategy.REPLACE:
        merged = dict(incoming)
    else:
        raise InvalidMergeStrategyError(strategy, allowed=[member.value for member in MergeStrategy])

    merged.update(key_to_dict(key))
    return merged


__all__ = ["apply_merge", "deep_merge", "resolve_merge_strategy", "shallow_merge"]
