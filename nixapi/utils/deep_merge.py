# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Deep Merge Utility - Nutritionix API Client

Recursively merges any number of nested dictionaries into a new dictionary.
"""

import copy
from collections.abc import Mapping
from typing import Any


def _is_mapping(value: Any) -> bool:
    # Lists and tuples are never merged element-wise, they replace wholesale
    return isinstance(value, Mapping)


def _copy_value(value: Any) -> Any:
    if _is_mapping(value):
        return {key: _copy_value(item) for key, item in value.items()}
    return copy.deepcopy(value)


def _merge_two(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result = _copy_value(base)

    for key, value in override.items():
        if key in result and _is_mapping(result[key]) and _is_mapping(value):
            result[key] = _merge_two(result[key], value)
        else:
            result[key] = _copy_value(value)

    return result


def deep_merge(*objects: Mapping[str, Any]) -> dict[str, Any]:
    """
    Recursively merge two or more dictionaries.

    Later arguments take precedence over earlier ones. Nested dictionaries
    are merged key by key; everything else (scalars, lists, tuples) coming
    from a later argument replaces the earlier value. Merging more than two
    dictionaries is the same as merging the first with the merge of the
    rest: ``deep_merge(a, b, c) == deep_merge(a, deep_merge(b, c))``.

    None of the arguments are modified and the result shares no mutable
    values with them.

    Args:
        *objects: Two or more dictionaries, lowest priority first

    Returns:
        A new dictionary with merged values

    Raises:
        ValueError: If fewer than two dictionaries are given
        TypeError: If any argument is not a mapping

    Example:
        >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
        {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    if len(objects) < 2:
        raise ValueError(
            f"deep_merge requires at least two dictionaries, got {len(objects)}"
        )

    for position, obj in enumerate(objects):
        if not _is_mapping(obj):
            raise TypeError(
                f"deep_merge argument {position} must be a mapping, "
                f"got {type(obj).__name__}"
            )

    if len(objects) > 2:
        return _merge_two(objects[0], deep_merge(*objects[1:]))

    return _merge_two(objects[0], objects[1])
