from collections.abc import Mapping
from copy import deepcopy
from typing import Any, Callable

MergeFn = Callable[[dict, dict], dict]


def is_structured(value: Any) -> bool:
    """True for mapping values only. Lists, None and scalars are never merged."""
    return isinstance(value, Mapping)


def deep_merge(primary: Mapping, secondary: Mapping) -> dict:
    """Deep merge two mappings into a new dict. `primary` wins on conflicts.

    Nested mappings are merged recursively; lists and scalars from `primary`
    replace whatever `secondary` holds. Neither input is modified.
    """
    result = {key: deepcopy(value) for key, value in secondary.items()}
    for key, value in primary.items():
        if key in result and is_structured(result[key]) and is_structured(value):
            result[key] = deep_merge(value, result[key])
        else:
            result[key] = deepcopy(value)
    return result


def merge_values(primary: Any, secondary: Any, merge_fn: MergeFn = deep_merge, missing: Any = None) -> Any:
    """Fold a newly resolved value (primary) onto what was accumulated (secondary).

    `missing` is the marker for "nothing resolved"; a primary equal to it keeps
    the secondary.
    """
    if primary is missing:
        return secondary

    if is_structured(primary) and is_structured(secondary):
        return merge_fn(primary, secondary)

    return primary
