from collections.abc import Mapping
from typing import Any


def get_path_value(data: Any, path: str, default: Any = None) -> Any:
    """Walk a dotted path through nested mappings. Returns `default` when any key is missing."""
    current = data
    for key in path.split('.'):
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return current
