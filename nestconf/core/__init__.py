"""
nestconf Core Package

Namespace derivation, dotted path lookup, and value merging.
"""

from nestconf.core.merge import deep_merge, is_structured, merge_values
from nestconf.core.namespace import derive_namespace
from nestconf.core.object_path import get_path_value

__all__ = [
    'deep_merge',
    'is_structured',
    'merge_values',
    'derive_namespace',
    'get_path_value',
]
