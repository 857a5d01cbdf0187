"""
nestconf Storage Package

Fragment dataclass and the lazily sorted FragmentStore.
"""

from nestconf.storage.fragment_store import Fragment, FragmentStore

__all__ = [
    'Fragment',
    'FragmentStore',
]
