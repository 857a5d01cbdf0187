"""
nestconf - hierarchical config aggregation.

Discovers config files in one or more directories, files each one under a
namespace derived from its name, and resolves dotted keys across all of them.
"""

from nestconf.container import Container, create_container
from nestconf.options import DEFAULT_EXTENSIONS, NormalizedOptions, Options, normalize_options
from nestconf.storage import Fragment, FragmentStore

__version__ = '0.1.0'

__all__ = [
    'Container',
    'create_container',
    'DEFAULT_EXTENSIONS',
    'NormalizedOptions',
    'Options',
    'normalize_options',
    'Fragment',
    'FragmentStore',
]
