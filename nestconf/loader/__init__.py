"""
nestconf Loader Package

Config file discovery and format-specific parsing.
"""

from nestconf.loader.discovery import build_patterns, find_files
from nestconf.loader.parser import PARSERS, parse_config_content, parse_file, substitute_env_vars

__all__ = [
    'build_patterns',
    'find_files',
    'PARSERS',
    'parse_config_content',
    'parse_file',
    'substitute_env_vars',
]
