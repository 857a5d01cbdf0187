import fnmatch
import glob
import logging
import os
from typing import Iterable, List, Optional


def build_patterns(extensions: Iterable[str], prefix: Optional[str] = None, suffix: Optional[str] = None) -> List[str]:
    """Glob patterns a config file name has to match, with `{a,b}` extension groups."""
    extension = '{' + ','.join(extensions) + '}'
    # prefix and suffix are literal text, never wildcards
    prefix = glob.escape(prefix) if prefix else prefix
    suffix = glob.escape(suffix) if suffix else suffix

    if prefix and suffix:
        return [f'{prefix}.**.{suffix}.{extension}']
    if prefix:
        return [f'{prefix}.{extension}', f'{prefix}.**.{extension}']
    if suffix:
        return [f'{suffix}.{extension}', f'**.{suffix}.{extension}']
    return [f'**.{extension}']


def expand_pattern(pattern: str) -> List[str]:
    """Expand the first `{a,b}` group (recursively) and collapse `**` into `*`."""
    start = pattern.find('{')
    end = pattern.find('}', start)
    if start == -1 or end == -1:
        return [pattern.replace('**', '*')]

    expanded = []
    for option in pattern[start + 1:end].split(','):
        expanded.extend(expand_pattern(pattern[:start] + option + pattern[end + 1:]))
    return expanded


def match_file_name(name: str, patterns: Iterable[str]) -> bool:
    for pattern in patterns:
        # wildcards never match a leading dot
        if name.startswith('.') and not pattern.startswith('.'):
            continue
        if fnmatch.fnmatchcase(name, pattern):
            return True
    return False


def find_files(directories: Iterable[str], patterns: Iterable[str]) -> List[str]:
    """Absolute paths of files directly inside `directories` whose names match.

    Directories are scanned non-recursively; `**` never spans a path separator.
    Results keep directory order, then name order, without duplicates.
    """
    expanded = [p for pattern in patterns for p in expand_pattern(pattern)]
    found = {}

    for directory in directories:
        if not os.path.isdir(directory):
            logging.debug(f"Config directory not found: {directory}")
            continue

        with os.scandir(directory) as entries:
            names = sorted(entry.name for entry in entries if entry.is_file())

        matched = [name for name in names if match_file_name(name, expanded)]
        logging.debug(f"Discovered {len(matched)} config file(s) in {directory}")
        for name in matched:
            found.setdefault(os.path.abspath(os.path.join(directory, name)), None)

    return list(found)
