"""
Container - merges config fragments found across a directory tree.

Every config file becomes a fragment living under a namespace derived from
its file name (project.server.conf -> 'server' with prefix 'project').
Lookups walk the fragments in namespace order; each fragment whose namespace
is the key or a dotted parent of it contributes the value at the rest of the
key, and contributions are deep-merged with later namespaces winning.

Usage:
    container = Container({'prefix': 'project'})
    await container.load('config')
    port = container.get('server.core.port')
"""

import asyncio
import logging
import os
from typing import Any, List, Optional, Union

from nestconf.core.merge import is_structured, merge_values
from nestconf.core.namespace import derive_namespace
from nestconf.core.object_path import get_path_value
from nestconf.loader.discovery import build_patterns, find_files
from nestconf.loader.parser import parse_file, substitute_env_vars
from nestconf.options import NormalizedOptions, Options, normalize_options
from nestconf.storage.fragment_store import Fragment, FragmentStore

_MISSING = object()


class Container:
    """Loads config fragments and answers dotted-key lookups over all of them."""

    def __init__(self, options: Union[Options, dict, None] = None):
        self.options: NormalizedOptions = normalize_options(options)
        self._store = FragmentStore()

    @property
    def fragments(self) -> List[Fragment]:
        """Loaded fragments in namespace order."""
        return list(self._store)

    def __len__(self):
        return len(self._store)

    def get(self, key: Union[str, List[str]]) -> Any:
        """Resolve a dotted key, or a list of keys merged left to right.

        Returns None when no loaded fragment holds a value for the key. A
        null stored in a fragment is a value and overrides earlier ones.
        """
        output = self._resolve_key(key)
        return None if output is _MISSING else output

    def _resolve_key(self, key) -> Any:
        if isinstance(key, (list, tuple)):
            output = _MISSING
            for item in key:
                output = self._merge(self._resolve_key(item), output)
            return output

        self._store.ensure_sorted()

        output = _MISSING
        for fragment in self._store:
            remainder = self._remainder(fragment.name, key)
            if remainder is None:
                continue

            if remainder:
                value = get_path_value(fragment.data, remainder, _MISSING)
            else:
                value = fragment.data

            output = self._merge(value, output)

        return output

    async def load(self, directory: Union[str, os.PathLike, List[str], None] = None) -> None:
        """Load config file(s) from one or many directories."""
        if isinstance(directory, (list, tuple)):
            directories = [self._resolve(d) for d in directory]
        elif directory:
            directories = [self._resolve(directory)]
        else:
            directories = []

        if not directories:
            directories = [self.options.cwd]

        patterns = build_patterns(self.options.extensions, self.options.prefix, self.options.suffix)
        file_paths = await asyncio.to_thread(find_files, directories, patterns)

        await self.load_file(file_paths)

    async def load_file(self, path: Union[str, os.PathLike, List[str]]) -> None:
        """Load one file, or several concurrently. Non-mapping contents are skipped."""
        if isinstance(path, (list, tuple)):
            # every load settles before the first failure is raised; nothing is rolled back
            results = await asyncio.gather(*[self.load_file(p) for p in path], return_exceptions=True)
            for result in results:
                if isinstance(result, BaseException):
                    raise result
            return

        path = self._resolve(path)
        if path.lower().endswith('.py'):
            # module code stays on the event loop thread
            data = parse_file(path)
        else:
            data = await asyncio.to_thread(parse_file, path)

        if not is_structured(data):
            logging.debug(f"Skipping {path}: contents are not a mapping")
            return

        if self.options.substitute_env:
            data = substitute_env_vars(data)

        name = derive_namespace(path, self.options.prefix, self.options.suffix)
        self._store.add(Fragment(name=name, data=data, source=path))
        logging.debug(f"Loaded config fragment '{name}' from {path}")

    def _resolve(self, path) -> str:
        path = os.fspath(path)
        if os.path.isabs(path):
            return path
        return os.path.abspath(os.path.join(self.options.cwd, path))

    @staticmethod
    def _remainder(name: str, key: str) -> Optional[str]:
        # the part of `key` left to look up inside a fragment, None when out of scope
        if not name:
            return key
        if key == name:
            return ''
        if key.startswith(name) and key[len(name)] == '.':
            return key[len(name) + 1:]
        return None

    def _merge(self, primary: Any, secondary: Any) -> Any:
        return merge_values(primary, secondary, self.options.merge_fn, missing=_MISSING)


def create_container(options: Union[Options, dict, None] = None) -> Container:
    """Factory function mirroring Container(options)."""
    return Container(options)
