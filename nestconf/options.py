import os
from dataclasses import dataclass, fields
from typing import Optional, Union

from nestconf.core.merge import MergeFn, deep_merge

DEFAULT_EXTENSIONS = ('conf', 'js', 'mjs', 'cjs', 'ts', 'mts', 'yml', 'yaml')


@dataclass
class Options:
    cwd: Optional[str] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    extensions: Optional[list] = None
    merge_fn: Optional[MergeFn] = None
    substitute_env: bool = False


@dataclass(frozen=True)
class NormalizedOptions:
    cwd: str
    extensions: tuple
    merge_fn: MergeFn
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    substitute_env: bool = False


def normalize_options(options: Union[Options, dict, None] = None) -> NormalizedOptions:
    """Validate options and fill in defaults.

    Accepts an Options instance, a dict with the same keys, or None.
    """
    if options is None:
        options = Options()
    elif isinstance(options, dict):
        known = {f.name for f in fields(Options)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(f"Unknown option(s): {', '.join(unknown)}")
        options = Options(**options)
    elif not isinstance(options, Options):
        raise TypeError(f"Options must be an Options instance or a dict, got {type(options).__name__}")

    for key in ('cwd', 'prefix', 'suffix'):
        value = getattr(options, key)
        if value is not None and not isinstance(value, str):
            raise TypeError(f"Option '{key}' must be a string")

    if options.extensions:
        if isinstance(options.extensions, str):
            raise TypeError("Option 'extensions' must be a list of strings")
        extensions = []
        for extension in options.extensions:
            if not isinstance(extension, str):
                raise TypeError(f"Invalid extension: {extension!r}")
            extensions.append(extension[1:] if extension.startswith('.') else extension)
    else:
        extensions = list(DEFAULT_EXTENSIONS)

    merge_fn = options.merge_fn or deep_merge
    if not callable(merge_fn):
        raise TypeError("Option 'merge_fn' must be callable")

    return NormalizedOptions(
        cwd=options.cwd or os.getcwd(),
        extensions=tuple(extensions),
        merge_fn=merge_fn,
        prefix=options.prefix or None,
        suffix=options.suffix or None,
        substitute_env=bool(options.substitute_env),
    )
