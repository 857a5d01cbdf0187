"""
File parsers keyed by extension.

Each parser takes a path and returns the parsed value. Whether that value is
a usable config fragment is decided by the caller.
"""

import importlib.util
import inspect
import json
import os
import re
import uuid
from pathlib import Path

import yaml

_IDENTIFIER = re.compile(r'[A-Za-z_$][\w$]*')
_ENV_VAR = re.compile(r'\$\{(\w+)\}')
_SCRIPT_EXPORT = re.compile(r'(?:\bexport\s+default\b|\bmodule\.exports\s*=)\s*')
_SCRIPT_TAIL = re.compile(r'(?:\s+as\s+const)?\s*;?\s*$')


def _string_end(content: str, start: int) -> int:
    quote = content[start]
    i = start + 1
    while i < len(content):
        if content[i] == '\\':
            i += 2
            continue
        if content[i] == quote:
            return i + 1
        i += 1
    return len(content)


def _requote(literal: str) -> str:
    inner = literal[1:-1].replace("\\'", "'")
    inner = re.sub(r'(?<!\\)"', r'\\"', inner)
    return f'"{inner}"'


def _comment_end(content: str, start: int) -> int:
    # index just past a comment starting at `start`, or `start` when there is none
    if content.startswith('//', start):
        newline = content.find('\n', start)
        return len(content) if newline == -1 else newline
    if content.startswith('/*', start):
        close = content.find('*/', start + 2)
        return len(content) if close == -1 else close + 2
    return start


def _skip_blank(content: str, start: int) -> int:
    """Index of the next character that is neither whitespace nor inside a comment."""
    i = start
    while i < len(content):
        if content[i] in ' \t\r\n':
            i += 1
            continue
        end = _comment_end(content, i)
        if end == i:
            return i
        i = end
    return i


def _to_json(content: str, relaxed: bool = False) -> str:
    """Strip comments and trailing commas outside of strings. In relaxed mode
    also quote bare keys and turn single-quoted strings into double-quoted ones."""
    out = []
    i = 0
    n = len(content)
    while i < n:
        ch = content[i]
        if ch == '"' or (relaxed and ch == "'"):
            end = _string_end(content, i)
            literal = content[i:end]
            out.append(_requote(literal) if ch == "'" else literal)
            i = end
            continue
        end = _comment_end(content, i)
        if end != i:
            i = end
            continue
        if ch == ',':
            j = _skip_blank(content, i + 1)
            if j < n and content[j] in '}]':
                i += 1
                continue
        if relaxed:
            match = _IDENTIFIER.match(content, i)
            if match and (i == 0 or not (content[i - 1].isalnum() or content[i - 1] in '_$')):
                word = match.group(0)
                j = match.end()
                while j < n and content[j] in ' \t\r\n':
                    j += 1
                out.append(json.dumps(word) if j < n and content[j] == ':' else word)
                i = match.end()
                continue
        out.append(ch)
        i += 1

    return ''.join(out)


def parse_config_content(content: str, relaxed: bool = False):
    """Parse JSON5-like content: handle // comments, /* */ comments, trailing commas.

    With relaxed=True, JS object literal syntax (bare keys, single quotes) is accepted too.
    """
    return json.loads(_to_json(content, relaxed=relaxed))


def substitute_env_vars(config):
    """Deep-walk a dict/list structure, replacing ${VAR} patterns with env values."""

    def _substitute(value):
        if isinstance(value, dict):
            return {k: _substitute(v) for k, v in value.items()}
        if isinstance(value, list):
            return [_substitute(item) for item in value]
        if isinstance(value, str):
            return _ENV_VAR.sub(lambda m: os.environ.get(m.group(1), ''), value)
        return value

    return _substitute(config)


def _read_text(path) -> str:
    return Path(path).read_text(encoding='utf-8')


def parse_json_file(path):
    return parse_config_content(_read_text(path))


def parse_yaml_file(path):
    return yaml.safe_load(_read_text(path))


def parse_conf_file(path):
    """.conf files are JSON with comments; anything else is read as YAML."""
    content = _read_text(path)
    try:
        return parse_config_content(content)
    except json.JSONDecodeError:
        return yaml.safe_load(content)


def parse_script_file(path):
    """Read a static `export default {...}` / `module.exports = {...}` module."""
    content = _read_text(path)
    match = _SCRIPT_EXPORT.search(content)
    if not match:
        raise ValueError(f"No default export found in {path}")
    body = _SCRIPT_TAIL.sub('', content[match.end():])
    return parse_config_content(body, relaxed=True)


def parse_python_file(path):
    """Execute a Python module. A `default` attribute wins over the module namespace."""
    spec = importlib.util.spec_from_file_location(f"nestconf_fragment_{uuid.uuid4().hex}", path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Cannot import {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    if getattr(module, 'default', None) is not None:
        return module.default

    return {
        name: value
        for name, value in vars(module).items()
        if not name.startswith('_') and not inspect.ismodule(value)
    }


PARSERS = {
    'conf': parse_conf_file,
    'json': parse_json_file,
    'yml': parse_yaml_file,
    'yaml': parse_yaml_file,
    'js': parse_script_file,
    'mjs': parse_script_file,
    'cjs': parse_script_file,
    'ts': parse_script_file,
    'mts': parse_script_file,
    'py': parse_python_file,
}


def parse_file(path):
    """Parse a file with the parser registered for its extension."""
    extension = Path(path).suffix.lstrip('.').lower()
    parser = PARSERS.get(extension)
    if parser is None:
        raise ValueError(f"No parser registered for '.{extension}' files: {path}")
    return parser(path)
