from typing import Optional


def derive_namespace(file_path: str, prefix: Optional[str] = None, suffix: Optional[str] = None) -> str:
    """Turn a config file path into the dotted namespace its contents live under.

    project.server.conf with prefix='project' -> 'server'
    project.server.conf.yaml with prefix='project', suffix='conf' -> 'server'
    """
    name = file_path.replace('\\', '/')
    if '/' in name:
        name = name[name.rfind('/') + 1:]

    # no extension means nothing is left of the stem
    dot = name.rfind('.')
    name = name[:dot] if dot != -1 else ''

    if prefix and name.startswith(prefix):
        start = len(prefix)
        if name[start:start + 1] == '.':
            start += 1
        name = name[start:]

    if suffix and name.endswith(suffix):
        end = len(name) - len(suffix)
        if end > 0 and name[end - 1] == '.':
            end -= 1
        name = name[:end]

    return name
