"""Shared fixtures for nestconf tests."""

import json
import pytest


@pytest.fixture
def config_dir(tmp_path):
    """A directory of project.* config files in the formats nestconf reads."""
    (tmp_path / "project.conf").write_text("""
{
    // shared defaults
    "db": {"host": "127.0.0.1", "user": "root"},
    "server": {
        "core": {"host": "1.1.1.1", "port": 3000},
        "db": {"user": "admin"},
    },
}
""")
    (tmp_path / "project.server.conf").write_text(json.dumps({
        "core": {
            "port": 4010,
            "db": {"password": "start123", "database": "app"},
        },
    }))
    (tmp_path / "project.client.web.js").write_text("""
export default {
    host: '1.1.1.2',
    port: 4000, // dev server
};
""")
    # not a mapping, never becomes a fragment
    (tmp_path / "project.features.yaml").write_text("- search\n- export\n")
    # no project prefix
    (tmp_path / "other.conf").write_text(json.dumps({"ignored": True}))
    return tmp_path


@pytest.fixture
def write_conf():
    """Write `data` as JSON to directory/file_name and return the path."""

    def _write(directory, file_name, data):
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / file_name
        path.write_text(json.dumps(data))
        return path

    return _write
