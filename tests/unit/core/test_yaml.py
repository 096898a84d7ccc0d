"""Unit tests for core.yaml module.

Tests:
- load_yaml() on valid, empty, missing and malformed files
"""

from pathlib import Path

import pytest

from peerpoint.core.exceptions import ConfigurationError
from peerpoint.core.yaml import load_yaml


class TestLoadYaml:
    """Tests for load_yaml()."""

    def test_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("dns_server: 1.1.1.1\nfreshness_window: 30\n")
        assert load_yaml(path) == {"dns_server": "1.1.1.1", "freshness_window": 30}

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("dns_port: 53\n")
        assert load_yaml(str(path)) == {"dns_port": 53}

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("# only comments\n")
        assert load_yaml(path) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("dns_server: [1.1.1.1\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_yaml(path)

    def test_non_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("- 1.1.1.1\n- 8.8.8.8\n")
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_yaml(path)

    def test_no_python_objects(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("x: !!python/object/apply:os.getcwd []\n")
        with pytest.raises(ConfigurationError):
            load_yaml(path)
