"""
Tests for driverkit.yaml parsing and validation.
"""

from pathlib import Path

import pytest

from driverkit.config.parser import (
    CONFIG_FILE_NAME,
    DriverKitConfig,
    load_config,
    parse_config,
)
from driverkit.core.exceptions import ConfigError


class TestParseConfig:
    """Tests for parse_config."""

    def test_empty_gives_defaults(self, project_root):
        config = parse_config({}, project_root)

        assert config.driver.output_dir == "driver"
        assert config.driver.browser == "chrome"
        assert config.fetch_tool.name == "webdriver-manager"
        assert config.fetch_tool.tool_dir == "node_modules/.bin"
        assert config.fetch_tool.installer == "npm"
        assert config.locking.enabled is True
        assert config.locking.timeout == 300
        assert config.project_root == project_root

    def test_none_gives_defaults(self, project_root):
        assert parse_config(None, project_root).driver.browser == "chrome"

    def test_partial_sections(self, project_root):
        config = parse_config(
            {"driver": {"output_dir": "out"}, "locking": None}, project_root
        )

        assert config.driver.output_dir == "out"
        assert config.driver.browser == "chrome"
        assert config.locking.enabled is True

    def test_int_timeout_becomes_float(self, project_root):
        config = parse_config({"locking": {"timeout": 30}}, project_root)
        assert config.locking.timeout == 30.0
        assert isinstance(config.locking.timeout, float)

    def test_dotted_browser_name_allowed(self, project_root):
        config = parse_config({"driver": {"browser": "chrome.beta"}}, project_root)
        assert config.driver.browser == "chrome.beta"

    def test_unknown_keys_ignored(self, project_root):
        config = parse_config({"driver": {"colour": "blue"}, "extra": 1}, project_root)
        assert config.driver.output_dir == "driver"

    @pytest.mark.parametrize(
        "data,match",
        [
            ([], "root must be a mapping"),
            ({"driver": "chrome"}, "Section 'driver'"),
            ({"driver": {"browser": 3}}, "driver.browser"),
            ({"locking": {"enabled": "yes"}}, "locking.enabled"),
            ({"locking": {"timeout": True}}, "locking.timeout"),
            ({"locking": {"timeout": -1}}, "must not be negative"),
            ({"driver": {"browser": ""}}, "plain directory name"),
            ({"driver": {"browser": "a/b"}}, "plain directory name"),
            ({"driver": {"browser": "a\\b"}}, "plain directory name"),
            ({"driver": {"browser": ".."}}, "plain directory name"),
            ({"driver": {"browser": "."}}, "plain directory name"),
        ],
    )
    def test_invalid(self, project_root, data, match):
        with pytest.raises(ConfigError, match=match):
            parse_config(data, project_root)


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_default_file_gives_defaults(self, project_root):
        config = load_config(project_root=project_root)

        assert isinstance(config, DriverKitConfig)
        assert config.driver.output_dir == "driver"

    def test_reads_project_file(self, sample_config_yaml, project_root):
        config = load_config(project_root=project_root)

        assert sample_config_yaml.name == CONFIG_FILE_NAME
        assert config.driver.output_dir == "drivers"
        assert config.locking.timeout == 30.0
        assert config.project_root == project_root

    def test_explicit_file(self, tmp_path, project_root):
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("locking:\n  enabled: false\n")

        config = load_config(config_file, project_root)

        assert config.locking.enabled is False

    def test_explicit_file_missing(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yaml", tmp_path)

    def test_invalid_yaml(self, project_root):
        (project_root / CONFIG_FILE_NAME).write_text("driver: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(project_root=project_root)

    def test_empty_file(self, project_root):
        (project_root / CONFIG_FILE_NAME).write_text("")

        assert load_config(project_root=project_root).driver.browser == "chrome"

    def test_defaults_to_cwd(self, project_root, monkeypatch):
        monkeypatch.chdir(project_root)

        assert load_config().project_root == Path.cwd()
