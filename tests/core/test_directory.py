"""
Unit tests for driverkit.core.directory module.
"""

from pathlib import Path

import pytest

from driverkit.core.directory import (
    DirectoryCreationError,
    ensure_cache_structure,
    get_cache_dir,
    get_driver_output_root,
    get_lock_dir,
)


class TestGetDriverOutputRoot:
    """Tests for get_driver_output_root function."""

    def test_default(self, tmp_path):
        assert get_driver_output_root(tmp_path) == tmp_path.absolute() / "driver"

    def test_relative_output_dir(self, tmp_path):
        assert get_driver_output_root(tmp_path, "build/drivers") == (
            tmp_path.absolute() / "build" / "drivers"
        )

    def test_absolute_output_dir(self, tmp_path):
        absolute = tmp_path / "elsewhere"
        assert get_driver_output_root(Path("/ignored"), absolute) == absolute

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert get_driver_output_root() == Path.cwd().absolute() / "driver"


class TestLayout:
    def test_cache_dir(self, tmp_path):
        assert get_cache_dir(tmp_path) == tmp_path / "chrome"
        assert get_cache_dir(tmp_path, "firefox") == tmp_path / "firefox"

    def test_lock_dir_is_sibling_of_cache(self, tmp_path):
        assert get_lock_dir(tmp_path) == tmp_path / ".lock"
        assert get_lock_dir(tmp_path).parent == get_cache_dir(tmp_path).parent


class TestEnsureCacheStructure:
    """Tests for ensure_cache_structure."""

    def test_creates_missing_tree(self, driver_output_root):
        paths = ensure_cache_structure(driver_output_root)

        assert paths["root"] == driver_output_root
        assert paths["cache"] == driver_output_root / "chrome"
        assert paths["cache"].is_dir()

    def test_idempotent(self, populated_cache, driver_output_root):
        ensure_cache_structure(driver_output_root)

        # Existing contents are untouched
        assert (populated_cache / "chromedriver").exists()

    def test_failure(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file")

        with pytest.raises(DirectoryCreationError, match="Failed to create"):
            ensure_cache_structure(blocker / "driver")
