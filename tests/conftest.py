"""
Pytest configuration and shared fixtures for DriverKit tests.
"""

import pytest
from pathlib import Path

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.drivers import (
    linux_platform,
    windows_platform,
    link_capabilities,
    no_link_capabilities,
    windows_capabilities,
    driver_output_root,
    populated_cache,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as fast unit tests")
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def project_root(tmp_path) -> Path:
    """Create an empty project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def sample_config_yaml(project_root: Path) -> Path:
    """Create sample driverkit.yaml configuration."""
    config_content = """driver:
  output_dir: drivers
  browser: chrome

fetch_tool:
  name: webdriver-manager
  tool_dir: node_modules/.bin
  installer: npm

locking:
  enabled: true
  timeout: 30
"""
    config_file = project_root / "driverkit.yaml"
    config_file.write_text(config_content)
    return config_file
