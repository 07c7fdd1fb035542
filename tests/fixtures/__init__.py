"""Test fixtures for DriverKit tests.

- drivers: Platforms, filesystem capabilities and driver cache layouts

Import fixtures in your tests using:
    from tests.fixtures.drivers import populated_cache
"""

__all__ = [
    "drivers",
]
