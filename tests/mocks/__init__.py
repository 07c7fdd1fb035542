"""Mock collaborators for DriverKit tests."""

from .process import FakeProcessRunner, out_dir_from

__all__ = ["FakeProcessRunner", "out_dir_from"]
