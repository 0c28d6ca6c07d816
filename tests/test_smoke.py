"""Smoke test to verify the project is set up correctly."""

from proctable import ProcessRegistry, __doc__


def test_package_is_importable() -> None:
    """Verify that proctable can be imported."""
    assert __doc__ is not None


def test_registry_is_reexported() -> None:
    """The core registry should be importable from the package root."""
    assert ProcessRegistry().root_pid is None
