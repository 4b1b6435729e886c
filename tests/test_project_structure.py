"""Basic project scaffolding tests."""

import importlib


def test_package_importable() -> None:
    """Verify the top-level package is importable."""
    import battleships

    assert battleships.GameManager is not None


def test_submodules_exist() -> None:
    """All primary submodules should be importable."""
    modules = [
        "battleships.engine",
        "battleships.engine.manager",
        "battleships.engine.instrumented_manager",
        "battleships.telemetry",
    ]

    for module in modules:
        assert importlib.import_module(module) is not None
