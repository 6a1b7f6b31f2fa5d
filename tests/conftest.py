"""Pytest configuration for harsnip tests."""

import sys
from pathlib import Path

import pytest
import structlog
from structlog._config import BoundLoggerLazyProxy

# Add src directory to sys.path for test imports
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate each test from HARSNIP_* environment variables and .env files.

    This fixture:
    - Removes any HARSNIP_* variables inherited from the environment
    - Runs the test from an empty temporary directory so no .env is read
    - Resets the global settings instance before each test
    """
    import os

    for key in list(os.environ):
        if key.startswith("HARSNIP_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)

    from harsnip.config import reset_settings

    reset_settings()


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Reset structlog after each test to prevent closed file handle errors.

    CliRunner captures stderr with a temporary file. When configure_logging()
    runs inside CliRunner, structlog binds loggers to that temp file. After
    the test, CliRunner closes the file. We reset structlog to prevent stale
    references, then restore the CLI default (warnings and up, to stderr) so
    debug lines never leak into captured stdout.
    """
    from harsnip.logging import configure_logging

    yield
    structlog.reset_defaults()
    configure_logging()
    for module in list(sys.modules.values()):
        for attr in getattr(module, "__dict__", {}).values():
            if isinstance(attr, BoundLoggerLazyProxy):
                attr.__dict__.pop("bind", None)


@pytest.fixture
def restore_registry():
    """Snapshot the snippet client registry and restore it after the test."""
    from harsnip.snippet import engine

    saved = {
        key: engine._TargetEntry(title=entry.title, clients=dict(entry.clients))
        for key, entry in engine._REGISTRY.items()
    }
    yield engine._REGISTRY
    engine._REGISTRY.clear()
    engine._REGISTRY.update(saved)
