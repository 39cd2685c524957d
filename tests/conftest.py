# ============================================================================
# SHARED TEST FIXTURES
# ============================================================================
# STATUS: Tests - Shared fixtures
# PURPOSE: Isolate environment-driven defaults between tests
# CREATED: 18 OCT 2026
# ============================================================================

import pytest

from pgschema.config import reset_defaults


@pytest.fixture(autouse=True)
def _fresh_defaults(monkeypatch):
    """Every test reads defaults from a clean environment."""
    for name in ("PGSCHEMA_INDEX_SUFFIX", "PGSCHEMA_VALIDATE", "PGSCHEMA_LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    reset_defaults()
    yield
    reset_defaults()
