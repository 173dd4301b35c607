"""
Pytest configuration and shared fixtures for signature scheme tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

make_keypair = _common.make_keypair
make_signature = _common.make_signature
GROUP_NAMES = _common.GROUP_NAMES


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(params=GROUP_NAMES)
def group(request):
    """Run a test once per registered group suite."""
    from sigcore.groups import get_group

    return get_group(request.param)


@pytest.fixture
def ed25519():
    """Provide the Ed25519 suite."""
    from sigcore.groups import get_group

    return get_group("ed25519")


@pytest.fixture
def modp_group():
    """Provide the deterministic mod-p test suite."""
    from sigcore.groups import get_group

    return get_group("modp-257-test")


@pytest.fixture
def keypair(group):
    """Provide a random key pair in the parametrized group."""
    return make_keypair(group)


@pytest.fixture(autouse=True)
def _isolate_config_env(monkeypatch):
    """Keep SCHNORR_* variables from the host environment out of tests."""
    for name in ("SCHNORR_GROUP", "SCHNORR_LOG_LEVEL", "SCHNORR_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
