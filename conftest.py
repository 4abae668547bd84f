"""
Root-level shared test fixtures.

Inherited by the provider tests under sshvault/ and by tests/.
"""

from __future__ import annotations

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """Remove sshvault env vars that leak between tests."""
    for key in [
        "SSHVAULT_PROVIDER",
        "SSHVAULT_BW_COMMAND",
        "SSHVAULT_FOLDER",
        "SSHVAULT_SSH_DIR",
        "SSHVAULT_SSH_ADD_COMMAND",
        "SSHVAULT_LOG_LEVEL",
    ]:
        monkeypatch.delenv(key, raising=False)
