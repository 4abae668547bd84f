"""
Centralized configuration for sshvault.

All configuration is loaded from environment variables with sensible defaults.

Usage:
    from sshvault.config import get_config
    cfg = get_config()
    print(cfg.provider)                 # "bw"
    print(cfg.bitwarden.folder_name)    # "ssh-agent" or $SSHVAULT_FOLDER
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class BitwardenConfig:
    """Bitwarden CLI parameters."""

    command: str = "bw"
    folder_name: str = "ssh-agent"  # folder that scopes every key item


@dataclass(frozen=True)
class Config:
    """Top-level sshvault configuration."""

    provider: str = "bw"
    ssh_dir: Path = field(default_factory=lambda: Path.home() / ".ssh")
    ssh_add_command: str = "ssh-add"
    log_level: str = "WARNING"

    bitwarden: BitwardenConfig = field(default_factory=BitwardenConfig)


# Singleton
_config: Config | None = None


def get_config() -> Config:
    """Get or create the singleton config from environment variables."""
    global _config
    if _config is not None:
        return _config
    _config = _load_from_env()
    return _config


def _load_from_env() -> Config:
    """Load configuration from environment variables."""
    bitwarden = BitwardenConfig(
        command=os.environ.get("SSHVAULT_BW_COMMAND", "bw"),
        folder_name=os.environ.get("SSHVAULT_FOLDER", "ssh-agent"),
    )

    return Config(
        provider=os.environ.get("SSHVAULT_PROVIDER", "bw"),
        ssh_dir=Path(os.environ.get("SSHVAULT_SSH_DIR", Path.home() / ".ssh")).expanduser(),
        ssh_add_command=os.environ.get("SSHVAULT_SSH_ADD_COMMAND", "ssh-add"),
        log_level=os.environ.get("SSHVAULT_LOG_LEVEL", "WARNING").upper(),
        bitwarden=bitwarden,
    )


def reset_config() -> None:
    """Reset the singleton config (for testing)."""
    global _config
    _config = None
