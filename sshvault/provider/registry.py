"""
Provider registry — resolves a provider name to a ready-to-use instance.

Usage:
    from sshvault.provider import get_provider

    prv = get_provider("bw")
    for item in prv.list():
        print(item.name)
"""

from __future__ import annotations

from collections.abc import Callable

from sshvault.config import Config, get_config
from sshvault.provider.base import Provider
from sshvault.provider.bitwarden import BitwardenProvider
from sshvault.provider.commander import Commander
from sshvault.provider.errors import UnsupportedProviderError


def _bitwarden(commander: Commander | None, cfg: Config) -> Provider:
    return BitwardenProvider(
        commander=commander,
        command=cfg.bitwarden.command,
        folder_name=cfg.bitwarden.folder_name,
    )


# Registry of available providers: name -> factory(commander, config)
PROVIDERS: dict[str, Callable[[Commander | None, Config], Provider]] = {
    "bw": _bitwarden,
    "bitwarden": _bitwarden,  # Alias
}


def list_providers() -> list[str]:
    """Names accepted by get_provider()."""
    return sorted(PROVIDERS)


def get_provider(
    name: str,
    commander: Commander | None = None,
    config: Config | None = None,
) -> Provider:
    """Build the provider registered under ``name``.

    Raises UnsupportedProviderError for unknown names.
    """
    factory = PROVIDERS.get(name)
    if factory is None:
        raise UnsupportedProviderError(name)

    return factory(commander, config or get_config())
