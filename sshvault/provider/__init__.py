"""
sshvault providers — SSH keys stored as items of an external password vault.

Public API:
    get_provider(name)       → Provider for "bw" / "bitwarden"
    provider.list()          → items in the key folder (names only)
    provider.get(options)    → one item with its fields decoded
    provider.add(item)       → store a new item
"""

from __future__ import annotations

from sshvault.provider.base import Provider
from sshvault.provider.bitwarden import BitwardenProvider
from sshvault.provider.commander import Commander
from sshvault.provider.errors import (
    AlreadyExistsError,
    DecodeFailedError,
    ExecutionFailedError,
    InvalidKeyNameError,
    KeyFileExistsError,
    MissingFieldError,
    NotFoundError,
    ProviderError,
    UnsupportedProviderError,
)
from sshvault.provider.models import Bucket, Field, GetOptions, Item, ListOptions
from sshvault.provider.registry import PROVIDERS, get_provider, list_providers

__all__ = [
    "AlreadyExistsError",
    "BitwardenProvider",
    "Bucket",
    "Commander",
    "DecodeFailedError",
    "ExecutionFailedError",
    "Field",
    "GetOptions",
    "InvalidKeyNameError",
    "Item",
    "KeyFileExistsError",
    "ListOptions",
    "MissingFieldError",
    "NotFoundError",
    "PROVIDERS",
    "Provider",
    "ProviderError",
    "UnsupportedProviderError",
    "get_provider",
    "list_providers",
]
