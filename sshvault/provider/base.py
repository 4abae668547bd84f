"""Abstract interface for SSH key vault providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sshvault.provider.models import GetOptions, Item, ListOptions


class Provider(ABC):
    """A vault backend able to list, fetch and store SSH key items.

    Every operation is synchronous and talks to the backend directly; nothing
    is cached between process runs.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short provider name, as accepted by the registry."""

    @abstractmethod
    def list(self, options: ListOptions | None = None) -> list[Item]:
        """Return all stored items in summary form (no field values)."""

    @abstractmethod
    def get(self, options: GetOptions) -> Item:
        """Return the item called ``options.name`` with its field values.

        Raises NotFoundError if no such item exists.
        """

    @abstractmethod
    def add(self, item: Item) -> None:
        """Store a new item. Raises AlreadyExistsError if the name is taken."""
