"""The resource type handed out by providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .provider import WorkProvider
    from .uri import WorkURI


class Work(ABC):
    """A provider-specific resource identified by a URI.

    Works are owned by the provider that created them; the registry never
    caches or shares them across providers.
    """

    @property
    @abstractmethod
    def uri(self) -> WorkURI:
        """The URI this work was created for."""

    @abstractmethod
    def provider(self) -> WorkProvider:
        """Return the provider that created this work."""

    @abstractmethod
    def execute(self) -> Any:
        """Run the work's action."""
