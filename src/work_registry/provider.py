"""Service-provider contract for works.

A provider is a concrete subclass of :class:`WorkProvider` identified by a
URI scheme. Providers are instantiated with no arguments by a discovery
source (see :mod:`work_registry.discovery`) and live for the rest of the
process.

Construction should stay cheap. A provider that consults the registry from
its ``__init__`` re-enters discovery, which is reported as a
:class:`~work_registry.exceptions.CircularDiscoveryError`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .uri import WorkURI
    from .work import Work


class WorkProvider(ABC):
    """Abstract base for work providers.

    Implementations that are used from several threads must serialize
    mutations of whatever work cache they keep; the registry does not.
    """

    @abstractmethod
    def scheme(self) -> str:
        """Return the URI scheme served by this provider.

        Schemes are compared without regard to case. The value must not
        change over the provider's lifetime.
        """

    @abstractmethod
    def new_work(self, uri: WorkURI, options: Mapping[str, Any]) -> Work:
        """Construct a work identified by ``uri``.

        The URI's routing key equals (ignoring case) this provider's scheme.
        A provider may return an existing work for a URI it has already seen
        instead of building a new one.

        Args:
            uri: The URI identifying the work
            options: Provider-specific settings; may be empty

        Returns:
            The work for ``uri``

        Raises:
            InvalidArgumentError: If ``options`` lacks required keys or holds
                invalid values.
        """

    @abstractmethod
    def get_work(self, uri: WorkURI) -> Work:
        """Return the work previously created for ``uri``.

        A hit must return the same object an earlier :meth:`new_work` call
        returned for an equal URI. Whether a miss fails or creates a work is
        up to the provider.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(scheme={self.scheme()!r})"
