"""Discovery sources that enumerate installed providers.

A discovery source yields provider instances in discovery order. The
registry decides what to keep; sources only load, instantiate and
type-check.

Installed providers are declared as entry points, which is how a
distribution advertises implementations of a service:

    [project.entry-points."work_registry.providers"]
    hello = "work_registry.providers.hello:HelloWorkProvider"
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from importlib.metadata import entry_points
import logging
from typing import Any, Protocol, runtime_checkable

from .exceptions import CircularDiscoveryError, DiscoveryConfigurationError
from .provider import WorkProvider

log = logging.getLogger(__name__)

DEFAULT_ENTRY_POINT_GROUP = "work_registry.providers"

ProviderDeclaration = WorkProvider | type[WorkProvider] | Callable[[], WorkProvider]


@runtime_checkable
class DiscoverySource(Protocol):
    """Anything that can enumerate provider instances on demand."""

    def discover(self) -> Iterator[WorkProvider]:
        """Yield provider instances in discovery order.

        Raises:
            DiscoveryConfigurationError: If a declared provider is malformed.
        """
        ...


def _instantiate(declaration: str, target: Any) -> WorkProvider:
    """Turn a loaded declaration into a provider instance."""
    if isinstance(target, WorkProvider):
        return target
    if not callable(target):
        raise DiscoveryConfigurationError(
            declaration, f"{target!r} is neither a provider nor a provider factory"
        )

    try:
        provider = target()
    except CircularDiscoveryError:
        raise
    except Exception as e:
        raise DiscoveryConfigurationError(
            declaration, f"provider could not be instantiated: {e}"
        ) from e

    if not isinstance(provider, WorkProvider):
        raise DiscoveryConfigurationError(
            declaration,
            f"{type(provider).__name__} is not a subclass of WorkProvider",
        )
    return provider


class EntryPointDiscovery:
    """Loads providers declared under an entry-point group.

    Entry points are loaded lazily, one per iteration step, in the order the
    installed distributions report them.
    """

    def __init__(self, group: str = DEFAULT_ENTRY_POINT_GROUP) -> None:
        """Initialize for the given entry-point group."""
        if not group:
            raise ValueError("Entry point group must be a non-empty string")
        self.group = group

    def discover(self) -> Iterator[WorkProvider]:
        """Yield one provider per declared entry point."""
        for ep in entry_points(group=self.group):
            declaration = f"{ep.name} = {ep.value}"
            try:
                target = ep.load()
            except CircularDiscoveryError:
                raise
            except Exception as e:
                raise DiscoveryConfigurationError(
                    declaration, f"entry point could not be loaded: {e}"
                ) from e
            log.debug("Loaded provider entry point '%s' from group '%s'", ep.name, self.group)
            yield _instantiate(declaration, target)

    def __repr__(self) -> str:
        return f"EntryPointDiscovery(group={self.group!r})"


class StaticDiscovery:
    """Discovery over an explicit list of provider declarations.

    Useful where providers are linked in statically or registered by the
    host application rather than installed as distributions. Classes and
    factories are called on every :meth:`discover` pass; instances are
    yielded as they are.
    """

    def __init__(self, *declarations: ProviderDeclaration) -> None:
        """Initialize with provider instances, classes or zero-argument factories."""
        self._declarations: tuple[ProviderDeclaration, ...] = declarations

    def discover(self) -> Iterator[WorkProvider]:
        """Yield one provider per declaration, in registration order."""
        for index, target in enumerate(self._declarations):
            name = getattr(target, "__qualname__", None) or type(target).__name__
            yield _instantiate(f"#{index} {name}", target)

    def __len__(self) -> int:
        return len(self._declarations)

    def __repr__(self) -> str:
        return f"StaticDiscovery({len(self._declarations)} declarations)"
