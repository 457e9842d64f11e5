"""Process-wide registry of installed work providers.

The first call to :meth:`ProviderRegistry.installed_providers` runs a single
discovery pass and publishes the result as an immutable tuple. Every later
call, from any thread, returns that same tuple without locking. Threads that
arrive while the pass is running block until it finishes.

Discovery keeps the first provider seen for each scheme (compared without
regard to case) and silently drops later duplicates, so the order of the
discovery source decides which implementation wins.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
import logging
import threading

from .config import resolve_config
from .discovery import DiscoverySource, EntryPointDiscovery
from .exceptions import CircularDiscoveryError
from .provider import WorkProvider
from .telemetry import TelemetryContext, TelemetryContextProtocol, TelemetryReporter

log = logging.getLogger(__name__)

AccessGuard = Callable[[], None]


def schemes_match(a: str, b: str) -> bool:
    """Compare two schemes without regard to case."""
    return a.casefold() == b.casefold()


def match_provider(
    scheme: str, providers: Iterable[WorkProvider]
) -> WorkProvider | None:
    """Return the first provider in ``providers`` serving ``scheme``."""
    for provider in providers:
        if schemes_match(scheme, provider.scheme()):
            return provider
    return None


class ProviderRegistry:
    """Discovers providers once and caches them for the registry's lifetime.

    Args:
        source: Where installed providers come from
        access_guard: Optional callable run at the start of every
            :meth:`installed_providers` call. Hosts that need a permission
            check install one here; whatever it raises propagates.
        telemetry: Context that receives discovery timings and counts
    """

    def __init__(
        self,
        source: DiscoverySource,
        *,
        access_guard: AccessGuard | None = None,
        telemetry: TelemetryContextProtocol | None = None,
    ) -> None:
        self._source = source
        self._access_guard = access_guard
        self._telemetry = telemetry if telemetry is not None else TelemetryContext()
        # Re-entrant so that a provider constructor calling back into the
        # registry on the discovering thread reaches the circularity check.
        self._lock = threading.RLock()
        self._loading = False
        self._installed: tuple[WorkProvider, ...] | None = None

    @property
    def source(self) -> DiscoverySource:
        return self._source

    @property
    def is_loaded(self) -> bool:
        """True once the snapshot has been published."""
        return self._installed is not None

    def installed_providers(self) -> tuple[WorkProvider, ...]:
        """Return the installed providers, running discovery on first use.

        Returns:
            The published snapshot. The same tuple object is returned to
            every caller.

        Raises:
            CircularDiscoveryError: If discovery re-enters itself.
            DiscoveryConfigurationError: If a declared provider is malformed.
        """
        if self._access_guard is not None:
            self._access_guard()

        installed = self._installed
        if installed is not None:
            return installed

        with self._lock:
            if self._installed is None:
                if self._loading:
                    raise CircularDiscoveryError(
                        "Circular loading of installed providers detected"
                    )
                self._loading = True
                try:
                    self._installed = self._load_installed_providers()
                finally:
                    self._loading = False
            return self._installed

    def find(self, scheme: str) -> WorkProvider | None:
        """Return the installed provider for ``scheme``, if any."""
        return match_provider(scheme, self.installed_providers())

    def schemes(self) -> tuple[str, ...]:
        """Return the schemes of the installed providers, in discovery order."""
        return tuple(provider.scheme() for provider in self.installed_providers())

    def _load_installed_providers(self) -> tuple[WorkProvider, ...]:
        accepted: list[WorkProvider] = []
        seen: set[str] = set()
        duplicates = 0

        with self._telemetry("registry.discovery", source=repr(self._source)):
            # DiscoveryConfigurationError may be raised here
            for provider in self._source.discover():
                scheme = provider.scheme()
                key = scheme.casefold()
                if key in seen:
                    duplicates += 1
                    log.debug(
                        "Discarding %r: scheme '%s' is already provided", provider, scheme
                    )
                    continue
                seen.add(key)
                accepted.append(provider)
                log.debug("Installed provider %r", provider)

        self._telemetry.gauge("registry.providers", len(accepted))
        self._telemetry.count("registry.duplicates", duplicates)
        log.info(
            "Discovered %d work provider(s): %s",
            len(accepted),
            ", ".join(p.scheme() for p in accepted) or "<none>",
        )
        return tuple(accepted)

    def __repr__(self) -> str:
        state = "loaded" if self.is_loaded else "pending"
        return f"ProviderRegistry(source={self._source!r}, {state})"


_default_registry: ProviderRegistry | None = None
_default_lock = threading.Lock()


def create_default_registry(
    *reporters: TelemetryReporter,
    access_guard: AccessGuard | None = None,
) -> ProviderRegistry:
    """Build a registry over installed entry points using resolved configuration."""
    config = resolve_config().to_frozen()
    return ProviderRegistry(
        EntryPointDiscovery(config.entry_point_group),
        access_guard=access_guard,
        telemetry=TelemetryContext(*reporters, enabled=config.telemetry),
    )


def configure_default_registry(
    *reporters: TelemetryReporter,
    access_guard: AccessGuard | None = None,
) -> ProviderRegistry:
    """Create the process-wide registry with telemetry reporters or an access guard.

    Must be called before anything uses the default registry.

    Raises:
        RuntimeError: If the default registry already exists.
    """
    global _default_registry
    with _default_lock:
        if _default_registry is not None:
            raise RuntimeError("The default provider registry is already in use")
        _default_registry = create_default_registry(
            *reporters, access_guard=access_guard
        )
        return _default_registry


def get_default_registry() -> ProviderRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    registry = _default_registry
    if registry is not None:
        return registry

    with _default_lock:
        if _default_registry is None:
            _default_registry = create_default_registry()
        return _default_registry


def installed_providers() -> tuple[WorkProvider, ...]:
    """Return the installed providers of the process-wide registry."""
    return get_default_registry().installed_providers()
