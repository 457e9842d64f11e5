"""Pluggable work providers selected by URI scheme."""

import importlib.metadata
import logging

from work_registry.discovery import (
    DEFAULT_ENTRY_POINT_GROUP,
    DiscoverySource,
    EntryPointDiscovery,
    StaticDiscovery,
)
from work_registry.exceptions import (
    CircularDiscoveryError,
    DiscoveryConfigurationError,
    InvalidArgumentError,
    ProviderNotFoundError,
    WorkRegistryError,
)
from work_registry.provider import WorkProvider
from work_registry.registry import (
    ProviderRegistry,
    configure_default_registry,
    get_default_registry,
    installed_providers,
)
from work_registry.telemetry import TelemetryContext, TelemetryReporter
from work_registry.uri import WorkURI, parse_uri
from work_registry.work import Work
from work_registry.works import get_work, new_work

try:
    __version__ = importlib.metadata.version("work-registry")
except importlib.metadata.PackageNotFoundError:
    __version__ = "development"

# Null handler on the library's root logger so applications without logging
# configured do not get "No handler found" warnings.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Factory functions
    "get_work",
    "new_work",
    # Contract
    "Work",
    "WorkProvider",
    "WorkURI",
    "parse_uri",
    # Registry and discovery
    "ProviderRegistry",
    "installed_providers",
    "get_default_registry",
    "configure_default_registry",
    "DiscoverySource",
    "EntryPointDiscovery",
    "StaticDiscovery",
    "DEFAULT_ENTRY_POINT_GROUP",
    # Telemetry (extension points)
    "TelemetryContext",
    "TelemetryReporter",
    # Exceptions
    "WorkRegistryError",
    "InvalidArgumentError",
    "ProviderNotFoundError",
    "DiscoveryConfigurationError",
    "CircularDiscoveryError",
]
