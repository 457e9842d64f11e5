"""Factory functions for works.

These functions route a URI to the provider whose scheme matches the URI's
scheme, compared without regard to case. A URI without a scheme (``"hello"``)
routes on its scheme-specific part instead. The exact form of the rest of
the URI is up to the provider.

The first call, from any thread, triggers discovery of the installed
providers (see :mod:`work_registry.registry`).

Example:
    from work_registry import get_work, new_work

    work = new_work("hello:///team", {"greeting": "Hi"})
    assert get_work("hello:///team") is work
    work.execute()
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from .discovery import DiscoverySource
from .exceptions import ProviderNotFoundError
from .registry import ProviderRegistry, get_default_registry, match_provider
from .uri import WorkURI, parse_uri
from .work import Work

log = logging.getLogger(__name__)


def get_work(
    uri: str | WorkURI,
    *,
    registry: ProviderRegistry | None = None,
) -> Work:
    """Return a reference to an existing work.

    The matching installed provider's ``get_work`` is invoked; whether a
    miss creates the work is the provider's decision.

    Args:
        uri: The URI locating the work
        registry: Registry to search; the process-wide one by default

    Returns:
        The work.

    Raises:
        InvalidArgumentError: If ``uri`` is malformed.
        ProviderNotFoundError: If no installed provider supports the scheme.
    """
    parsed = parse_uri(uri)
    scheme = parsed.routing_key
    registry = registry if registry is not None else get_default_registry()

    provider = registry.find(scheme)
    if provider is None:
        raise ProviderNotFoundError(scheme)

    log.debug("Routing get_work(%s) to %r", parsed, provider)
    return provider.get_work(parsed)


def new_work(
    uri: str | WorkURI,
    options: Mapping[str, Any] | None = None,
    supplemental: DiscoverySource | None = None,
    *,
    registry: ProviderRegistry | None = None,
) -> Work:
    """Construct a new work identified by ``uri``.

    Installed providers are searched first. If none supports the scheme and
    a ``supplemental`` discovery source is given, its providers are searched
    next. Supplemental providers are created for this call only and never
    join the installed snapshot.

    Args:
        uri: The URI identifying the work
        options: Provider-specific settings; may be empty
        supplemental: Extra discovery source to consult when no installed
            provider matches, or None to only use installed providers
        registry: Registry to search; the process-wide one by default

    Returns:
        The work returned by the provider's ``new_work``.

    Raises:
        InvalidArgumentError: If ``uri`` is malformed, or the provider
            rejects ``options``.
        ProviderNotFoundError: If no provider supports the scheme.
        DiscoveryConfigurationError: If a provider declaration in either
            source is malformed.

    Example:
        work = new_work(
            "sftp:///?name=logs",
            {"host": "myhost", "path": "/my/path"},
            supplemental=StaticDiscovery(SftpWorkProvider),
        )
    """
    parsed = parse_uri(uri)
    scheme = parsed.routing_key
    env: Mapping[str, Any] = options if options is not None else {}
    registry = registry if registry is not None else get_default_registry()

    provider = registry.find(scheme)
    if provider is None and supplemental is not None:
        provider = match_provider(scheme, supplemental.discover())
        if provider is not None:
            log.debug("Scheme '%s' served by supplemental source %r", scheme, supplemental)
    if provider is None:
        raise ProviderNotFoundError(scheme)

    log.debug("Routing new_work(%s) to %r", parsed, provider)
    return provider.new_work(parsed, env)
