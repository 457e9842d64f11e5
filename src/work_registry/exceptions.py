"""Exceptions raised by the work registry."""


class WorkRegistryError(Exception):
    """Base exception for recoverable work registry errors"""  # noqa: D415


class InvalidArgumentError(WorkRegistryError, ValueError):
    """Raised when a URI or provider options are rejected"""  # noqa: D415


class ProviderNotFoundError(WorkRegistryError, LookupError):
    """Raised when no provider supports the requested URI scheme.

    Callers are expected to handle this one, typically by reporting the
    scheme as unsupported.
    """

    def __init__(self, scheme: str) -> None:
        """Initialize with the scheme that could not be matched."""
        self.scheme = scheme
        super().__init__(f'Provider "{scheme}" not found')


class DiscoveryConfigurationError(WorkRegistryError):
    """Raised when a declared provider cannot be loaded or instantiated."""

    def __init__(self, declaration: str, message: str) -> None:
        """Initialize with the offending declaration and a reason.

        Args:
            declaration: Human-readable name of the entry point or registration
            message: What went wrong while loading it
        """
        self.declaration = declaration
        self.message = message
        super().__init__(f"Provider declaration {declaration!r}: {message}")


class CircularDiscoveryError(RuntimeError):
    """Raised when provider discovery re-enters itself.

    This signals a defect in a provider's construction path. It is not a
    WorkRegistryError so that handlers of recoverable registry errors do not
    swallow it.
    """
