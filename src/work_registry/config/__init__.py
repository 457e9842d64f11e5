"""Configuration for the work registry.

Values are resolved once from programmatic overrides, ``WORK_REGISTRY_*``
environment variables, ``[tool.work_registry]`` in pyproject.toml and
defaults, then frozen.
"""

from .file_loader import ConfigFileError, FileConfigLoader
from .resolver import ConfigResolver, resolve_config
from .schema import RegistrySettings
from .types import ConfigOrigin, FrozenConfig, ResolvedConfig, SourceMap

__all__ = [
    "ConfigFileError",
    "ConfigOrigin",
    "ConfigResolver",
    "FileConfigLoader",
    "FrozenConfig",
    "RegistrySettings",
    "ResolvedConfig",
    "SourceMap",
    "resolve_config",
]
