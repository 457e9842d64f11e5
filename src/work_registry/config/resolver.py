"""Configuration resolution with precedence handling.

Merges configuration in this order, highest first:
Programmatic > Environment > pyproject.toml > Defaults
"""

import logging
import os
from pathlib import Path
from typing import Any

from .file_loader import FileConfigLoader
from .schema import RegistrySettings
from .types import ConfigOrigin, ResolvedConfig

log = logging.getLogger(__name__)

_ENV_VARS = {
    "WORK_REGISTRY_ENTRY_POINT_GROUP": "entry_point_group",
    "WORK_REGISTRY_TELEMETRY": "telemetry",
}


class ConfigResolver:
    """Resolves configuration from all sources with source tracking."""

    def __init__(self) -> None:
        """Initialize the configuration resolver."""
        self.file_loader = FileConfigLoader()

    def resolve(
        self,
        programmatic: dict[str, Any] | None = None,
        *,
        project_root: Path | None = None,
    ) -> ResolvedConfig:
        """Resolve configuration from all sources.

        Args:
            programmatic: Overrides with the highest precedence. Unknown keys
                are ignored.
            project_root: Directory to search for pyproject.toml

        Returns:
            ResolvedConfig with merged values and their origins.

        Raises:
            ValueError: If the merged values fail validation.
            ConfigFileError: If pyproject.toml exists but is malformed.
        """
        merged: dict[str, Any] = {}
        origin: dict[str, ConfigOrigin] = {}

        def apply(values: dict[str, Any], source: ConfigOrigin) -> None:
            for field, value in values.items():
                if field in merged:  # Only override known fields
                    merged[field] = value
                    origin[field] = source

        # Defaults straight from the schema, without reading the environment
        for field, info in RegistrySettings.model_fields.items():
            merged[field] = info.default
            origin[field] = "default"

        apply(self.file_loader.load_project_config(project_root), "file")
        apply(
            {field: os.environ[var] for var, field in _ENV_VARS.items() if var in os.environ},
            "env",
        )
        if programmatic:
            apply(programmatic, "programmatic")

        try:
            settings = RegistrySettings(**merged)
        except ValueError as e:
            raise ValueError(f"Configuration validation failed: {e}") from e

        values = settings.to_dict()
        log.debug("Resolved work registry configuration: %s", values)
        return ResolvedConfig(**values, origin=origin)


_resolver = ConfigResolver()


def resolve_config(
    programmatic: dict[str, Any] | None = None,
    *,
    project_root: Path | None = None,
) -> ResolvedConfig:
    """Resolve configuration using the shared resolver.

    Example:
        config = resolve_config({"entry_point_group": "acme.work_providers"})
        print(config.audit())
    """
    return _resolver.resolve(programmatic, project_root=project_root)
