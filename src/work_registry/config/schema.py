"""Settings schema and validation using Pydantic.

Validates and coerces configuration values from the environment, the
``[tool.work_registry]`` table of ``pyproject.toml`` and programmatic
overrides into typed settings with defaults.
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from work_registry.discovery import DEFAULT_ENTRY_POINT_GROUP


class RegistrySettings(BaseSettings):
    """Pydantic settings schema for the work registry.

    Reads ``WORK_REGISTRY_*`` environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="WORK_REGISTRY_",
        env_file=None,
        case_sensitive=False,
        extra="ignore",  # Unknown keys are ignored for forward compatibility
    )

    entry_point_group: str = Field(
        default=DEFAULT_ENTRY_POINT_GROUP,
        description="Entry point group that installed providers are declared under",
        min_length=1,
    )

    telemetry: bool = Field(
        default=False,
        description="Report discovery timings and counts to telemetry reporters",
    )

    @field_validator("entry_point_group")
    @classmethod
    def strip_group(cls, v: str) -> str:
        """Reject groups that are blank once surrounding whitespace is removed."""
        v = v.strip()
        if not v:
            raise ValueError("entry_point_group must not be blank")
        return v

    def to_dict(self) -> dict[str, Any]:
        """Return the settings as a plain dictionary."""
        return {
            "entry_point_group": self.entry_point_group,
            "telemetry": self.telemetry,
        }
