"""Configuration data types."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, NamedTuple

ConfigOrigin = Literal["programmatic", "env", "file", "default"]
SourceMap = Mapping[str, ConfigOrigin]


class ResolvedConfig(NamedTuple):
    """Configuration after merging all sources, with per-field origins."""

    entry_point_group: str
    telemetry: bool

    # Where each field value came from
    origin: SourceMap

    def to_frozen(self) -> "FrozenConfig":
        """Drop the audit metadata and return the immutable settings."""
        return FrozenConfig(
            entry_point_group=self.entry_point_group,
            telemetry=self.telemetry,
        )

    def audit(self) -> str:
        """Return one ``field: origin:value`` line per field."""
        lines = []
        for field in ("entry_point_group", "telemetry"):
            origin = self.origin.get(field, "default")
            value = getattr(self, field)
            if origin == "env":
                lines.append(f"{field}: env:WORK_REGISTRY_{field.upper()}={value}")
            else:
                lines.append(f"{field}: {origin}:{value}")
        return "\n".join(lines)


@dataclass(frozen=True)
class FrozenConfig:
    """Immutable settings used to build the default registry."""

    entry_point_group: str
    telemetry: bool
