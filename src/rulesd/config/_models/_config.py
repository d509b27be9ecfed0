"""Service configuration model.

This module provides the frozen ServiceConfiguration handed to the rules
service at startup.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from rulesd.enums import LogLevel


class ServiceConfiguration(BaseModel):
    """Validated, immutable startup configuration for the rules service.

    Instances are produced by build_configuration() and must not be built
    directly by callers.

    Attributes:
        log_level: Log level for the rules service.
        storage_path: Filesystem location of the rules database.
        admin_ips: IP addresses allowed to use the administrative listener.
        periodic_pruning: Whether the rules database is pruned periodically.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    log_level: LogLevel = Field(description="Log level for the rules service.")
    storage_path: str = Field(description="Path to the rules database.")
    admin_ips: tuple[str, ...] = Field(
        default=(),
        description="IP addresses allowed administrative access.",
    )
    periodic_pruning: bool = Field(
        default=False,
        description="Enable periodic pruning of the rules database.",
    )

    @property
    def periodic_pruning_enabled(self) -> bool:
        return self.periodic_pruning

    def to_dict(self) -> dict[str, object]:
        """Return the configuration as a JSON-compatible dictionary."""
        return self.model_dump(mode="json")
