"""Raw settings schema.

This module provides the lenient Pydantic schema used to validate values
read from files, environment variables and command-line overrides before
they are turned into settings.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from rulesd.enums import LogLevel


class ServiceSettingsSchema(BaseModel):
    """Schema for raw service settings (unknown keys are ignored).

    Every field is optional; only keys present in the source produce a
    setting.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    log_level: LogLevel | None = None
    storage_path: str | None = None
    admin_ips: tuple[str, ...] | None = None
    periodic_pruning: bool | None = None
