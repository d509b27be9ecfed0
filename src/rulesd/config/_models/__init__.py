"""Configuration models.

This module provides the Pydantic models for the rules service
configuration and for raw settings sources.
"""

from rulesd.config._models._config import ServiceConfiguration
from rulesd.config._models._settings import ServiceSettingsSchema

__all__ = [
    "ServiceConfiguration",
    "ServiceSettingsSchema",
]
