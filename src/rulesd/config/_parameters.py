"""Service settings and configuration building.

Settings are small deferred mutations over an in-progress configuration.
They can be supplied in any order, any subset and any repetition; they are
applied strictly in the order given, so the last setting for a field wins.
Nothing is checked until every setting has been applied, after which the
mandatory fields are verified once and the frozen ServiceConfiguration is
returned.

Example:
    >>> from rulesd.config import build_configuration, with_storage_path
    >>> config = build_configuration(with_storage_path("/var/lib/rulesd"))
    >>> config.storage_path
    '/var/lib/rulesd'
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from structlog.typing import FilteringBoundLogger

from rulesd.config._models import ServiceConfiguration
from rulesd.enums import LogLevel
from rulesd.exceptions import MissingMandatoryFieldError
from rulesd.utils._logging import get_global_log_level


@dataclass(slots=True)
class ConfigurationDraft:
    """Mutable configuration that settings are applied to.

    build_configuration() creates one draft per call and discards it once the
    frozen configuration is built. It is public so custom settings can be
    written against it.
    """

    log_level: LogLevel
    storage_path: str = ""
    admin_ips: tuple[str, ...] = field(default=())
    periodic_pruning: bool = False


class Setting(Protocol):
    """Anything that can be applied to a configuration draft."""

    def apply(self, draft: ConfigurationDraft) -> None: ...


@dataclass(frozen=True, slots=True)
class SettingFunc:
    """Setting backed by a plain function.

    Attributes:
        name: Configuration field the setting writes, for display.
        func: Function that writes the captured value into a draft.
    """

    name: str
    func: Callable[[ConfigurationDraft], None]

    def apply(self, draft: ConfigurationDraft) -> None:
        self.func(draft)


def with_log_level(log_level: LogLevel) -> Setting:
    """Set the log level for the rules service."""

    def _apply(draft: ConfigurationDraft) -> None:
        draft.log_level = log_level

    return SettingFunc("log_level", _apply)


def with_storage_path(storage_path: str) -> Setting:
    """Set the storage path for the rules database."""

    def _apply(draft: ConfigurationDraft) -> None:
        draft.storage_path = storage_path

    return SettingFunc("storage_path", _apply)


def with_admin_ips(admin_ips: Sequence[str]) -> Setting:
    """Set the IP addresses allowed administrative access.

    Replaces any previously applied addresses rather than adding to them.
    A bare string is taken as a single address.
    """
    captured = (admin_ips,) if isinstance(admin_ips, str) else tuple(admin_ips)

    def _apply(draft: ConfigurationDraft) -> None:
        draft.admin_ips = captured

    return SettingFunc("admin_ips", _apply)


def with_periodic_pruning(periodic_pruning: bool) -> Setting:  # noqa: FBT001
    """Enable or disable periodic pruning of the rules database."""

    def _apply(draft: ConfigurationDraft) -> None:
        draft.periodic_pruning = periodic_pruning

    return SettingFunc("periodic_pruning", _apply)


def build_configuration(
    *settings: Setting,
    default_log_level: LogLevel | None = None,
    logger: FilteringBoundLogger | None = None,
) -> ServiceConfiguration:
    """Apply settings in order and check mandatory fields.

    Args:
        *settings: Settings to apply, in order. Later settings override
            earlier ones targeting the same field.
        default_log_level: Log level used when no with_log_level() setting is
            supplied. Defaults to the process-wide level at call time.
        logger: Optional logger for build diagnostics.

    Returns:
        The frozen service configuration.

    Raises:
        MissingMandatoryFieldError: If no storage path was specified.
    """
    draft = ConfigurationDraft(
        log_level=(
            default_log_level
            if default_log_level is not None
            else get_global_log_level()
        ),
    )
    for setting in settings:
        setting.apply(draft)

    if draft.storage_path == "":
        if logger is not None:
            logger.error("configuration_invalid", missing="storage_path")
        msg = "no storage path specified"
        raise MissingMandatoryFieldError(msg, field="storage_path")

    # Values are accepted as given; no coercion past this point
    configuration = ServiceConfiguration.model_construct(
        log_level=draft.log_level,
        storage_path=draft.storage_path,
        admin_ips=draft.admin_ips,
        periodic_pruning=draft.periodic_pruning,
    )

    if logger is not None:
        logger.debug(
            "configuration_built",
            settings=len(settings),
            log_level=str(draft.log_level),
            storage_path=draft.storage_path,
            admin_ips=list(draft.admin_ips),
            periodic_pruning=draft.periodic_pruning,
        )

    return configuration
