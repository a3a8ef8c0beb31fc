"""Router configuration consumed (never mutated) by the routing layer."""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

import yaml

# Support being imported as either "src.routing.config" or "routing.config"
try:
    from ..constants import Constants, I18nTypes
    from ..versioning.errors import ConfigError
    from ..versioning.models import Threshold
except ImportError:
    from constants import Constants, I18nTypes
    from versioning.errors import ConfigError
    from versioning.models import Threshold

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def _normalize_log_level(value: Any) -> str:
    name = str(value).strip().upper()
    return Constants.LOG_LEVEL_ALIASES.get(name, name)


@dataclass(frozen=True)
class RouterConfig:
    """Settings shared by every request."""

    versions_root: str = Constants.DEFAULT_VERSIONS_ROOT
    default_group: str = Constants.DEFAULT_GROUP
    default_channel: str = Constants.DEFAULT_CHANNEL
    show_latest_channel: bool = False
    languages: Tuple[str, ...] = Constants.SUPPORTED_LANGUAGES
    i18n_type: str = I18nTypes.DOMAIN.value
    channels_file: str = Constants.DEFAULT_CHANNELS_FILE
    log_level: str = Constants.DEFAULT_LOG_LEVEL

    @property
    def threshold(self) -> Threshold:
        return Threshold.parse(self.default_channel)

    def validate(self) -> "RouterConfig":
        """Check values and return self.

        Raises:
            ConfigError: On an unknown channel threshold, localization method,
                empty language list or a versions root without a leading '/'.
        """
        if self.default_channel.lower() not in Constants.THRESHOLDS:
            raise ConfigError(
                f"Unknown default channel '{self.default_channel}'. "
                f"It can be one of: {', '.join(Constants.THRESHOLDS)}."
            )
        if self.i18n_type not in Constants.I18N_TYPES:
            raise ConfigError(
                f"Unknown localization method specified ({self.i18n_type}). "
                f"It can be one of: {', '.join(Constants.I18N_TYPES)}."
            )
        if not self.languages:
            raise ConfigError("At least one language code is required.")
        if not self.versions_root.startswith("/") or self.versions_root.endswith("/"):
            raise ConfigError(
                f"Versions location '{self.versions_root}' must start with '/' and not end with '/'."
            )
        if not self.default_group:
            raise ConfigError("Default group must not be empty.")
        if self.log_level.upper() not in Constants.LOG_LEVELS:
            raise ConfigError(f"Unknown log level '{self.log_level}'.")
        return self

    def replace(self, **changes: Any) -> "RouterConfig":
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RouterConfig":
        """Build config from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        changes = {}
        if env.get(Constants.ENV_DEFAULT_GROUP):
            changes["default_group"] = env[Constants.ENV_DEFAULT_GROUP].strip()
        if env.get(Constants.ENV_DEFAULT_CHANNEL):
            changes["default_channel"] = env[Constants.ENV_DEFAULT_CHANNEL].strip().lower()
        if env.get(Constants.ENV_SHOW_LATEST_CHANNEL):
            changes["show_latest_channel"] = _parse_bool(env[Constants.ENV_SHOW_LATEST_CHANNEL])
        if env.get(Constants.ENV_LOCATION_VERSIONS):
            changes["versions_root"] = env[Constants.ENV_LOCATION_VERSIONS].strip()
        if env.get(Constants.ENV_I18N_TYPE):
            changes["i18n_type"] = env[Constants.ENV_I18N_TYPE].strip().lower()
        if env.get(Constants.ENV_PATH_CHANNELS_FILE):
            changes["channels_file"] = env[Constants.ENV_PATH_CHANNELS_FILE].strip()
        log_level = env.get(Constants.ENV_LOG_LEVEL) or env.get(Constants.ENV_LOG_LEVEL_LEGACY)
        if log_level:
            changes["log_level"] = _normalize_log_level(log_level)
        return cls(**changes)

    @classmethod
    def from_yaml(cls, path: str, base: Optional["RouterConfig"] = None) -> "RouterConfig":
        """Overlay keys from a YAML file (keys named like the fields) on ``base``.

        Raises:
            ConfigError: If the file can't be read or isn't a mapping.
        """
        base = base or cls()
        try:
            with open(path, "r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Failed to load config {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must be a mapping")

        known = {f.name for f in dataclasses.fields(cls)}
        changes = {}
        for key, value in data.items():
            name = str(key).replace("-", "_").lower()
            if name not in known:
                logger.warning("Ignoring unknown config key '%s' in %s", key, path)
                continue
            if name == "show_latest_channel":
                value = _parse_bool(value)
            elif name == "log_level":
                value = _normalize_log_level(value)
            elif name == "languages":
                value = tuple(str(v) for v in (value if isinstance(value, list) else [value]))
            else:
                value = str(value)
            changes[name] = value
        return base.replace(**changes)

    @classmethod
    def from_args(cls, args: Any, base: Optional["RouterConfig"] = None) -> "RouterConfig":
        """Apply CLI overrides (highest precedence) on top of ``base``."""
        config = base or cls.from_env()
        changes = {}
        if getattr(args, "VERSIONS_ROOT", None):
            changes["versions_root"] = args.VERSIONS_ROOT
        if getattr(args, "DEFAULT_GROUP", None):
            changes["default_group"] = args.DEFAULT_GROUP
        if getattr(args, "DEFAULT_CHANNEL", None):
            changes["default_channel"] = args.DEFAULT_CHANNEL
        if getattr(args, "SHOW_LATEST", False):
            changes["show_latest_channel"] = True
        if getattr(args, "I18N_TYPE", None):
            changes["i18n_type"] = args.I18N_TYPE
        if getattr(args, "CHANNELS_FILE", None):
            changes["channels_file"] = args.CHANNELS_FILE
        if getattr(args, "LOG_LEVEL", None):
            changes["log_level"] = _normalize_log_level(args.LOG_LEVEL)
        return config.replace(**changes)
