"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    RESOLUTION_ERROR = 2
    CONFIG_ERROR = 3


class I18nTypes(Enum):
    """How the language of a request is determined.

    Args:
        Enum (string): Localization methods supported by the router.
    """

    DOMAIN = "domain"
    LOCATION = "location"
    SEPARATE_DOMAIN = "separate-domain"


class MenuKinds(Enum):
    """Menus the router can assemble.

    Args:
        Enum (string): Menu kinds accepted on the command line.
    """

    VERSION = "version"
    GROUP = "group"
    CHANNEL = "channel"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration defaults; not intended to provide behavior.
    """

    DEFAULT_GROUP = "v1"
    DEFAULT_CHANNEL = "stable"
    DEFAULT_VERSIONS_ROOT = "/documentation"
    DEFAULT_CHANNELS_FILE = "channels.yaml"
    DEFAULT_LOG_LEVEL = "WARNING"
    SUPPORTED_LANGUAGES = ("ru", "en")
    DEFAULT_LANGUAGE = "en"
    THRESHOLDS = ["stable", "ea", "beta", "alpha", "latest"]
    I18N_TYPES = [t.value for t in I18nTypes]
    MENU_KINDS = [k.value for k in MenuKinds]
    LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
    # Level names used by LOG_LEVEL in existing deployments
    LOG_LEVEL_ALIASES = {"WARN": "WARNING", "TRACE": "DEBUG", "FATAL": "CRITICAL", "PANIC": "CRITICAL"}

    NOT_FOUND_PATH = "/404.html"
    NOT_FOUND_QUERY_KEY = "uri"

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "DOCROUTER_LOG_LEVEL"
    ENV_LOG_FORMAT = "DOCROUTER_LOG_FORMAT"

    # Environment variables read by RouterConfig.from_env
    ENV_DEFAULT_GROUP = "DEFAULT_GROUP"
    ENV_DEFAULT_CHANNEL = "DEFAULT_CHANNEL"
    ENV_SHOW_LATEST_CHANNEL = "SHOW_LATEST_CHANNEL"
    ENV_LOCATION_VERSIONS = "LOCATION_VERSIONS"
    ENV_I18N_TYPE = "I18N_TYPE"
    ENV_PATH_CHANNELS_FILE = "PATH_CHANNELS_FILE"
    ENV_LOG_LEVEL_LEGACY = "LOG_LEVEL"
