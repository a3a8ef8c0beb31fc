"""Redirect targets the HTTP layer sends for group and group/channel URLs.

Only path assembly lives here; whether the target is reachable is the
caller's concern.
"""

from __future__ import annotations

import logging

# Support being imported as either "src.routing.redirects" or "routing.redirects"
try:
    from ..constants import I18nTypes
    from ..versioning.codec import encode_version
    from ..versioning.resolvers import ReverseResolver, StabilityCascadeResolver
    from ..versioning.topology import ReleaseTopology
except ImportError:
    from constants import I18nTypes
    from versioning.codec import encode_version
    from versioning.resolvers import ReverseResolver, StabilityCascadeResolver
    from versioning.topology import ReleaseTopology
from .config import RouterConfig

logger = logging.getLogger(__name__)


def language_prefix(config: RouterConfig, lang: str = "") -> str:
    """'/<lang>' when languages live in the URL path, otherwise ''."""
    if lang and config.i18n_type == I18nTypes.LOCATION.value:
        return f"/{lang}"
    return ""


def _versioned_path(config: RouterConfig, version: str, page: str, lang: str) -> str:
    return f"{language_prefix(config, lang)}{config.versions_root}/{encode_version(version)}/{page.lstrip('/')}"


def group_redirect_path(
    topology: ReleaseTopology, group: str, page: str, config: RouterConfig, lang: str = ""
) -> str:
    """Internal redirect for /<root>/v1.2/<page> to the group's cascade version.

    Raises:
        NoVersionForGroup: The caller falls back to the site root.
    """
    version = StabilityCascadeResolver(config.threshold).resolve(topology, group)
    logger.debug("Got version %s for group %s redirect", version, group)
    return _versioned_path(config, version, page, lang)


def group_channel_redirect_path(
    topology: ReleaseTopology,
    group: str,
    channel: str,
    page: str,
    config: RouterConfig,
    lang: str = "",
) -> str:
    """Temporary redirect for /<root>/v1.2-beta/<page> to the pinned version.

    Raises:
        NoMatchingVersion: The caller answers with its not-found page.
    """
    version = ReverseResolver(topology).version_from_channel_and_group(channel, group)
    return _versioned_path(config, version, page, lang)


def root_redirect_path(config: RouterConfig, remainder: str = "", lang: str = "") -> str:
    """Permanent redirect from an unversioned docs URL to the default group."""
    return f"{language_prefix(config, lang)}{config.versions_root}/{config.default_group}/{remainder.lstrip('/')}"
