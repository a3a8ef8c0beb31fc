"""Stability cascade: pick the version to serve for a release group."""

import logging
from typing import Union

from ..errors import ConfigError, NoVersionForGroup
from ..models import CASCADE_ORDER, LATEST, Channel, Threshold
from ..topology import ReleaseTopology

logger = logging.getLogger(__name__)

UNKNOWN_VERSION = "unknown"


class StabilityCascadeResolver:
    """Resolve a group (e.g. 'v1.2') to a concrete version such as 'v1.2.3+fix6'.

    Candidates are tried from the most stable channel down; the configured
    threshold decides which of them may be returned.
    """

    def __init__(self, threshold: Union[Threshold, str] = Threshold.STABLE):
        """Initialize the resolver.

        Args:
            threshold: Default channel threshold (stable, ea, beta, alpha or latest).

        Raises:
            ConfigError: If the threshold name is unknown.
        """
        try:
            self.threshold = Threshold.parse(threshold)
        except ValueError as exc:
            raise ConfigError(
                f"Unknown default channel '{threshold}'. It can be one of: {', '.join(t.value for t in Threshold)}."
            ) from exc

    def resolve(self, topology: ReleaseTopology, group: str) -> str:
        """Return the version to serve for ``group``.

        Raises:
            NoVersionForGroup: If the group is absent or has no usable channel.
        """
        if self.threshold is Threshold.LATEST:
            return LATEST

        channels = topology.channels_of(group)
        if not channels:
            raise NoVersionForGroup(group)

        for channel in CASCADE_ORDER:
            version = channels.get(channel)
            if version is not None and self.threshold.admits(channel):
                return version

        alpha = channels.get(Channel.ALPHA)
        logger.error("can't get version for group %s, chose %s for alpha channel", group, alpha or "nothing")
        if alpha:
            return alpha
        raise NoVersionForGroup(group)


def root_release_version(topology: ReleaseTopology, group: str) -> str:
    """Most stable version of a group regardless of threshold, or 'unknown'."""
    channels = topology.channels_of(group)
    for channel in CASCADE_ORDER:
        version = channels.get(channel)
        if version is not None:
            return version
    return UNKNOWN_VERSION
