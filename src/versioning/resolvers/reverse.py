"""Map a concrete version back to the channel and group that publish it."""

import re
from typing import Tuple, Union

from ..errors import NoMatchingVersion
from ..models import STABILITY_ORDER, Channel
from ..topology import ReleaseTopology

BARE_GROUP_PATTERN = re.compile(r"^v[0-9]+$")


class ReverseResolver:
    """Reverse and exact lookups against a topology snapshot."""

    def __init__(self, topology: ReleaseTopology):
        self.topology = topology

    def channel_and_group_from_version(self, version: str) -> Tuple[str, str]:
        """Return (channel, group) for a version.

        A bare group token such as 'v2' yields ('', 'v2'). Groups are scanned
        newest first and channels from most to least stable, so the first
        group/channel publishing the version wins. No match yields ('', '').
        """
        if BARE_GROUP_PATTERN.match(version):
            return "", version

        for group in self.topology.groups_descending():
            channels = self.topology.channels_of(group)
            for channel in STABILITY_ORDER:
                if channels.get(channel) == version:
                    return channel.value, group
        return "", ""

    def version_from_channel_and_group(self, channel: Union[Channel, str], group: str) -> str:
        """Exact version pinned to ``channel`` in ``group``.

        Raises:
            NoMatchingVersion: If the group or channel is absent.
        """
        version = self.topology.lookup(group, channel)
        if version is None:
            name = channel.value if isinstance(channel, Channel) else str(channel)
            raise NoMatchingVersion(group, name)
        return version
