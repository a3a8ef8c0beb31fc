"""Functional entry points over the topology and resolvers.

These are the calls an HTTP layer makes per request; each one works on the
single topology snapshot it is given.
"""

from typing import Tuple, Union

from .loader import load_topology
from .models import Channel, Threshold
from .resolvers import ReverseResolver, StabilityCascadeResolver
from .topology import ReleaseTopology


def refresh_topology(raw: Union[bytes, str], fmt: str) -> ReleaseTopology:
    """Parse channels data ('json' or 'yaml') into a new topology; raises LoadError."""
    return load_topology(raw, fmt)


def resolve_group_version(
    topology: ReleaseTopology, group: str, threshold: Union[Threshold, str]
) -> str:
    """Stability-cascade resolution of a group; raises NoVersionForGroup."""
    return StabilityCascadeResolver(threshold).resolve(topology, group)


def resolve_channel_group_version(
    topology: ReleaseTopology, channel: Union[Channel, str], group: str
) -> str:
    """Exact group/channel lookup; raises NoMatchingVersion."""
    return ReverseResolver(topology).version_from_channel_and_group(channel, group)


def reverse_resolve(topology: ReleaseTopology, version: str) -> Tuple[str, str]:
    """Return (channel, group) publishing ``version``; ('', '') if none does."""
    return ReverseResolver(topology).channel_and_group_from_version(version)
