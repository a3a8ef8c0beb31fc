"""Immutable release topology: groups of channels pinned to versions."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

import semantic_version

from .errors import LoadError
from .models import Channel, ChannelEntry

_ZERO = semantic_version.Version("0.0.0")


def group_sort_key(name: str) -> semantic_version.Version:
    """Numeric sort key for a group name such as 'v1', 'v1.10' or '1.2'.

    Names that do not start with a number (after an optional 'v') compare
    as 0 so they land at the end of a descending listing.
    """
    raw = name.strip()
    if raw[:1] in ("v", "V"):
        raw = raw[1:]
    try:
        return semantic_version.Version.coerce(raw)
    except ValueError:
        return _ZERO


@dataclass(frozen=True)
class ReleaseGroup:
    """A named release line (e.g. 'v1.2') and its channel entries."""
    name: str
    entries: Tuple[ChannelEntry, ...] = ()

    def __post_init__(self):
        seen = set()
        for entry in self.entries:
            if entry.channel in seen:
                raise LoadError(
                    f"group {self.name} has more than one '{entry.channel.value}' channel"
                )
            seen.add(entry.channel)

    def channels(self) -> Mapping[Channel, str]:
        """Read-only channel -> version mapping."""
        return MappingProxyType({entry.channel: entry.version for entry in self.entries})

    def version_for(self, channel: Union[Channel, str]) -> Optional[str]:
        wanted = Channel.parse(channel)
        for entry in self.entries:
            if entry.channel is wanted:
                return entry.version
        return None

    def ordered_entries(self) -> List[ChannelEntry]:
        """Entries sorted from most to least stable channel."""
        return sorted(self.entries, key=lambda entry: entry.channel.rank)


@dataclass(frozen=True)
class ReleaseTopology:
    """Snapshot of every group, channel and version known to the router.

    Instances are never mutated; a refresh builds a new topology and
    publishes it in one step (see :class:`versioning.store.TopologyStore`).
    """
    groups: Tuple[ReleaseGroup, ...] = ()
    _index: Optional[Mapping[str, ReleaseGroup]] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        index: Dict[str, ReleaseGroup] = {}
        for group in self.groups:
            if group.name in index:
                raise LoadError(f"duplicate group name {group.name}")
            index[group.name] = group
        object.__setattr__(self, "_index", MappingProxyType(index))

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self) -> Iterator[ReleaseGroup]:
        return iter(self.groups)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def groups_descending(self) -> List[str]:
        """Group names by descending numeric value; malformed names sort last."""
        return sorted((g.name for g in self.groups), key=group_sort_key, reverse=True)

    def channels_of(self, group: str) -> Mapping[Channel, str]:
        """Channel -> version mapping for a group; empty if the group is absent."""
        found = self._index.get(group)
        if found is None:
            return MappingProxyType({})
        return found.channels()

    def lookup(self, group: str, channel: Union[Channel, str]) -> Optional[str]:
        """Exact version for a group/channel pair, or None."""
        found = self._index.get(group)
        if found is None:
            return None
        return found.version_for(channel)

    def to_dict(self) -> dict:
        """Serialize back to the channels file layout."""
        return {
            "groups": [
                {
                    "name": group.name,
                    "channels": [
                        {"name": entry.channel.value, "version": entry.version}
                        for entry in group.ordered_entries()
                    ],
                }
                for group in self.groups
            ]
        }


def build_topology(data: Mapping[str, Mapping[str, str]]) -> ReleaseTopology:
    """Build a topology from a plain ``{group: {channel: version}}`` mapping.

    Handy for tests and for callers that already hold parsed data.
    """
    groups = []
    for name, channels in data.items():
        entries = []
        for channel_name, version in channels.items():
            channel = Channel.parse(channel_name)
            if channel is None:
                raise LoadError(f"unknown channel '{channel_name}' in group {name}")
            entries.append(ChannelEntry(channel=channel, version=version))
        entries.sort(key=lambda entry: entry.channel.rank)
        groups.append(ReleaseGroup(name=name, entries=tuple(entries)))
    return ReleaseTopology(groups=tuple(groups))
