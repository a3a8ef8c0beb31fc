"""Data models for release channels, groups and per-request routing values."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

LATEST = "latest"


class Channel(Enum):
    """Release channels, declared from most to least stable."""
    ROCK_SOLID = "rock-solid"
    STABLE = "stable"
    EA = "ea"
    BETA = "beta"
    ALPHA = "alpha"

    @property
    def rank(self) -> int:
        """Stability rank; 0 is the most stable channel."""
        return STABILITY_ORDER.index(self)

    @classmethod
    def parse(cls, value: Union["Channel", str, None]) -> Optional["Channel"]:
        """Return the channel for a name, or None if the name is unknown."""
        if isinstance(value, cls):
            return value
        if not value:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


# Total order used for menus and reverse lookups.
STABILITY_ORDER: Tuple[Channel, ...] = tuple(Channel)

# Candidates walked by the stability cascade; rock-solid is never a cascade target.
CASCADE_ORDER: Tuple[Channel, ...] = (Channel.STABLE, Channel.EA, Channel.BETA, Channel.ALPHA)


class Threshold(Enum):
    """Configured default-channel threshold for group resolution."""
    STABLE = "stable"
    EA = "ea"
    BETA = "beta"
    ALPHA = "alpha"
    LATEST = LATEST

    @classmethod
    def parse(cls, value: Union["Threshold", str]) -> "Threshold":
        """Return the threshold for a name; raises ValueError if unknown."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())

    def admits(self, channel: Channel) -> bool:
        """Whether the cascade may return ``channel`` under this threshold.

        stable is admitted by every threshold; ea by stable and ea; beta by
        stable, ea and beta; alpha by stable, ea, beta and alpha.
        """
        if channel is Channel.STABLE:
            return True
        if self is Threshold.LATEST or channel is Channel.ROCK_SOLID:
            return False
        return Channel(self.value).rank <= channel.rank


@dataclass(frozen=True)
class ChannelEntry:
    """A channel of a group pinned to exactly one version."""
    channel: Channel
    version: str


@dataclass(frozen=True)
class RequestContext:
    """Per-request view of a documentation URL; never persisted."""
    language: str
    version_token: str
    relative_page_path: str
    raw_version_url_segment: str
    page_path: str = ""


@dataclass(frozen=True)
class MenuItem:
    """One row of the version navigation menu."""
    group: str
    channel: str
    version: str
    version_url: str  # encoded version without a leading slash, e.g. 'v1.2.3-plus-fix6'
    is_current: bool = False

    def to_dict(self) -> dict:
        return {
            "group": self.group,
            "channel": self.channel,
            "version": self.version,
            "versionURL": self.version_url,
            "isCurrent": self.is_current,
        }
