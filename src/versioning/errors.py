"""Exception types raised by the release topology and resolvers."""


class RouterError(Exception):
    """Base class for all documentation router errors."""


class LoadError(RouterError):
    """Raised when a topology source cannot be read or parsed.

    A failed load never replaces a previously published snapshot.
    """


class ConfigError(RouterError):
    """Raised when router configuration values are invalid."""


class ResolutionError(RouterError):
    """Base class for failures turning a token into a concrete version."""


class NoVersionForGroup(ResolutionError):
    """Raised when the stability cascade finds nothing usable for a group."""

    def __init__(self, group: str):
        super().__init__(f"can't get version for group {group}")
        self.group = group


class NoMatchingVersion(ResolutionError):
    """Raised when an exact group/channel lookup misses."""

    def __init__(self, group: str, channel: str):
        super().__init__(f"no matching version for group {group}, channel {channel}")
        self.group = group
        self.channel = channel
