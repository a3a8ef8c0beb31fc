"""Release topology model and version resolution.

- models.py: channels, thresholds and per-request value types
- codec.py: reversible version <-> URL segment mapping
- topology.py / loader.py / store.py: immutable topology, parsing, publication
- resolvers/: stability cascade and reverse lookups
- service.py: functional API used by the routing layer
"""

from .codec import decode_version, encode_version
from .errors import (
    ConfigError,
    LoadError,
    NoMatchingVersion,
    NoVersionForGroup,
    ResolutionError,
    RouterError,
)
from .models import (
    CASCADE_ORDER,
    LATEST,
    STABILITY_ORDER,
    Channel,
    ChannelEntry,
    MenuItem,
    RequestContext,
    Threshold,
)
from .resolvers import ReverseResolver, StabilityCascadeResolver, root_release_version
from .service import (
    refresh_topology,
    resolve_channel_group_version,
    resolve_group_version,
    reverse_resolve,
)
from .store import TopologyStore
from .topology import ReleaseGroup, ReleaseTopology, build_topology

__all__ = [
    "encode_version",
    "decode_version",
    "RouterError",
    "LoadError",
    "ConfigError",
    "ResolutionError",
    "NoVersionForGroup",
    "NoMatchingVersion",
    "CASCADE_ORDER",
    "LATEST",
    "STABILITY_ORDER",
    "Channel",
    "ChannelEntry",
    "MenuItem",
    "RequestContext",
    "Threshold",
    "ReverseResolver",
    "StabilityCascadeResolver",
    "root_release_version",
    "refresh_topology",
    "resolve_channel_group_version",
    "resolve_group_version",
    "reverse_resolve",
    "TopologyStore",
    "ReleaseGroup",
    "ReleaseTopology",
    "build_topology",
]
