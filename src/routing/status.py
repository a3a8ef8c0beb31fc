"""Status document describing the loaded release channels."""

from __future__ import annotations

from typing import Any, Dict, List

# Support being imported as either "src.routing.status" or "routing.status"
try:
    from ..versioning.codec import encode_version
    from ..versioning.resolvers import root_release_version
    from ..versioning.resolvers.cascade import UNKNOWN_VERSION
    from ..versioning.store import TopologyStore
    from ..versioning.topology import ReleaseTopology
except ImportError:
    from versioning.codec import encode_version
    from versioning.resolvers import root_release_version
    from versioning.resolvers.cascade import UNKNOWN_VERSION
    from versioning.store import TopologyStore
    from versioning.topology import ReleaseTopology
from .config import RouterConfig


def _release_channels(topology: ReleaseTopology) -> List[Dict[str, Any]]:
    # Group keys are capitalized (Name, Channels); channel keys are lowercase
    return [
        {
            "Name": group.name,
            "Channels": [
                {"name": entry.channel.value, "version": entry.version}
                for entry in group.ordered_entries()
            ],
        }
        for group in topology
    ]


def status_report(store: TopologyStore, config: RouterConfig) -> Dict[str, Any]:
    """Build the status payload from the store's current snapshot.

    A failed refresh is reported as 'error' while the last good snapshot is
    still described.
    """
    msg = store.last_error or ""
    if not store.loaded:
        return {
            "status": "error",
            "msg": msg or "release topology has not been loaded",
            "rootVersion": UNKNOWN_VERSION,
            "rootVersionURL": UNKNOWN_VERSION,
            "releasechannels": [],
        }

    topology = store.snapshot()
    root_version = root_release_version(topology, config.default_group)
    return {
        "status": "error" if msg else "ok",
        "msg": msg,
        "rootVersion": root_version,
        "rootVersionURL": encode_version(root_version),
        "releasechannels": _release_channels(topology),
    }
