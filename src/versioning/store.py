"""Process-wide holder for the current release topology snapshot."""

from __future__ import annotations

import logging
import threading
from typing import Optional, Tuple, Union

from .errors import LoadError
from .loader import load_topology, load_topology_file
from .topology import ReleaseTopology

logger = logging.getLogger(__name__)


class TopologyStore:
    """Publishes fully built topologies with a single reference swap.

    Readers call :meth:`snapshot` once per request and keep using that value;
    a concurrent refresh never changes a snapshot already handed out. The
    lock only serializes writers so generations stay monotonic.
    """

    def __init__(self, initial: Optional[ReleaseTopology] = None):
        self._lock = threading.Lock()
        self._current: Optional[Tuple[int, ReleaseTopology]] = (1, initial) if initial is not None else None
        self._last_error: Optional[str] = None

    @property
    def generation(self) -> int:
        """Number of topologies published so far (0 before the first load)."""
        current = self._current
        return current[0] if current else 0

    @property
    def last_error(self) -> Optional[str]:
        """Message of the most recent failed refresh, cleared on success."""
        return self._last_error

    @property
    def loaded(self) -> bool:
        return self._current is not None

    def snapshot(self) -> ReleaseTopology:
        """Return the current topology; raises LoadError if none was ever loaded."""
        current = self._current
        if current is None:
            raise LoadError(self._last_error or "release topology has not been loaded")
        return current[1]

    def publish(self, topology: ReleaseTopology) -> int:
        """Swap in a new topology and return its generation."""
        with self._lock:
            generation = self.generation + 1
            self._current = (generation, topology)
            self._last_error = None
        logger.debug("Published release topology generation %d (%d groups)", generation, len(topology))
        return generation

    def refresh(self, raw: Union[bytes, str], fmt: str) -> ReleaseTopology:
        """Parse raw channels data and publish it.

        On failure the previous snapshot stays in place and LoadError is raised.
        """
        try:
            topology = load_topology(raw, fmt)
        except LoadError as exc:
            self._record_failure(exc)
            raise
        self.publish(topology)
        return topology

    def refresh_from_file(self, path: str) -> ReleaseTopology:
        """Re-read a channels file and publish it; see :meth:`refresh`."""
        try:
            topology = load_topology_file(path)
        except LoadError as exc:
            self._record_failure(exc)
            raise
        self.publish(topology)
        return topology

    def _record_failure(self, exc: LoadError) -> None:
        with self._lock:
            self._last_error = str(exc)
        if self._current is None:
            logger.error("Release topology refresh failed, nothing loaded yet: %s", exc)
        else:
            logger.error("Release topology refresh failed, keeping generation %d: %s", self.generation, exc)

