"""Parse channels files (JSON or YAML) into a :class:`ReleaseTopology`.

Expected layout::

    groups:
      - name: v1
        channels:
          - name: stable
            version: v1.2.3+fix6
          - name: alpha
            version: v1.3.0-alpha1

Key lookup is case-insensitive so files written for the ``Groups``/``Name``
spelling load as well.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Union

import yaml

from .errors import LoadError
from .models import Channel, ChannelEntry
from .topology import ReleaseGroup, ReleaseTopology

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("json", "yaml")

_EXTENSION_FORMATS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def format_for_path(path: str) -> str:
    """Pick the parser for a channels file from its extension."""
    _, ext = os.path.splitext(path)
    fmt = _EXTENSION_FORMATS.get(ext.lower())
    if fmt is None:
        raise LoadError(f"failed to decode channels file {path}: unsupported extension")
    return fmt


def _decode(raw: Union[bytes, str], fmt: str) -> Any:
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise LoadError(f"channels data is not valid UTF-8: {exc}") from exc

    if fmt == "json":
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise LoadError(f"can't unmarshal JSON channels data: {exc}") from exc
    if fmt in ("yaml", "yml"):
        try:
            # BaseLoader keeps every scalar as text, so '1.10' stays '1.10'.
            return yaml.load(raw, Loader=yaml.BaseLoader)  # nosec B506
        except yaml.YAMLError as exc:
            raise LoadError(f"can't unmarshal YAML channels data: {exc}") from exc
    raise LoadError(f"unsupported channels format '{fmt}'")


def _lower_keys(node: Any, where: str) -> Dict[str, Any]:
    if not isinstance(node, dict):
        raise LoadError(f"{where}: expected a mapping, got {type(node).__name__}")
    return {str(k).lower(): v for k, v in node.items()}


def _as_list(node: Any, where: str) -> List[Any]:
    if node in (None, ""):
        return []
    if not isinstance(node, list):
        raise LoadError(f"{where}: expected a list, got {type(node).__name__}")
    return node


def _as_text(node: Any, where: str) -> str:
    if isinstance(node, bool) or node is None:
        raise LoadError(f"{where}: expected a string")
    if isinstance(node, (int, float)):
        # JSON numbers are accepted for group names like 1.2
        node = str(node)
    if not isinstance(node, str):
        raise LoadError(f"{where}: expected a string, got {type(node).__name__}")
    text = node.strip()
    if not text:
        raise LoadError(f"{where}: must not be empty")
    return text


def parse_topology(data: Any) -> ReleaseTopology:
    """Validate decoded channels data and build an immutable topology."""
    root = _lower_keys(data if data is not None else {}, "channels file")
    groups = []
    for g_idx, raw_group in enumerate(_as_list(root.get("groups"), "groups")):
        group = _lower_keys(raw_group, f"groups[{g_idx}]")
        name = _as_text(group.get("name"), f"groups[{g_idx}].name")
        entries = []
        for c_idx, raw_channel in enumerate(_as_list(group.get("channels"), f"group {name} channels")):
            where = f"group {name} channels[{c_idx}]"
            item = _lower_keys(raw_channel, where)
            channel_name = _as_text(item.get("name"), f"{where}.name")
            channel = Channel.parse(channel_name)
            if channel is None:
                raise LoadError(f"{where}: unknown channel '{channel_name}'")
            version = _as_text(item.get("version"), f"{where}.version")
            entries.append(ChannelEntry(channel=channel, version=version))
        groups.append(ReleaseGroup(name=name, entries=tuple(entries)))
    return ReleaseTopology(groups=tuple(groups))


def load_topology(raw: Union[bytes, str], fmt: str) -> ReleaseTopology:
    """Parse raw channels data in the given format ('json' or 'yaml')."""
    fmt = (fmt or "").lower().lstrip(".")
    topology = parse_topology(_decode(raw, fmt))
    logger.debug("Loaded release topology with %d groups", len(topology))
    return topology


def load_topology_file(path: str) -> ReleaseTopology:
    """Read and parse a channels file, choosing the format by extension."""
    fmt = format_for_path(path)
    try:
        with open(path, "rb") as fh:
            raw = fh.read()
    except OSError as exc:
        raise LoadError(f"can't open {path}: {exc}") from exc
    try:
        return load_topology(raw, fmt)
    except LoadError as exc:
        raise LoadError(f"{path}: {exc}") from exc
