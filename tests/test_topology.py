"""Tests for the immutable release topology."""

import dataclasses

import pytest

from src.versioning.errors import LoadError
from src.versioning.models import Channel, ChannelEntry
from src.versioning.topology import ReleaseGroup, ReleaseTopology, build_topology, group_sort_key


class TestGroupOrdering:
    """Descending numeric ordering of group names."""

    def test_numeric_not_lexicographic(self):
        topology = build_topology({"v1": {}, "v10": {}, "v2": {}})
        assert topology.groups_descending() == ["v10", "v2", "v1"]

    def test_minor_versions_compare_numerically(self):
        topology = build_topology({"v1.9": {}, "v1.10": {}, "v1": {}})
        assert topology.groups_descending() == ["v1.10", "v1.9", "v1"]

    def test_names_without_prefix(self):
        topology = build_topology({"1.1": {}, "1.2": {}})
        assert topology.groups_descending() == ["1.2", "1.1"]

    def test_malformed_names_sort_last(self):
        topology = build_topology({"next": {}, "v3": {}, "v1": {}})
        assert topology.groups_descending() == ["v3", "v1", "next"]

    def test_sort_key_for_garbage_is_zero(self):
        assert str(group_sort_key("garbage")) == "0.0.0"
        assert str(group_sort_key("")) == "0.0.0"


class TestTopologyAccess:
    """Lookups over a topology snapshot."""

    def test_channels_of(self, topology):
        channels = topology.channels_of("v2")
        assert dict(channels) == {
            Channel.BETA: "v2.0.0-beta1",
            Channel.ALPHA: "v2.1.0-alpha1",
        }

    def test_channels_of_missing_group_is_empty(self, topology):
        assert len(topology.channels_of("v99")) == 0

    def test_channels_of_is_read_only(self, topology):
        with pytest.raises(TypeError):
            topology.channels_of("v1")[Channel.STABLE] = "v0"

    def test_lookup(self, topology):
        assert topology.lookup("v1", "stable") == "v1.2.3+fix6"
        assert topology.lookup("v1", Channel.EA) == "v1.2.4"
        assert topology.lookup("v2", "stable") is None
        assert topology.lookup("v99", "stable") is None
        assert topology.lookup("v1", "nightly") is None

    def test_container_protocol(self, topology):
        assert len(topology) == 3
        assert "v10" in topology
        assert "v3" not in topology
        assert [g.name for g in topology] == ["v1", "v2", "v10"]

    def test_frozen(self, topology):
        with pytest.raises(dataclasses.FrozenInstanceError):
            topology.groups = ()

    def test_to_dict_orders_channels_by_stability(self):
        topology = build_topology({"v1": {"alpha": "v1.1-a", "stable": "v1.0"}})
        assert topology.to_dict() == {
            "groups": [
                {
                    "name": "v1",
                    "channels": [
                        {"name": "stable", "version": "v1.0"},
                        {"name": "alpha", "version": "v1.1-a"},
                    ],
                }
            ]
        }


class TestTopologyInvariants:
    """Construction-time uniqueness checks."""

    def test_duplicate_group_names_rejected(self):
        group = ReleaseGroup(name="v1")
        with pytest.raises(LoadError):
            ReleaseTopology(groups=(group, ReleaseGroup(name="v1")))

    def test_duplicate_channel_rejected(self):
        with pytest.raises(LoadError):
            ReleaseGroup(
                name="v1",
                entries=(
                    ChannelEntry(Channel.STABLE, "v1.0"),
                    ChannelEntry(Channel.STABLE, "v1.1"),
                ),
            )

    def test_unknown_channel_rejected(self):
        with pytest.raises(LoadError):
            build_topology({"v1": {"nightly": "v1.0"}})
