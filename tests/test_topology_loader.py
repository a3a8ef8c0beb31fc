"""Tests for parsing channels files into a topology."""

import json

import pytest

from src.versioning.errors import LoadError
from src.versioning.loader import format_for_path, load_topology, load_topology_file
from src.versioning.models import Channel


class TestLoadYAML:
    """YAML channels data."""

    def test_parses_groups_and_channels(self, channels_yaml):
        topology = load_topology(channels_yaml, "yaml")
        assert [g.name for g in topology] == ["v1", "v2", "v10"]
        assert topology.lookup("v1", "stable") == "v1.2.3+fix6"
        assert topology.lookup("v1", "rock-solid") == "v1.1.5"
        assert topology.lookup("v2", Channel.ALPHA) == "v2.1.0-alpha1"

    def test_accepts_bytes(self, channels_yaml):
        topology = load_topology(channels_yaml.encode("utf-8"), "yml")
        assert len(topology) == 3

    def test_numeric_looking_names_keep_their_text(self):
        raw = "groups:\n  - name: 1.10\n    channels:\n      - name: stable\n        version: 1.10.2\n"
        topology = load_topology(raw, "yaml")
        assert topology.groups_descending() == ["1.10"]
        assert topology.lookup("1.10", "stable") == "1.10.2"

    def test_group_without_channels(self):
        topology = load_topology("groups:\n  - name: v3\n    channels:\n", "yaml")
        assert "v3" in topology
        assert len(topology.channels_of("v3")) == 0

    def test_empty_document_is_empty_topology(self):
        assert len(load_topology("", "yaml")) == 0

    def test_invalid_yaml(self):
        with pytest.raises(LoadError):
            load_topology("groups: [unclosed", "yaml")


class TestLoadJSON:
    """JSON channels data."""

    def test_parses_capitalized_keys(self):
        raw = json.dumps({
            "Groups": [
                {"Name": "v1", "Channels": [{"Name": "beta", "Version": "v1.3.0-beta2"}]},
            ]
        })
        topology = load_topology(raw, "json")
        assert topology.lookup("v1", "beta") == "v1.3.0-beta2"

    def test_invalid_json(self):
        with pytest.raises(LoadError):
            load_topology("{not json", "json")

    def test_groups_must_be_a_list(self):
        with pytest.raises(LoadError):
            load_topology(json.dumps({"groups": {"v1": {}}}), "json")

    def test_unknown_channel(self):
        raw = json.dumps({"groups": [{"name": "v1", "channels": [{"name": "nightly", "version": "x"}]}]})
        with pytest.raises(LoadError, match="unknown channel"):
            load_topology(raw, "json")

    def test_duplicate_channel(self):
        raw = json.dumps({"groups": [{"name": "v1", "channels": [
            {"name": "stable", "version": "v1.0"},
            {"name": "stable", "version": "v1.1"},
        ]}]})
        with pytest.raises(LoadError):
            load_topology(raw, "json")

    def test_duplicate_group(self):
        raw = json.dumps({"groups": [{"name": "v1"}, {"name": "v1"}]})
        with pytest.raises(LoadError, match="duplicate group"):
            load_topology(raw, "json")

    def test_missing_version(self):
        raw = json.dumps({"groups": [{"name": "v1", "channels": [{"name": "stable"}]}]})
        with pytest.raises(LoadError):
            load_topology(raw, "json")

    def test_non_utf8_bytes(self):
        with pytest.raises(LoadError):
            load_topology(b"\xff\xfe\x00", "json")


class TestFormats:
    """Format selection."""

    @pytest.mark.parametrize("path,expected", [
        ("channels.json", "json"),
        ("channels.yaml", "yaml"),
        ("/etc/router/channels.YML", "yaml"),
    ])
    def test_format_for_path(self, path, expected):
        assert format_for_path(path) == expected

    def test_unsupported_extension(self):
        with pytest.raises(LoadError):
            format_for_path("channels.toml")

    def test_unsupported_format_name(self):
        with pytest.raises(LoadError):
            load_topology("{}", "toml")


class TestLoadFile:
    """Reading channels files from disk."""

    def test_load_file(self, channels_file):
        topology = load_topology_file(str(channels_file))
        assert topology.lookup("v10", "stable") == "v10.0.1"

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadError):
            load_topology_file(str(tmp_path / "absent.yaml"))

    def test_error_mentions_path(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[", encoding="utf-8")
        with pytest.raises(LoadError, match="broken.json"):
            load_topology_file(str(path))
