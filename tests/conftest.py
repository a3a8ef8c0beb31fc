"""Shared fixtures for router tests."""

import pytest

from src.routing.config import RouterConfig
from src.versioning.topology import build_topology

CHANNELS_YAML = """\
groups:
  - name: v1
    channels:
      - name: rock-solid
        version: v1.1.5
      - name: stable
        version: v1.2.3+fix6
      - name: ea
        version: v1.2.4
      - name: beta
        version: v1.3.0-beta2
      - name: alpha
        version: v1.4.0_rc1
  - name: v2
    channels:
      - name: beta
        version: v2.0.0-beta1
      - name: alpha
        version: v2.1.0-alpha1
  - name: v10
    channels:
      - name: stable
        version: v10.0.1
"""


@pytest.fixture
def topology():
    """Three groups, deliberately listed out of numeric order."""
    return build_topology({
        "v1": {
            "rock-solid": "v1.1.5",
            "stable": "v1.2.3+fix6",
            "ea": "v1.2.4",
            "beta": "v1.3.0-beta2",
            "alpha": "v1.4.0_rc1",
        },
        "v2": {
            "beta": "v2.0.0-beta1",
            "alpha": "v2.1.0-alpha1",
        },
        "v10": {
            "stable": "v10.0.1",
        },
    })


@pytest.fixture
def config():
    return RouterConfig()


@pytest.fixture
def channels_file(tmp_path):
    path = tmp_path / "channels.yaml"
    path.write_text(CHANNELS_YAML, encoding="utf-8")
    return path


@pytest.fixture
def channels_yaml():
    return CHANNELS_YAML
