"""Resolvers turning group, channel and version tokens into each other."""

from .cascade import StabilityCascadeResolver, root_release_version
from .reverse import ReverseResolver

__all__ = [
    "StabilityCascadeResolver",
    "ReverseResolver",
    "root_release_version",
]
