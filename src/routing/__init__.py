"""Documentation request routing.

This package turns request paths into version tokens and builds the data an
HTTP layer renders or redirects with:
- request_parser.py: language/version/page decomposition of request paths
- menu.py: version, group and channel menus
- redirects.py: redirect targets for group and group/channel URLs
- status.py: status payload for the loaded topology
- config.py: shared router configuration
"""

from .config import RouterConfig
from .menu import Menu, MenuAssembler, build_menu
from .redirects import group_channel_redirect_path, group_redirect_path, root_redirect_path
from .request_parser import (
    RequestPathDecomposer,
    decompose_request_path,
    language_from_domain_map,
    language_from_host,
    split_group_channel,
)
from .status import status_report

__all__ = [
    "RouterConfig",
    "Menu",
    "MenuAssembler",
    "build_menu",
    "group_channel_redirect_path",
    "group_redirect_path",
    "root_redirect_path",
    "RequestPathDecomposer",
    "decompose_request_path",
    "language_from_domain_map",
    "language_from_host",
    "split_group_channel",
    "status_report",
]
