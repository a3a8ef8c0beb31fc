"""Assemble the version/channel/group navigation menus."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Union

# Support being imported as either "src.routing.menu" or "routing.menu"
try:
    from ..constants import MenuKinds
    from ..versioning.codec import encode_version
    from ..versioning.errors import ResolutionError
    from ..versioning.models import LATEST, STABILITY_ORDER, MenuItem, RequestContext
    from ..versioning.resolvers import ReverseResolver, StabilityCascadeResolver
    from ..versioning.resolvers.reverse import BARE_GROUP_PATTERN
    from ..versioning.topology import ReleaseTopology
except ImportError:
    from constants import MenuKinds
    from versioning.codec import encode_version
    from versioning.errors import ResolutionError
    from versioning.models import LATEST, STABILITY_ORDER, MenuItem, RequestContext
    from versioning.resolvers import ReverseResolver, StabilityCascadeResolver
    from versioning.resolvers.reverse import BARE_GROUP_PATTERN
    from versioning.topology import ReleaseTopology
from .config import RouterConfig
from .request_parser import split_group_channel

logger = logging.getLogger(__name__)

# 'v1' is a group, 'v1.2' or 'v1.2.3+fix6' is a concrete version of group 'v1'
_VERSION_GROUP_PATTERN = re.compile(r"^(v[0-9]+)(\..+)?$")


@dataclass
class Menu:
    """Menu rows plus the page context a template renders around them."""

    kind: MenuKinds
    items: List[MenuItem] = field(default_factory=list)
    current_group: str = ""
    current_channel: str = ""
    current_version: str = ""
    current_version_url: str = ""
    current_language: str = ""
    absolute_version: str = ""  # explicit version, used for links to source files
    current_page_url_relative: str = ""  # without '<lang><root>/<version>'
    current_page_url: str = ""
    menu_documentation_link: str = ""

    @property
    def current(self) -> MenuItem:
        return self.items[0]

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "items": [item.to_dict() for item in self.items],
            "currentGroup": self.current_group,
            "currentChannel": self.current_channel,
            "currentVersion": self.current_version,
            "currentVersionURL": self.current_version_url,
            "currentLang": self.current_language,
            "absoluteVersion": self.absolute_version,
            "currentPageURLRelative": self.current_page_url_relative,
            "currentPageURL": self.current_page_url,
            "menuDocumentationLink": self.menu_documentation_link,
        }


class MenuAssembler:
    """Builds menus for one topology snapshot and one configuration.

    Item 0 of every menu is the current selection; the optional 'latest'
    pseudo-item is always appended last.
    """

    def __init__(self, topology: ReleaseTopology, config: RouterConfig):
        self.topology = topology
        self.config = config
        self._reverse = ReverseResolver(topology)
        self._root_pattern = re.compile(rf"^/[^/]+{re.escape(config.versions_root)}/.+$")

    def build(self, context: RequestContext, kind: Union[MenuKinds, str]) -> Menu:
        kind = MenuKinds(kind)
        if kind is MenuKinds.VERSION:
            return self.version_menu(context)
        if kind is MenuKinds.GROUP:
            return self.group_menu(context)
        return self.channel_menu(context)

    def _new_menu(self, kind: MenuKinds, context: RequestContext) -> Menu:
        return Menu(
            kind=kind,
            current_language=context.language,
            current_page_url_relative=context.relative_page_path,
            current_page_url=context.page_path,
            current_version_url=context.raw_version_url_segment,
            current_version=context.version_token,
        )

    def _doc_link(self, version: str) -> str:
        return f"{self.config.versions_root}/{encode_version(version)}/"

    def version_menu(self, context: RequestContext) -> Menu:
        """Full menu: current version, every group's channels, then 'latest'."""
        menu = self._new_menu(MenuKinds.VERSION, context)

        if not menu.current_version and self._root_pattern.match(menu.current_page_url):
            menu.current_version = self.config.default_group
            menu.current_version_url = encode_version(menu.current_version)

        match = _VERSION_GROUP_PATTERN.match(menu.current_version)
        if match:
            menu.menu_documentation_link = self._doc_link(menu.current_version)
            if match.group(2):
                menu.absolute_version = menu.current_version
            else:
                try:
                    menu.absolute_version = StabilityCascadeResolver(self.config.threshold).resolve(
                        self.topology, match.group(1)
                    )
                except ResolutionError as exc:
                    logger.debug("Can't determine absolute version for %s: %s", menu.current_version, exc)
        elif self.config.show_latest_channel and menu.current_version == LATEST:
            menu.menu_documentation_link = f"{self.config.versions_root}/{LATEST}/"
            menu.absolute_version = LATEST

        if menu.current_version:
            menu.current_channel, menu.current_group = self._reverse.channel_and_group_from_version(
                menu.current_version
            )

        self._append_current(menu)
        menu.items.extend(self.channel_items())
        self._append_latest(menu)
        return menu

    def group_menu(self, context: RequestContext) -> Menu:
        """Groups only: channel and version of non-current rows stay empty."""
        menu = self._new_menu(MenuKinds.GROUP, context)
        if not menu.current_version:
            menu.current_version = self.config.default_group
            menu.current_version_url = encode_version(menu.current_version)

        if BARE_GROUP_PATTERN.match(menu.current_version):
            menu.current_group = menu.current_version
        self._append_current(menu)

        for group in self.topology.groups_descending():
            menu.items.append(MenuItem(group=group, channel="", version="", version_url=""))
        self._append_latest(menu)
        return menu

    def channel_menu(self, context: RequestContext) -> Menu:
        """Landing menu for /v1.2-beta/ style URLs and concrete versions."""
        menu = self._new_menu(MenuKinds.CHANNEL, context)

        group_channel = split_group_channel(menu.current_version_url)
        if group_channel:
            group, channel = group_channel
            try:
                menu.current_version = self._reverse.version_from_channel_and_group(channel, group)
                menu.current_group, menu.current_channel = group, channel
            except ResolutionError as exc:
                logger.debug("Group/channel landing %s not found: %s", menu.current_version_url, exc)
                menu.current_version = ""
            menu.current_version_url = encode_version(menu.current_version)

        if not menu.current_version:
            menu.current_version = self.config.default_group
            menu.current_version_url = encode_version(menu.current_version)

        if not menu.current_channel or not menu.current_group:
            menu.current_channel, menu.current_group = self._reverse.channel_and_group_from_version(
                menu.current_version
            )

        self._append_current(menu)
        menu.items.extend(self.channel_items())
        self._append_latest(menu)
        return menu

    def channel_items(self) -> List[MenuItem]:
        """Every group newest first, its channels from rock-solid to alpha."""
        items = []
        for group in self.topology.groups_descending():
            channels = self.topology.channels_of(group)
            for channel in STABILITY_ORDER:
                version = channels.get(channel)
                if version is None:
                    continue
                items.append(
                    MenuItem(
                        group=group,
                        channel=channel.value,
                        version=version,
                        version_url=encode_version(version),
                    )
                )
        return items

    def _append_current(self, menu: Menu) -> None:
        menu.items.append(
            MenuItem(
                group=menu.current_group,
                channel=menu.current_channel,
                version=menu.current_version,
                version_url=menu.current_version_url,
                is_current=True,
            )
        )

    def _append_latest(self, menu: Menu) -> None:
        if self.config.show_latest_channel:
            menu.items.append(MenuItem(group="", channel="", version=LATEST, version_url=LATEST))


def build_menu(
    topology: ReleaseTopology,
    context: RequestContext,
    kind: Union[MenuKinds, str],
    config: RouterConfig,
) -> Menu:
    """Assemble one menu for a request against a topology snapshot."""
    return MenuAssembler(topology, config).build(context, kind)
