"""Request parser for extracting language, version and page from documentation URLs."""

from __future__ import annotations

import re
import urllib.parse
from typing import Iterable, Mapping, Optional, Tuple

# Support being imported as either "src.routing.request_parser" or "routing.request_parser"
try:
    from ..constants import Constants
    from ..versioning.codec import decode_version
    from ..versioning.models import Channel, RequestContext
except ImportError:
    from constants import Constants
    from versioning.codec import decode_version
    from versioning.models import Channel, RequestContext

# /v1.2-beta/ style tokens: a major or major.minor group plus a channel name
_GROUP_CHANNEL_PATTERN = re.compile(
    r"^(v[0-9]+(?:\.[0-9]+)?)-(" + "|".join(re.escape(c.value) for c in Channel) + r")$"
)


class RequestPathDecomposer:
    """Best-effort parser for paths like /en/documentation/v1.2.3-plus-fix6/page.html.

    Every method returns a documented default (empty string or the default
    language) instead of raising when the path doesn't have the expected shape.
    """

    def __init__(
        self,
        versions_root: str = Constants.DEFAULT_VERSIONS_ROOT,
        languages: Iterable[str] = Constants.SUPPORTED_LANGUAGES,
        default_language: str = Constants.DEFAULT_LANGUAGE,
    ):
        """Initialize the decomposer.

        Args:
            versions_root: URL location holding versioned docs, e.g. '/documentation'.
            languages: Supported language codes.
            default_language: Language reported when none is found in the path.
        """
        self.versions_root = versions_root
        self.default_language = default_language
        root = re.escape(versions_root)
        langs = "|".join(re.escape(lang) for lang in languages)

        # /<lang><root>/<anything>
        self._language_pattern = re.compile(rf"^/({langs}){root}/.+$")
        # /<lang><root>/<version segment>[/<anything>]
        self._version_pattern = re.compile(rf"^/({langs}){root}/([^/]+)/?.*$")
        # /<lang>[<root>/<version segment>]/<page>
        self._relative_pattern = re.compile(rf"^/({langs})({root}/[^/]+)?/(.*)$")

    def current_language(self, path: str) -> str:
        """Language code from the path, defaulting to the configured default."""
        if path == Constants.NOT_FOUND_PATH:
            return self.default_language
        match = self._language_pattern.match(path)
        if match:
            return match.group(1)
        return self.default_language

    def version_url_segment(self, path: str, query: str = "") -> str:
        """Raw (still encoded) version segment, e.g. 'v1.2.3-plus-fix5'; '' if absent.

        For the not-found page the original URI is taken from the 'uri'
        query parameter.
        """
        target = path
        if path == Constants.NOT_FOUND_PATH:
            values = urllib.parse.parse_qs(query or "")
            target = urllib.parse.urlsplit(values.get(Constants.NOT_FOUND_QUERY_KEY, [""])[0]).path
        match = self._version_pattern.match(target)
        if not match:
            return ""
        return match.group(2).lstrip("/")

    def relative_page_path(self, path: str) -> str:
        """Page path without the '/<lang><root>/<version>/' prefix.

        E.g. 'reference/page.html' for '/en/documentation/v1.2.3/reference/page.html'.
        Paths outside the versions root keep a leading slash after the language.
        """
        if path == Constants.NOT_FOUND_PATH:
            return ""
        match = self._relative_pattern.match(path)
        if not match:
            return ""
        if match.group(2):
            return match.group(3)
        return f"/{match.group(3)}"

    def page_path(self, path: str) -> str:
        """Full page path, or '' for the not-found page."""
        if path == Constants.NOT_FOUND_PATH:
            return ""
        return path

    def decompose(self, uri: str) -> RequestContext:
        """Split a raw request URI (path and optional query) into a RequestContext."""
        parts = urllib.parse.urlsplit(uri or "")
        path = urllib.parse.unquote(parts.path)
        if not path.startswith("/"):
            path = "/" + path
        segment = self.version_url_segment(path, parts.query)
        return RequestContext(
            language=self.current_language(path),
            version_token=decode_version(segment),
            relative_page_path=self.relative_page_path(path),
            raw_version_url_segment=segment,
            page_path=self.page_path(path),
        )


def split_group_channel(segment: str) -> Optional[Tuple[str, str]]:
    """Split a 'v1.2-beta' token into ('v1.2', 'beta'); None for anything else."""
    match = _GROUP_CHANNEL_PATTERN.match(segment or "")
    if not match:
        return None
    return match.group(1), match.group(2)


def language_from_host(host: str) -> str:
    """Language for the 'domain' localization method: ru.<domain> is Russian."""
    hostname = (host or "").split(":")[0]
    if hostname.startswith("ru.") or hostname.startswith("www.ru."):
        return "ru"
    return Constants.DEFAULT_LANGUAGE


def language_from_domain_map(host: str, domain_map: Mapping[str, str]) -> str:
    """Language for the 'separate-domain' method; first entry is the fallback."""
    hostname = (host or "").split(":")[0]
    result = ""
    for lang, domain in domain_map.items():
        if not result:
            result = lang
        if hostname in (domain, f"www.{domain}"):
            return lang
    return result


def decompose_request_path(
    path: str,
    versions_root: str = Constants.DEFAULT_VERSIONS_ROOT,
    query: str = "",
) -> RequestContext:
    """Decompose a request path; a query string may be passed separately or inline."""
    uri = f"{path}?{query}" if query else path
    return RequestPathDecomposer(versions_root).decompose(uri)
