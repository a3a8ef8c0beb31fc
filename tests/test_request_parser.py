"""Tests for decomposing documentation request paths."""

import pytest

from src.routing.request_parser import (
    RequestPathDecomposer,
    decompose_request_path,
    language_from_domain_map,
    language_from_host,
    split_group_channel,
)


class TestRequestPathDecomposer:
    """Per-field extraction from request paths."""

    def setup_method(self):
        self.decomposer = RequestPathDecomposer("/documentation", ("ru", "en"))

    @pytest.mark.parametrize("path,expected", [
        ("/ru/documentation/v1/page.html", "ru"),
        ("/en/documentation/v1/page.html", "en"),
        ("/fr/documentation/v1/page.html", "en"),
        ("/ru/other/page.html", "en"),
        ("/404.html", "en"),
    ])
    def test_current_language(self, path, expected):
        assert self.decomposer.current_language(path) == expected

    def test_version_url_segment(self):
        assert self.decomposer.version_url_segment("/en/documentation/v1.2.3-plus-fix6/page.html") == "v1.2.3-plus-fix6"
        assert self.decomposer.version_url_segment("/en/documentation/v1.2") == "v1.2"
        assert self.decomposer.version_url_segment("/en/documentation/") == ""
        assert self.decomposer.version_url_segment("/en/blog/v1/") == ""

    def test_version_url_segment_from_not_found_page(self):
        segment = self.decomposer.version_url_segment(
            "/404.html", "uri=/ru/documentation/v1.2-beta/x"
        )
        assert segment == "v1.2-beta"

    def test_not_found_page_ignores_query_of_uri(self):
        segment = self.decomposer.version_url_segment(
            "/404.html", "uri=/en/documentation/v1.2%3Fx%3D1"
        )
        assert segment == "v1.2"

    def test_not_found_page_uri_with_page_and_query(self):
        context = self.decomposer.decompose("/404.html?uri=/en/documentation/v1.2/page.html?x=1")
        assert context.raw_version_url_segment == "v1.2"
        assert context.version_token == "v1.2"

    def test_not_found_page_without_uri(self):
        assert self.decomposer.version_url_segment("/404.html") == ""

    @pytest.mark.parametrize("path,expected", [
        ("/en/documentation/v1.2.3/reference/page.html", "reference/page.html"),
        ("/en/documentation/v1/", ""),
        ("/en/documentation/", "/documentation/"),
        ("/en/other/page", "/other/page"),
        ("/404.html", ""),
        ("/de/documentation/v1/page.html", ""),
    ])
    def test_relative_page_path(self, path, expected):
        assert self.decomposer.relative_page_path(path) == expected

    def test_decompose(self):
        context = self.decomposer.decompose("/en/documentation/v1.2.3-plus-fix6/reference/cli.html?x=1")
        assert context.language == "en"
        assert context.version_token == "v1.2.3+fix6"
        assert context.raw_version_url_segment == "v1.2.3-plus-fix6"
        assert context.relative_page_path == "reference/cli.html"
        assert context.page_path == "/en/documentation/v1.2.3-plus-fix6/reference/cli.html"

    def test_decompose_unquotes_path(self):
        context = self.decomposer.decompose("/ru/documentation/v1.4.0-u-rc1/%D0%B3%D0%B0%D0%B9%D0%B4.html")
        assert context.language == "ru"
        assert context.version_token == "v1.4.0_rc1"
        assert context.relative_page_path == "гайд.html"

    def test_decompose_not_found_page(self):
        context = self.decomposer.decompose("/404.html")
        assert context.relative_page_path == ""
        assert context.raw_version_url_segment == ""
        assert context.version_token == ""
        assert context.page_path == ""

    def test_decompose_adds_leading_slash(self):
        context = self.decomposer.decompose("en/documentation/v2/")
        assert context.version_token == "v2"

    def test_custom_root(self):
        decomposer = RequestPathDecomposer("/docs/product", ("en",))
        context = decomposer.decompose("/en/docs/product/v3.1/index.html")
        assert context.version_token == "v3.1"
        assert context.relative_page_path == "index.html"


class TestDecomposeRequestPath:
    """Module-level convenience wrapper."""

    def test_query_passed_separately(self):
        context = decompose_request_path("/404.html", query="uri=/en/documentation/v2-alpha/page.html")
        assert context.raw_version_url_segment == "v2-alpha"
        assert context.language == "en"

    def test_default_root(self):
        assert decompose_request_path("/ru/documentation/v1/").version_token == "v1"


class TestSplitGroupChannel:
    """Group/channel landing tokens."""

    @pytest.mark.parametrize("segment,expected", [
        ("v1.2-beta", ("v1.2", "beta")),
        ("v1-rock-solid", ("v1", "rock-solid")),
        ("v10-ea", ("v10", "ea")),
    ])
    def test_valid(self, segment, expected):
        assert split_group_channel(segment) == expected

    @pytest.mark.parametrize("segment", ["", "v1.2", "v1.2.3-beta", "v1-nightly", "1.2-beta", "v1.2-beta/x"])
    def test_invalid(self, segment):
        assert split_group_channel(segment) is None


class TestLanguageFromHost:
    """Host based language detection."""

    def test_domain(self):
        assert language_from_host("ru.example.com") == "ru"
        assert language_from_host("www.ru.example.com:8080") == "ru"
        assert language_from_host("example.com") == "en"
        assert language_from_host("") == "en"

    def test_domain_map(self):
        domains = {"en": "example.com", "ru": "example.ru"}
        assert language_from_domain_map("www.example.ru", domains) == "ru"
        assert language_from_domain_map("example.com:443", domains) == "en"
        assert language_from_domain_map("unknown.org", domains) == "en"
        assert language_from_domain_map("unknown.org", {}) == ""
