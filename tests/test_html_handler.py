"""Tests for page loading, classification and framework path lookup."""

import pytest

from rb_docset.domain.enums import PageKind
from rb_docset.infrastructure.html.docref import extract_docref
from rb_docset.infrastructure.html.html_handler import parse_html_page, sanitize

from tests.pages import FRAMEWORK_PATH, METHOD_BLOCK


class TestClassification:
    @pytest.mark.parametrize(
        ("title", "kind", "name"),
        [
            ("NSView Class Reference", PageKind.CLASS, "NSView"),
            ("NSCoding Protocol Reference", PageKind.PROTOCOL, "NSCoding"),
            ("Foundation Functions Reference", PageKind.REFERENCE, "Foundation Functions"),
            ("Introduction to Cocoa", PageKind.UNRECOGNIZED, ""),
            ("", PageKind.UNRECOGNIZED, ""),
        ],
    )
    def test_title_kinds(self, title, kind, name):
        assert PageKind.from_title(title) == (kind, name)

    def test_parsed_page_carries_kind(self, make_page):
        page = parse_html_page(make_page("Foo Class Reference"))
        assert page.kind is PageKind.CLASS
        assert page.name == "Foo"
        assert page.is_recognized

    def test_missing_title_is_unrecognized(self):
        page = parse_html_page("<html><body><p>nothing</p></body></html>")
        assert page.kind is PageKind.UNRECOGNIZED
        assert not page.is_recognized


class TestFrameworkPath:
    def test_found(self, make_page):
        page = parse_html_page(make_page("Foo Class Reference"))
        assert page.framework_path == FRAMEWORK_PATH

    def test_missing(self, make_page):
        page = parse_html_page(make_page("Foo Class Reference", framework_path=None))
        assert page.framework_path is None


class TestDocref:
    def test_abstract_and_discussion_without_code_sample(self, make_page):
        page = parse_html_page(make_page("Foo Class Reference", METHOD_BLOCK))
        node = page.soup.find("div", class_="instanceMethod")
        assert extract_docref(node) == "Sets the value. Use with care."

    def test_code_sample_left_in_document(self, make_page):
        page = parse_html_page(make_page("Foo Class Reference", METHOD_BLOCK))
        node = page.soup.find("div", class_="instanceMethod")
        extract_docref(node)
        assert "[foo setValue:bar];" in node.get_text()

    def test_undocumented_node(self, make_page):
        page = parse_html_page(make_page("Foo Class Reference", '<div class="api instanceMethod"></div>'))
        node = page.soup.find("div", class_="instanceMethod")
        assert extract_docref(node) == ""


class TestSanitize:
    def test_collapses_newlines(self):
        assert sanitize("  first\n   second\n") == "first second"

    def test_none(self):
        assert sanitize(None) == ""
