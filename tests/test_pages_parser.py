"""Tests for page classification and dispatch to the page parsers."""

import pytest

from rb_docset.domain.entities import ClassDecl, FunctionDecl, ProtocolDecl, StructDecl
from rb_docset.domain.enums import PageKind
from rb_docset.infrastructure.html.pages_parser import ReferencePagesParser
from rb_docset.presentation.stub_formatter import RubyStubFormatter

from tests.pages import FRAMEWORK_PATH, METHOD_BLOCK, PROPERTY_BLOCK


@pytest.fixture
def parser():
    return ReferencePagesParser()


class TestClassPages:
    def test_class_declaration(self, parser, class_page_html):
        stub = parser.parse(class_page_html)
        assert stub.kind is PageKind.CLASS
        assert stub.name == "Foo"
        assert stub.framework_path == FRAMEWORK_PATH

        (decl,) = stub.symbols
        assert isinstance(decl, ClassDecl)
        assert decl.superclass == "Bar"
        assert decl.documentation == "The Foo class does things."
        assert [m.name for m in decl.members] == ["name", "setValue:"]
        assert [c.name for c in decl.constants] == ["MyEnum"]
        assert decl.structs == []

    def test_read_only_property_class(self, parser, make_page):
        stub = parser.parse(make_page("Foo Class Reference", PROPERTY_BLOCK, superclass="Bar"))
        text = RubyStubFormatter().format_page(stub)
        assert "class Foo < Bar\n" in text
        assert "  # @return [String]\n  attr_reader :name\n" in text

    def test_missing_superclass_row_skips_page(self, parser, make_page):
        assert parser.parse(make_page("Foo Class Reference", PROPERTY_BLOCK)) is None

    def test_superclass_none_is_root_class(self, parser, make_page):
        stub = parser.parse(make_page("NSObject Class Reference", superclass="none"))
        decl = stub.symbols[0]
        assert decl.superclass is None
        assert not decl.has_members()

    def test_class_without_framework_path(self, parser, make_page):
        stub = parser.parse(make_page("Foo Class Reference", superclass="Bar", framework_path=None))
        assert stub.framework_path is None


class TestProtocolPages:
    def test_protocol_declaration(self, parser, protocol_page_html):
        stub = parser.parse(protocol_page_html)
        assert stub.kind is PageKind.PROTOCOL
        (decl,) = stub.symbols
        assert isinstance(decl, ProtocolDecl)
        assert decl.name == "FooDelegate"
        assert decl.documentation == "Delegate of Foo."
        assert [m.name for m in decl.members] == ["setValue:"]

    def test_protocol_without_abstract_skipped(self, parser, make_page):
        assert parser.parse(make_page("FooDelegate Protocol Reference")) is None

    def test_root_protocol_skipped(self, parser, make_page):
        page = make_page("NSObject Protocol Reference", METHOD_BLOCK, abstract="The root protocol.")
        assert parser.parse(page) is None


class TestReferencePages:
    def test_functions_and_data_types(self, parser, reference_page_html):
        stub = parser.parse(reference_page_html)
        assert stub.kind is PageKind.REFERENCE
        assert stub.name == "Foo Functions"
        assert stub.framework_path is None
        assert [(type(s), s.name) for s in stub.symbols] == [
            (FunctionDecl, "Add"),
            (FunctionDecl, "FooLog"),
            (StructDecl, "FooRange"),
        ]

    def test_empty_reference_page_still_yields_stub(self, parser, make_page):
        stub = parser.parse(make_page("Foo Constants Reference"))
        assert stub is not None
        assert stub.symbols == []


class TestUnrecognizedPages:
    def test_other_titles_skipped(self, parser, make_page):
        assert parser.parse(make_page("Foo Programming Guide", METHOD_BLOCK)) is None

    def test_page_without_title(self, parser):
        assert parser.parse("<html><body><p>Nothing here</p></body></html>") is None


class TestIdempotence:
    def test_same_page_parsed_twice(self, parser, class_page_html):
        assert parser.parse(class_page_html) == parser.parse(class_page_html)

    def test_same_reference_page_parsed_twice(self, parser, reference_page_html):
        formatter = RubyStubFormatter()
        first = formatter.format_page(parser.parse(reference_page_html))
        second = formatter.format_page(parser.parse(reference_page_html))
        assert first == second
