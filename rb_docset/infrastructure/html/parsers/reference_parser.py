"""Parser for functions and data types reference pages."""

from __future__ import annotations

from rb_docset.domain.entities import PageStub, Symbol
from rb_docset.domain.enums import PageKind

from ..html_handler import ParsedPage
from .base import PageParser
from .function_parser import FunctionParser
from .struct_parser import StructParser

FUNCTIONS_SECTION_TITLE = "Functions"
DATA_TYPES_SECTION_TITLE = "Data Types"


class ReferencePageParser(PageParser):
    """Parses '<Name> Reference' pages.

    Always yields a stub, possibly with no symbols, so every reference page
    gets an output file.
    """

    def __init__(self) -> None:
        self._function_parser = FunctionParser()
        self._struct_parser = StructParser()

    def _build_result(self, page: ParsedPage) -> PageStub:
        symbols: list[Symbol] = []
        for anchor in page.soup.select(f'section > a[title="{FUNCTIONS_SECTION_TITLE}"]'):
            symbols.extend(self._function_parser.parse(anchor.parent))

        consumed: set[int] = set()
        for anchor in page.soup.select(f'section > a[title="{DATA_TYPES_SECTION_TITLE}"]'):
            symbols.extend(self._struct_parser.parse(anchor.parent, consumed))

        return PageStub(kind=PageKind.REFERENCE, name=page.name, framework_path=page.framework_path, symbols=symbols)
