"""Coordinator for page parsers: dispatches to specific parsers by page kind."""

from __future__ import annotations

import logging

from rb_docset.domain.entities import PageStub
from rb_docset.domain.enums import PageKind

from .html_handler import ParsedPage, parse_html_page
from .parsers.base import PageParser
from .parsers.class_parser import ClassPageParser, ProtocolPageParser
from .parsers.reference_parser import ReferencePageParser

logger = logging.getLogger(__name__)


class ReferencePagesParser:
    """Classifies HTML reference pages and dispatches them to the matching parser."""

    def __init__(self) -> None:
        self._parsers: dict[PageKind, PageParser] = {
            PageKind.CLASS: ClassPageParser(),
            PageKind.PROTOCOL: ProtocolPageParser(),
            PageKind.REFERENCE: ReferencePageParser(),
        }

    def parse(self, html: str) -> PageStub | None:
        return self.parse_page(parse_html_page(html))

    def parse_page(self, page: ParsedPage) -> PageStub | None:
        if not page.is_recognized:
            logger.debug("Unrecognized page title %r, skipping", page.title)
            return None
        logger.debug("Parsing %s page '%s'", page.kind.get_display_name(), page.name)
        return self._parsers[page.kind].parse_page(page)
