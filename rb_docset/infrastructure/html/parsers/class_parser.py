"""Parsers for class and protocol reference pages."""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup

from rb_docset.domain.entities import ClassDecl, Member, PageStub, ProtocolDecl
from rb_docset.domain.enums import PageKind

from ..html_handler import ParsedPage, find_all_with_classes, node_text
from .base import PageParser
from .constant_parser import ConstantParser, ConstantsResult
from .method_parser import MethodParser
from .property_parser import PropertyParser

logger = logging.getLogger(__name__)

ROOT_CLASS_NAME = "NSObject"
NO_SUPERCLASS = "none"

_INHERITS_FROM_RE = re.compile(r"Inherits from\s*(\S+)")


class _MemberPageParser(PageParser):
    """Shared member extraction of class and protocol pages."""

    def __init__(self) -> None:
        self._property_parser = PropertyParser()
        self._method_parser = MethodParser()
        self._constant_parser = ConstantParser()

    def _collect(self, page: ParsedPage) -> tuple[list[Member], ConstantsResult]:
        members: list[Member] = []
        members.extend(self._property_parser.parse(page.soup))
        members.extend(self._method_parser.parse(page.soup))
        return members, self._constant_parser.parse(page.soup)


class ClassPageParser(_MemberPageParser):
    """Parses '<Name> Class Reference' pages into a ClassDecl."""

    def _build_result(self, page: ParsedPage) -> PageStub | None:
        superclass = find_superclass(page.soup)
        if superclass is None:
            logger.debug("Class %s has no superclass row, skipping", page.name)
            return None

        members, constants = self._collect(page)
        decl = ClassDecl(
            name=page.name,
            superclass=None if superclass == NO_SUPERCLASS else superclass,
            members=members,
            constants=constants.constants,
            structs=constants.structs,
            documentation=node_text(page.soup.find("p", class_="abstract")).strip(),
        )
        if not decl.has_members():
            logger.debug("Class %s has no documented members", page.name)
        return PageStub(kind=PageKind.CLASS, name=page.name, framework_path=page.framework_path, symbols=[decl])


class ProtocolPageParser(_MemberPageParser):
    """Parses '<Name> Protocol Reference' pages into a ProtocolDecl."""

    def _build_result(self, page: ParsedPage) -> PageStub | None:
        abstract = page.soup.find("p", class_="abstract")
        if abstract is None:
            logger.debug("Protocol %s has no abstract, skipping", page.name)
            return None
        # The NSObject protocol would shadow the NSObject root class.
        if page.name == ROOT_CLASS_NAME:
            logger.debug("Skipping %s protocol", ROOT_CLASS_NAME)
            return None

        members, constants = self._collect(page)
        decl = ProtocolDecl(
            name=page.name,
            members=members,
            constants=constants.constants,
            structs=constants.structs,
            documentation=node_text(abstract).strip(),
        )
        if not decl.has_members():
            logger.debug("Protocol %s has no documented members", page.name)
        return PageStub(kind=PageKind.PROTOCOL, name=page.name, framework_path=page.framework_path, symbols=[decl])


def find_superclass(soup: BeautifulSoup) -> str | None:
    """Return the direct superclass from the specbox table's 'Inherits from' row."""
    for table in find_all_with_classes(soup, "table", "specbox"):
        for row in table.find_all("tr"):
            match = _INHERITS_FROM_RE.search(row.get_text(" ", strip=True))
            if match is not None:
                return match.group(1)
    return None
