"""Parser for Objective-C property declarations."""

from __future__ import annotations

import logging
import re

from bs4 import Tag

from rb_docset.domain.entities import PropertyDecl
from rb_docset.domain.type_normalizer import normalize_type

from ..docref import extract_docref
from ..html_handler import find_all_with_classes, node_text
from .base import DeclarationParser

logger = logging.getLogger(__name__)

READONLY_MARKER = "readonly"

_PROPERTY_PREFIX_RE = re.compile(r"@property\s*(\([^)]+\))?")
_PROPERTY_NAME_RE = re.compile(r"(\w+);?\s*$")


class PropertyParser(DeclarationParser[PropertyDecl]):
    """Extracts properties from 'api propertyObjC' blocks."""

    def parse(self, root: Tag) -> list[PropertyDecl]:
        properties: list[PropertyDecl] = []
        for node in find_all_with_classes(root, "div", "api propertyObjC"):
            prop = self._parse_property(node)
            if prop is not None:
                properties.append(prop)
        return properties

    def _parse_property(self, node: Tag) -> PropertyDecl | None:
        decl = _declaration_text(node)
        is_read_only = READONLY_MARKER in decl
        decl = _PROPERTY_PREFIX_RE.sub("", decl, count=1).strip()

        match = _PROPERTY_NAME_RE.search(decl)
        if match is None:
            logger.debug("Skipping property with unparsable declaration: %r", decl)
            return None

        return PropertyDecl(
            name=match.group(1),
            property_type=normalize_type(decl[: match.start()]),
            is_read_only=is_read_only,
            documentation=extract_docref(node),
        )


def _declaration_text(node: Tag) -> str:
    """Prefer the nested declaration div; some pages only have the outer one."""
    inner = node.select_one("div.declaration > div.declaration")
    if inner is not None and inner.get_text(strip=True):
        return node_text(inner)
    return node_text(node.find("div", class_="declaration"))
