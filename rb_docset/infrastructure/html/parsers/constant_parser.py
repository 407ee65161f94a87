"""Parser for the constants section of class and protocol pages."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from bs4 import Tag

from rb_docset.domain.entities import Constant, ConstantDecl, EnumerationDecl, StructDecl

from ..html_handler import child_tags, node_text, sanitize
from .struct_parser import StructParser

logger = logging.getLogger(__name__)

CONSTANTS_SECTION_ID = "Constants_section"

_STRUCT_DECLARATION_RE = re.compile(r"^(typedef\s+)?struct")
# Heuristic: only a name after the closing brace marks an enumeration.
_ENUM_NAME_RE = re.compile(r"\}\s*(\S+);$", re.M)


@dataclass
class ConstantsResult:
    constants: list[Constant] = field(default_factory=list)
    structs: list[StructDecl] = field(default_factory=list)


class ConstantParser:
    """Extracts enumerations, loose constants and structs from constants sections."""

    def __init__(self, struct_parser: StructParser | None = None) -> None:
        self._struct_parser = struct_parser or StructParser()

    def parse(self, root: Tag) -> ConstantsResult:
        result = ConstantsResult()
        for section in root.find_all("div", id=CONSTANTS_SECTION_ID):
            self._parse_section(section, result)
        return result

    def _parse_section(self, section: Tag, result: ConstantsResult) -> None:
        abstracts = child_tags(section, "p", "abstract")
        declarations = child_tags(section, "pre", "declaration")
        termdefs = child_tags(section, "dl", "termdef")
        consumed: set[int] = set()

        for i, termdef in enumerate(termdefs):
            declaration = node_text(declarations[i]).strip() if i < len(declarations) else ""
            if _STRUCT_DECLARATION_RE.match(declaration):
                result.structs.extend(self._struct_parser.parse(section, consumed))
                continue

            constants = [
                ConstantDecl(name=sanitize(node_text(dt)), description=_capitalize(sanitize(node_text(dd))))
                for dt, dd in zip(termdef.find_all("dt", recursive=False), termdef.find_all("dd", recursive=False))
            ]

            match = _ENUM_NAME_RE.search(declaration)
            if match is None:
                result.constants.extend(constants)
                continue

            result.constants.append(
                EnumerationDecl(
                    name=match.group(1),
                    constants=constants,
                    documentation=sanitize(node_text(abstracts[i])) if i < len(abstracts) else "",
                )
            )
            logger.debug("Enumeration %s with %d constants", match.group(1), len(constants))


def _capitalize(text: str) -> str:
    # Only the first letter; acronyms and identifiers later in the text keep their case.
    return text[:1].upper() + text[1:]
