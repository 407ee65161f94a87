"""Parser for C struct declarations and struct typedefs."""

from __future__ import annotations

import logging
import re

from bs4 import Tag

from rb_docset.domain.entities import StructDecl, StructMember
from rb_docset.domain.type_normalizer import normalize_type

from ..html_handler import child_tags, has_classes, node_text, sanitize
from .base import DeclarationParser

logger = logging.getLogger(__name__)

STRUCT_HEADING_CLASSES = "tight jump struct"
TYPEDEF_HEADING_CLASSES = "tight jump typeDef"

_TYPEDEF_STRUCT_RE = re.compile(r"^typedef\s+struct")
_MEMBER_LIST_RE = re.compile(r"\{([^}]+)\}")


class StructParser(DeclarationParser[StructDecl]):
    """Extracts structs from the headings, declarations and field lists of a container.

    Headings, abstracts and declarations are matched by position. Field
    descriptions are taken from every termdef list of the container in
    order, with one counter running across all struct blocks, which is how
    the reference pages lay them out.

    Headings handled by a call are added to ``consumed``; passing the same
    set again for the same container yields nothing, so a section that
    triggers struct parsing more than once still emits each struct once.
    """

    def parse(self, root: Tag, consumed: set[int] | None = None) -> list[StructDecl]:
        if consumed is None:
            consumed = set()

        headings = [h for h in root.find_all(_is_struct_heading, recursive=False) if id(h) not in consumed]
        abstracts = child_tags(root, "p", "abstract")
        declarations = root.find_all(_is_declaration, recursive=False)
        descriptions = [
            dd for termdef in child_tags(root, "dl", "termdef") for dd in termdef.find_all("dd", recursive=False)
        ]

        structs: list[StructDecl] = []
        position = 0
        for i, heading in enumerate(headings):
            declaration = node_text(declarations[i]).strip() if i < len(declarations) else ""
            if has_classes(heading, TYPEDEF_HEADING_CLASSES) and not _TYPEDEF_STRUCT_RE.match(declaration):
                continue

            members: list[StructMember] = []
            for member_type, member_name in split_members(declaration):
                description = sanitize(node_text(descriptions[position])) if position < len(descriptions) else ""
                members.append(StructMember(name=member_name, type=normalize_type(member_type), description=description))
                position += 1
            if not members:
                logger.debug("Skipping struct %r without a member list", sanitize(node_text(heading)))
                continue

            structs.append(
                StructDecl(
                    name=sanitize(node_text(heading)),
                    members=members,
                    documentation=sanitize(node_text(abstracts[i])) if i < len(abstracts) else "",
                )
            )

        consumed.update(id(h) for h in headings)
        return structs


def split_members(declaration: str) -> list[tuple[str, str]]:
    """Return (type, name) pairs of a brace-delimited member list.

    'struct { double x, y; int *count; }' yields
    [('double', 'x'), ('double', 'y'), ('int*', 'count')].
    """
    match = _MEMBER_LIST_RE.search(declaration)
    if match is None:
        return []

    members: list[tuple[str, str]] = []
    for item in match.group(1).split(";"):
        first, *others = item.split(",")
        words = first.split()
        if len(words) < 2:
            continue
        # The prefix before the first declarator types every name of the item.
        prefix = " ".join(words[:-1])
        for declarator in [words[-1], *others]:
            declarator = declarator.strip()
            name = declarator.lstrip("*")
            if name:
                members.append((prefix + "*" * (len(declarator) - len(name)), name))
    return members


def _is_struct_heading(tag: Tag) -> bool:
    return tag.name == "h3" and (
        has_classes(tag, STRUCT_HEADING_CLASSES) or has_classes(tag, TYPEDEF_HEADING_CLASSES)
    )


def _is_declaration(tag: Tag) -> bool:
    return (tag.name == "pre" and has_classes(tag, "declaration")) or (
        tag.name == "table" and has_classes(tag, "zDeclaration")
    )
