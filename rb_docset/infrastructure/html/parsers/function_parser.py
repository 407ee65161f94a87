"""Parser for C function reference sections."""

from __future__ import annotations

import logging
import re

from bs4 import Tag

from rb_docset.domain.entities import FunctionDecl, Parameter
from rb_docset.domain.type_normalizer import normalize_type

from ..html_handler import child_tags, find_with_classes, has_classes, node_text, sanitize
from .base import DeclarationParser

logger = logging.getLogger(__name__)

FUNCTION_HEADING_CLASSES = "tight jump function"

_FUNCTION_RE = re.compile(r"^(?P<return_type>.+?)\s*\b(?P<name>\w+)\s*\((?P<args>.*)\)\s*;", re.S)
_STORAGE_QUALIFIER_RE = re.compile(r"^(?:(?:extern|static|inline|[A-Z][A-Z_]*_(?:EXTERN|EXPORT|INLINE))\s+)+")
_ARGUMENT_RE = re.compile(r"(?P<type>.+)\s+(?P<name>\S+)$", re.S)


class FunctionParser(DeclarationParser[FunctionDecl]):
    """Extracts functions from a 'Functions' section.

    Each function heading owns the sibling nodes that follow it up to the
    next heading: abstract, declaration, parameter list and return value.
    """

    def parse(self, root: Tag) -> list[FunctionDecl]:
        functions: list[FunctionDecl] = []
        for heading in child_tags(root, "h3", FUNCTION_HEADING_CLASSES):
            function = self._parse_function(heading, _function_block(heading))
            if function is not None:
                functions.append(function)
        return functions

    def _parse_function(self, heading: Tag, block: list[Tag]) -> FunctionDecl | None:
        name = sanitize(node_text(heading))
        declaration = node_text(_first(block, "pre", "declaration")).strip()

        match = _FUNCTION_RE.search(declaration)
        if match is None:
            logger.debug("Skipping function %s with unparsable declaration: %r", name, declaration)
            return None

        descriptions = _parameter_descriptions(block)
        parameters: list[Parameter] = []
        for index, arg in enumerate(match.group("args").split(",")):
            parameter = _parse_argument(arg.strip(), descriptions[index] if index < len(descriptions) else "")
            if parameter is not None:
                parameters.append(parameter)
        if not parameters:
            logger.debug("Skipping function %s without named parameters", name)
            return None

        return_type = _STORAGE_QUALIFIER_RE.sub("", match.group("return_type").strip())
        return FunctionDecl(
            name=name or match.group("name"),
            parameters=parameters,
            return_type=normalize_type(return_type),
            return_description=sanitize(node_text(_first_return_value(block))),
            documentation=sanitize(node_text(_first(block, "p", "abstract"))),
        )


def _parse_argument(arg: str, description: str) -> Parameter | None:
    """'NSString **names' -> Parameter('names', type of 'NSString**')."""
    match = _ARGUMENT_RE.match(arg)
    if match is None:
        return None
    name = match.group("name").rstrip(",")
    stars = len(name) - len(name.lstrip("*"))
    name = name.lstrip("*")
    if not name:
        return None
    return Parameter(
        name=name,
        description=description,
        type=normalize_type(match.group("type") + "*" * stars),
    )


def _function_block(heading: Tag) -> list[Tag]:
    block: list[Tag] = []
    for sibling in heading.find_next_siblings():
        if sibling.name in ("h2", "h3"):
            break
        block.append(sibling)
    return block


def _first(block: list[Tag], name: str, classes: str) -> Tag | None:
    for tag in block:
        if tag.name == name and has_classes(tag, classes):
            return tag
    return None


def _parameter_descriptions(block: list[Tag]) -> list[str]:
    parameters = _first(block, "div", "api parameters")
    if parameters is None:
        return []
    termdef = find_with_classes(parameters, "dl", "termdef")
    if termdef is None:
        return []
    return [sanitize(node_text(dd)) for dd in termdef.find_all("dd")]


def _first_return_value(block: list[Tag]) -> Tag | None:
    return_value = _first(block, "div", "return_value")
    if return_value is None:
        return None
    return return_value.find("p")
