"""Parser for Objective-C class and instance method declarations."""

from __future__ import annotations

import logging
import re

from bs4 import Tag

from rb_docset.domain.entities import MethodDecl, Parameter, SelectorPart
from rb_docset.domain.type_normalizer import normalize_type

from ..docref import extract_docref
from ..html_handler import find_with_classes, has_classes, node_text, sanitize
from .base import DeclarationParser

logger = logging.getLogger(__name__)

CLASS_METHOD_CLASSES = "api classMethod"
INSTANCE_METHOD_CLASSES = "api instanceMethod"

_TYPE_RE = re.compile(r"\(([^)]+)\)")
_TYPE_ANNOTATION_RE = re.compile(r"\([^)]+\)+")
_CLASS_SCOPE_RE = re.compile(r"^\s*\+")
_QUALIFIER_RE = re.compile(r"^\s*[+\-]")
_TERMINATOR_RE = re.compile(r";\s*$")
_WORD_RE = re.compile(r"\w")


class MethodParser(DeclarationParser[MethodDecl]):
    """Extracts class and instance methods, keeping document order."""

    def parse(self, root: Tag) -> list[MethodDecl]:
        methods: list[MethodDecl] = []
        for node in root.find_all(_is_method_block):
            method = self._parse_method(node)
            if method is not None:
                methods.append(method)
        return methods

    def _parse_method(self, node: Tag) -> MethodDecl | None:
        decl = node_text(node.find("div", class_="declaration")).strip()
        selector = parse_selector(decl)
        if not selector:
            logger.debug("Skipping method with empty declaration")
            return None

        types = _TYPE_RE.findall(decl)
        return_type = normalize_type(types.pop(0)) if types else None

        method = MethodDecl(
            name=selector_name(selector),
            selector=selector,
            parameters=_parse_parameters(node, types),
            return_type=return_type,
            return_description=sanitize(node_text(node.select_one("div.return_value > p"))),
            is_class_method=_CLASS_SCOPE_RE.match(decl) is not None,
            documentation=extract_docref(node),
        )
        if method.argument_count != len(method.parameters):
            logger.debug(
                "Method %s documents %d of %d arguments",
                method.name,
                len(method.parameters),
                method.argument_count,
            )
        return method


def parse_selector(decl: str) -> list[SelectorPart]:
    """Split a method declaration into its keyword/argument selector parts.

    '- (void)setValue:(id)value forKey:(NSString *)key;' yields
    [setValue/value, forKey/key]; '- (void)reset' yields [reset/None].
    """
    decl = _QUALIFIER_RE.sub("", decl, count=1)
    decl = _TERMINATOR_RE.sub("", decl, count=1)
    decl = _TYPE_ANNOTATION_RE.sub("", decl)

    parts: list[SelectorPart] = []
    awaiting_argument = False
    for token in decl.split():
        token = token.strip(",")
        if not _WORD_RE.search(token):
            continue
        keyword, colon, argument = token.partition(":")
        if awaiting_argument and not colon:
            # "setValue: value" puts the argument name in its own token
            parts[-1] = SelectorPart(keyword=parts[-1].keyword, argument=token)
            awaiting_argument = False
            continue
        parts.append(SelectorPart(keyword=keyword, argument=argument or None))
        awaiting_argument = bool(colon) and not argument
    return parts


def selector_name(selector: list[SelectorPart]) -> str:
    """Full selector, e.g. 'setValue:forKey:' or 'reset'."""
    if len(selector) == 1 and selector[0].argument is None:
        return selector[0].keyword
    return "".join(f"{part.keyword}:" for part in selector)


def _parse_parameters(node: Tag, types: list[str]) -> list[Parameter]:
    block = find_with_classes(node, "div", "api parameters")
    if block is None:
        return []
    names = block.find_all("dt")
    descriptions = block.find_all("dd")
    typed = len(types) == len(names)

    parameters: list[Parameter] = []
    for i, (name, description) in enumerate(zip(names, descriptions)):
        parameters.append(
            Parameter(
                name=sanitize(node_text(name)),
                description=sanitize(node_text(description)),
                type=normalize_type(types[i]) if typed else None,
            )
        )
    return parameters


def _is_method_block(tag: Tag) -> bool:
    return tag.name == "div" and (
        has_classes(tag, CLASS_METHOD_CLASSES) or has_classes(tag, INSTANCE_METHOD_CLASSES)
    )
