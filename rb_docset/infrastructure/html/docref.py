"""Documentation prose attached to a declaration node."""

from __future__ import annotations

import re

from bs4 import Tag

from .html_handler import NO_BREAK_SPACE, find_with_classes, has_classes, sanitize

DISCUSSION_LABEL_RE = re.compile(r"^\s*Discussion")


def extract_docref(node: Tag) -> str:
    """Return the abstract and discussion text of a declaration node.

    Code samples inside the discussion are left out and the leading
    'Discussion' heading is dropped. The result is a single line; an empty
    string means the declaration is undocumented.
    """
    abstract = node.find("p", class_="abstract")
    parts = [abstract.get_text() if abstract is not None else ""]

    discussion = find_with_classes(node, "div", "api discussion")
    if discussion is not None:
        parts.append(DISCUSSION_LABEL_RE.sub("", _text_without_code_samples(discussion), count=1))

    return sanitize("\n".join(parts).replace(NO_BREAK_SPACE, " "))


def _text_without_code_samples(discussion: Tag) -> str:
    chunks: list[str] = []
    for string in discussion.find_all(string=True):
        if any(_is_code_sample(parent) for parent in string.parents):
            continue
        chunks.append(str(string))
    return "".join(chunks)


def _is_code_sample(tag: Tag) -> bool:
    return tag.name == "div" and has_classes(tag, "codesample clear")
