"""Reference page loading and classification using BeautifulSoup.

Loads one Objective-C framework reference page, classifies it by its
<title> suffix and locates the framework path metadata. The declaration
extractors work on the ParsedPage built here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from rb_docset.domain.enums import PageKind

NO_BREAK_SPACE = "\u00a0"

_NEWLINES_RE = re.compile(r"\s*\n\s*")


@dataclass
class ParsedPage:
    soup: BeautifulSoup
    title: str = ""
    kind: PageKind = PageKind.UNRECOGNIZED
    name: str = ""
    framework_path: str | None = None

    @property
    def is_recognized(self) -> bool:
        return self.kind is not PageKind.UNRECOGNIZED


def parse_html_page(html: str) -> ParsedPage:
    """Parse a reference page and classify it."""
    soup = BeautifulSoup(html, "lxml")
    page = ParsedPage(soup=soup)

    title_tag = soup.find("title")
    if title_tag is not None:
        page.title = title_tag.get_text(strip=True)

    page.kind, page.name = PageKind.from_title(page.title)
    page.framework_path = find_framework_path(soup)
    return page


def find_framework_path(soup: BeautifulSoup) -> str | None:
    """Return the framework path from the specbox table, if present.

    The marker span sits in the label cell of a table row; the path is the
    text of the row's second cell.
    """
    span = soup.find("span", class_="FrameworkPath")
    if span is None:
        return None
    row = span.find_parent("tr")
    if row is None:
        return None
    cells = row.find_all(["td", "th"], recursive=False)
    if len(cells) < 2:
        return None
    path = cells[1].get_text(strip=True)
    return path or None


def has_classes(tag: Tag, classes: str) -> bool:
    """True when the tag's class attribute is exactly the given class list."""
    return tag.get("class", []) == classes.split()


def find_all_with_classes(root: Tag, name: str, classes: str, recursive: bool = True) -> list[Tag]:
    """Tags under root whose class attribute is exactly the given class list."""
    return root.find_all(lambda tag: tag.name == name and has_classes(tag, classes), recursive=recursive)


def find_with_classes(root: Tag, name: str, classes: str) -> Tag | None:
    found = find_all_with_classes(root, name, classes)
    return found[0] if found else None


def child_tags(container: Tag, name: str, classes: str) -> list[Tag]:
    """Direct children of container with the given tag name and class list."""
    return find_all_with_classes(container, name, classes, recursive=False)


def node_text(node: Tag | None) -> str:
    """Text of a node with no-break spaces normalized."""
    if node is None:
        return ""
    return node.get_text().replace(NO_BREAK_SPACE, " ")


def sanitize(text: str | None) -> str:
    """Collapse line breaks into single spaces and trim."""
    return _NEWLINES_RE.sub(" ", text or "").strip()
