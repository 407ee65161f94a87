"""Reference page kind enumeration."""

from __future__ import annotations

import re
from enum import Enum


class PageKind(Enum):
    CLASS = "class"
    PROTOCOL = "protocol"
    REFERENCE = "reference"
    UNRECOGNIZED = "unrecognized"

    def get_display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_title(cls, title: str) -> tuple[PageKind, str]:
        """Classify a page title and return the kind with the page name.

        'NSView Class Reference' -> (CLASS, 'NSView'). Titles that do not end
        with a known suffix are UNRECOGNIZED with an empty name.
        """
        for kind, pattern in _TITLE_PATTERNS:
            match = pattern.match(title.strip())
            if match is not None:
                name = match.group(1).strip()
                if name:
                    return kind, name
        return cls.UNRECOGNIZED, ""


_TITLE_PATTERNS = (
    (PageKind.CLASS, re.compile(r"^(.+)Class Reference$")),
    (PageKind.PROTOCOL, re.compile(r"^(.+)Protocol Reference$")),
    (PageKind.REFERENCE, re.compile(r"^(.+) Reference$")),
)

_DISPLAY_NAMES = {
    PageKind.CLASS: "Class",
    PageKind.PROTOCOL: "Protocol",
    PageKind.REFERENCE: "Reference",
    PageKind.UNRECOGNIZED: "Unrecognized",
}
