"""Discovery of HTML reference pages from files and directories."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from rb_docset.domain.exceptions import InputDiscoveryException

logger = logging.getLogger(__name__)

HTML_PATTERN = "*.html"


class InputDiscovery:
    """Expands input paths into the list of HTML pages to process.

    Directories are searched recursively for ``*.html`` files (sorted, so
    output numbering is stable between runs); files are used as given.
    """

    def discover(self, paths: Iterable[str | Path]) -> list[Path]:
        found: list[Path] = []
        for raw_path in paths:
            path = Path(raw_path).expanduser().resolve()
            if path.is_dir():
                pages = sorted(p for p in path.rglob(HTML_PATTERN) if p.is_file())
                logger.debug("Found %d HTML pages under %s", len(pages), path)
                found.extend(pages)
            elif path.is_file():
                found.append(path)
            else:
                raise InputDiscoveryException(f"Input path does not exist: {path}")
        return found
