"""Batch driver: HTML reference pages -> Ruby stubs -> rendered docset."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from rb_docset.config import AppConfig
from rb_docset.domain.entities import PageStub
from rb_docset.infrastructure.html.pages_parser import ReferencePagesParser
from rb_docset.infrastructure.renderer.yard import YardRenderer
from rb_docset.infrastructure.storage.input_discovery import InputDiscovery
from rb_docset.infrastructure.storage.stub_writer import StubWriter
from rb_docset.presentation.stub_formatter import RubyStubFormatter

logger = logging.getLogger(__name__)


class DocsetGenerator:
    """Generates a docset from HTML reference pages.

    Every input page is parsed on its own; a page that cannot be parsed is
    logged and skipped without affecting the others.
    """

    def __init__(
        self,
        output_path: str | Path,
        input_paths: Iterable[str | Path],
        config: AppConfig | None = None,
        renderer: YardRenderer | None = None,
    ) -> None:
        self._config = config or AppConfig()
        self._output_path = Path(output_path)
        self._input_paths = list(input_paths)
        self._discovery = InputDiscovery()
        self._parser = ReferencePagesParser()
        self._formatter = RubyStubFormatter()
        self._writer = StubWriter(
            self._config.output.scratch_dir,
            prefix=self._config.output.stub_prefix,
            encoding_marker=self._config.output.encoding_marker,
        )
        self._renderer = renderer or YardRenderer(
            command=self._config.renderer.command,
            args=self._config.renderer.args,
            output_dir=self._config.renderer.output_dir,
        )

    def generate_stubs(self) -> list[Path]:
        """Write one stub per recognized page into a freshly cleared scratch directory."""
        pages = self._discovery.discover(self._input_paths)
        self._writer.reset()

        written: list[Path] = []
        for path in pages:
            stub = self._parse_file(path)
            if stub is None:
                continue
            written.append(self._writer.write(len(written), self._formatter.format_page(stub)))

        logger.info(
            "Generated %d stubs from %d pages in %s",
            len(written),
            len(pages),
            self._writer.scratch_dir,
        )
        return written

    def render(self) -> Path:
        return self._renderer.render(self._writer.scratch_dir, self._output_path)

    def run(self) -> Path | None:
        self.generate_stubs()
        if not self._config.renderer.enabled:
            logger.info("Rendering disabled, stubs left in %s", self._writer.scratch_dir)
            return None
        return self.render()

    def _parse_file(self, path: Path) -> PageStub | None:
        try:
            with open(path, encoding="utf-8", errors="replace") as f:
                html = f.read()
            stub = self._parser.parse(html)
        except Exception as e:
            logger.warning("Failed to parse page '%s': %s", path, e)
            return None

        if stub is None:
            logger.debug("No stub produced for %s", path)
        return stub
