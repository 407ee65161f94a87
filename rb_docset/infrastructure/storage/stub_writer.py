"""Scratch directory holding the generated Ruby stubs."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from rb_docset.domain.exceptions import StubGenerationException

logger = logging.getLogger(__name__)

STUB_SUFFIX = ".rb"


class StubWriter:
    """Writes one numbered stub file per processed page into a scratch directory."""

    def __init__(
        self,
        scratch_dir: str | Path,
        prefix: str = "t",
        encoding_marker: str = "# -*- coding: utf-8 -*-",
    ) -> None:
        self._scratch_dir = Path(scratch_dir)
        self._prefix = prefix
        self._encoding_marker = encoding_marker

    @property
    def scratch_dir(self) -> Path:
        return self._scratch_dir

    def reset(self) -> None:
        """Remove the scratch directory with any previous stubs and recreate it."""
        try:
            if self._scratch_dir.exists():
                logger.debug("Clearing scratch directory %s", self._scratch_dir)
                shutil.rmtree(self._scratch_dir)
            self._scratch_dir.mkdir(parents=True)
        except OSError as e:
            raise StubGenerationException(f"Cannot prepare scratch directory '{self._scratch_dir}': {e}") from e

    def write(self, index: int, code: str) -> Path:
        path = self._scratch_dir / f"{self._prefix}{index}{STUB_SUFFIX}"
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(self._encoding_marker + "\n")
                f.write(code)
        except OSError as e:
            raise StubGenerationException(f"Cannot write stub '{path}': {e}") from e
        return path
