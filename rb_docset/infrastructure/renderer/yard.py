"""Invocation of the YARD renderer and post-processing of its output."""

from __future__ import annotations

import logging
import re
import shutil
import subprocess
import tempfile
from collections.abc import Sequence
from pathlib import Path

from rb_docset.domain.exceptions import RendererException

logger = logging.getLogger(__name__)

_MODULE_LABEL_RE = re.compile(r"\s*Module:")


class YardRenderer:
    """Runs ``yard doc`` over the stub directory and moves the result into place."""

    def __init__(
        self,
        command: str = "yard",
        args: Sequence[str] = ("doc",),
        output_dir: str = "doc",
    ) -> None:
        self._command = command
        self._args = list(args)
        self._output_dir = output_dir

    def render(self, source_dir: Path, destination: Path) -> Path:
        """Render source_dir and move the generated docs to destination.

        The renderer runs inside a temporary working directory so its
        output and cache files never land in the caller's directory.
        """
        # Relative to the caller, not to the renderer working directory.
        source_dir = Path(source_dir).resolve()
        cmd = [self._command, *self._args, str(source_dir)]
        with tempfile.TemporaryDirectory(prefix="rb_docset_render_") as workdir:
            logger.info("Running: %s", " ".join(cmd))
            try:
                subprocess.run(cmd, check=True, cwd=workdir)
            except FileNotFoundError as e:
                raise RendererException(f"Renderer executable not found: {self._command}") from e
            except subprocess.CalledProcessError as e:
                raise RendererException(f"Renderer failed with exit code {e.returncode}") from e

            produced = Path(workdir) / self._output_dir
            if not produced.is_dir():
                raise RendererException(f"Renderer produced no '{self._output_dir}' directory")

            destination.parent.mkdir(parents=True, exist_ok=True)
            moved = shutil.move(str(produced), str(destination))

        logger.info("Docset written to %s", moved)
        return Path(moved)


def retitle_document(path: str | Path, new_title: str) -> bool:
    """Replace the 'Module:' label of a rendered page with new_title.

    Returns False, after logging a warning, when the file does not exist.
    """
    path = Path(path)
    if not path.is_file():
        logger.warning("File does not exist: %s", path)
        return False

    data = path.read_text(encoding="utf-8")
    path.write_text(_MODULE_LABEL_RE.sub(lambda _: new_title + ":", data), encoding="utf-8")
    return True
