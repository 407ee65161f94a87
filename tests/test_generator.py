"""Tests for the batch DocsetGenerator."""

import subprocess
from pathlib import Path

import pytest

from rb_docset.config import AppConfig
from rb_docset.domain.exceptions import InputDiscoveryException
from rb_docset.generator import DocsetGenerator
from rb_docset.infrastructure.html.pages_parser import ReferencePagesParser
from rb_docset.infrastructure.renderer import yard

from tests.pages import FRAMEWORK_PATH


class FakeRenderer:
    def __init__(self):
        self.calls = []

    def render(self, source_dir, destination):
        self.calls.append((source_dir, destination))
        return Path(destination)


@pytest.fixture
def config(tmp_path):
    config = AppConfig()
    config.output.scratch_dir = str(tmp_path / "scratch")
    return config


@pytest.fixture
def pages_dir(tmp_path, class_page_html, reference_page_html, make_page):
    pages = tmp_path / "pages"
    pages.mkdir()
    (pages / "a_Foo.html").write_text(class_page_html, encoding="utf-8")
    (pages / "b_Guide.html").write_text(make_page("Foo Programming Guide"), encoding="utf-8")
    (pages / "c_Functions.html").write_text(reference_page_html, encoding="utf-8")
    return pages


class TestGenerateStubs:
    def test_one_stub_per_recognized_page(self, tmp_path, config, pages_dir):
        written = DocsetGenerator(tmp_path / "docset", [pages_dir], config).generate_stubs()
        assert [p.name for p in written] == ["t0.rb", "t1.rb"]

        class_stub = written[0].read_text(encoding="utf-8")
        assert class_stub.startswith(f"# -*- coding: utf-8 -*-\n# -*- framework: {FRAMEWORK_PATH} -*-\n\n")
        assert "class Foo < Bar\n" in class_stub
        assert "module MyEnum # Enumeration\n" in class_stub

        reference_stub = written[1].read_text(encoding="utf-8")
        assert reference_stub.startswith("# -*- coding: utf-8 -*-\n\n\n")
        assert "def Add(a, b); end\n" in reference_stub

    def test_scratch_directory_cleared(self, tmp_path, config, pages_dir):
        scratch = Path(config.output.scratch_dir)
        scratch.mkdir()
        (scratch / "t9.rb").write_text("stale", encoding="utf-8")

        DocsetGenerator(tmp_path / "docset", [pages_dir], config).generate_stubs()
        assert sorted(p.name for p in scratch.iterdir()) == ["t0.rb", "t1.rb"]

    def test_failing_page_does_not_stop_batch(self, tmp_path, config, pages_dir, monkeypatch, caplog):
        original_parse = ReferencePagesParser.parse

        def flaky_parse(self, html):
            if "Class Reference" in html:
                raise ValueError("broken markup")
            return original_parse(self, html)

        monkeypatch.setattr(ReferencePagesParser, "parse", flaky_parse)
        written = DocsetGenerator(tmp_path / "docset", [pages_dir], config).generate_stubs()

        assert [p.name for p in written] == ["t0.rb"]
        assert "def Add(a, b); end\n" in written[0].read_text(encoding="utf-8")
        assert "Failed to parse page" in caplog.text
        assert "broken markup" in caplog.text

    def test_undecodable_bytes_replaced(self, tmp_path, config, make_page):
        page = tmp_path / "Foo.html"
        page.write_bytes(make_page("Foo Class Reference", superclass="Bar", abstract="Caf\xe9").encode("latin-1"))

        written = DocsetGenerator(tmp_path / "docset", [page], config).generate_stubs()
        assert len(written) == 1
        assert "# Caf\ufffd\n" in written[0].read_text(encoding="utf-8")

    def test_missing_input(self, tmp_path, config):
        with pytest.raises(InputDiscoveryException):
            DocsetGenerator(tmp_path / "docset", [tmp_path / "missing"], config).generate_stubs()


class TestRun:
    def test_renders_scratch_directory(self, tmp_path, config, pages_dir):
        renderer = FakeRenderer()
        result = DocsetGenerator(tmp_path / "docset", [pages_dir], config, renderer=renderer).run()

        assert result == tmp_path / "docset"
        assert renderer.calls == [(Path(config.output.scratch_dir), tmp_path / "docset")]

    def test_rendering_disabled(self, tmp_path, config, pages_dir):
        config.renderer.enabled = False
        renderer = FakeRenderer()

        result = DocsetGenerator(tmp_path / "docset", [pages_dir], config, renderer=renderer).run()
        assert result is None
        assert renderer.calls == []
        assert (Path(config.output.scratch_dir) / "t0.rb").is_file()

    def test_relative_scratch_directory_rendered(self, tmp_path, pages_dir, monkeypatch):
        seen = []

        def fake_run(cmd, check, cwd):
            source = Path(cmd[-1])
            seen.append(sorted(p.name for p in source.iterdir()))
            (Path(cwd) / "doc").mkdir()
            return subprocess.CompletedProcess(cmd, 0)

        monkeypatch.setattr(yard.subprocess, "run", fake_run)
        monkeypatch.chdir(tmp_path)
        config = AppConfig()
        config.output.scratch_dir = "scratch"

        result = DocsetGenerator("docset", [pages_dir], config).run()

        assert seen == [["t0.rb", "t1.rb"]]
        assert (tmp_path / "scratch" / "t0.rb").is_file()
        assert result.resolve() == (tmp_path / "docset").resolve()
        assert (tmp_path / "docset").is_dir()
