"""
Tests for the mddocument command line.
"""

import json

import pytest

from mddocument import cli, output_format, pandoc


@pytest.fixture(autouse=True)
def pinned_pandoc(monkeypatch):
    monkeypatch.setattr(pandoc, "installed_pandoc_version", lambda: "3.1.11")


def test_format_command(capsys):
    cli.main(["format", "--variant", "gfm", "--toc", "--preserve-yaml",
              "--pandoc-arg=--wrap=none", "--in-header", "head.html"])
    data = json.loads(capsys.readouterr().out)
    assert data["to"] == "gfm-yaml_metadata_block"
    assert data["args"] == [
        "--standalone", "--table-of-contents", "--toc-depth", "3",
        "--include-in-header", "head.html", "--wrap=none",
    ]
    assert data["post_processor"] is True
    assert data["pre_processor"] is False


def test_adapt_command(capsys):
    cli.main(["adapt", "markdown_mmd"])
    assert capsys.readouterr().out.strip() == "markdown_mmd-yaml_metadata_block-mmd_title_block"


def test_preserve_yaml_command(rmd_file, tmp_path):
    output = tmp_path / "out.md"
    output.write_text("body\n", encoding="utf-8")
    cli.main(["-q", "preserve-yaml", str(rmd_file), str(output)])
    assert output.read_text(encoding="utf-8").startswith("---\ntitle: Report\n")


def test_number_sections_command_without_auto_identifiers(rmd_file):
    with pytest.raises(SystemExit) as exc:
        cli.main(["-q", "number-sections", str(rmd_file), "--variant", "markdown_strict"])
    assert exc.value.code == 1


def test_number_sections_command(rmd_file, monkeypatch):
    def fake_convert(input_file, to, output=None, options=None, from_=None):
        with open(output, "w", encoding="utf-8") as f:
            f.write("# 1 Intro\n")

    monkeypatch.setattr(output_format, "pandoc_convert", fake_convert)
    cli.main(["-q", "number-sections", str(rmd_file), "--variant", "gfm",
              "--md-extension", "+gfm_auto_identifiers"])
    assert rmd_file.read_text(encoding="utf-8").endswith("---\n\n# 1 Intro\n")


def test_missing_input_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        cli.main(["-q", "preserve-yaml", str(tmp_path / "nope.Rmd"), str(tmp_path / "out.md")])
    assert exc.value.code == 1


def test_invalid_front_matter_exits(tmp_path):
    source = tmp_path / "broken.Rmd"
    source.write_text("---\ntitle: [unclosed\n---\n\nbody\n", encoding="utf-8")
    output = tmp_path / "out.md"
    output.write_text("body\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        cli.main(["-q", "preserve-yaml", str(source), str(output)])
    assert exc.value.code == 1
    assert output.read_text(encoding="utf-8") == "body\n"
