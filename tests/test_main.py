"""Tests for the CLI entry point."""

import json
import tomllib
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console

from extractor.errors import SourceError
from extractor.exporters.json_export import EXPORT_FILENAME
from extractor.main import EXIT_BLANK_INPUT, EXIT_SOURCE_ERROR, build_parser, main

PAPER = (
    "Mistral 7B is evaluated on MMLU with a score of 62.5% (5-shot). "
    "With AWQ quantization the INT4 weights occupy 3.5 GB of memory."
)


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    monkeypatch.setattr("extractor.main.console", Console(width=160))


@pytest.fixture
def paper_file(tmp_path):
    path = tmp_path / "paper.txt"
    path.write_text(PAPER)
    return path


class TestExtractCommand:
    def test_json_output(self, paper_file, capsys):
        assert main(["extract", str(paper_file), "--format", "json"]) == 0
        [row] = json.loads(capsys.readouterr().out)
        assert row["model_name"] == "Mistral 7B"
        assert row["memory_footprint_gb"]["int4"] == 3.5

    def test_table_is_default(self, paper_file, capsys):
        assert main(["extract", str(paper_file)]) == 0
        out = capsys.readouterr().out
        assert "Model comparison" in out
        assert "Mistral 7B" in out

    def test_export(self, paper_file, tmp_path, capsys):
        out_dir = tmp_path / "exports"
        assert main(["extract", str(paper_file), "--export", "--output-dir", str(out_dir)]) == 0
        data = json.loads((out_dir / EXPORT_FILENAME).read_text())
        assert data[0]["parameter_count"] == 7_000_000_000

    def test_blank_input(self, tmp_path, capsys):
        path = tmp_path / "blank.txt"
        path.write_text("   \n")
        assert main(["extract", str(path)]) == EXIT_BLANK_INPUT
        assert "Please provide research paper text" in capsys.readouterr().err

    def test_no_models(self, tmp_path, capsys):
        path = tmp_path / "other.txt"
        path.write_text("A paper about graph databases.")
        assert main(["extract", str(path)]) == 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No models detected." in captured.err

    def test_no_models_json_is_empty_list(self, tmp_path, capsys):
        path = tmp_path / "other.txt"
        path.write_text("A paper about graph databases.")
        assert main(["extract", str(path), "--format", "json"]) == 0
        assert json.loads(capsys.readouterr().out) == []

    def test_sample(self, capsys):
        assert main(["extract", "--sample", "--format", "json"]) == 0
        names = [row["model_name"] for row in json.loads(capsys.readouterr().out)]
        assert {"Llama 3.1 8B", "Mistral 7B", "Phi-3 3.8B"} <= set(names)

    def test_missing_file(self, tmp_path):
        assert main(["extract", str(tmp_path / "nope.txt")]) == EXIT_SOURCE_ERROR

    def test_url_source(self, capsys):
        with patch("extractor.main.fetch_text", return_value=PAPER) as mock_fetch:
            assert main(["extract", "--url", "https://example.org/p.txt", "--format", "cards"]) == 0
        mock_fetch.assert_called_once_with("https://example.org/p.txt")
        assert "Mistral 7B  [general-purpose]" in capsys.readouterr().out

    def test_url_failure(self):
        with patch("extractor.main.fetch_text", side_effect=SourceError("https://x", "HTTP 500")):
            assert main(["extract", "--url", "https://x"]) == EXIT_SOURCE_ERROR


class TestServeCommand:
    def test_serve_passes_host_and_port(self):
        with patch("extractor.main.run_server") as mock_run:
            assert main(["serve", "--host", "0.0.0.0", "--port", "9000"]) == 0
        mock_run.assert_called_once_with(host="0.0.0.0", port=9000)


def test_command_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_console_script_name_matches_parser():
    pyproject = tomllib.loads((Path(__file__).resolve().parent.parent / "pyproject.toml").read_text())
    assert pyproject["project"]["scripts"] == {"model-extract": "extractor.main:main"}
    assert build_parser().prog == "model-extract"
