"""Tests for the staticmcp command line."""

import json
import logging

import pytest

from staticmcp_cli.main import build_parser, main


@pytest.fixture(autouse=True)
def _reset_cli_logger():
    """Drop console handlers bound to a previous test's captured stderr."""
    yield
    logger = logging.getLogger("staticmcp")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


class TestParser:
    """Test argument parsing."""

    def test_verb_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_resolve_target_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["resolve", "--uri", "docs://a", "--tool", "list_docs"])


class TestGenerate:
    """Test staticmcp generate."""

    def test_generate(self, docusaurus_site, output_dir, capsys):
        code = main([
            "generate", str(docusaurus_site),
            "--output", str(output_dir),
            "--name", "CLI Docs",
            "--base-uri", "kb",
        ])
        assert code == 0
        result = json.loads(capsys.readouterr().out)
        assert result["status"] == "success"
        assert result["resources"] == 4

        manifest = json.loads((output_dir / "mcp.json").read_text())
        assert manifest["serverInfo"]["name"] == "CLI Docs"
        assert manifest["capabilities"]["resources"][0]["uri"].startswith("kb://")

    def test_config_file_picked_up(self, docusaurus_site, output_dir, capsys):
        (docusaurus_site / "staticmcp.yaml").write_text("server_version: 3.0.0\n")
        assert main(["generate", str(docusaurus_site), "--output", str(output_dir)]) == 0
        manifest = json.loads((output_dir / "mcp.json").read_text())
        assert manifest["serverInfo"]["version"] == "3.0.0"

    def test_not_docusaurus(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", str(tmp_path), "--output", str(tmp_path / "out")])
        assert exc_info.value.code == 1
        assert "Not a Docusaurus source directory" in capsys.readouterr().err

    def test_missing_config(self, docusaurus_site, tmp_path, capsys):
        with pytest.raises(SystemExit):
            main(["generate", str(docusaurus_site), "--config", str(tmp_path / "none.yaml")])
        assert "Missing config file" in capsys.readouterr().err


class TestCheck:
    """Test staticmcp check."""

    def test_check_passes(self, docusaurus_site, output_dir, capsys):
        main(["generate", str(docusaurus_site), "--output", str(output_dir)])
        capsys.readouterr()
        assert main(["check", str(output_dir), "--compact"]) == 0
        out = capsys.readouterr().out
        assert len(out.strip().splitlines()) == 1
        assert json.loads(out)["status"] == "success"

    def test_check_fails(self, tmp_path, capsys):
        assert main(["check", str(tmp_path)]) == 1
        assert json.loads(capsys.readouterr().out)["status"] == "error"


class TestResolve:
    """Test staticmcp resolve."""

    def test_uri(self, capsys):
        assert main(["resolve", "--uri", "docs://docs/intro"]) == 0
        assert json.loads(capsys.readouterr().out)["path"] == "resources/docs/intro.json"

    def test_tool_without_args(self, capsys):
        main(["resolve", "--tool", "list_docs"])
        assert json.loads(capsys.readouterr().out)["path"] == "tools/list_docs.json"

    def test_tool_with_args(self, capsys):
        main(["resolve", "--tool", "list_docs_by_tag", "--args", '{"type": "docs", "tag": "api"}'])
        result = json.loads(capsys.readouterr().out)
        assert result["path"] == "tools/list_docs_by_tag/api/docs.json"
        assert result["arguments"] == {"type": "docs", "tag": "api"}

    def test_invalid_args(self, capsys):
        with pytest.raises(SystemExit):
            main(["resolve", "--tool", "list_docs", "--args", "{bad"])
        assert "invalid JSON in --args" in capsys.readouterr().err

    def test_args_must_be_object(self, capsys):
        with pytest.raises(SystemExit):
            main(["resolve", "--tool", "list_docs", "--args", "[1]"])
        assert "must be a JSON object" in capsys.readouterr().err


def test_debug_flag(monkeypatch, capsys):
    monkeypatch.setenv("STATICMCP_DEBUG", "false")
    assert main(["--debug", "resolve", "--uri", "docs://a"]) == 0
    assert json.loads(capsys.readouterr().out)["path"] == "resources/a.json"
