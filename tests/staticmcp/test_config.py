"""Tests for layered generator configuration."""

import pytest

from staticmcp.config import GeneratorOptions, load_options
from staticmcp.errors import ConfigError, ErrorCode


class TestLoadOptions:
    """Test defaults, file, environment and override precedence."""

    def test_defaults(self):
        options = load_options()
        assert options == GeneratorOptions()
        assert options.output_dir == "./staticmcp"
        assert options.server_name == "Docusaurus StaticMCP Server"
        assert options.server_version == "1.0.0"
        assert options.protocol_version == "2024-11-05"
        assert options.base_uri == "docs"

    def test_config_in_source_root(self, tmp_path):
        (tmp_path / "staticmcp.yaml").write_text("server-name: Site Docs\nserver_version: 2.1\n")
        options = load_options(source_root=tmp_path)
        assert options.server_name == "Site Docs"
        assert options.server_version == "2.1"

    def test_no_config_in_source_root(self, tmp_path):
        assert load_options(source_root=tmp_path) == GeneratorOptions()

    def test_explicit_config(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("base_uri: kb\n")
        assert load_options(config_path=path).base_uri == "kb"

    def test_empty_config(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_options(config_path=path) == GeneratorOptions()

    def test_env_over_file(self, tmp_path, monkeypatch):
        (tmp_path / "staticmcp.yaml").write_text("base_uri: kb\nserver_name: File\n")
        monkeypatch.setenv("STATICMCP_BASE_URI", "env")
        options = load_options(source_root=tmp_path)
        assert options.base_uri == "env"
        assert options.server_name == "File"

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("STATICMCP_OUTPUT_DIR", "/env/out")
        options = load_options(output_dir="/cli/out", server_name=None)
        assert options.output_dir == "/cli/out"
        assert options.server_name == "Docusaurus StaticMCP Server"


class TestConfigErrors:
    """Test invalid configuration."""

    def test_missing_explicit_config(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_options(config_path=tmp_path / "nope.yaml")
        assert exc_info.value.code == ErrorCode.CONFIG_ERROR

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("server_name: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_options(config_path=path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_options(config_path=path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "typo.yaml"
        path.write_text("server_nmae: x\n")
        with pytest.raises(ConfigError) as exc_info:
            load_options(config_path=path)
        assert exc_info.value.details == {"unknown": ["server_nmae"]}

    def test_unknown_override(self):
        with pytest.raises(ConfigError):
            load_options(color="blue")
