"""Tests for the configuration system."""

import pytest
import yaml
from pydantic import ValidationError

from uricraft.config import ConfigLoader, UriCraftConfig
from uricraft.config.loader import ConfigurationError, load_config


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    """Run every test from an empty directory without URICRAFT_ variables."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("URICRAFT_QUERY__SPACE_ENCODING", raising=False)
    monkeypatch.delenv("URICRAFT_CATALOG__EXTRA_FILES", raising=False)
    monkeypatch.delenv("URICRAFT_CATALOG__INCLUDE_BUILTIN", raising=False)


class TestUriCraftConfig:
    """Test the main UriCraftConfig model."""

    def test_default_config_creation(self):
        config = UriCraftConfig()

        assert config.catalog.include_builtin is True
        assert config.catalog.extra_files == []
        assert config.query.space_encoding == "percent"

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError) as exc_info:
            UriCraftConfig(invalid_field="value")
        assert "Extra inputs are not permitted" in str(exc_info.value)

    def test_invalid_space_encoding(self):
        with pytest.raises(ValidationError):
            UriCraftConfig(query={"space_encoding": "hex"})

    def test_catalog_source_required(self):
        with pytest.raises(ValidationError) as exc_info:
            UriCraftConfig(catalog={"include_builtin": False})
        assert "catalog.extra_files must be set" in str(exc_info.value)

    def test_single_extra_file_string(self):
        config = UriCraftConfig(catalog={"extra_files": "extra.toml"})
        assert config.catalog.extra_files == ["extra.toml"]

    def test_get_nested_value(self):
        config = UriCraftConfig()

        assert config.get_nested_value("query.space_encoding") == "percent"
        assert config.get_nested_value("invalid.key") is None
        assert config.get_nested_value("invalid.key", "default") == "default"


class TestConfigLoader:
    """Test the ConfigLoader class."""

    def test_defaults_without_file(self):
        config = ConfigLoader().load_config(env_overrides={})
        assert config == UriCraftConfig()

    def test_load_toml_file(self, tmp_path):
        path = tmp_path / ".uricraft.toml"
        path.write_text('[query]\nspace_encoding = "plus"\n')

        config = ConfigLoader().load_config(env_overrides={})
        assert config.query.space_encoding == "plus"

    def test_load_yaml_file(self, tmp_path):
        path = tmp_path / "settings.yml"
        path.write_text(yaml.safe_dump({"catalog": {"extra_files": ["a.toml", "b.toml"]}}))

        config = ConfigLoader(path).load_config(env_overrides={})
        assert config.catalog.extra_files == ["a.toml", "b.toml"]

    def test_env_variables(self, monkeypatch):
        monkeypatch.setenv("URICRAFT_QUERY__SPACE_ENCODING", "plus")
        monkeypatch.setenv("URICRAFT_CATALOG__EXTRA_FILES", "one.toml,two.toml")
        monkeypatch.setenv("URICRAFT_QUIET", "1")

        config = ConfigLoader().load_config()
        assert config.query.space_encoding == "plus"
        assert config.catalog.extra_files == ["one.toml", "two.toml"]

    def test_env_boolean_and_single_path(self, monkeypatch):
        monkeypatch.setenv("URICRAFT_CATALOG__INCLUDE_BUILTIN", "false")
        monkeypatch.setenv("URICRAFT_CATALOG__EXTRA_FILES", "only.toml")

        config = ConfigLoader().load_config()
        assert config.catalog.include_builtin is False
        assert config.catalog.extra_files == ["only.toml"]

    def test_precedence_file_env_cli(self, tmp_path):
        path = tmp_path / "uricraft.toml"
        path.write_text(
            '[query]\nspace_encoding = "plus"\n\n[catalog]\nextra_files = ["file.toml"]\n'
        )

        config = load_config(
            env_overrides={"query": {"space_encoding": "percent"}},
            cli_overrides={"catalog": {"extra_files": ["cli.toml"]}},
        )
        assert config.query.space_encoding == "percent"
        assert config.catalog.extra_files == ["cli.toml"]

    def test_config_cached_until_reload(self, tmp_path):
        loader = ConfigLoader()
        first = loader.load_config(env_overrides={})

        (tmp_path / ".uricraft.toml").write_text('[query]\nspace_encoding = "plus"\n')
        assert loader.load_config(env_overrides={}) is first
        assert loader.load_config(env_overrides={}, reload=True).query.space_encoding == "plus"

    def test_invalid_toml(self, tmp_path):
        (tmp_path / ".uricraft.toml").write_text("[query\n")

        with pytest.raises(ConfigurationError, match="Invalid TOML"):
            ConfigLoader().load_config(env_overrides={})

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("query: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            ConfigLoader(path).load_config(env_overrides={})

    def test_validation_error_wrapped(self, tmp_path):
        (tmp_path / ".uricraft.toml").write_text('[query]\nspace_encoding = "hex"\n')

        with pytest.raises(ConfigurationError, match="Configuration validation failed"):
            ConfigLoader().load_config(env_overrides={})

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigLoader(tmp_path / "nope.toml").load_config(env_overrides={})

    def test_unknown_file_type(self, tmp_path):
        path = tmp_path / "settings.ini"
        path.write_text("[query]\n")

        with pytest.raises(ConfigurationError, match="Unknown configuration file type"):
            ConfigLoader(path).load_config(env_overrides={})

    def test_empty_file_uses_defaults(self, tmp_path):
        (tmp_path / ".uricraft.yml").write_text("")

        config = ConfigLoader().load_config(env_overrides={})
        assert config == UriCraftConfig()
