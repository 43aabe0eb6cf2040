import pytest

from schemanode.config import LoaderConfig
from schemanode.constants import CONFIG_FILE_NAME
from schemanode.exceptions import ConfigurationError


def test_default_loader_config():
    config = LoaderConfig()
    assert config.unknown_keywords == "retain"
    assert config.on_malformed == "raise"
    assert config.log_level == "INFO"


def test_loader_config_from_yaml(tmp_path):
    config_content = """
unknown_keywords: drop
on_malformed: substitute
log_level: debug
"""
    (tmp_path / CONFIG_FILE_NAME).write_text(config_content)

    config = LoaderConfig.from_yaml(tmp_path)
    assert config.unknown_keywords == "drop"
    assert config.on_malformed == "substitute"
    assert config.log_level == "DEBUG"


def test_loader_config_from_yaml_missing_file(tmp_path):
    assert LoaderConfig.from_yaml(tmp_path) == LoaderConfig()


def test_loader_config_from_empty_yaml(tmp_path):
    (tmp_path / CONFIG_FILE_NAME).write_text("")
    assert LoaderConfig.from_yaml(tmp_path) == LoaderConfig()


def test_loader_config_invalid_value(tmp_path):
    (tmp_path / CONFIG_FILE_NAME).write_text("unknown_keywords: keep\n")
    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        LoaderConfig.from_yaml(tmp_path)


def test_loader_config_unknown_option(tmp_path):
    (tmp_path / CONFIG_FILE_NAME).write_text("strict: true\n")
    with pytest.raises(ConfigurationError):
        LoaderConfig.from_yaml(tmp_path)


def test_loader_config_not_a_mapping(tmp_path):
    (tmp_path / CONFIG_FILE_NAME).write_text("- retain\n- raise\n")
    with pytest.raises(ConfigurationError, match="must contain a mapping"):
        LoaderConfig.from_yaml(tmp_path)


def test_loader_config_broken_yaml(tmp_path):
    (tmp_path / CONFIG_FILE_NAME).write_text("unknown_keywords: [retain\n")
    with pytest.raises(ConfigurationError, match="Failed to read"):
        LoaderConfig.from_yaml(tmp_path)


def test_invalid_log_level():
    with pytest.raises(ValueError, match="log_level"):
        LoaderConfig(log_level="verbose")
