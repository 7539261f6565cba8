"""Tests for settings resolution and the logging helper."""

import logging

import pytest
from pydantic import ValidationError

from dtoview import config
from dtoview.config import ViewSettings, get_settings, load_settings, reset_settings
from dtoview.enums import JsonOption
from dtoview.exceptions import ConfigurationError
from dtoview.logging import LOG_FORMAT, configure_logger


def test_defaults_without_file_or_environment():
    settings = load_settings(env={})
    assert settings.json_options == JsonOption.NONE
    assert settings.json_indent == 4
    assert settings.log_level == "WARNING"


def test_yaml_file_then_environment(tmp_path):
    settings_file = tmp_path / "dtoview.yaml"
    settings_file.write_text("json_options: [pretty_print, sort_keys]\njson_indent: 2\nlog_level: debug\n")

    from_file = load_settings(settings_file, env={})
    assert from_file.json_options == JsonOption.PRETTY_PRINT | JsonOption.SORT_KEYS
    assert isinstance(from_file.json_options, JsonOption)
    assert from_file.json_indent == 2
    assert from_file.log_level == "DEBUG"

    overridden = load_settings(settings_file, env={"DTOVIEW_JSON_INDENT": "8", "DTOVIEW_JSON_OPTIONS": "unescaped-unicode"})
    assert overridden.json_indent == 8
    assert overridden.json_options == JsonOption.UNESCAPED_UNICODE


def test_numeric_json_options_from_environment():
    settings = load_settings(env={"DTOVIEW_JSON_OPTIONS": "3"})
    assert settings.json_options == JsonOption.PRETTY_PRINT | JsonOption.SORT_KEYS


def test_empty_yaml_file_uses_defaults(tmp_path):
    settings_file = tmp_path / "empty.yaml"
    settings_file.write_text("")
    assert load_settings(settings_file, env={}) == ViewSettings()


@pytest.mark.parametrize(
    "env",
    (
        {"DTOVIEW_JSON_OPTIONS": "shiny"},
        {"DTOVIEW_JSON_INDENT": "-1"},
        {"DTOVIEW_LOG_LEVEL": "loud"},
    ),
)
def test_invalid_values_raise_configuration_error(env):
    with pytest.raises(ConfigurationError) as exc_info:
        load_settings(env=env)
    assert exc_info.value.error_code == "CONFIGURATION_ERROR"


def test_unreadable_or_non_mapping_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_settings(tmp_path / "missing.yaml", env={})

    settings_file = tmp_path / "list.yaml"
    settings_file.write_text("- a\n- b\n")
    with pytest.raises(ConfigurationError):
        load_settings(settings_file, env={})

    broken = tmp_path / "broken.yaml"
    broken.write_text("json_indent: [unclosed\n")
    with pytest.raises(ConfigurationError):
        load_settings(broken, env={})


def test_settings_are_cached_and_read_from_environment(monkeypatch):
    monkeypatch.setenv("DTOVIEW_JSON_INDENT", "3")
    reset_settings()

    first = get_settings()
    assert first.json_indent == 3
    assert get_settings() is first

    reset_settings()
    assert config._settings is None


def test_settings_are_immutable():
    settings = ViewSettings()
    with pytest.raises(ValidationError):
        settings.json_indent = 1


def test_configure_logger_attaches_single_handler():
    name = "dtoview.tests.configure_logger"
    logger = configure_logger(name, logging.DEBUG)
    again = configure_logger(name)

    assert again is logger
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT

    logger.removeHandler(logger.handlers[0])


def test_configure_logger_defaults_to_configured_level(monkeypatch):
    monkeypatch.setenv("DTOVIEW_LOG_LEVEL", "error")
    name = "dtoview.tests.configured_level"
    logger = configure_logger(name)

    assert logger.level == logging.ERROR
    logger.removeHandler(logger.handlers[0])


def test_package_logger_is_configured_on_import():
    import dtoview

    logger = logging.getLogger(dtoview.__name__)
    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT
    assert configure_logger(dtoview.__name__) is logger
    assert len(logger.handlers) == 1
