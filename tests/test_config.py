"""
Configuration Tests
Defaults, env file loading, environment precedence and validation
"""

import pytest

from peak.modules import view_state
from peak.utils.config import Config, ConfigurationError, DEFAULT_MAX_MESSAGE_BYTES, PANES


def test_defaults_without_env_file(clean_env, tmp_path):
    config = Config(str(tmp_path / "missing.env"))

    assert config.parser.encoding == "utf-8"
    assert config.parser.max_message_bytes == DEFAULT_MAX_MESSAGE_BYTES
    assert config.display.color is True
    assert config.display.default_panes == list(PANES)
    assert config.system.log_level == "INFO"
    assert config.system.log_file == ""
    assert config.system.log_format == "text"
    assert config.validate() is True


def test_values_loaded_from_env_file(clean_env, tmp_path):
    env_file = tmp_path / "peak.env"
    env_file.write_text(
        "PEAK_ENCODING=latin-1\n"
        "PEAK_MAX_MESSAGE_BYTES=1024\n"
        "PEAK_COLOR=false\n"
        "PEAK_DEFAULT_PANES=Headers, senders\n"
        "LOG_FORMAT=JSON\n"
    )

    config = Config(str(env_file))

    assert config.parser.encoding == "latin-1"
    assert config.parser.max_message_bytes == 1024
    assert config.display.color is False
    assert config.display.default_panes == ["headers", "senders"]
    assert config.system.log_format == "json"


def test_process_environment_wins_over_env_file(clean_env, tmp_path):
    env_file = tmp_path / "peak.env"
    env_file.write_text("PEAK_ENCODING=latin-1\n")
    clean_env.setenv("PEAK_ENCODING", "ascii")

    assert Config(str(env_file)).parser.encoding == "ascii"


@pytest.mark.parametrize("value, expected", [
    ("true", True), ("1", True), ("YES", True), ("on", True),
    ("false", False), ("0", False), ("nope", False),
])
def test_color_flag_parsing(clean_env, tmp_path, value, expected):
    clean_env.setenv("PEAK_COLOR", value)
    assert Config(str(tmp_path / "none.env")).display.color is expected


def test_non_integer_size_rejected(clean_env, tmp_path):
    clean_env.setenv("PEAK_MAX_MESSAGE_BYTES", "lots")
    with pytest.raises(ConfigurationError):
        Config(str(tmp_path / "none.env"))


@pytest.mark.parametrize("key, value", [
    ("PEAK_ENCODING", "no-such-codec"),
    ("PEAK_MAX_MESSAGE_BYTES", "-1"),
    ("PEAK_DEFAULT_PANES", "body,attachments"),
    ("LOG_FORMAT", "xml"),
])
def test_validate_rejects_bad_values(clean_env, tmp_path, key, value):
    clean_env.setenv(key, value)
    config = Config(str(tmp_path / "none.env"))
    with pytest.raises(ConfigurationError):
        config.validate()


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)


def test_pane_names_shared_with_view_state():
    assert view_state.PANES is PANES
