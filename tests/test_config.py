import logging

import pytest
import yaml

from gherkin_context.config import DEFAULT_DESIGNATION_PATTERN, Settings, configure_logging, load_settings

ENV_KEYS = [
    "GHERKIN_CONTEXT_CONFIG",
    "GHERKIN_CONTEXT_LOG_LEVEL",
    "GHERKIN_CONTEXT_ATTRIBUTE_SEPARATOR",
    "GHERKIN_CONTEXT_DESIGNATION_PATTERN",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    settings = load_settings()
    assert settings == Settings()
    assert settings.designation_pattern == DEFAULT_DESIGNATION_PATTERN


def test_yaml_file_then_env_overrides(tmp_path, monkeypatch) -> None:
    config = tmp_path / "gherkin_context.yaml"
    config.write_text(yaml.safe_dump({"log_level": "DEBUG", "attribute_separator": "="}))
    monkeypatch.setenv("GHERKIN_CONTEXT_CONFIG", str(config))
    monkeypatch.setenv("GHERKIN_CONTEXT_ATTRIBUTE_SEPARATOR", "/")

    settings = load_settings()

    assert settings.log_level == "DEBUG"
    assert settings.attribute_separator == "/"


def test_unknown_yaml_key_is_rejected(tmp_path) -> None:
    config = tmp_path / "bad.yaml"
    config.write_text("colour: blue\n")
    with pytest.raises(ValueError, match="colour"):
        load_settings(str(config))


def test_missing_config_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(str(tmp_path / "nope.yaml"))


def test_configure_logging_accepts_unknown_level(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

    configure_logging(Settings(log_level="chatty"))
    configure_logging(Settings(log_level="debug"))

    assert [c["level"] for c in calls] == [logging.INFO, logging.DEBUG]


@pytest.mark.parametrize("body", ['attribute_separator: ""\n', "attribute_separator: null\n", "log_level:\n"])
def test_empty_yaml_values_are_rejected(tmp_path, body) -> None:
    config = tmp_path / "empty.yaml"
    config.write_text(body)
    with pytest.raises(ValueError, match="must not be empty"):
        load_settings(str(config))


def test_invalid_designation_pattern_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("GHERKIN_CONTEXT_DESIGNATION_PATTERN", "([unclosed")
    with pytest.raises(ValueError, match="designation_pattern"):
        load_settings()


def test_empty_env_value_keeps_default(monkeypatch) -> None:
    monkeypatch.setenv("GHERKIN_CONTEXT_ATTRIBUTE_SEPARATOR", "")
    assert load_settings().attribute_separator == ":"
