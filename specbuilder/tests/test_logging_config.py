import json
import logging
from pathlib import Path
from unittest.mock import patch

from specbuilder import logging_config
from specbuilder.config import SpecBuilderConfig


def _record(msg="Test message", **extra):
    record = logging.LogRecord(
        name="specbuilder.test",
        level=logging.WARNING,
        pathname="test_path.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_custom_json_formatter_fields():
    log_json = json.loads(logging_config.CustomJsonFormatter().format(_record()))

    assert log_json["message"] == "Test message"
    assert log_json["level"] == "WARNING"
    assert log_json["logger"] == "specbuilder.test"
    assert "_time" in log_json


def test_custom_json_formatter_includes_extra_fields():
    log_json = json.loads(
        logging_config.CustomJsonFormatter().format(_record(function_name="index"))
    )

    assert log_json["function_name"] == "index"


def test_setup_logging_falls_back_without_config(tmp_path):
    with patch("logging.basicConfig") as mock_basic:
        logging_config.setup_logging(str(tmp_path / "missing.yml"), level="DEBUG")

    mock_basic.assert_called_once()
    assert mock_basic.call_args.kwargs["level"] == "DEBUG"


def test_setup_logging_substitutes_level(tmp_path):
    config_path = tmp_path / "logging.yml"
    config_path.write_text(
        """
version: 1
loggers:
  specbuilder:
    level: ${LOG_LEVEL}
""",
        encoding="utf-8",
    )

    with patch("logging.config.dictConfig") as mock_dict_config:
        logging_config.setup_logging(str(config_path), level="ERROR")

    config = mock_dict_config.call_args.args[0]
    assert config["loggers"]["specbuilder"]["level"] == "ERROR"


def test_bundled_logging_config_is_valid():
    assert logging_config.DEFAULT_LOG_CONFIG_PATH.parent == Path(logging_config.__file__).parent
    assert logging_config.DEFAULT_LOG_CONFIG_PATH.is_file()

    with patch("logging.config.dictConfig") as mock_dict_config:
        logging_config.setup_logging(level="WARNING")

    config = mock_dict_config.call_args.args[0]
    assert config["loggers"]["specbuilder"]["level"] == "WARNING"
    assert "json" in config["formatters"]


def test_config_defaults(monkeypatch):
    for name in (
        "LOG_LEVEL",
        "LOG_CONFIG_PATH",
        "OUTPUT_VARIANT",
        "USER_ENV_PREFIX",
        "SPEC_PATH",
        "ACCESS",
    ):
        monkeypatch.delenv(name, raising=False)

    config = SpecBuilderConfig(_env_file=None)

    assert config.LOG_LEVEL == "INFO"
    assert config.OUTPUT_VARIANT == "ros"
    assert config.USER_ENV_PREFIX == "UDEV_"
    assert config.SPEC_PATH == "f.yml"
    assert config.ACCESS == "default"
    assert config.LOG_CONFIG_PATH == str(logging_config.DEFAULT_LOG_CONFIG_PATH)


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("OUTPUT_VARIANT", "component")
    monkeypatch.setenv("USER_ENV_PREFIX", "FC_")

    config = SpecBuilderConfig(_env_file=None)

    assert config.OUTPUT_VARIANT == "component"
    assert config.USER_ENV_PREFIX == "FC_"
