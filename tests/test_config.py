import logging

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir


def test_defaults():
    settings = AppSettings()

    assert settings.minor_unit_scale == 100
    assert settings.log_level == "WARNING"
    assert settings.log_level_number == logging.WARNING
    assert settings.show_banner is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SPLIT_IT_MINOR_UNIT_SCALE", "1000")
    monkeypatch.setenv("SPLIT_IT_LOG_LEVEL", "debug")
    monkeypatch.setenv("SPLIT_IT_SHOW_BANNER", "false")

    settings = AppSettings()

    assert settings.minor_unit_scale == 1000
    assert settings.log_level == "DEBUG"
    assert settings.show_banner is False


def test_dotenv_file_in_working_directory(tmp_path):
    (tmp_path / ".env").write_text("SPLIT_IT_MINOR_UNIT_SCALE=10\n", encoding="utf-8")

    assert AppSettings().minor_unit_scale == 10


@pytest.mark.parametrize(
    "key, value",
    [("SPLIT_IT_LOG_LEVEL", "verbose"), ("SPLIT_IT_MINOR_UNIT_SCALE", "0")],
)
def test_invalid_values(monkeypatch, key, value):
    monkeypatch.setenv(key, value)

    with pytest.raises(ValidationError):
        AppSettings()


def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr("core.config.sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert get_user_config_dir() == tmp_path / "split-it"


def test_user_config_dir_override(monkeypatch, tmp_path):
    monkeypatch.setenv("SPLIT_IT_CONFIG_DIR", str(tmp_path / "custom"))

    assert get_user_config_dir() == tmp_path / "custom"
