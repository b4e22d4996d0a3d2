"""Tests for settings helpers, logger setup and the system clock."""

import logging
from datetime import date, datetime

import pytz

from datetime_helper.config.settings import Settings, env_bool
from datetime_helper.core.logger import setup_logger
from datetime_helper.services.date_time_helper import system_today


class TestEnvBool:

    def test_truthy_values(self, monkeypatch):
        for value in ("1", "true", "YES", " on "):
            monkeypatch.setenv("DTH_FLAG", value)
            assert env_bool("DTH_FLAG") is True

    def test_falsy_and_default(self, monkeypatch):
        monkeypatch.setenv("DTH_FLAG", "off")
        assert env_bool("DTH_FLAG", True) is False
        monkeypatch.delenv("DTH_FLAG")
        assert env_bool("DTH_FLAG", True) is True


class TestSystemToday:

    def test_uses_server_tz_when_set(self, monkeypatch):
        zone = pytz.timezone("Pacific/Kiritimati")
        monkeypatch.setattr(Settings, "SERVER_TZ", zone)
        assert system_today() == datetime.now(zone).date()

    def test_local_date_when_unset(self, monkeypatch):
        monkeypatch.setattr(Settings, "SERVER_TZ", None)
        before = date.today()
        result = system_today()
        assert result in {before, date.today()}


class TestSetupLogger:

    def test_file_handler(self, monkeypatch, tmp_path):
        log_file = tmp_path / "logs" / "helper.log"
        monkeypatch.setattr(Settings, "LOG_FILE", log_file)
        monkeypatch.setattr(Settings, "LOG_LEVEL", "DEBUG")
        monkeypatch.setattr(Settings, "LOG_TO_CONSOLE", False)
        saved = list(logging.root.handlers)
        saved_level = logging.root.level
        try:
            setup_logger()
            logging.getLogger("datetime_helper.test").debug("ready")
            for handler in logging.root.handlers:
                handler.flush()
            assert logging.root.level == logging.DEBUG
            assert "datetime_helper.test - DEBUG - ready" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in logging.root.handlers:
                handler.close()
            logging.root.handlers[:] = saved
            logging.root.setLevel(saved_level)

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setattr(Settings, "LOG_FILE", None)
        monkeypatch.setattr(Settings, "LOG_LEVEL", "CHATTY")
        monkeypatch.setattr(Settings, "LOG_TO_CONSOLE", True)
        saved = list(logging.root.handlers)
        saved_level = logging.root.level
        try:
            setup_logger()
            assert logging.root.level == logging.INFO
            assert len(logging.root.handlers) == 1
        finally:
            logging.root.handlers[:] = saved
            logging.root.setLevel(saved_level)
