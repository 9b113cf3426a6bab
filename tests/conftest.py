import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from roozh.core import config as config_module
from roozh.core.config import ConversionSettings
from roozh.models.calendar_date import CalendarDate, CalendarSystem
from roozh.services.calendar_converter import CalendarConverter


@pytest.fixture
def tehran_settings():
    return ConversionSettings()


@pytest.fixture
def converter(tehran_settings):
    return CalendarConverter(tehran_settings)


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    """Redirect AppConfig persistence into a temporary directory."""
    path = tmp_path / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_PATH", path)
    return path


@pytest.fixture
def jalali_date():
    def make(year=1403, month=1, day=1, **clock):
        return CalendarDate(
            calendar=CalendarSystem.JALALI,
            year=year,
            month=month,
            day=day,
            **clock,
        )

    return make
