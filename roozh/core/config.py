from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import asdict, dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from roozh.core.paths import app_dir
from roozh.data.locales import RoozhLocale
from roozh.models.calendar_date import Weekday
from roozh.models.errors import InvalidArgumentError, RoozhError

DEFAULT_TIMEZONE = "Asia/Tehran"
CONFIG_PATH = Path(
    os.getenv("ROOZH_CONFIG_PATH", "").strip() or app_dir() / "config.json"
)
_CONFIG_LOCK = threading.RLock()
_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionSettings:
    timezone: str = DEFAULT_TIMEZONE
    first_day_of_week: Weekday = Weekday.SATURDAY

    def __post_init__(self) -> None:
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError, TypeError) as exc:
            raise InvalidArgumentError(
                f"Unknown timezone: {self.timezone!r}"
            ) from exc
        if not isinstance(self.first_day_of_week, Weekday):
            try:
                weekday = Weekday(int(self.first_day_of_week))
            except (TypeError, ValueError):
                weekday = Weekday.from_name(str(self.first_day_of_week))
            object.__setattr__(self, "first_day_of_week", weekday)

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


DEFAULT_SETTINGS = ConversionSettings()


@dataclass
class AppConfig:
    locale: str = RoozhLocale.PERSIAN.value
    timezone: str = DEFAULT_TIMEZONE
    first_day_of_week: str = "saturday"
    show_milliseconds: bool = True
    theme: str = "light"

    @classmethod
    def _default_data(cls) -> dict[str, str | bool]:
        return asdict(cls())

    @classmethod
    def _read_data_locked(cls) -> dict[str, str | bool]:
        if not CONFIG_PATH.exists():
            return cls._default_data()
        try:
            raw = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            _logger.warning(
                "Unreadable config at %s; using defaults.", CONFIG_PATH
            )
            return cls._default_data()
        if not isinstance(raw, dict):
            return cls._default_data()
        data = cls._default_data()
        for key in data:
            if key in raw:
                data[key] = raw.get(key)
        return data

    @classmethod
    def _write_data_locked(cls, data: dict[str, str | bool]) -> None:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = CONFIG_PATH.with_name(f"{CONFIG_PATH.name}.tmp")
        tmp_path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        tmp_path.replace(CONFIG_PATH)

    @classmethod
    def _from_data(cls, data: dict[str, str | bool]) -> "AppConfig":
        return cls(
            locale=str(data.get("locale") or RoozhLocale.PERSIAN.value),
            timezone=str(data.get("timezone") or DEFAULT_TIMEZONE),
            first_day_of_week=str(data.get("first_day_of_week") or "saturday"),
            show_milliseconds=bool(data.get("show_milliseconds", True)),
            theme=str(data.get("theme") or "light"),
        )

    @classmethod
    def load(cls) -> "AppConfig":
        with _CONFIG_LOCK:
            data = cls._read_data_locked()
        return cls._from_data(data)

    def to_dict(self) -> dict[str, str | bool]:
        return asdict(self)

    def save(self) -> None:
        with _CONFIG_LOCK:
            self._write_data_locked(self.to_dict())

    @classmethod
    def save_partial(cls, **updates) -> "AppConfig":
        with _CONFIG_LOCK:
            data = cls._read_data_locked()
            for key, value in updates.items():
                if key in data:
                    data[key] = value
            cls._write_data_locked(data)
            return cls._from_data(data)

    def resolved_locale(self) -> RoozhLocale:
        try:
            return RoozhLocale.from_code(self.locale)
        except RoozhError:
            _logger.warning("Unknown locale %r in config.", self.locale)
            return RoozhLocale.PERSIAN

    def to_settings(self) -> ConversionSettings:
        try:
            return ConversionSettings(
                timezone=self.timezone,
                first_day_of_week=Weekday.from_name(self.first_day_of_week),
            )
        except RoozhError:
            _logger.warning(
                "Invalid calendar settings (%s, %s); using defaults.",
                self.timezone,
                self.first_day_of_week,
            )
            return DEFAULT_SETTINGS
