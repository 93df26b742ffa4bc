#!/usr/bin/env python3
# /plates/infrastructure/settings_manager.py
import json
import os
from typing import Any, Dict


class SettingsManager:
    """Управляет JSON-настройками: логирование и страна по умолчанию."""

    def __init__(self, path: str = "settings.json") -> None:
        self.path = path
        self.settings = self._load()

    def _default(self) -> Dict[str, Any]:
        return {
            "plates": self._plate_defaults(),
            "logging": self._logging_defaults(),
        }

    @staticmethod
    def _plate_defaults() -> Dict[str, Any]:
        return {
            "default_country": "",
            "countries_dir": "",
        }

    @staticmethod
    def _logging_defaults() -> Dict[str, Any]:
        return {
            "level": "INFO",
            "file": "data/plates.log",
            "max_bytes": 1048576,
            "backup_count": 5,
        }

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            defaults = self._default()
            self._save(defaults)
            return defaults
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Файл настроек {self.path} должен содержать JSON-объект")
        return self._upgrade(data)

    def _upgrade(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Дополняет существующие настройки недостающими секциями и ключами."""

        changed = False
        for section, defaults in (("plates", self._plate_defaults()), ("logging", self._logging_defaults())):
            if self._fill_section_defaults(data, section, defaults):
                changed = True

        if changed:
            self._save(data)
        return data

    @staticmethod
    def _fill_section_defaults(data: Dict[str, Any], section: str, defaults: Dict[str, Any]) -> bool:
        if not isinstance(data.get(section), dict):
            data[section] = dict(defaults)
            return True

        changed = False
        current = data[section]
        for key, value in defaults.items():
            if key not in current:
                # Пользовательские значения не перезаписываются
                current[key] = value
                changed = True
        return changed

    def _save(self, data: Dict[str, Any]) -> None:
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def get_plate_settings(self) -> Dict[str, Any]:
        return self.settings.get("plates", {})

    def save_plate_settings(self, plate_settings: Dict[str, Any]) -> None:
        self.settings["plates"] = plate_settings
        self._save(self.settings)

    def get_default_country(self) -> str:
        return str(self.get_plate_settings().get("default_country") or "")

    def save_default_country(self, code: str) -> None:
        plates = self.get_plate_settings()
        plates["default_country"] = (code or "").strip().upper()
        self.save_plate_settings(plates)

    def get_countries_dir(self) -> str:
        return str(self.get_plate_settings().get("countries_dir") or "")

    def get_logging_config(self) -> Dict[str, Any]:
        return self.settings.get("logging", {})

    def refresh(self) -> None:
        self.settings = self._load()
