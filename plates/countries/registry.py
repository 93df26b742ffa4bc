"""Загрузка обозначений стран из YAML."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from plates.country import Country
from plates.infrastructure.logging_manager import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).parent / "configs"


@dataclass(frozen=True)
class CountryInfo:
    country: Country
    name: str
    aliases: List[str] = field(default_factory=list)

    @property
    def code(self) -> str:
        return self.country.code


class CountryRegistry:
    """Сопоставляет обозначения вроде ``CH``, ``SUI`` или ``Schweiz`` с тегом страны."""

    def __init__(self, config_dir: Path | str = DEFAULT_CONFIG_DIR) -> None:
        self.config_dir = Path(config_dir)
        self._countries: Dict[Country, CountryInfo] = {}
        self._aliases: Dict[str, Country] = {}
        self._load()

    @staticmethod
    def _key(indicator: str) -> str:
        return "".join(indicator.split()).upper()

    def _load(self) -> None:
        for path in sorted(self.config_dir.glob("*.yaml")):
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as exc:
                # Ошибка в одном файле не должна мешать загрузке остальных
                logger.error("Не удалось загрузить страну из %s: %s", path.name, exc)
                continue
            if not isinstance(data, dict):
                logger.error("Файл %s не содержит описания страны", path.name)
                continue
            info = self._parse_country(path, data)
            if info is not None:
                self._register(info)

    def _parse_country(self, path: Path, data: Dict[str, object]) -> Optional[CountryInfo]:
        code = str(data.get("code") or path.stem).upper()
        country = Country.from_code(code)
        if country is None or country is Country.UNSPECIFIED:
            logger.warning("Страна %s из %s не поддерживается, пропуск", code, path.name)
            return None
        raw_aliases = data.get("aliases") or []
        if isinstance(raw_aliases, str):
            raw_aliases = [raw_aliases]
        if not isinstance(raw_aliases, (list, tuple)):
            logger.error("Поле aliases в %s должно быть списком, пропуск", path.name)
            return None
        aliases = [str(alias) for alias in raw_aliases if alias]
        return CountryInfo(country=country, name=str(data.get("name") or code), aliases=aliases)

    def _register(self, info: CountryInfo) -> None:
        self._countries[info.country] = info
        for alias in [info.code, info.name, *info.aliases]:
            self._aliases[self._key(alias)] = info.country

    def get(self, country: Country) -> Optional[CountryInfo]:
        return self._countries.get(country)

    def resolve(self, indicator: Optional[str]) -> Country:
        """Возвращает страну по обозначению; пустое или неизвестное даёт UNSPECIFIED."""

        if not indicator or not indicator.strip():
            return Country.UNSPECIFIED
        country = self._aliases.get(self._key(indicator))
        if country is None:
            logger.warning("Неизвестная страна '%s', используется обработчик по умолчанию", indicator)
            return Country.UNSPECIFIED
        return country

    def available(self) -> List[Dict[str, str]]:
        return sorted(
            ({"code": info.code, "name": info.name} for info in self._countries.values()),
            key=lambda item: item["code"],
        )
