"""Теги стран, по которым выбирается обработчик номеров."""
from __future__ import annotations

from enum import Enum
from typing import Optional


class Country(Enum):
    """Страна номера; значение — код ISO 3166-1 alpha-2."""

    UNSPECIFIED = ""
    SWITZERLAND = "CH"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["Country"]:
        normalized = (code or "").strip().upper()
        for country in cls:
            if country.value == normalized:
                return country
        return None
