"""Значение номерного знака вместе со страной."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from plates.country import Country
from plates.handlers.registry import handler_for


@dataclass(frozen=True)
class LicensePlate:
    value: str
    country: Country = Country.UNSPECIFIED

    @classmethod
    def for_value(cls, value: str) -> "LicensePlate":
        return cls(value=value)

    def with_country(self, country: Union[Country, str, None]) -> "LicensePlate":
        """Возвращает копию номера с другой страной; неизвестные коды дают UNSPECIFIED."""

        if not isinstance(country, Country):
            country = Country.from_code(country) or Country.UNSPECIFIED
        return replace(self, country=country)

    @property
    def normalized_value(self) -> str:
        return handler_for(self.country).normalize(self.value)

    def is_valid(self) -> bool:
        return handler_for(self.country).validate(self.value)

    def __str__(self) -> str:
        return self.normalized_value
