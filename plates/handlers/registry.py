"""Выбор обработчика номеров по стране."""
from __future__ import annotations

from typing import Dict, List, Optional, Union

from plates.country import Country
from plates.handlers.base import LicensePlateHandler
from plates.handlers.default import DefaultLicensePlateHandler
from plates.handlers.swiss import SwissLicensePlateHandler

DEFAULT_HANDLER: LicensePlateHandler = DefaultLicensePlateHandler()

_HANDLERS: Dict[Country, LicensePlateHandler] = {
    Country.SWITZERLAND: SwissLicensePlateHandler(),
}


def handler_for(country: Union[Country, str, None] = None) -> LicensePlateHandler:
    """Возвращает обработчик страны, для остальных случаев — обработчик по умолчанию.

    Строка принимается только как код ISO 3166-1 alpha-2 (``"CH"``). Названия
    и псевдонимы вроде ``"Schweiz"`` сначала переводятся в ``Country`` через
    ``CountryRegistry.resolve``, иначе будет выбран обработчик по умолчанию.
    """

    if not isinstance(country, Country):
        country = Country.from_code(country) if isinstance(country, str) else None
    if country is None:
        return DEFAULT_HANDLER
    return _HANDLERS.get(country, DEFAULT_HANDLER)


def supported_countries() -> List[Country]:
    return sorted(_HANDLERS, key=lambda c: c.code)


__all__ = ["DEFAULT_HANDLER", "handler_for", "supported_countries"]
