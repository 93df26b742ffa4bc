"""Обработчики номеров по странам."""

from .base import LicensePlateHandler, trim
from .default import DefaultLicensePlateHandler
from .registry import handler_for, supported_countries
from .swiss import CANTONS, SwissLicensePlateHandler

__all__ = [
    "CANTONS",
    "DefaultLicensePlateHandler",
    "LicensePlateHandler",
    "SwissLicensePlateHandler",
    "handler_for",
    "supported_countries",
    "trim",
]
