"""Нормализация и валидация автомобильных номеров."""

from plates.country import Country
from plates.handlers import (
    DefaultLicensePlateHandler,
    LicensePlateHandler,
    SwissLicensePlateHandler,
    handler_for,
    supported_countries,
)
from plates.license_plate import LicensePlate
from plates.validation import DefaultLicensePlateValidator, is_valid

__all__ = [
    "Country",
    "DefaultLicensePlateHandler",
    "DefaultLicensePlateValidator",
    "LicensePlate",
    "LicensePlateHandler",
    "SwissLicensePlateHandler",
    "handler_for",
    "is_valid",
    "supported_countries",
]
