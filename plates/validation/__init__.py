"""Проверка номера без привязки к стране."""
from plates.validation.validator import DefaultLicensePlateValidator, is_valid

__all__ = ["DefaultLicensePlateValidator", "is_valid"]
