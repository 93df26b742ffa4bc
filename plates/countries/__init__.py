"""Распознавание страны по произвольному обозначению."""

from .registry import DEFAULT_CONFIG_DIR, CountryInfo, CountryRegistry

__all__ = ["DEFAULT_CONFIG_DIR", "CountryInfo", "CountryRegistry"]
