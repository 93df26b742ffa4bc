"""Контракт обработчиков номеров разных стран."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LicensePlateHandler(Protocol):
    """Нормализация и валидация номера по правилам одной страны.

    ``validate`` всегда проверяет результат собственного ``normalize``,
    а не исходную строку. Ни один из методов не выбрасывает исключений.
    """

    def normalize(self, value: str) -> str:
        ...

    def validate(self, value: str) -> bool:
        ...


def trim(value: str) -> str:
    """Убирает пробельные символы по краям."""

    return value.strip()
