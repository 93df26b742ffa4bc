"""Грубая проверка правдоподобия номера без правил конкретной страны."""
from __future__ import annotations

import re
from typing import Union

from plates.license_plate import LicensePlate

_WHITESPACE = re.compile(r"\s")
_ALLOWED_SYMBOLS = frozenset("0123456789-")


class DefaultLicensePlateValidator:
    """Номер допустим, если после удаления пробелов в нём только буквы, цифры и дефисы."""

    def is_valid(self, plate: Union[LicensePlate, str]) -> bool:
        value = plate.value if isinstance(plate, LicensePlate) else plate
        normalized = _WHITESPACE.sub("", value.upper())
        return all(ch.isalpha() or ch in _ALLOWED_SYMBOLS for ch in normalized)


_DEFAULT_VALIDATOR = DefaultLicensePlateValidator()


def is_valid(plate: Union[LicensePlate, str]) -> bool:
    return _DEFAULT_VALIDATOR.is_valid(plate)
