"""Обработчик швейцарских номеров.

Примеры: ``FR 24539``, ``SZ 65726``, ``ZH 445789``, ``GR 123``.
Номер состоит из кода кантона (две буквы) и до шести цифр.
Номера с буквенным суффиксом (например, дилерские), а также служебные и
военные номера не поддерживаются и считаются недействительными.
"""
from __future__ import annotations

import re

from plates.handlers.base import trim

CANTONS = frozenset(
    {
        "AG", "AR", "AI", "BL", "BS", "BE", "FR", "GE", "GL", "GR", "JU", "LU", "NE",
        "NW", "OW", "SH", "SZ", "SO", "SG", "TI", "TG", "UR", "VD", "VS", "ZG", "ZH",
    }
)

CANTON_CODE_LENGTH = 2

_SEPARATORS = re.compile(r"[\s\-]")
_PLATE_PATTERN = re.compile(r"[A-Z]{2} [0-9]{1,6}")


class SwissLicensePlateHandler:
    """Отделяет код кантона пробелом и проверяет его по списку кантонов."""

    def normalize(self, value: str) -> str:
        # Регистр не меняется: строчные буквы отсеет validate
        normalized = _SEPARATORS.sub("", trim(value))
        if len(normalized) > CANTON_CODE_LENGTH:
            normalized = f"{normalized[:CANTON_CODE_LENGTH]} {normalized[CANTON_CODE_LENGTH:]}"
        return normalized

    def validate(self, value: str) -> bool:
        normalized = self.normalize(value)
        if not _PLATE_PATTERN.fullmatch(normalized):
            return False
        return normalized[:CANTON_CODE_LENGTH] in CANTONS
