"""Обработчик по умолчанию для неуказанной или неизвестной страны."""
from __future__ import annotations

import re

from plates.handlers.base import trim
from plates.infrastructure.logging_manager import get_logger

logger = get_logger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-+")
_ALLOWED_SYMBOLS = frozenset("0123456789- ")


class DefaultLicensePlateHandler:
    """Заменяет пробелы на дефисы и переводит номер в верхний регистр."""

    def normalize(self, value: str) -> str:
        """Обрезает края, затем заменяет пробелы дефисами.

        Края обрезаются до замены, поэтому ``" AB 12 "`` даёт ``"AB-12"``,
        а не ``"-AB-12-"``. Пробелами
        считаются и Unicode-пробелы (например, неразрывный пробел).
        """

        normalized = _WHITESPACE_RUN.sub("-", trim(value))
        normalized = _HYPHEN_RUN.sub("-", normalized).upper()

        logger.debug("Normalized '%s' to '%s'", value, normalized)

        return normalized

    def validate(self, value: str) -> bool:
        """Номер допустим, если в нём только буквы, цифры, дефисы и пробелы.

        Пробел разрешён, хотя ``normalize`` его никогда не оставляет.
        """

        return all(ch.isalpha() or ch in _ALLOWED_SYMBOLS for ch in self.normalize(value))
