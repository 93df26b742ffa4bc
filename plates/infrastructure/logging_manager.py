#!/usr/bin/env python3
# /plates/infrastructure/logging_manager.py
"""Единая настройка логирования для библиотеки и CLI."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_DEFAULT_CONFIG: Dict[str, Any] = {
    "level": "INFO",
    "file": "data/plates.log",
    "max_bytes": 1048576,
    "backup_count": 5,
}


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class LoggingManager:
    """Настраивает корневой логгер: консоль и ротируемый файл."""

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        self.config = {**_DEFAULT_CONFIG, **(config or {})}
        self.level = self._parse_level(self.config.get("level"))
        self._configure()

    @staticmethod
    def _parse_level(raw: Any) -> int:
        level = logging.getLevelName(str(raw or "INFO").upper())
        return level if isinstance(level, int) else logging.INFO

    def _configure(self) -> None:
        root = logging.getLogger()
        root.setLevel(self.level)
        # Повторная инициализация не должна дублировать обработчики
        for handler in list(root.handlers):
            if getattr(handler, "_plates_managed", False):
                root.removeHandler(handler)
                handler.close()

        formatter = logging.Formatter(LOG_FORMAT)

        console = logging.StreamHandler()
        console.setFormatter(formatter)
        console._plates_managed = True  # type: ignore[attr-defined]
        root.addHandler(console)

        log_file = self.config.get("file")
        if log_file:
            os.makedirs(os.path.dirname(str(log_file)) or ".", exist_ok=True)
            file_handler = RotatingFileHandler(
                str(log_file),
                maxBytes=int(self.config.get("max_bytes", 1048576)),
                backupCount=int(self.config.get("backup_count", 5)),
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            file_handler._plates_managed = True  # type: ignore[attr-defined]
            root.addHandler(file_handler)
