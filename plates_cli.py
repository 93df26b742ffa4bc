# /plates_cli.py
"""CLI для нормализации и проверки номеров из командной строки.

Страна берётся из ``--country`` или из настроек (``plates.default_country``);
при её отсутствии работает обработчик по умолчанию.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from plates.countries import DEFAULT_CONFIG_DIR, CountryRegistry
from plates.country import Country
from plates.handlers import handler_for
from plates.infrastructure.logging_manager import LoggingManager, get_logger
from plates.infrastructure.settings_manager import SettingsManager
from plates.validation import is_valid

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _resolve_country(registry: CountryRegistry, indicator: Optional[str], settings: SettingsManager) -> Country:
    if indicator is None:
        indicator = settings.get_default_country()
    return registry.resolve(indicator)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Нормализация и проверка автомобильных номеров.")
    parser.add_argument(
        "--settings",
        default="settings.json",
        help="Путь к файлу настроек (создаётся со значениями по умолчанию).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    normalize = subparsers.add_parser("normalize", help="Привести номер к каноническому виду.")
    normalize.add_argument("value")
    normalize.add_argument("--country", help="Страна номера, например 'CH' или 'Schweiz'.")

    validate = subparsers.add_parser("validate", help="Проверить номер по правилам страны.")
    validate.add_argument("value")
    validate.add_argument("--country", help="Страна номера, например 'CH' или 'Schweiz'.")

    check = subparsers.add_parser("check", help="Проверить допустимость символов без учёта страны.")
    check.add_argument("value")

    subparsers.add_parser("countries", help="Показать страны со своими правилами.")
    return parser


def run(args: argparse.Namespace, settings: SettingsManager) -> int:
    registry = CountryRegistry(settings.get_countries_dir() or DEFAULT_CONFIG_DIR)

    if args.command == "countries":
        for item in registry.available():
            print(f"{item['code']}\t{item['name']}")
        return EXIT_OK

    if args.command == "check":
        valid = is_valid(args.value)
        print("valid" if valid else "invalid")
        return EXIT_OK if valid else EXIT_INVALID

    country = _resolve_country(registry, args.country, settings)
    handler = handler_for(country)

    if args.command == "normalize":
        print(handler.normalize(args.value))
        return EXIT_OK

    valid = handler.validate(args.value)
    logger.info("Номер '%s' (%s): %s", args.value, country.code or "-", "valid" if valid else "invalid")
    print("valid" if valid else "invalid")
    return EXIT_OK if valid else EXIT_INVALID


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        settings = SettingsManager(args.settings)
        LoggingManager(settings.get_logging_config())
        return run(args, settings)
    except (OSError, ValueError) as exc:
        logger.error("Критическая ошибка: %s", exc)
        print(f"Критическая ошибка: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
