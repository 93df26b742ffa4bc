"""Инфраструктура: логирование и настройки."""
