"""Иерархия ошибок MCP-сервера."""

from __future__ import annotations


class AnkiMCPError(Exception):
    """Базовая ошибка адаптера AnkiConnect."""


class ValidationError(AnkiMCPError, ValueError):
    """Аргументы инструмента не прошли проверку до обращения к Anki."""


class UpstreamError(AnkiMCPError, RuntimeError):
    """AnkiConnect вернул непустое поле `error`."""


class RequestTimeoutError(AnkiMCPError, TimeoutError):
    """Запрос к AnkiConnect не уложился в отведённое время."""


class TransportError(AnkiMCPError, ConnectionError):
    """Сетевая ошибка или некорректный ответ AnkiConnect."""


class NotFoundError(AnkiMCPError, LookupError):
    """Запрошенная заметка отсутствует в коллекции."""


__all__ = [
    "AnkiMCPError",
    "NotFoundError",
    "RequestTimeoutError",
    "TransportError",
    "UpstreamError",
    "ValidationError",
]
