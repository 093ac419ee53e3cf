"""Клиентские вызовы к AnkiConnect."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import anyio
import httpx

from .. import config
from ..errors import RequestTimeoutError, TransportError, UpstreamError


logger = logging.getLogger(__name__)


def _make_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=config.REQUEST_TIMEOUT)


async def _post(payload: Dict[str, Any]) -> Any:
    async with _make_client() as client:
        response = await client.post(config.ANKI_URL, json=payload)
        response.raise_for_status()
        return response.json()


async def anki_call(
    action: str,
    params: Optional[Mapping[str, Any]] = None,
    *,
    version: int = config.ANKI_CONNECT_VERSION,
):
    """Выполнить RPC-вызов AnkiConnect.

    Проводит базовую валидацию аргументов, отправляет ровно один POST-запрос
    и возвращает поле `result` ответа без дополнительной проверки схемы.
    Весь обмен ограничен `config.REQUEST_TIMEOUT` секундами.

    Raises:
        UpstreamError: AnkiConnect вернул непустое поле `error`.
        RequestTimeoutError: ответ не получен за отведённое время.
        TransportError: сетевая ошибка, HTTP-статус ошибки или битый JSON.
    """

    if not isinstance(action, str):
        raise TypeError("action must be a string")
    trimmed_action = action.strip()
    if not trimmed_action:
        raise ValueError("action must be a non-empty string")

    if params is None:
        normalized_params: Dict[str, Any] = {}
    elif isinstance(params, Mapping):
        normalized_params = dict(params)
    else:
        raise TypeError("params must be a mapping of argument names to values")

    if isinstance(version, bool) or not isinstance(version, int):
        raise TypeError("version must be an integer")

    payload = {
        "action": trimmed_action,
        "version": version,
        "params": normalized_params,
    }
    timeout = config.REQUEST_TIMEOUT
    logger.debug("AnkiConnect: %s", trimmed_action)

    try:
        with anyio.fail_after(timeout):
            data = await _post(payload)
    except (TimeoutError, httpx.TimeoutException) as exc:
        logger.warning("AnkiConnect: таймаут действия %s", trimmed_action)
        raise RequestTimeoutError(
            f"AnkiConnect request timed out after {timeout:g} seconds"
        ) from exc
    except httpx.HTTPError as exc:
        logger.warning("AnkiConnect: ошибка соединения для %s: %s", trimmed_action, exc)
        raise TransportError(f"AnkiConnect request failed: {exc}") from exc
    except ValueError as exc:
        logger.warning("AnkiConnect: некорректный JSON для %s", trimmed_action)
        raise TransportError(f"AnkiConnect returned malformed JSON: {exc}") from exc

    if not isinstance(data, Mapping):
        raise TransportError("AnkiConnect response must be a JSON object")

    error = data.get("error")
    if error is not None:
        logger.warning("AnkiConnect: %s вернул ошибку: %s", trimmed_action, error)
        raise UpstreamError(str(error))
    return data.get("result")


__all__ = ["anki_call", "httpx"]
