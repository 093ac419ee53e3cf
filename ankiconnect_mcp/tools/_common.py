"""Общие помощники инструментов: ответы, ошибки, поисковые запросы."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Type

from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import BaseModel

from ..errors import NotFoundError, ValidationError


logger = logging.getLogger(__name__)


def output_schema(model: Type[BaseModel]) -> Dict[str, Any]:
    return model.model_json_schema(by_alias=True)


def tool_result(summary: str, output: BaseModel) -> ToolResult:
    """Собирает ответ инструмента: текстовую сводку и структурированные данные."""

    return ToolResult(
        content=[TextContent(type="text", text=summary)],
        structured_content=output.model_dump(by_alias=True),
    )


@contextmanager
def reported_as_tool_error(tool_name: str, failure_prefix: str) -> Iterator[None]:
    """Превращает любую ошибку внутри блока в `ToolError`.

    FastMCP отдаёт `ToolError` клиенту как результат с `isError: true`,
    процесс продолжает обслуживать следующие вызовы. Ошибки валидации и
    отсутствия заметки передаются без префикса.
    """

    try:
        yield
    except (ValidationError, NotFoundError) as exc:
        logger.warning("%s: %s", tool_name, exc)
        raise ToolError(str(exc)) from exc
    except Exception as exc:
        logger.warning("%s: %s: %s", tool_name, type(exc).__name__, exc)
        raise ToolError(f"{failure_prefix}: {exc}") from exc


def deck_query(deck_name: str) -> str:
    # Имя подставляется как есть, кавычки внутри имени не экранируются.
    return f'"deck:{deck_name}"'


__all__ = ["deck_query", "output_schema", "reported_as_tool_error", "tool_result"]
