"""Helpers producing JSON response bodies and raising API errors."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, NoReturn

from servicekit import base_response


def success(result: Any) -> tuple[int, dict[str, Any]]:
    """Return an OK status and the success body for ``result``."""
    return HTTPStatus.OK, base_response.success(result).to_dict()


def success_with_message(result: Any, message: str) -> tuple[int, dict[str, Any]]:
    """Return an OK status and the success body with a message."""
    return HTTPStatus.OK, base_response.success_with_message(result, message).to_dict()


def error(code_system: str, code: str, message: str, http_status: int) -> NoReturn:
    """Raise an :class:`ApiError` to abort the request."""
    raise base_response.new_error(code_system, code, message, http_status)


def error_with_result(
    code_system: str, code: str, message: str, http_status: int, result: Any
) -> NoReturn:
    """Raise an :class:`ApiError` carrying a result to abort the request."""
    raise base_response.new_error_with_result(
        code_system, code, message, http_status, result
    )