"""Response envelope for successful calls and the error raised for failed ones."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Any, Generic, TypeVar

from servicekit.api_constant import GENERAL_SUCCESS
from servicekit.env import get_env_string

T = TypeVar("T")

_SUCCESS_CODE, _SUCCESS_DESCRIPTION = astuple(GENERAL_SUCCESS)


def _plain(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return value


@dataclass
class BaseResponse(Generic[T]):
    """Standard envelope wrapping a call's result."""

    code: str = ""
    code_system: str = ""
    message: str = ""
    message_error: str = ""
    result: T | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the envelope keyed by its JSON field names."""
        return {
            "code": self.code,
            "codeSystem": self.code_system,
            "message": self.message,
            "messageError": self.message_error,
            "result": _plain(self.result),
        }


class ApiError(Exception):
    """An error to be reported to the caller with a code and HTTP status."""

    def __init__(
        self,
        code_system: str = "",
        code: str = "",
        message: str = "",
        http_status: int = 0,
        result: Any = None,
    ) -> None:
        super().__init__(message)
        self.code_system = code_system
        self.code = code
        self.message = message
        self.http_status = http_status
        self.result = result

    def _key(self) -> tuple[Any, ...]:
        return (self.code_system, self.code, self.message, self.http_status, self.result)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"ApiError(code_system={self.code_system!r}, code={self.code!r}, "
            f"message={self.message!r}, http_status={self.http_status!r}, "
            f"result={self.result!r})"
        )

    def __str__(self) -> str:
        return self.message


def _envelope(result: T, message: str) -> BaseResponse[T]:
    app_name = get_env_string("APP_NAME")
    return BaseResponse(_SUCCESS_CODE, app_name, message, "", result)


def success(result: T) -> BaseResponse[T]:
    """Wrap a result in a success envelope tagged with the application name."""
    return _envelope(result, "")


def success_with_message(result: T, message: str) -> BaseResponse[T]:
    """Wrap a result in a success envelope carrying a message."""
    return _envelope(result, message)


def error_with_result(code_system: str, code: str, message: str, result: Any) -> ApiError:
    """Build an error carrying a result but no HTTP status."""
    return ApiError(code_system=code_system, code=code, message=message, result=result)


def new_error(code_system: str, code: str, message: str, http_status: int) -> ApiError:
    """Build an error with an HTTP status."""
    return ApiError(
        code_system=code_system, code=code, message=message, http_status=http_status
    )


def new_error_with_result(
    code_system: str, code: str, message: str, http_status: int, result: Any
) -> ApiError:
    """Build an error with an HTTP status and a result."""
    return ApiError(
        code_system=code_system,
        code=code,
        message=message,
        http_status=http_status,
        result=result,
    )