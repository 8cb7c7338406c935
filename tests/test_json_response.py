from http import HTTPStatus

import pytest

from servicekit.base_response import ApiError, new_error, new_error_with_result
from servicekit.json_response import (
    error,
    error_with_result,
    success,
    success_with_message,
)


@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("APP_NAME", "orders")


def test_success_status_and_body():
    status, body = success({"n": 1})
    assert status == HTTPStatus.OK
    assert body["code"] == "00"
    assert body["codeSystem"] == "orders"
    assert body["result"] == {"n": 1}


def test_success_with_message_body():
    status, body = success_with_message([1], "created")
    assert status == HTTPStatus.OK
    assert body["message"] == "created"
    assert body["result"] == [1]


def test_error_raises_api_error():
    with pytest.raises(ApiError) as info:
        error("sys", "4000", "Invalid request parameters", 400)
    assert info.value == new_error("sys", "4000", "Invalid request parameters", 400)


def test_error_with_result_raises_with_result():
    with pytest.raises(ApiError) as info:
        error_with_result("sys", "6040", "missing", 404, {"id": 9})
    assert info.value == new_error_with_result("sys", "6040", "missing", 404, {"id": 9})
    assert info.value.result == {"id": 9}