import pytest

from servicekit.audit import AuditPayload
from servicekit.base_response import (
    ApiError,
    BaseResponse,
    error_with_result,
    new_error,
    new_error_with_result,
    success,
    success_with_message,
)


@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("APP_NAME", "billing")


def test_success_uses_general_success_code_and_app_name():
    response = success({"id": 1})
    assert response.code == "00"
    assert response.code_system == "billing"
    assert response.result == {"id": 1}
    assert response.message == ""
    assert response.message_error == ""


def test_success_without_app_name(monkeypatch):
    monkeypatch.delenv("APP_NAME", raising=False)
    assert success([1, 2]).code_system == ""


def test_success_with_message_carries_message():
    response = success_with_message([1, 2], "done")
    assert response.message == "done"
    assert response.result == [1, 2]
    assert response.code == "00"


def test_to_dict_uses_wire_names():
    body = success_with_message("x", "hello").to_dict()
    assert body == {
        "code": "00",
        "codeSystem": "billing",
        "message": "hello",
        "messageError": "",
        "result": "x",
    }


def test_to_dict_expands_nested_payload():
    payload = AuditPayload(user_id=7, activity_name="login")
    body = BaseResponse(result=payload).to_dict()
    assert body["result"] == payload.to_dict()


def test_new_error_fields():
    err = new_error("sys", "4000", "bad", 400)
    assert (err.code_system, err.code, err.message, err.http_status) == (
        "sys",
        "4000",
        "bad",
        400,
    )
    assert err.result is None
    assert str(err) == "bad"


def test_new_error_with_result_fields():
    err = new_error_with_result("sys", "6040", "missing", 404, {"k": "v"})
    assert err.result == {"k": "v"}
    assert err.http_status == 404


def test_error_with_result_has_no_status():
    err = error_with_result("sys", "8010", "api", [3])
    assert err.http_status == 0
    assert err.result == [3]
    assert err.code == "8010"


def test_api_error_is_raisable_and_comparable():
    with pytest.raises(ApiError) as info:
        raise new_error("sys", "5000", "boom", 500)
    assert info.value == new_error("sys", "5000", "boom", 500)
    assert info.value != new_error("sys", "5000", "boom", 503)


def test_default_api_error_is_empty():
    err = ApiError()
    assert err == new_error("", "", "", 0)