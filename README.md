# servicekit

Small building blocks shared by HTTP services:

- **`servicekit.api_constant`**: standard request header names (`HeaderList`, with a ready-made instance `HEADER`), language codes (`LANG_ENGLISH`, `LANG_INDONESIA`, …) and a catalogue of `ErrorCode` values (`GENERAL_SUCCESS`, `INVALID_REQUEST`, `DATA_NOT_FOUND`, …).
- **`servicekit.env`**: typed access to environment variables. A `.env` file in the working directory is loaded once, on first use. Variables that are already set are not overridden.
- **`servicekit.audit`**: `AuditPayload`, the record written for each audited activity. `to_dict()` keys it by its camel-case wire names.
- **`servicekit.base_response`**: `BaseResponse`, the envelope every JSON reply uses, and `ApiError`, the exception raised for failures.
- **`servicekit.api_context`**: `ApiContext`, which holds request `Metadata`, the `User`, an `ApiError` and an `AuditPayload` for the current request. It is kept in a context variable.
- **`servicekit.json_response`**: helpers that build success response bodies or raise errors.

## Installation

```
pip install servicekit
```

To run the tests as well:

```
pip install "servicekit[test]"
pytest
```

## Environment variables

```python
from servicekit.env import get_env_string, get_env_int, get_env_bool, get_env_map, get_env_array

app_name = get_env_string("APP_NAME")   # "" if unset
port = get_env_int("PORT")              # 0 if unset, not an integer, or outside the 64-bit range
debug = get_env_bool("DEBUG")           # True only for 1, t, T, true, True, TRUE
limits = get_env_map("LIMITS")          # "a=1,b=2" -> {"a": "1", "b": "2"}; any malformed pair -> {}
hosts = get_env_array("HOSTS")          # "x,,y" -> ["x", "y"]
```

If no `.env` file can be loaded, a warning is logged and only the process environment is used. `load_env()` can be called directly to trigger the one-time load early.

## Responses

```python
from servicekit.base_response import success, success_with_message

body = success({"id": 1}).to_dict()
# {"code": "00", "codeSystem": <APP_NAME>, "message": "", "messageError": "", "result": {"id": 1}}

body = success_with_message([1, 2], "done").to_dict()
```

If the result has a `to_dict()` method, such as an `AuditPayload`, the envelope's `to_dict()` uses it.

`servicekit.json_response` returns the HTTP status together with the body:

```python
from servicekit.json_response import success

status, body = success({"id": 1})
# status == 200
```

## Errors

Errors are reported by raising `ApiError`:

```python
from servicekit.json_response import error
from servicekit.base_response import ApiError

try:
    error("my-service", "4040", "Requested data not found", 404)
except ApiError as exc:
    print(exc.code, exc.http_status, exc.message)
```

`error_with_result` raises the same way and also carries a `result`. The builders `new_error`, `new_error_with_result` and `error_with_result` in `servicekit.base_response` return an `ApiError` without raising it. Two `ApiError` values are equal when all their fields are equal.

`ErrorCode` values have a readable form:

```python
from servicekit.api_constant import ErrorCode

str(ErrorCode("00", "Success"))
# "ErrorCode{code='00', description='Success'}"
```

## Request context

```python
from servicekit.api_context import get_api_context, update_api_context, ApiContext

ctx = get_api_context()           # creates an empty context the first time
ctx.user.email = "someone@example.com"
update_api_context(ApiContext())  # replaces it for the current context
```

## What it does not do

servicekit is not tied to a web framework and contains no server. The response helpers return a status and a plain dict, and errors are raised as `ApiError`. Writing the body to a response, turning `ApiError` into an HTTP reply, and filling `Metadata` from request headers are left to the application.