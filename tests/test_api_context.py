import contextvars

from servicekit.api_context import (
    ApiContext,
    Metadata,
    User,
    get_api_context,
    update_api_context,
)
from servicekit.audit import AuditPayload
from servicekit.base_response import ApiError


def _fresh(func):
    return contextvars.copy_context().run(func)


def test_new_context_is_empty():
    ctx = _fresh(get_api_context)
    assert ctx == ApiContext()
    assert ctx.user.user_id == 0
    assert ctx.error == ApiError()
    assert ctx.audit == AuditPayload()


def test_get_returns_same_instance():
    def run():
        first = get_api_context()
        first.user.name = "alice"
        return first, get_api_context()

    first, second = _fresh(run)
    assert first is second
    assert second.user.name == "alice"


def test_update_replaces_context():
    def run():
        get_api_context()
        replacement = ApiContext(
            metadata=Metadata(client_ip="10.0.0.1"),
            user=User(user_id=5, email="user@example.com", token="token"),
        )
        update_api_context(replacement)
        return replacement, get_api_context()

    replacement, current = _fresh(run)
    assert current is replacement
    assert current.metadata.client_ip == "10.0.0.1"
    assert current.user.email == "user@example.com"


def test_contexts_are_isolated():
    def run():
        update_api_context(ApiContext(user=User(name="bob")))
        return get_api_context().user.name

    assert _fresh(run) == "bob"
    assert _fresh(lambda: get_api_context().user.name) == ""


def test_default_factories_are_independent():
    a = ApiContext()
    b = ApiContext()
    a.metadata.language = "en"
    assert b.metadata.language == ""