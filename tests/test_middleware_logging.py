"""
Tests for request logging helpers
"""

import logging

import pytest
from starlette.requests import Request

from tubetalk.auth.factory import get_auth_adapter_cached
from tubetalk.logging import (
    clear_request_context,
    configure_logging,
    extract_user_id_from_request,
    generate_request_id,
    get_request_id,
    get_user_id,
    set_request_context,
)
from tubetalk.middleware import _operation_from_payload, sanitize_query_params


def _request(headers: dict[str, str]) -> Request:
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/graphql",
        "headers": [(k.lower().encode(), v.encode()) for k, v in headers.items()],
    }
    return Request(scope)


@pytest.mark.unit
def test_sanitize_query_params():
    sanitized = sanitize_query_params({"access_token": "secret", "page": "2"})

    assert sanitized == {"access_token": "[REDACTED]", "page": "2"}


@pytest.mark.unit
@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"operationName": "GetPost", "query": "query GetPost { posts { id } }"}, "GetPost"),
        ({"query": "mutation AddPost { addPost { id } }"}, "mutation:AddPost"),
        ({"query": "query Feed { posts { id } }"}, "Feed"),
        ({"query": "{ posts { id } }"}, "unnamed_operation"),
        ({"query": "query IntrospectionQuery { __schema { types { name } } }"}, "__introspection"),
        ({}, None),
    ],
)
def test_operation_from_payload(payload, expected):
    assert _operation_from_payload(payload) == expected


@pytest.mark.unit
def test_request_context_round_trip():
    set_request_context(request_id="req-123", user_id="user-456")
    assert get_request_id() == "req-123"
    assert get_user_id() == "user-456"

    clear_request_context()
    assert get_request_id() is None
    assert get_user_id() is None


@pytest.mark.unit
def test_generate_request_id_is_compact_and_unique():
    ids = {generate_request_id() for _ in range(50)}

    assert len(ids) == 50
    assert all(len(i) == 14 for i in ids)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_extract_user_id_from_request():
    import uuid

    user_id = uuid.uuid4()
    token = await get_auth_adapter_cached().issue_token(user_id)

    assert extract_user_id_from_request(_request({"Authorization": f"Bearer {token}"})) == str(
        user_id
    )
    assert extract_user_id_from_request(_request({"Authorization": "Bearer junk"})) is None
    assert extract_user_id_from_request(_request({})) is None


@pytest.fixture
def root_level():
    level = logging.getLogger().level
    yield
    logging.getLogger().setLevel(level)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("debug", "log_level", "expected"),
    [
        (False, "warning", logging.WARNING),
        (False, "ERROR", logging.ERROR),
        (False, None, logging.INFO),
        (False, "chatty", logging.INFO),
        (True, "warning", logging.DEBUG),
    ],
)
def test_configure_logging_level(root_level, debug, log_level, expected):
    configure_logging(debug=debug, log_level=log_level)

    assert logging.getLogger().level == expected
