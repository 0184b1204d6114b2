"""Error hierarchy tests — codes, HTTP status and the response envelope."""

import pytest

from friendgraph.core.errors import (
    AlreadyBlockedError,
    AlreadyFriendsError,
    AlreadySubscribedError,
    ErrorCategory,
    FriendGraphError,
    InvalidRelationshipError,
    OperationTimeoutError,
    StoreError,
    UserAlreadyExistsError,
    UserNotFoundError,
)


@pytest.mark.parametrize(
    "error, code, status",
    [
        (UserNotFoundError("x@y.com"), "USER_NOT_FOUND", 404),
        (UserAlreadyExistsError("x@y.com"), "USER_ALREADY_EXISTS", 409),
        (AlreadyFriendsError(), "ALREADY_FRIENDS", 409),
        (AlreadySubscribedError(), "ALREADY_SUBSCRIBED", 409),
        (AlreadyBlockedError(), "ALREADY_BLOCKED", 409),
        (InvalidRelationshipError("nope"), "INVALID_RELATIONSHIP", 400),
        (StoreError("boom", "list_friends"), "STORE_ERROR", 503),
        (OperationTimeoutError("resolve_recipients", 2.5), "OPERATION_TIMEOUT", 504),
    ],
)
def test_error_codes_and_status(error, code, status):
    assert isinstance(error, FriendGraphError)
    assert error.code == code
    assert error.http_status == status


def test_response_envelope_shape():
    body = AlreadyFriendsError().to_response()
    assert body["success"] is False
    assert body["error_message"] == "They are already friends"
    assert body["error"]["code"] == "ALREADY_FRIENDS"
    assert body["error"]["category"] == ErrorCategory.CONFLICT.value


def test_store_error_carries_operation():
    err = StoreError("connection reset", "is_blocked")
    assert err.operation == "is_blocked"
    assert err.context.operation == "is_blocked"
    assert "is_blocked" in err.message
    assert err.to_response()["error"]["operation"] == "is_blocked"


def test_user_not_found_names_email():
    err = UserNotFoundError("ghost@example.com")
    assert err.email == "ghost@example.com"
    assert "ghost@example.com" in err.message


def test_timeout_message_includes_deadline():
    err = OperationTimeoutError("block", 0.5)
    assert err.message == "block did not complete within 0.5s"
