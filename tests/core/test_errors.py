"""Error hierarchy — codes, statuses and the REST envelope."""

from users_api.core.errors import (
    ErrorCategory,
    ErrorSeverity,
    StoreConnectionError,
    UserNotCreatedError,
    UsersApiError,
)


def test_store_connection_error_is_critical_503():
    err = StoreConnectionError("sqlite+aiosqlite:///users.db")

    assert isinstance(err, UsersApiError)
    assert err.http_status == 503
    assert err.category is ErrorCategory.DATABASE
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.context.operation == "connect"


def test_store_connection_error_response_hides_database_location():
    response = StoreConnectionError("sqlite+aiosqlite:///secret/users.db").to_response()

    assert response["error"]["code"] == "DATABASE_UNAVAILABLE"
    assert "secret" not in str(response)


def test_user_not_created_error_is_400_with_user_context():
    err = UserNotCreatedError("abc")

    assert err.http_status == 400
    assert err.context.user_id == "abc"
    assert err.to_response()["error"]["category"] == "validation"
