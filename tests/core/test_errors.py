"""Error hierarchy - codes, HTTP statuses and the REST envelope."""

from foot.core.errors import (
    BadRequestError, ConflictError, DatabaseError, ErrorCategory, ErrorContext,
    ErrorSeverity, ResourceNotFoundError,
)


def test_bad_request_is_400_business_rule():
    err = BadRequestError("nope")
    assert err.http_status == 400
    assert err.code == "BAD_REQUEST"
    assert err.category == ErrorCategory.BUSINESS_RULE
    assert str(err) == "nope"


def test_resource_not_found_message_and_status():
    err = ResourceNotFoundError("Match", "7")
    assert err.http_status == 404
    assert err.message == "Match '7' not found"
    assert err.resource_type == "Match"


def test_conflict_is_409():
    err = ConflictError("Request conflicts with existing data")
    assert err.http_status == 409
    assert err.code == "CONFLICT"
    assert err.category == ErrorCategory.CONFLICT
    assert err.severity == ErrorSeverity.ERROR


def test_database_error_is_critical_503():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 503
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.message == "Database execute failed: Connection or operational error"


def test_to_response_envelope():
    err = BadRequestError("bad", ErrorContext(match_id=3, player_id=1))
    body = err.to_response()["error"]
    assert body["code"] == "BAD_REQUEST"
    assert body["message"] == "bad"
    assert body["category"] == "business_rule"
    assert body["severity"] == "error"
    assert body["context"] == {"match_id": 3, "player_id": 1}
    assert "timestamp" in body
