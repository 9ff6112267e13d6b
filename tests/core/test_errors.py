"""Error Hierarchy — codes, HTTP statuses and the REST envelope."""

from employee_api.core.errors import (
    EmployeeApiError,
    EmployeeNotFoundError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    UpstreamResponseError,
    UpstreamUnavailableError,
)


def test_not_found_message_carries_id():
    err = EmployeeNotFoundError("non-existent-id")
    assert err.message == "Employee not found for ID: non-existent-id"
    assert err.http_status == 404
    assert err.code == "EMPLOYEE_NOT_FOUND"
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert err.context.employee_id == "non-existent-id"


def test_all_errors_share_base_class():
    for err in (
        EmployeeNotFoundError("x"),
        UpstreamUnavailableError("down", "connection_error"),
        UpstreamResponseError("bad"),
    ):
        assert isinstance(err, EmployeeApiError)


def test_upstream_unavailable_is_503_and_critical():
    err = UpstreamUnavailableError("slow", "timeout")
    assert err.http_status == 503
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.category is ErrorCategory.TIMEOUT
    assert err.reason == "timeout"


def test_upstream_unavailable_keeps_retry_after():
    err = UpstreamUnavailableError("throttled", "rate_limit", retry_after_ms=3000)
    assert err.category is ErrorCategory.EXTERNAL_API
    assert err.to_response()["error"]["context"]["retry_after_ms"] == 3000


def test_upstream_response_error_is_502():
    err = UpstreamResponseError("no data")
    assert err.http_status == 502
    assert err.code == "UPSTREAM_BAD_RESPONSE"


def test_to_response_envelope_shape():
    ctx = ErrorContext(upstream_status=500)
    body = UpstreamUnavailableError("boom", "server_error", context=ctx).to_response()
    error = body["error"]
    assert error["code"] == "UPSTREAM_UNAVAILABLE"
    assert error["severity"] == "critical"
    assert error["category"] == "external_api"
    assert error["context"]["upstream_status"] == 500
    assert "timestamp" in error
