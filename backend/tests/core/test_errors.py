"""Tests for the error hierarchy — status codes and response envelope."""

from task_api.core.errors import (
    DatabaseError, ErrorCategory, InvalidTaskDataError, InvalidTaskIdError,
    MissingDescripcionError, TaskNotFoundError,
)


def test_client_errors_carry_expected_status():
    assert InvalidTaskIdError("x").http_status == 400
    assert InvalidTaskDataError().http_status == 400
    assert MissingDescripcionError().http_status == 422
    assert TaskNotFoundError(3).http_status == 404


def test_not_found_message_includes_id():
    err = TaskNotFoundError(12)
    assert err.message == "Task with ID 12 not found"
    assert err.context.task_id == "12"
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND


def test_to_response_keeps_msg_envelope():
    body = MissingDescripcionError().to_response()
    assert body["msg"] == "Incorrect task descripcion. descripcion is required"
    assert body["error"]["code"] == "DESCRIPCION_REQUIRED"
    assert body["error"]["category"] == "validation"


def test_database_error_is_critical_503():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 503
    assert err.severity.value == "critical"
    assert err.message.startswith("Database execute failed")
