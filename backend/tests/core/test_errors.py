"""Error Hierarchy — tests for typed gate errors and their REST envelope.

Tests cover:
    - MissingAccountStateError is a precondition error (500, critical)
    - SnapshotDecodeError carries the field path (400)
    - to_response() envelope shape
"""

from server_data_gate.core.errors import (
    ErrorCategory,
    ErrorSeverity,
    MissingAccountStateError,
    ServerDataGateError,
    SnapshotDecodeError,
)


def test_missing_account_state_is_precondition_violation():
    err = MissingAccountStateError()
    assert isinstance(err, ServerDataGateError)
    assert err.category == ErrorCategory.PRECONDITION
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.http_status == 500


def test_snapshot_decode_error_records_field():
    err = SnapshotDecodeError("expected an object", "state.realm")
    assert err.field_path == "state.realm"
    assert err.context.field_path == "state.realm"
    assert err.http_status == 400
    assert "state.realm" in err.message


def test_to_response_envelope():
    body = SnapshotDecodeError("bad", "users[0]").to_response()["error"]
    assert body["code"] == "SNAPSHOT_DECODE_ERROR"
    assert body["category"] == "validation"
    assert body["severity"] == "error"
    assert body["context"]["field"] == "users[0]"
    assert "timestamp" in body
