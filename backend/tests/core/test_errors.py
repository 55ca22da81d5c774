"""Error Hierarchy — codes, statuses, envelopes and GraphQL extensions."""

from app.core.errors import (
    DatabaseError,
    ErrorCategory,
    ErrorSeverity,
    InvalidNameError,
    OutOfRangeError,
    ParticipantNotFoundError,
    ParticipationError,
    QuotaExceededError,
)


def test_domain_errors_are_participation_errors():
    for error in (
        InvalidNameError(), OutOfRangeError(150), QuotaExceededError(80, 20),
        ParticipantNotFoundError("abc"), DatabaseError("down", "connect"),
    ):
        assert isinstance(error, ParticipationError)


def test_str_is_user_message():
    assert str(ParticipantNotFoundError("abc")) == "Participante não encontrado"


def test_http_statuses():
    assert InvalidNameError().http_status == 400
    assert OutOfRangeError(-1).http_status == 400
    assert QuotaExceededError(80, 20).http_status == 400
    assert ParticipantNotFoundError("x").http_status == 404
    assert DatabaseError("down", "connect").http_status == 503


def test_not_found_records_participant_id_in_context():
    error = ParticipantNotFoundError("abc")
    assert error.context.participant_id == "abc"
    assert error.to_response()["error"]["context"]["participant_id"] == "abc"


def test_to_response_envelope():
    body = QuotaExceededError(80, 20).to_response()["error"]
    assert body["code"] == "QUOTA_EXCEEDED"
    assert body["category"] == ErrorCategory.BUSINESS_RULE.value
    assert body["severity"] == ErrorSeverity.ERROR.value
    assert "Atual: 80.00%" in body["message"]
    assert "timestamp" in body


def test_extensions_expose_code_and_category():
    assert InvalidNameError().extensions == {
        "code": "INVALID_NAME", "category": "validation",
    }


def test_database_error_is_critical():
    error = DatabaseError("Connection or operational error", "execute")
    assert error.severity == ErrorSeverity.CRITICAL
    assert error.message == "Database execute failed: Connection or operational error"
    assert error.operation == "execute"
