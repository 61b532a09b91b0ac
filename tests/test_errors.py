"""
Tests for the error classifier.
"""

from __future__ import annotations

from unittest.mock import patch

from checkapi.services.errors import (
    GENERIC_ERROR_MESSAGE,
    INVALID_DOMAIN_MESSAGE,
    CheckFailure,
    FailureKind,
    classify,
)


def test_validation_failure_uses_fixed_message() -> None:
    envelope = classify(CheckFailure.validation())
    assert envelope.model_dump() == {"status": "error", "reason": INVALID_DOMAIN_MESSAGE}


def test_protocol_failure_is_shown_verbatim() -> None:
    with patch("checkapi.services.errors.log_error") as mock_log:
        envelope = classify(CheckFailure.protocol("Command is not implemented"))

    assert envelope.model_dump() == {"status": "error", "reason": "Command is not implemented"}
    mock_log.assert_not_called()


def test_unexpected_failure_is_logged_and_hidden() -> None:
    cause = RuntimeError("template system fault at /srv/templates")

    with patch("checkapi.services.errors.log_error") as mock_log:
        envelope = classify(CheckFailure.unexpected(cause), trid="CheckApiAction")

    assert envelope.model_dump() == {"status": "error", "reason": GENERIC_ERROR_MESSAGE}
    assert "template" not in envelope.reason
    mock_log.assert_called_once()
    kwargs = mock_log.call_args.kwargs
    assert kwargs["exc_info"] is cause
    assert kwargs["error_type"] == "RuntimeError"
    assert kwargs["trid"] == "CheckApiAction"
    assert kwargs["failure_kind"] == FailureKind.UNEXPECTED.value


def test_unexpected_failure_message_is_never_surfaced() -> None:
    failure = CheckFailure(FailureKind.UNEXPECTED, "internal detail")
    with patch("checkapi.services.errors.log_error"):
        assert classify(failure).reason == GENERIC_ERROR_MESSAGE
