"""
Tests for ProtocolBridge: session context, engine invocation and failure tagging.
"""

from __future__ import annotations

import pytest

from checkapi.flows.base import EppException
from checkapi.flows.models import FEE_0_6_URI, FlowKind, SessionContext, SessionSource, Trid
from checkapi.services.errors import GENERIC_ERROR_MESSAGE, CheckFailure, FailureKind
from checkapi.services.protocol_bridge import ProtocolBridge
from checkapi.services.request_builder import RequestBuilder
from checkapi.services.normalizer import NormalizedDomain
from checkapi.services.templates import get_template_renderer

from conftest import FIXED_NOW, FakeFlowRunner, available_response


@pytest.fixture
def payload() -> bytes:
    return RequestBuilder(get_template_renderer()).build(
        NormalizedDomain(name="newname.example", zone="example")
    )


def make_bridge(runner: FakeFlowRunner) -> ProtocolBridge:
    return ProtocolBridge(runner, client_id="checkapi-test", trid_label="CheckApiAction", clock=lambda: FIXED_NOW)


def test_execute_passes_fresh_session_and_trid(payload: bytes) -> None:
    runner = FakeFlowRunner(response=available_response())
    response = make_bridge(runner).execute(payload)

    assert response is runner.response
    call = runner.calls[0]
    assert call["flow_kind"] is FlowKind.DOMAIN_CHECK
    assert call["trid"] == Trid(client_transaction_id="CheckApiAction")
    assert call["session"] == SessionContext(
        client_id="checkapi-test",
        is_superuser=False,
        is_dry_run=False,
        service_extensions=frozenset({FEE_0_6_URI}),
        source=SessionSource.HTTP,
    )
    assert call["input_xml_bytes"] == payload
    assert call["epp_input"].tag == "{urn:ietf:params:xml:ns:epp-1.0}epp"
    assert call["response_hint"] is None
    assert call["clock"]() == FIXED_NOW


def test_session_context_is_not_shared_between_calls(payload: bytes) -> None:
    runner = FakeFlowRunner(response=available_response())
    bridge = make_bridge(runner)
    bridge.execute(payload)
    bridge.execute(payload)

    first, second = runner.calls[0]["session"], runner.calls[1]["session"]
    assert first == second
    assert first is not second
    assert first.commit_mode.value == "live"


def test_execute_tags_protocol_failure(payload: bytes) -> None:
    runner = FakeFlowRunner(error=EppException("Command is not implemented", code=2101))
    result = make_bridge(runner).execute(payload)

    assert result == CheckFailure(FailureKind.PROTOCOL, "Command is not implemented")


def test_execute_tags_unexpected_failure(payload: bytes) -> None:
    error = ConnectionError("registry unreachable")
    runner = FakeFlowRunner(error=error)
    result = make_bridge(runner).execute(payload)

    assert isinstance(result, CheckFailure)
    assert result.kind is FailureKind.UNEXPECTED
    assert result.message == GENERIC_ERROR_MESSAGE
    assert result.cause is error


def test_execute_unparseable_payload_is_unexpected() -> None:
    runner = FakeFlowRunner(response=available_response())
    result = make_bridge(runner).execute(b"<epp>")

    assert isinstance(result, CheckFailure)
    assert result.kind is FailureKind.UNEXPECTED
    assert runner.calls == []
