"""
Shared fixtures: a scriptable flow runner and a wired CheckService.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List, Optional

import pytest

from checkapi.flows.base import BaseFlowRunner
from checkapi.flows.models import (
    DomainCheckResult,
    FeeCheckResult,
    ProtocolResponse,
)
from checkapi.services.check_service import CheckService, build_check_service
from checkapi.services.templates import get_template_renderer
from checkapi.services.zones import ZoneRegistry

FIXED_NOW = datetime(2016, 6, 1, tzinfo=timezone.utc)


class FakeFlowRunner(BaseFlowRunner):
    """Returns a canned response (or raises a canned error) and records calls."""

    def __init__(self, response: Optional[ProtocolResponse] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[dict] = []

    def run(self, flow_kind, epp_input, trid, session, input_xml_bytes, response_hint, clock):
        self.calls.append({
            "flow_kind": flow_kind,
            "epp_input": epp_input,
            "trid": trid,
            "session": session,
            "input_xml_bytes": input_xml_bytes,
            "response_hint": response_hint,
            "clock": clock,
        })
        if self.error is not None:
            raise self.error
        return self.response

    def get_runner_name(self) -> str:
        return "fake"


def available_response(name: str = "newname.example", fee_class: Optional[str] = None) -> ProtocolResponse:
    return ProtocolResponse(
        results=[DomainCheckResult(name=name, available=True)],
        extensions=[FeeCheckResult(name=name, fee_class=fee_class)],
    )


def unavailable_response(name: str = "taken.example", reason: Any = "In use") -> ProtocolResponse:
    return ProtocolResponse(results=[DomainCheckResult(name=name, available=False, reason=reason)])


@pytest.fixture
def zones() -> ZoneRegistry:
    return ZoneRegistry(["example", "tld", "co.example"])


@pytest.fixture
def runner() -> FakeFlowRunner:
    return FakeFlowRunner(response=available_response())


@pytest.fixture
def service(runner: FakeFlowRunner, zones: ZoneRegistry) -> CheckService:
    svc = build_check_service(
        runner,
        zones=zones,
        renderer=get_template_renderer(),
        client_id="checkapi-test",
        trid_label="CheckApiAction",
    )
    svc.bridge.clock = lambda: FIXED_NOW
    return svc
