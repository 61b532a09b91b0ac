"""
Flow runner that forwards EPP requests to a registry's EPP-over-HTTP tool
endpoint and parses the XML response.
"""

import xml.etree.ElementTree as ET
from typing import Any, List, Optional
from xml.etree.ElementTree import Element

import httpx

from .base import BaseFlowRunner, EppException, UnsupportedFlowError
from .models import (
    FEE_0_6_URI,
    Clock,
    DomainCheckResult,
    FeeCheckResult,
    FlowKind,
    ProtocolResponse,
    SessionContext,
    Trid,
)

EPP_NS = "urn:ietf:params:xml:ns:epp-1.0"
DOMAIN_NS = "urn:ietf:params:xml:ns:domain-1.0"

NS = {
    "epp": EPP_NS,
    "domain": DOMAIN_NS,
    "fee": FEE_0_6_URI,
}

# EPP result codes 2xxx are command failures
FIRST_ERROR_CODE = 2000


def _parse_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true")


def parse_check_response(xml_bytes: bytes) -> ProtocolResponse:
    """
    Parse an EPP <response> to a domain check into a ProtocolResponse.

    Raises:
        EppException: If the result code signals a command failure
        ET.ParseError: If the body is not XML
        ValueError: If the body is not an EPP response
    """
    root = ET.fromstring(xml_bytes)
    response = root.find("epp:response", NS)
    if response is None:
        raise ValueError("Not an EPP response document")

    result = response.find("epp:result", NS)
    if result is None:
        raise ValueError("EPP response has no <result>")

    code = int(result.attrib.get("code", "0"))
    message = result.findtext("epp:msg", default="", namespaces=NS).strip()
    if code >= FIRST_ERROR_CODE:
        raise EppException(message or "Command failed", code=code)

    results: List[DomainCheckResult] = []
    for cd in response.iterfind("epp:resData/domain:chkData/domain:cd", NS):
        name = cd.find("domain:name", NS)
        if name is None:
            continue
        reason = cd.findtext("domain:reason", namespaces=NS)
        results.append(DomainCheckResult(
            name=(name.text or "").strip(),
            available=_parse_bool(name.attrib.get("avail")),
            reason=reason.strip() if reason is not None else None,
        ))

    extensions: List[FeeCheckResult] = []
    for cd in response.iterfind("epp:extension/fee:chkData/fee:cd", NS):
        fee_class = cd.findtext("fee:class", namespaces=NS)
        extensions.append(FeeCheckResult(
            name=cd.findtext("fee:name", default="", namespaces=NS).strip(),
            fee_class=fee_class.strip() if fee_class else None,
            currency=cd.findtext("fee:currency", namespaces=NS),
            fee=cd.findtext("fee:fee", namespaces=NS),
        ))

    trid = None
    trid_el = response.find("epp:trID", NS)
    if trid_el is not None:
        trid = Trid(
            client_transaction_id=trid_el.findtext("epp:clTRID", default="", namespaces=NS),
            server_transaction_id=trid_el.findtext("epp:svTRID", namespaces=NS),
        )

    return ProtocolResponse(
        results=results,
        extensions=extensions,
        result_code=code,
        message=message or None,
        trid=trid,
    )


class HttpFlowRunner(BaseFlowRunner):
    """Runs check flows against a remote EPP-over-HTTP endpoint"""

    SUPPORTED_FLOWS = frozenset({FlowKind.DOMAIN_CHECK})

    def __init__(
        self,
        endpoint_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[int] = None,
        client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the HTTP flow runner.

        Args:
            endpoint_url: EPP tool endpoint (reads from config if not provided)
            token: Optional bearer token for the endpoint
            timeout: Transport timeout in seconds
            client: Pre-built httpx client, mainly for tests
        """
        from ..config import EPP_ENDPOINT_URL, EPP_ENDPOINT_TOKEN, EPP_TIMEOUT

        self.endpoint_url = endpoint_url or EPP_ENDPOINT_URL
        self.token = token if token is not None else EPP_ENDPOINT_TOKEN
        self.timeout = timeout or EPP_TIMEOUT

        if not self.endpoint_url:
            raise ValueError("EPP_ENDPOINT_URL not set in environment or config")

        self.client = client or httpx.Client(timeout=float(self.timeout))

    def run(
        self,
        flow_kind: FlowKind,
        epp_input: Element,
        trid: Trid,
        session: SessionContext,
        input_xml_bytes: bytes,
        response_hint: Optional[Any],
        clock: Clock,
    ) -> ProtocolResponse:
        if flow_kind not in self.SUPPORTED_FLOWS:
            raise UnsupportedFlowError(flow_kind)
        if epp_input.find("epp:command/epp:check", NS) is None:
            raise EppException("Command is not implemented", code=2101)

        headers = {"X-Client-Trid": trid.client_transaction_id}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        response = self.client.post(
            self.endpoint_url,
            data={
                "clientId": session.client_id,
                "superuser": str(session.is_superuser).lower(),
                "dryRun": str(session.is_dry_run).lower(),
                "xml": input_xml_bytes.decode("utf-8"),
            },
            headers=headers,
        )
        response.raise_for_status()

        return parse_check_response(response.content)

    def close(self):
        self.client.close()

    def get_runner_name(self) -> str:
        """Return runner name"""
        return "http"
