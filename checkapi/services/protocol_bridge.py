"""
Bridge between the check endpoint and the protocol execution engine.
"""

import time
import xml.etree.ElementTree as ET
from typing import Union

from ..flows.base import BaseFlowRunner, EppException
from ..flows.models import (
    FEE_0_6_URI,
    Clock,
    FlowKind,
    ProtocolResponse,
    SessionContext,
    SessionSource,
    Trid,
)
from ..logger import log_debug, log_info
from .clock import now_utc
from .errors import CheckFailure


class ProtocolBridge:
    """
    Runs a rendered check request through the flow runner.

    Holds only read-only collaborators; session context and transaction id
    are built per call.
    """

    def __init__(
        self,
        runner: BaseFlowRunner,
        client_id: str,
        trid_label: str,
        clock: Clock = now_utc,
    ):
        self.runner = runner
        self.client_id = client_id
        self.trid_label = trid_label
        self.clock = clock

    def session_context(self) -> SessionContext:
        return SessionContext(
            client_id=self.client_id,
            is_superuser=False,
            is_dry_run=False,
            service_extensions=frozenset({FEE_0_6_URI}),
            source=SessionSource.HTTP,
        )

    def transaction_id(self) -> Trid:
        # Fixed per deployment; concurrent identical calls share it.
        return Trid(client_transaction_id=self.trid_label)

    def execute(self, payload: bytes) -> Union[ProtocolResponse, CheckFailure]:
        """
        Execute the domain check flow for a rendered request.

        Args:
            payload: EPP request bytes from the RequestBuilder

        Returns:
            The engine's response, or a PROTOCOL / UNEXPECTED failure
        """
        trid = self.transaction_id()
        session = self.session_context()
        start_time = time.time()

        try:
            epp_input = ET.fromstring(payload)
            response = self.runner.run(
                FlowKind.DOMAIN_CHECK,
                epp_input,
                trid,
                session,
                payload,
                None,
                self.clock,
            )
        except EppException as e:
            log_info(
                "Check flow returned a protocol error",
                trid=trid.client_transaction_id,
                flow=FlowKind.DOMAIN_CHECK.value,
                action="flow_protocol_error",
                error_type=type(e).__name__,
            )
            return CheckFailure.protocol(str(e))
        except Exception as e:
            return CheckFailure.unexpected(e)

        log_debug(
            "Check flow completed",
            trid=trid.client_transaction_id,
            flow=FlowKind.DOMAIN_CHECK.value,
            action="flow_completed",
            runner=self.runner.get_runner_name(),
            duration_ms=int((time.time() - start_time) * 1000),
        )
        return response
