"""
Base abstract class for flow runners.
All protocol execution engine adapters must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional
from xml.etree.ElementTree import Element

from .models import Clock, FlowKind, ProtocolResponse, SessionContext, Trid


class EppException(Exception):
    """
    Declared protocol-level failure.

    The message is vetted by the engine as safe to show to a caller.
    """

    def __init__(self, message: str, code: int = 2400):
        super().__init__(message)
        self.code = code


class UnsupportedFlowError(EppException):
    """Raised when a runner is asked for a flow kind it does not serve"""

    def __init__(self, flow_kind: FlowKind):
        super().__init__("Command is not implemented", code=2101)
        self.flow_kind = flow_kind


class BaseFlowRunner(ABC):
    """Abstract base class for protocol execution engine adapters"""

    @abstractmethod
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
        """
        Execute one flow synchronously.

        Args:
            flow_kind: Which operation to run
            epp_input: Parsed <epp> request element
            trid: Transaction id for correlation
            session: Caller context for this call only
            input_xml_bytes: The raw request as rendered
            response_hint: Unused by check flows, kept for engine parity
            clock: Time source for the engine

        Returns:
            Structured protocol response

        Raises:
            EppException: For domain-semantic failures with a caller-safe message
            Exception: Anything else is an engine or transport fault
        """
        pass

    @abstractmethod
    def get_runner_name(self) -> str:
        """
        Return the name of this runner (e.g., "http").

        Returns:
            Runner name string
        """
        pass
