"""
Protocol execution engine abstraction layer.
Flow runners execute EPP flows and return structured responses.
"""

from .base import BaseFlowRunner, EppException, UnsupportedFlowError
from .http_runner import HttpFlowRunner
from .models import (
    FEE_0_6_URI,
    DomainCheckResult,
    FeeCheckResult,
    FlowKind,
    ProtocolResponse,
    SessionContext,
    SessionSource,
    Trid,
)

__all__ = [
    "BaseFlowRunner",
    "EppException",
    "UnsupportedFlowError",
    "HttpFlowRunner",
    "FEE_0_6_URI",
    "DomainCheckResult",
    "FeeCheckResult",
    "FlowKind",
    "ProtocolResponse",
    "SessionContext",
    "SessionSource",
    "Trid",
]
