"""
Value types exchanged with the protocol execution engine.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, FrozenSet, List, Optional


# Service extension URIs a session may declare
FEE_0_6_URI = "urn:ietf:params:xml:ns:fee-0.6"

Clock = Callable[[], datetime]


class FlowKind(str, Enum):
    """Closed set of check operations the engine can be asked to run."""
    DOMAIN_CHECK = "domain_check"


class SessionSource(str, Enum):
    HTTP = "http"
    TOOL = "tool"


class CommitMode(str, Enum):
    LIVE = "live"
    DRY_RUN = "dry_run"


@dataclass(frozen=True)
class SessionContext:
    """Per-call, read-only authorization bundle passed to the engine."""
    client_id: str
    is_superuser: bool = False
    is_dry_run: bool = False
    service_extensions: FrozenSet[str] = frozenset({FEE_0_6_URI})
    source: SessionSource = SessionSource.HTTP

    @property
    def commit_mode(self) -> CommitMode:
        return CommitMode.DRY_RUN if self.is_dry_run else CommitMode.LIVE


@dataclass(frozen=True)
class Trid:
    """EPP transaction identifier pair."""
    client_transaction_id: str
    server_transaction_id: Optional[str] = None


@dataclass
class DomainCheckResult:
    """One <domain:cd> entry of a check response."""
    name: str
    available: bool
    reason: Optional[str] = None


@dataclass
class FeeCheckResult:
    """One <fee:cd> entry of a fee-0.6 check response extension."""
    name: str
    fee_class: Optional[str] = None
    currency: Optional[str] = None
    fee: Optional[str] = None


@dataclass
class ProtocolResponse:
    """
    Structured engine response.

    For a single-name check the first result is the domain check and the
    first extension, when present, is its fee check.
    """
    results: List[DomainCheckResult] = field(default_factory=list)
    extensions: List[FeeCheckResult] = field(default_factory=list)
    result_code: int = 1000
    message: Optional[str] = None
    trid: Optional[Trid] = None
