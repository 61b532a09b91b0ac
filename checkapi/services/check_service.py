"""
Domain check service.

Chains normalization, request rendering, the protocol bridge and response
translation. Every path ends in an envelope; nothing raises to the caller.
"""

from typing import Optional

from ..flows.base import BaseFlowRunner
from ..logger import log_info
from ..models import OutputEnvelope
from .errors import CheckFailure, classify
from .normalizer import DomainNormalizer
from .protocol_bridge import ProtocolBridge
from .request_builder import RequestBuilder
from .templates import TemplateRenderer, get_template_renderer
from .translator import translate
from .zones import ZoneRegistry, get_zone_registry


class CheckService:
    """Answers availability checks for a single domain name."""

    def __init__(
        self,
        normalizer: DomainNormalizer,
        builder: RequestBuilder,
        bridge: ProtocolBridge,
    ):
        self.normalizer = normalizer
        self.builder = builder
        self.bridge = bridge

    def check(self, raw_domain: Optional[str]) -> OutputEnvelope:
        """
        Check availability of one domain.

        Args:
            raw_domain: Domain as received from the client (may be None)

        Returns:
            One of AvailableEnvelope, UnavailableEnvelope or ErrorEnvelope
        """
        domain = self.normalizer.normalize(raw_domain)
        if isinstance(domain, CheckFailure):
            log_info("Rejected domain check input", action="check_invalid_domain")
            return classify(domain)

        context = {
            "trid": self.bridge.trid_label,
            "zone": domain.zone,
        }

        try:
            payload = self.builder.build(domain)
        except Exception as e:
            return classify(CheckFailure.unexpected(e), **context)

        response = self.bridge.execute(payload)
        if isinstance(response, CheckFailure):
            return classify(response, **context)

        try:
            envelope = translate(response)
        except Exception as e:
            return classify(CheckFailure.unexpected(e), **context)

        log_info(
            "Domain check completed",
            action="check_completed",
            available=getattr(envelope, "available", None),
            **context,
        )
        return envelope


def build_check_service(
    runner: BaseFlowRunner,
    zones: Optional[ZoneRegistry] = None,
    renderer: Optional[TemplateRenderer] = None,
    client_id: Optional[str] = None,
    trid_label: Optional[str] = None,
) -> CheckService:
    """
    Wire a CheckService from config defaults.

    Args:
        runner: Flow runner to execute checks with
        zones: Managed zones (default: MANAGED_TLDS)
        renderer: Template renderer (default: process-wide renderer)
        client_id: Session caller identity (default: CHECK_API_CLIENT_ID)
        trid_label: Client transaction id (default: CHECK_API_TRID_LABEL)
    """
    from ..config import CHECK_API_CLIENT_ID, CHECK_API_TRID_LABEL

    return CheckService(
        normalizer=DomainNormalizer(zones or get_zone_registry()),
        builder=RequestBuilder(renderer or get_template_renderer()),
        bridge=ProtocolBridge(
            runner=runner,
            client_id=client_id or CHECK_API_CLIENT_ID,
            trid_label=trid_label or CHECK_API_TRID_LABEL,
        ),
    )
