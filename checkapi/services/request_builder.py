from .normalizer import NormalizedDomain
from .templates import TemplateKey, TemplateRenderer


class RequestBuilder:
    """Renders the EPP domain check (with fee-0.6 extension) for one name."""

    def __init__(self, renderer: TemplateRenderer):
        self.renderer = renderer

    def build(self, domain: NormalizedDomain) -> bytes:
        # Renderer faults are not validation failures; let them propagate.
        return self.renderer.render(TemplateKey.DOMAIN_CHECK_FEE, {"domainName": domain.name})
