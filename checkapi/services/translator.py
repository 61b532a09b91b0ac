from ..flows.models import ProtocolResponse
from ..models import AvailableEnvelope, OutputEnvelope, UnavailableEnvelope

DEFAULT_TIER = "standard"


def translate(response: ProtocolResponse) -> OutputEnvelope:
    """
    Turn a domain check response into a success envelope.

    Reads the first check result and, for available names, the first fee
    extension. A check call carries exactly one name, so positional access
    is the contract with the engine; batching would break it.

    Raises:
        IndexError: If the engine returned no check result
        ValueError: If an unavailable result carries no reason
    """
    check = response.results[0]

    if check.available:
        fee_class = response.extensions[0].fee_class if response.extensions else None
        return AvailableEnvelope(tier=fee_class if fee_class is not None else DEFAULT_TIER)

    # Reason is registry-authored, never the caller's input
    if check.reason is None:
        raise ValueError("Unavailable check result has no reason")
    return UnavailableEnvelope(reason=check.reason)
