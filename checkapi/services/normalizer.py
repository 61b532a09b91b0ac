"""
Validation and canonicalization of the domain name supplied to /check.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

import idna

from .errors import CheckFailure
from .zones import ZoneRegistry

MAX_DOMAIN_LENGTH = 253
_LDH_LABEL = re.compile(r"^(?!-)[a-z0-9-]{1,63}(?<!-)$")


@dataclass(frozen=True)
class NormalizedDomain:
    name: str
    zone: str


def canonicalize_domain_name(raw: str) -> str:
    """
    Lower-case and IDNA-encode a domain name.

    Raises:
        ValueError: If the name is empty or not a valid host name
    """
    name = raw.strip()
    if name.endswith("."):
        name = name[:-1]
    if not name:
        raise ValueError("Empty domain name")

    try:
        ascii_name = idna.encode(name, uts46=True, std3_rules=True).decode("ascii")
    except (idna.IDNAError, UnicodeError) as e:
        raise ValueError(f"Invalid domain name: {e}") from e

    if len(ascii_name) > MAX_DOMAIN_LENGTH:
        raise ValueError("Domain name too long")
    labels = ascii_name.split(".")
    if len(labels) < 2 or not all(_LDH_LABEL.match(label) for label in labels):
        raise ValueError("Domain name is not a valid host name")
    return ascii_name


class DomainNormalizer:
    """Turns raw input into a NormalizedDomain on a managed zone."""

    def __init__(self, zones: ZoneRegistry):
        self.zones = zones

    def normalize(self, raw: Optional[str]) -> Union[NormalizedDomain, CheckFailure]:
        # Malformed and unmanaged names share one message so the zone list
        # cannot be probed through this endpoint.
        try:
            name = canonicalize_domain_name(raw or "")
        except ValueError:
            return CheckFailure.validation()

        zone = self.zones.resolve(name)
        if zone is None:
            return CheckFailure.validation()
        return NormalizedDomain(name=name, zone=zone)
