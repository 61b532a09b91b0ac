"""
Registry of zones (TLDs) this deployment is authoritative for.
"""

from typing import Iterable, Optional


class ZoneRegistry:
    """Read-only set of managed zones, shared across requests."""

    def __init__(self, zones: Iterable[str]):
        self._zones = frozenset(z.strip().lower().rstrip(".") for z in zones if z.strip())

    @property
    def zones(self) -> frozenset:
        return self._zones

    def resolve(self, domain_name: str) -> Optional[str]:
        """
        Find the managed zone owning a canonical domain name.

        The longest matching suffix wins, and the name itself never counts
        as its own zone, so "example" alone does not resolve.

        Returns:
            The zone, or None if no managed zone owns the name
        """
        labels = domain_name.split(".")
        for i in range(1, len(labels)):
            suffix = ".".join(labels[i:])
            if suffix in self._zones:
                return suffix
        return None


_registry: Optional[ZoneRegistry] = None


def get_zone_registry() -> ZoneRegistry:
    """Return the process-wide registry built from MANAGED_TLDS."""
    global _registry
    if _registry is None:
        from ..config import MANAGED_TLDS
        _registry = ZoneRegistry(MANAGED_TLDS)
    return _registry
