"""Kingbright indicator LEDs."""

from .. import types as t
from .base import ManufacturerProvider

_THROUGH_HOLE = (
    r'^L-\d{1,4}[A-Z]{1,5}[A-Z0-9-]*$',
    r'^WP\d{3,4}[A-Z]{1,5}[A-Z0-9-]*$',
)
_SMD = (
    r'^KP-?\d{4}[A-Z]{1,6}[A-Z0-9-]*$',
    r'^APT?D?\d{4}[A-Z]{1,6}[A-Z0-9-]*$',
)


class KingbrightProvider(ManufacturerProvider):
    provider_id = "kingbright"
    name = "Kingbright"

    PATTERNS = {
        t.LED_STANDARD_KINGBRIGHT: _THROUGH_HOLE,
        t.LED_SMD_KINGBRIGHT: _SMD,
        t.LED: _THROUGH_HOLE + _SMD,
    }

    def extract_package_code(self, mpn: str) -> str:
        if not mpn:
            return ""
        upper = mpn.strip().upper()
        if upper.startswith(("KP", "AP")):
            return "SMD"
        if upper.startswith(("L-", "WP")):
            return "THT"
        return ""
