"""Molex board connectors."""

import re

from .. import types as t
from .base import ManufacturerProvider

_CONNECTORS = (
    r'^(?:00)?(?:22|39|43|53|87)-?\d{2,4}-?\d{4}$',
    r'^50[0-5]\d{3}-?\d{4}$',
)

_SERIES = re.compile(r'^(?:00)?(\d{2}-?\d{2,3}|50[0-5]\d{3})')


class MolexProvider(ManufacturerProvider):
    provider_id = "molex"
    name = "Molex"

    PATTERNS = {
        t.CONNECTOR_MOLEX: _CONNECTORS,
        t.CONNECTOR: _CONNECTORS,
    }

    def extract_series(self, mpn: str) -> str:
        if not mpn:
            return ""
        match = _SERIES.match(mpn.strip().upper())
        return match.group(1).replace("-", "") if match else ""

    def extract_package_code(self, mpn: str) -> str:
        return ""
