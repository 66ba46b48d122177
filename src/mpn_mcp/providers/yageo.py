"""Yageo chip resistors (RC) and MLCCs (CC)."""

import re

from .. import types as t
from .base import ManufacturerProvider

_SIZES = r'(?:0201|0402|0603|0805|1206|1210|2010|2512)'
_RESISTORS = (rf'^RC{_SIZES}[A-Z]{{2}}-?[0-9A-Z]+$',)
_CAPACITORS = (rf'^CC{_SIZES}[A-Z]{{2}}[A-Z0-9]{{3}}[A-Z0-9]*$',)

_SERIES = re.compile(r'^(RC|CC)(\d{4})')
# RC0603 FR-07 10K L -> RC060310K
_RESISTOR_VALUE = re.compile(r'^RC\d{4}[A-Z]{2}-?\d{2}(\d*[RKM]\d*)')
# CC0603 KR X7R 9 BB 104 -> CC0603X7R9104
_CAPACITOR_VALUE = re.compile(r'^CC\d{4}[A-Z]{2}([A-Z0-9]{3})(\d)B[BN](\d{3}|\dR\d)')


class YageoProvider(ManufacturerProvider):
    provider_id = "yageo"
    name = "Yageo"

    PATTERNS = {
        t.RESISTOR_CHIP_YAGEO: _RESISTORS,
        t.RESISTOR: _RESISTORS,
        t.CAPACITOR_CERAMIC_YAGEO: _CAPACITORS,
        t.CAPACITOR: _CAPACITORS,
    }

    def extract_package_code(self, mpn: str) -> str:
        if not mpn:
            return ""
        match = _SERIES.match(mpn.strip().upper())
        return match.group(2) if match else ""

    def extract_series(self, mpn: str) -> str:
        """Family and case size plus the value fields; tolerance excluded."""
        if not mpn:
            return ""
        upper = mpn.strip().upper()
        match = _SERIES.match(upper)
        if not match:
            return ""
        value = _RESISTOR_VALUE.match(upper) or _CAPACITOR_VALUE.match(upper)
        if value:
            return match.group(0) + "".join(value.groups())
        return match.group(0)
