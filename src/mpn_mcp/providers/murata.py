"""Murata ceramic capacitors and chip inductors."""

import re

from .. import types as t
from .base import ManufacturerProvider

_CAPACITORS = (
    r'^GRM\d{2}[0-9A-Z]+$',
    r'^GCM\d{2}[0-9A-Z]+$',
    r'^GRT\d{2}[0-9A-Z]+$',
)
_INDUCTORS = (r'^LQ[GHMW]\d{2}[0-9A-Z]+$',)

# Second and third characters of the dimension code: GRM188 -> 18 -> 0603
_SIZE_CODES = {
    "03": "0201",
    "15": "0402",
    "18": "0603",
    "21": "0805",
    "31": "1206",
    "32": "1210",
}
_DIMENSION = re.compile(r'^(?:GRM|GCM|GRT|LQ[GHMW])(\d{2})([0-9A-Z])')
# Through the value code: GRM188 R7 1H 104, LQG15 HS 10N
_CAPACITOR_VALUE = re.compile(r'^(?:GRM|GCM|GRT)\d{2}[0-9A-Z][0-9A-Z]{2}[0-9A-Z]{2}(?:\d{3}|\dR\d|R\d{2})')
_INDUCTOR_VALUE = re.compile(r'^LQ[GHMW]\d{2}[A-Z]{2}\d*[NRU]\d*')


class MurataProvider(ManufacturerProvider):
    provider_id = "murata"
    name = "Murata Manufacturing"

    PATTERNS = {
        t.CAPACITOR_CERAMIC_MURATA: _CAPACITORS,
        t.CAPACITOR: _CAPACITORS,
        t.INDUCTOR_CHIP_MURATA: _INDUCTORS,
        t.INDUCTOR: _INDUCTORS,
    }

    def extract_package_code(self, mpn: str) -> str:
        if not mpn:
            return ""
        match = _DIMENSION.match(mpn.strip().upper())
        if not match:
            return ""
        return _SIZE_CODES.get(match.group(1), "")

    def extract_series(self, mpn: str) -> str:
        """Series, dimension and value codes (GRM188R71H104KA93D -> GRM188R71H104).

        Codes without a readable value keep the dimension prefix (GRM188).
        """
        if not mpn:
            return ""
        upper = mpn.strip().upper()
        match = _CAPACITOR_VALUE.match(upper) or _INDUCTOR_VALUE.match(upper)
        if match:
            return match.group(0)
        match = _DIMENSION.match(upper)
        return upper[:match.end()] if match else ""
