"""Nexperia (formerly NXP standard products) part numbers."""

import re

from .. import types as t
from .base import ManufacturerProvider

_LOGIC = (
    r'^74(?:HC|HCT|LVC|AHC|AHCT|LV|ALVC|LVC1G|LVC2G)\d{2,4}[A-Z0-9,-]*$',
)
_TRANSISTORS = (
    r'^BC8(?:07|17|4[6-9]|5[0-9])[A-C]?[A-Z0-9,-]*$',
    r'^PMBT\d{4}[A-Z0-9,-]*$',
)
_DIODES = (
    r'^BA[SVT]\d{2,3}[A-Z0-9,-]*$',
    r'^PMEG\d{4}[A-Z0-9,-]*$',
    r'^BZX84[A-Z0-9,-]*$',
)
_MOSFETS = (
    r'^PMV\d{2,3}[A-Z]{2,4}[A-Z0-9,-]*$',
    r'^BSS\d{2,3}[A-Z0-9,-]*$',
    r'^2N7002[A-Z0-9,-]*$',
)

_LOGIC_SERIES = re.compile(r'^(74[A-Z]+(?:\d[A-Z])?\d+)')


class NexperiaProvider(ManufacturerProvider):
    provider_id = "nexperia"
    name = "Nexperia"

    PATTERNS = {
        t.LOGIC_IC_NEXPERIA: _LOGIC,
        t.LOGIC_IC: _LOGIC,
        t.TRANSISTOR_NEXPERIA: _TRANSISTORS,
        t.TRANSISTOR: _TRANSISTORS,
        t.DIODE_NEXPERIA: _DIODES,
        t.DIODE: _DIODES,
        t.MOSFET_NEXPERIA: _MOSFETS,
        t.MOSFET: _MOSFETS,
    }

    def extract_series(self, mpn: str) -> str:
        if not mpn:
            return ""
        match = _LOGIC_SERIES.match(mpn.strip().upper())
        if match:
            return match.group(1)
        return super().extract_series(mpn)
