"""Vishay part numbers: chip and through-hole resistors, diodes, MOSFETs, LEDs."""

import re

from .. import types as t
from .base import ManufacturerProvider

_CHIP_RESISTORS = (r'^CRCW(?:0201|0402|0603|0805|1206|1210|2010|2512)[0-9A-Z]+$',)
_THT_RESISTORS = (r'^(?:CMF|RN)(?:55|60|65)[0-9A-Z]+$',)
_DIODES = (
    r'^1N4148[A-Z0-9-]*$',
    r'^1N47[2-6]\dA?[A-Z0-9-]*$',
    r'^BZX55C\d+[A-Z0-9-]*$',
    r'^SS[1-3]\d[A-Z0-9-]*$',
)
_MOSFETS = (
    r'^SI\d{4}[A-Z]{2,3}[A-Z0-9-]*$',
    r'^SUD\d{2}N\d{2}[A-Z0-9-]*$',
)
_LEDS = (
    r'^TLH[A-Z]\d{4}[A-Z0-9-]*$',
    r'^VLM[A-Z]\d{4}[A-Z0-9-]*$',
)

_CHIP_SIZE = re.compile(r'^CRCW(\d{4})')
# Size plus resistance code: CRCW060310K0FKEA -> CRCW060310K0
_CHIP_SERIES = re.compile(r'^(CRCW\d{4}(?:\d*[RKM]\d*|\d{3,4}))')


class VishayProvider(ManufacturerProvider):
    provider_id = "vishay"
    name = "Vishay Intertechnology"

    PATTERNS = {
        t.RESISTOR_CHIP_VISHAY: _CHIP_RESISTORS,
        t.RESISTOR_THT_VISHAY: _THT_RESISTORS,
        t.RESISTOR: _CHIP_RESISTORS + _THT_RESISTORS,
        t.DIODE_VISHAY: _DIODES,
        t.DIODE: _DIODES,
        t.MOSFET_VISHAY: _MOSFETS,
        t.MOSFET: _MOSFETS,
        t.LED_STANDARD_VISHAY: _LEDS,
        t.LED: _LEDS,
    }

    def extract_package_code(self, mpn: str) -> str:
        if not mpn:
            return ""
        match = _CHIP_SIZE.match(mpn.strip().upper())
        if match:
            return match.group(1)
        return super().extract_package_code(mpn)

    def extract_series(self, mpn: str) -> str:
        if not mpn:
            return ""
        match = _CHIP_SERIES.match(mpn.strip().upper())
        if match:
            return match.group(1)
        return super().extract_series(mpn)
