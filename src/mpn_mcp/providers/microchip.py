"""Microchip part numbers, including the Atmel AVR and SAM lines."""

import re

from .. import types as t
from ..packages import is_known_package, resolve_package
from .base import ManufacturerProvider

_PIC = (r'^PIC(?:10|12|16|18|24|32)[A-Z]{1,2}\d+[A-Z0-9/-]*$',)
_AVR = (
    r'^ATMEGA\d+[A-Z0-9/-]*$',
    r'^ATTINY\d+[A-Z0-9/-]*$',
    r'^ATSAM[A-Z0-9/-]+$',
)
_EEPROMS = (
    r'^24(?:LC|AA|FC)\d+[A-Z0-9/-]*$',
    r'^25(?:LC|AA)\d+[A-Z0-9/-]*$',
    r'^AT24C\d+[A-Z0-9/-]*$',
)
_OPAMPS = (r'^MCP6\d{3}[A-Z0-9/-]*$',)
_TEMPERATURE_SENSORS = (
    r'^MCP9\d{3}[A-Z0-9/-]*$',
    r'^TC74[A-Z0-9/-]*$',
)

_PIC_SERIES = re.compile(r'^(PIC\d+[A-Z]+\d+)')
# Family plus density: 24LC256-I/SN -> 24LC256, AT24C02D -> AT24C02
_EEPROM_SERIES = re.compile(r'^((?:24|25)(?:LC|AA|FC)\d+|AT24C\d+)')


class MicrochipProvider(ManufacturerProvider):
    provider_id = "microchip"
    name = "Microchip Technology"

    PATTERNS = {
        t.MICROCONTROLLER_MICROCHIP: _PIC,
        t.MICROCONTROLLER_ATMEL: _AVR,
        t.MICROCONTROLLER: _PIC + _AVR,
        t.MEMORY_MICROCHIP: _EEPROMS,
        t.MEMORY_EEPROM: _EEPROMS,
        t.OPAMP_MICROCHIP: _OPAMPS,
        t.OPAMP: _OPAMPS,
        t.TEMPERATURE_SENSOR_MICROCHIP: _TEMPERATURE_SENSORS,
        t.TEMPERATURE_SENSOR: _TEMPERATURE_SENSORS,
    }

    def extract_series(self, mpn: str) -> str:
        if not mpn:
            return ""
        upper = mpn.strip().upper()
        match = _PIC_SERIES.match(upper) or _EEPROM_SERIES.match(upper)
        if match:
            return match.group(1)
        return super().extract_series(mpn)

    def extract_package_code(self, mpn: str) -> str:
        # Temperature grade and package share the tail: MCP6002-I/SN
        if mpn and "/" in mpn:
            package = mpn.strip().upper().rpartition("/")[2]
            if is_known_package(package, self.provider_id):
                return resolve_package(package, self.provider_id)
            return ""
        return super().extract_package_code(mpn)
