"""STMicroelectronics part numbers."""

import re

from .. import types as t
from .base import ManufacturerProvider

_MCUS = (
    r'^STM32[FGLHUWC]\d{3}[A-Z0-9-]*$',
    r'^STM8[SLA]\d{3}[A-Z0-9-]*$',
)
_REGULATORS = (
    r'^L78(?:M|L)?\d{2}[A-Z0-9-]*$',
    r'^L79\d{2}[A-Z0-9-]*$',
    r'^LD(?:1117|1086|39015)[A-Z0-9.-]*$',
)
_OPAMPS = (
    r'^TSV\d{3}[A-Z0-9-]*$',
    r'^LM2904[A-Z0-9-]*$',
)
_EEPROMS = (
    r'^M24C\d{2}[A-Z0-9-]*$',
    r'^M95\d{3}[A-Z0-9-]*$',
)
_ACCELEROMETERS = (
    r'^LIS[23]DH[A-Z0-9-]*$',
    r'^LIS2[A-Z]{2,3}\d*[A-Z0-9-]*$',
    r'^LSM6DS[A-Z0-9-]*$',
)
_MOSFETS = (
    r'^ST[PDB]\d{1,3}N[A-Z]?\d{1,3}[A-Z0-9-]*$',
)

_MCU_SERIES = re.compile(r'^(STM(?:32|8)[A-Z]\d{3})')
# STM32 ordering code: STM32F103C8T6 -> pin count C, flash 8, package T (LQFP)
_MCU_PACKAGE = re.compile(r'^STM32[A-Z]\d{3}[A-Z][0-9A-Z]([A-Z])\d')
_MCU_PACKAGES = {"T": "LQFP", "U": "QFN", "H": "BGA", "Y": "WLCSP", "P": "TSSOP"}


class STProvider(ManufacturerProvider):
    provider_id = "st"
    name = "STMicroelectronics"

    PATTERNS = {
        t.MICROCONTROLLER_ST: _MCUS,
        t.MICROCONTROLLER: _MCUS,
        t.VOLTAGE_REGULATOR_LINEAR_ST: _REGULATORS,
        t.VOLTAGE_REGULATOR: _REGULATORS,
        t.OPAMP_ST: _OPAMPS,
        t.OPAMP: _OPAMPS,
        t.MEMORY_ST: _EEPROMS,
        t.MEMORY_EEPROM: _EEPROMS,
        t.ACCELEROMETER_ST: _ACCELEROMETERS,
        t.ACCELEROMETER: _ACCELEROMETERS,
        t.MOSFET_ST: _MOSFETS,
        t.MOSFET: _MOSFETS,
    }

    def extract_series(self, mpn: str) -> str:
        if not mpn:
            return ""
        match = _MCU_SERIES.match(mpn.strip().upper())
        if match:
            return match.group(1)
        return super().extract_series(mpn)

    def extract_package_code(self, mpn: str) -> str:
        if not mpn:
            return ""
        match = _MCU_PACKAGE.match(mpn.strip().upper())
        if match:
            return _MCU_PACKAGES.get(match.group(1), "")
        return super().extract_package_code(mpn)
