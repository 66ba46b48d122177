"""Texas Instruments part numbers."""

import re

from .. import types as t
from .base import ManufacturerProvider

_OPAMPS = (
    r'^LM(?:358|324|741|2902|2904|6132)[A-Z0-9-]*$',
    r'^TL0[78][1-4][A-Z0-9-]*$',
    r'^NE5532[A-Z0-9-]*$',
    r'^OPA\d{3,4}[A-Z0-9-]*$',
)
_LINEAR_REGULATORS = (
    r'^(?:LM|UA)78(?:M|L)?\d{2}[A-Z0-9-]*$',
    r'^LM79\d{2}[A-Z0-9-]*$',
    r'^LM3[13]7[A-Z0-9-]*$',
    r'^(?:LM|TLV)1117[A-Z0-9.-]*$',
    r'^TLV7\d{4}[A-Z0-9-]*$',
)
_SWITCHING_REGULATORS = (
    r'^TPS5\d{3,5}[A-Z0-9.-]*$',
    r'^LM25(?:76|96)[A-Z0-9.-]*$',
)
_LOGIC = (
    r'^SN74(?:LS|ALS|HC|HCT|AHC|AC|ACT|LVC|F)?\d{2,4}[A-Z0-9-]*$',
    r'^CD4\d{3}[A-Z0-9-]*$',
)
_TEMPERATURE_SENSORS = (
    r'^LM35(?:[A-Z]{1,3})?$',
    r'^LM75[A-Z0-9-]*$',
    r'^TMP\d{2,3}[A-Z0-9-]*$',
)
_MCUS = (r'^MSP430[A-Z0-9-]+$',)

_LOGIC_SERIES = re.compile(r'^(SN74[A-Z]*\d+|CD4\d{3})')


class TIProvider(ManufacturerProvider):
    provider_id = "ti"
    name = "Texas Instruments"

    PATTERNS = {
        t.OPAMP_TI: _OPAMPS,
        t.OPAMP: _OPAMPS,
        t.VOLTAGE_REGULATOR_LINEAR_TI: _LINEAR_REGULATORS,
        t.VOLTAGE_REGULATOR_SWITCHING_TI: _SWITCHING_REGULATORS,
        t.VOLTAGE_REGULATOR: _LINEAR_REGULATORS + _SWITCHING_REGULATORS,
        t.LOGIC_IC_TI: _LOGIC,
        t.LOGIC_IC: _LOGIC,
        t.TEMPERATURE_SENSOR_TI: _TEMPERATURE_SENSORS,
        t.TEMPERATURE_SENSOR: _TEMPERATURE_SENSORS,
        t.MICROCONTROLLER_TI: _MCUS,
        t.MICROCONTROLLER: _MCUS,
        # Catch-all buckets, outranked by any functional tag above
        t.ANALOG_IC: (r'^(?:LM|TL|OPA|NE|UA|TLV)\d',),
        t.IC: (r'^(?:LM|TL|SN|TPS|OPA|TMP|MSP|UA|NE|CD|TLV)\d',),
    }

    def extract_series(self, mpn: str) -> str:
        if not mpn:
            return ""
        match = _LOGIC_SERIES.match(mpn.strip().upper())
        if match:
            return match.group(1)
        return super().extract_series(mpn)
