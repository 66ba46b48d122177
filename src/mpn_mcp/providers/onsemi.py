"""onsemi (including Fairchild) part numbers."""

from .. import types as t
from .base import ManufacturerProvider

_TRANSISTORS = (
    r'^2N(?:2222|2907|3904|3906|4401|4403|5551)A?[A-Z0-9-]*$',
    r'^MMBT\d{4}[A-Z0-9-]*$',
    r'^BC(?:5[45][6-9]|3[23][78])[A-C]?[A-Z0-9-]*$',
)
_DIODES = (
    r'^1N4(?:00[1-7]|148|448)[A-Z0-9-]*$',
    r'^1N58(?:1[7-9])[A-Z0-9-]*$',
    r'^MBR[SA]?\d{3,5}[A-Z0-9-]*$',
)
_REGULATORS = (
    r'^MC78(?:M|L)?\d{2}[A-Z0-9-]*$',
    r'^MC79\d{2}[A-Z0-9-]*$',
    r'^NCP1117[A-Z0-9-]*$',
)
_MOSFETS = (
    r'^NTR\d{4}[A-Z0-9-]*$',
    r'^FQP\d+N\d+[A-Z0-9-]*$',
    r'^FDS\d{4}[A-Z0-9-]*$',
    r'^2N7002[A-Z0-9-]*$',
)


class OnsemiProvider(ManufacturerProvider):
    provider_id = "onsemi"
    name = "onsemi"

    PATTERNS = {
        t.TRANSISTOR_ONSEMI: _TRANSISTORS,
        t.TRANSISTOR: _TRANSISTORS,
        t.DIODE_ONSEMI: _DIODES,
        t.DIODE: _DIODES,
        t.VOLTAGE_REGULATOR_LINEAR_ON: _REGULATORS,
        t.VOLTAGE_REGULATOR: _REGULATORS,
        t.MOSFET_ONSEMI: _MOSFETS,
        t.MOSFET: _MOSFETS,
    }
