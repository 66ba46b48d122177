"""Bosch Sensortec environmental sensors and accelerometers."""

from .. import types as t
from .base import ManufacturerProvider

_ENVIRONMENTAL = (
    r'^BM[EP]\d{3}[A-Z0-9-]*$',
)
_ACCELEROMETERS = (
    r'^BMA\d{3}[A-Z0-9-]*$',
    r'^BMI\d{3}[A-Z0-9-]*$',
)


class BoschProvider(ManufacturerProvider):
    provider_id = "bosch"
    name = "Bosch Sensortec"

    PATTERNS = {
        t.SENSOR_BOSCH: _ENVIRONMENTAL,
        t.SENSOR: _ENVIRONMENTAL,
        t.ACCELEROMETER_BOSCH: _ACCELEROMETERS,
        t.ACCELEROMETER: _ACCELEROMETERS,
    }

    def extract_package_code(self, mpn: str) -> str:
        # All parts in this catalog ship in LGA
        return "LGA" if mpn else ""
