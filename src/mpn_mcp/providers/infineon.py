"""Infineon (including International Rectifier) power MOSFETs."""

from .. import types as t
from .base import ManufacturerProvider

_MOSFETS = (
    r'^IRF[BLPRSZ]?\d{3,4}[A-Z0-9-]*$',
    r'^IRL[BRSZ]?\d{3,4}[A-Z0-9-]*$',
    r'^IRLML\d{4}[A-Z0-9-]*$',
    r'^BSC\d{3}N\d{2}[A-Z0-9-]*$',
    r'^IP[BDP]\d{3}N\d{2}[A-Z0-9-]*$',
)


class InfineonProvider(ManufacturerProvider):
    provider_id = "infineon"
    name = "Infineon Technologies"

    PATTERNS = {
        t.MOSFET_INFINEON: _MOSFETS,
        t.MOSFET: _MOSFETS,
    }
