"""Winbond serial NOR flash."""

import re

from .. import types as t
from .base import ManufacturerProvider

_FLASH = (
    r'^W25Q\d{2,3}[A-Z]{1,2}[A-Z0-9-]*$',
    r'^W25X\d{2}[A-Z0-9-]*$',
)

# W25Q128JVSIQ: S = SOIC-8 208mil, U = USON, Z = WSON, E = WSON 8x6
_PACKAGE = re.compile(r'^W25[QX]\d+[A-Z]{0,2}([SUZEF])[A-Z]?[IJ]')
_PACKAGES = {"S": "SOIC", "U": "USON", "Z": "WSON", "E": "WSON", "F": "SOIC-16"}


class WinbondProvider(ManufacturerProvider):
    provider_id = "winbond"
    name = "Winbond Electronics"

    PATTERNS = {
        t.MEMORY_FLASH_WINBOND: _FLASH,
        t.MEMORY_FLASH: _FLASH,
    }

    def extract_package_code(self, mpn: str) -> str:
        if not mpn:
            return ""
        match = _PACKAGE.match(mpn.strip().upper())
        return _PACKAGES[match.group(1)] if match else ""
