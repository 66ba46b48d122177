"""Manufacturer capability providers."""

from .base import ManufacturerProvider
from .bosch import BoschProvider
from .infineon import InfineonProvider
from .kingbright import KingbrightProvider
from .microchip import MicrochipProvider
from .molex import MolexProvider
from .murata import MurataProvider
from .nexperia import NexperiaProvider
from .onsemi import OnsemiProvider
from .st import STProvider
from .ti import TIProvider
from .vishay import VishayProvider
from .winbond import WinbondProvider
from .yageo import YageoProvider

__all__ = [
    "ManufacturerProvider",
    "PROVIDER_CLASSES",
    "all_providers",
]

PROVIDER_CLASSES: tuple[type[ManufacturerProvider], ...] = (
    BoschProvider,
    InfineonProvider,
    KingbrightProvider,
    MicrochipProvider,
    MolexProvider,
    MurataProvider,
    NexperiaProvider,
    OnsemiProvider,
    STProvider,
    TIProvider,
    VishayProvider,
    WinbondProvider,
    YageoProvider,
)


def all_providers() -> list[ManufacturerProvider]:
    """Fresh provider instances, sorted by provider id."""
    return sorted((cls() for cls in PROVIDER_CLASSES), key=lambda p: p.provider_id)
