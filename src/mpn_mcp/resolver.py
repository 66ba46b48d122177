"""Type specificity resolution.

Several providers and types usually claim the same MPN (LM358N is an IC, an
analog IC, an op-amp and a TI op-amp). The resolver scores every candidate and
keeps the most specific one:

    score = 0
          + 100  manufacturer-qualified tag
          -  50  the IC bucket itself
          -  40  the ANALOG_IC / DIGITAL_IC buckets
          +  50  tag (or one of its bases) names a concrete function

The strictly highest score wins; ties keep the first candidate seen while
walking providers in id order and each provider's types in declaration order.
"""

import logging
from dataclasses import dataclass

from . import types as t
from .providers.base import ManufacturerProvider
from .registry import PatternRegistry
from .types import ComponentType, declaration_index, generic_types

logger = logging.getLogger(__name__)

MANUFACTURER_BONUS = 100
IC_PENALTY = -50
IC_BUCKET_PENALTY = -40
FUNCTIONAL_BONUS = 50

FUNCTIONAL_FAMILIES = frozenset({
    t.OPAMP,
    t.VOLTAGE_REGULATOR,
    t.TEMPERATURE_SENSOR,
    t.LED,
    t.MICROCONTROLLER,
    t.TRANSISTOR,
    t.MOSFET,
    t.DIODE,
    t.LOGIC_IC,
    t.MEMORY,
    t.SENSOR,
    t.ACCELEROMETER,
    t.CRYSTAL,
    t.OSCILLATOR,
    t.RESISTOR,
    t.CAPACITOR,
    t.INDUCTOR,
    t.CONNECTOR,
})


def specificity_score(component_type: ComponentType) -> int:
    score = 0
    if component_type.is_manufacturer_qualified:
        score += MANUFACTURER_BONUS
    if component_type is t.IC:
        score += IC_PENALTY
    elif component_type is t.ANALOG_IC or component_type is t.DIGITAL_IC:
        score += IC_BUCKET_PENALTY
    if any(node in FUNCTIONAL_FAMILIES for node in component_type.lineage()):
        score += FUNCTIONAL_BONUS
    return score


@dataclass(frozen=True)
class Candidate:
    component_type: ComponentType
    provider_id: str
    score: int


def _prepare(mpn: str | None) -> str:
    if not isinstance(mpn, str):
        return ""
    return mpn.strip().upper()


class TypeResolver:
    """Collapses provider/type matches for an MPN into one best type.

    Holds only read-only references (registry, providers); every method is a
    pure function of its input and is safe for concurrent callers.
    """

    def __init__(self, registry: PatternRegistry, providers: list[ManufacturerProvider]):
        self.registry = registry
        self.providers = sorted(providers, key=lambda p: p.provider_id)
        self._providers_by_id = {p.provider_id: p for p in self.providers}
        self._type_order = {
            p.provider_id: sorted(p.supported_types(), key=declaration_index) for p in self.providers
        }

    def provider(self, provider_id: str) -> ManufacturerProvider | None:
        return self._providers_by_id.get(provider_id)

    def _provider_matches(self, provider: ManufacturerProvider, mpn: str, component_type: ComponentType) -> bool:
        try:
            return provider.matches(mpn, component_type, self.registry)
        except Exception as e:
            logger.warning(f"Provider {provider.provider_id} failed matching {mpn!r} as {component_type}: {e}")
            return False

    def candidates(self, mpn: str | None) -> list[Candidate]:
        """All (type, provider) pairs that claim this MPN, in iteration order."""
        upper = _prepare(mpn)
        if not upper:
            return []
        found = []
        for provider in self.providers:
            for component_type in self._type_order[provider.provider_id]:
                if self._provider_matches(provider, upper, component_type):
                    found.append(Candidate(component_type, provider.provider_id, specificity_score(component_type)))
        return found

    def best_candidate(self, mpn: str | None) -> Candidate | None:
        best = None
        for candidate in self.candidates(mpn):
            if best is None or candidate.score > best.score:
                best = candidate
        return best

    def generic_match(self, mpn: str | None) -> ComponentType | None:
        """First generic type (declaration order) whose registry patterns match."""
        upper = _prepare(mpn)
        if not upper:
            return None
        for component_type in generic_types():
            if self.registry.matches(upper, component_type):
                return component_type
        return None

    def resolve(self, mpn: str | None) -> ComponentType | None:
        """Most specific type for the MPN, or None when nothing recognizes it."""
        best = self.best_candidate(mpn)
        if best is not None:
            logger.debug(f"Resolved {mpn!r} -> {best.component_type} via {best.provider_id} (score {best.score})")
            return best.component_type
        fallback = self.generic_match(mpn)
        if fallback is not None:
            logger.debug(f"Resolved {mpn!r} -> {fallback} via generic sweep")
        return fallback

    def matching_types(self, mpn: str | None) -> list[ComponentType]:
        """Every distinct type claiming the MPN: provider hits first, then generic registry hits."""
        result: list[ComponentType] = []
        for candidate in self.candidates(mpn):
            if candidate.component_type not in result:
                result.append(candidate.component_type)
        upper = _prepare(mpn)
        if upper:
            for component_type in generic_types():
                if component_type not in result and self.registry.matches(upper, component_type):
                    result.append(component_type)
        return result

    def find_provider(self, mpn: str | None) -> ManufacturerProvider | None:
        best = self.best_candidate(mpn)
        return self._providers_by_id[best.provider_id] if best else None

    def extract_package_code(self, mpn: str | None) -> str:
        provider = self.find_provider(mpn)
        if provider is None:
            return ""
        return provider.extract_package_code(_prepare(mpn))

    def extract_series(self, mpn: str | None) -> str:
        provider = self.find_provider(mpn)
        if provider is None:
            return ""
        return provider.extract_series(_prepare(mpn))

    def is_official_replacement(self, mpn1: str | None, mpn2: str | None) -> bool:
        """True when the same provider owns both parts and declares them interchangeable."""
        provider = self.find_provider(mpn1)
        if provider is None or self.find_provider(mpn2) is not provider:
            return False
        return provider.is_official_replacement(_prepare(mpn1), _prepare(mpn2))
