"""Per-type specification metadata and similarity profiles.

Metadata says which specs matter for a component type, how much (importance)
and how two values are compared (tolerance rule). A similarity profile then
scales importance for a use case: a design-phase match is strict, emergency
sourcing accepts almost any functional equivalent.

Effective spec weight = importance base weight x profile multiplier.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from .. import types as t
from ..types import ComponentType
from .tolerance import (
    ToleranceRule,
    compatible_set,
    exact_match,
    maximum_allowed,
    minimum_required,
    percentage_tolerance,
    range_tolerance,
)

logger = logging.getLogger(__name__)


class SpecImportance(Enum):
    CRITICAL = 1.0
    HIGH = 0.7
    MEDIUM = 0.4
    LOW = 0.2
    OPTIONAL = 0.1

    @property
    def base_weight(self) -> float:
        return self.value


class SimilarityProfile(Enum):
    """Use-case profiles: (description, importance multipliers, minimum score)."""

    DESIGN_PHASE = (
        "Exact specification match required",
        {"CRITICAL": 1.0, "HIGH": 0.9, "MEDIUM": 0.7, "LOW": 0.4, "OPTIONAL": 0.0},
        0.85,
    )
    REPLACEMENT = (
        "Drop-in replacement - form/fit/function compatible",
        {"CRITICAL": 1.0, "HIGH": 0.7, "MEDIUM": 0.4, "LOW": 0.2, "OPTIONAL": 0.0},
        0.75,
    )
    COST_OPTIMIZATION = (
        "Accept downgrade if cheaper, maintain critical specs",
        {"CRITICAL": 1.0, "HIGH": 0.4, "MEDIUM": 0.2, "LOW": 0.0, "OPTIONAL": 0.0},
        0.60,
    )
    PERFORMANCE_UPGRADE = (
        "Accept better specs, prioritize performance",
        {"CRITICAL": 1.0, "HIGH": 0.8, "MEDIUM": 0.5, "LOW": 0.2, "OPTIONAL": 0.0},
        0.70,
    )
    EMERGENCY_SOURCING = (
        "Any functional equivalent acceptable",
        {"CRITICAL": 0.8, "HIGH": 0.4, "MEDIUM": 0.2, "LOW": 0.0, "OPTIONAL": 0.0},
        0.50,
    )

    def __init__(self, description: str, multipliers: dict[str, float], minimum_score: float):
        self.description = description
        self._multipliers = multipliers
        self.minimum_score = minimum_score

    def multiplier(self, importance: SpecImportance) -> float:
        return self._multipliers.get(importance.name, 0.0)

    def effective_weight(self, importance: SpecImportance) -> float:
        return importance.base_weight * self.multiplier(importance)

    def meets_threshold(self, score: float) -> bool:
        return score >= self.minimum_score


def get_profile(name: str | None) -> SimilarityProfile | None:
    """Profile by (case-insensitive) name; None for unknown names."""
    if not name:
        return None
    try:
        return SimilarityProfile[name.strip().upper()]
    except KeyError:
        return None


@dataclass(frozen=True)
class SpecConfig:
    importance: SpecImportance
    rule: ToleranceRule


@dataclass(frozen=True)
class ComponentTypeMetadata:
    component_type: ComponentType
    specs: dict[str, SpecConfig] = field(default_factory=dict)
    default_profile: SimilarityProfile = SimilarityProfile.REPLACEMENT

    def spec(self, name: str) -> SpecConfig | None:
        return self.specs.get(name)

    def spec_names(self) -> list[str]:
        return list(self.specs)

    def is_critical(self, name: str) -> bool:
        config = self.specs.get(name)
        return config is not None and config.importance is SpecImportance.CRITICAL

    def critical_specs(self) -> list[str]:
        return [name for name in self.specs if self.is_critical(name)]


def _metadata(component_type: ComponentType, *specs: tuple[str, SpecImportance, ToleranceRule],
              profile: SimilarityProfile = SimilarityProfile.REPLACEMENT) -> ComponentTypeMetadata:
    return ComponentTypeMetadata(
        component_type,
        {name: SpecConfig(importance, rule) for name, importance, rule in specs},
        profile,
    )


CRITICAL = SpecImportance.CRITICAL
HIGH = SpecImportance.HIGH
MEDIUM = SpecImportance.MEDIUM
LOW = SpecImportance.LOW

BUILTIN_METADATA: tuple[ComponentTypeMetadata, ...] = (
    _metadata(
        t.RESISTOR,
        ("resistance", CRITICAL, percentage_tolerance(1.0)),
        ("tolerance", CRITICAL, exact_match()),
        ("package", HIGH, exact_match()),
        ("powerRating", MEDIUM, minimum_required()),
        ("temperatureCoefficient", LOW, percentage_tolerance(20.0)),
        ("composition", LOW, exact_match()),
    ),
    _metadata(
        t.CAPACITOR,
        ("capacitance", CRITICAL, percentage_tolerance(5.0)),
        ("voltage", CRITICAL, minimum_required()),
        ("dielectric", CRITICAL, compatible_set({"X7R", "X5R"}, {"C0G", "NP0"})),
        ("package", HIGH, exact_match()),
        ("tolerance", MEDIUM, exact_match()),
        ("temperatureCharacteristic", MEDIUM, exact_match()),
        ("esr", LOW, maximum_allowed(1.5)),
    ),
    _metadata(
        t.MOSFET,
        ("voltageRating", CRITICAL, minimum_required()),
        ("currentRating", CRITICAL, minimum_required()),
        ("channel", CRITICAL, exact_match()),
        ("rdsOn", HIGH, maximum_allowed(1.2)),
        ("package", MEDIUM, exact_match()),
        ("gateCharge", LOW, percentage_tolerance(30.0)),
        ("threshold", LOW, range_tolerance(0.8, 1.2)),
    ),
    _metadata(
        t.TRANSISTOR,
        ("polarity", CRITICAL, exact_match()),
        ("voltageRating", CRITICAL, minimum_required()),
        ("currentRating", CRITICAL, minimum_required()),
        ("package", HIGH, exact_match()),
        ("hfe", MEDIUM, range_tolerance(0.7, 1.5)),
        ("powerRating", MEDIUM, minimum_required()),
    ),
    _metadata(
        t.DIODE,
        ("type", CRITICAL, exact_match()),
        ("voltageRating", CRITICAL, minimum_required()),
        ("currentRating", CRITICAL, minimum_required()),
        ("package", HIGH, exact_match()),
        ("forwardVoltage", MEDIUM, maximum_allowed(1.2)),
        ("reverseRecovery", LOW, maximum_allowed(1.5)),
    ),
    _metadata(
        t.OPAMP,
        ("configuration", CRITICAL, exact_match()),
        ("inputType", HIGH, exact_match()),
        ("package", HIGH, exact_match()),
        ("gbw", MEDIUM, minimum_required()),
        ("slewRate", MEDIUM, minimum_required()),
        ("inputOffset", LOW, maximum_allowed(1.5)),
    ),
    _metadata(
        t.MICROCONTROLLER,
        ("family", CRITICAL, exact_match()),
        ("series", HIGH, exact_match()),
        ("flashSize", HIGH, minimum_required()),
        ("ramSize", HIGH, minimum_required()),
        ("ioCount", MEDIUM, minimum_required()),
        ("package", MEDIUM, exact_match()),
        ("frequency", LOW, minimum_required()),
    ),
    _metadata(
        t.MEMORY,
        ("type", CRITICAL, exact_match()),
        ("capacity", CRITICAL, minimum_required()),
        ("interface", CRITICAL, exact_match()),
        ("voltage", HIGH, exact_match()),
        ("package", MEDIUM, exact_match()),
        ("speed", LOW, minimum_required()),
    ),
    _metadata(
        t.LED,
        ("color", CRITICAL, exact_match()),
        ("package", HIGH, exact_match()),
        ("brightness", MEDIUM, minimum_required()),
        ("forwardVoltage", MEDIUM, range_tolerance(0.9, 1.1)),
        ("viewingAngle", LOW, minimum_required()),
        ("wavelength", LOW, percentage_tolerance(5.0)),
    ),
    _metadata(
        t.CONNECTOR,
        ("pinCount", CRITICAL, exact_match()),
        ("pitch", CRITICAL, exact_match()),
        ("gender", CRITICAL, exact_match()),
        ("mountingType", HIGH, exact_match()),
        ("currentRating", MEDIUM, minimum_required()),
        ("voltageRating", MEDIUM, minimum_required()),
    ),
    _metadata(
        t.VOLTAGE_REGULATOR,
        ("regulatorType", CRITICAL, exact_match()),
        ("outputVoltage", CRITICAL, exact_match()),
        ("polarity", CRITICAL, exact_match()),
        ("currentRating", HIGH, minimum_required()),
        ("package", MEDIUM, exact_match()),
    ),
    _metadata(
        t.SENSOR,
        ("sensorType", CRITICAL, exact_match()),
        ("family", HIGH, exact_match()),
        ("interface", HIGH, exact_match()),
        ("accuracy", MEDIUM, maximum_allowed(1.5)),
        ("package", MEDIUM, exact_match()),
    ),
)


class MetadataRegistry:
    """Component type -> metadata, with lookup through the type's base chain."""

    def __init__(self, metadata: tuple[ComponentTypeMetadata, ...] = BUILTIN_METADATA):
        self._by_type: dict[ComponentType, ComponentTypeMetadata] = {}
        for entry in metadata:
            self.register(entry)

    def register(self, metadata: ComponentTypeMetadata) -> None:
        if metadata.component_type in self._by_type:
            logger.debug(f"Replacing metadata for {metadata.component_type}")
        self._by_type[metadata.component_type] = metadata

    def get(self, component_type: ComponentType | None) -> ComponentTypeMetadata | None:
        """Metadata for the type or its nearest base that has some."""
        if component_type is None:
            return None
        for node in component_type.lineage():
            metadata = self._by_type.get(node)
            if metadata is not None:
                return metadata
        return None

    def registered_types(self) -> list[ComponentType]:
        return list(self._by_type)


_registry: MetadataRegistry | None = None


def get_metadata_registry() -> MetadataRegistry:
    """Shared registry of the built-in metadata."""
    global _registry
    if _registry is None:
        _registry = MetadataRegistry()
    return _registry
