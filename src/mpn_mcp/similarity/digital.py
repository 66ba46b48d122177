"""Logic, memory and microcontroller comparators."""

import logging
import re
from typing import Any, NamedTuple

from .. import types as t
from .base import (
    HIGH_SIMILARITY,
    LOW_SIMILARITY,
    MEDIUM_SIMILARITY,
    ComparisonContext,
    SimilarityComparator,
)

logger = logging.getLogger(__name__)


# =============================================================================
# LOGIC
# =============================================================================

# SN74HC00N -> HC, 00; 74LVC1G08GW -> LVC, 1G, 08
_SERIES_74 = re.compile(r"^(?:SN)?74([A-Z]*?)(\d+G)?(\d{2,4})")
# CD4017BE -> 4017
_SERIES_4000 = re.compile(r"^(?:CD|HEF)(4\d{3})")

CMOS_4000 = "CD4000"

# Families sharing TTL-compatible levels and pinouts; "" is plain 74xx TTL
COMPATIBLE_TECHNOLOGIES = frozenset({"", "LS", "ALS", "F", "HC", "HCT"})

# Different input count of the same gate: related but not pin compatible
FUNCTION_GROUP_SIMILARITY = 0.5

LOGIC_FUNCTION_GROUPS: dict[str, frozenset[str]] = {
    "NAND": frozenset({"00", "10", "20", "30", "40"}),
    "NOR": frozenset({"02", "27"}),
    "NOT": frozenset({"04", "05", "14"}),
    "AND": frozenset({"08", "11", "21"}),
    "OR": frozenset({"32"}),
    "XOR": frozenset({"86", "136"}),
    "FLIP_FLOP": frozenset({"73", "74", "75", "76", "77", "78"}),
    "MUX": frozenset({"151", "153", "157", "158"}),
    "DECODER": frozenset({"138", "139", "154", "155"}),
    "SHIFT_REGISTER": frozenset({"164", "165", "595"}),
}


class LogicPart(NamedTuple):
    technology: str
    gates: str
    function: str


def logic_part(mpn: str) -> LogicPart | None:
    """Technology, single-gate width and function number: 'SN74HC00N' -> ('HC', '', '00')"""
    match = _SERIES_4000.match(mpn)
    if match:
        return LogicPart(CMOS_4000, "", match.group(1))
    match = _SERIES_74.match(mpn)
    if match:
        technology, gates, function = match.groups()
        return LogicPart(technology, gates or "", function)
    return None


def function_group(function: str) -> str | None:
    for group, numbers in LOGIC_FUNCTION_GROUPS.items():
        if function in numbers:
            return group
    return None


class LogicICComparator(SimilarityComparator):
    """74-series and CD4000 logic.

    Same function in a compatible technology (LS/HC/HCT) scores HIGH, in
    another technology MEDIUM. Single-gate parts (1G/2G) never match the
    multi-gate packages.
    """

    name = "logic"
    families = (t.LOGIC_IC,)

    def _compare(self, mpn1: str, mpn2: str, context: ComparisonContext) -> float:
        part1 = logic_part(mpn1)
        part2 = logic_part(mpn2)
        if part1 is None or part2 is None:
            return self._series_fallback(mpn1, mpn2, context)
        logger.debug(f"Logic parts: {part1} vs {part2}")
        if part1.gates != part2.gates:
            return LOW_SIMILARITY
        if part1.function == part2.function:
            if part1.technology == part2.technology:
                return HIGH_SIMILARITY
            if part1.technology in COMPATIBLE_TECHNOLOGIES and part2.technology in COMPATIBLE_TECHNOLOGIES:
                return HIGH_SIMILARITY
            return MEDIUM_SIMILARITY
        group = function_group(part1.function)
        if group is not None and group == function_group(part2.function):
            return FUNCTION_GROUP_SIMILARITY
        return LOW_SIMILARITY


# =============================================================================
# MEMORY
# =============================================================================

EEPROM = "EEPROM"
FLASH = "FLASH"
I2C = "I2C"
SPI = "SPI"

# 24LC256, AT24C02, M24C64
_I2C_EEPROM = re.compile(r"^(?:24(LC|AA|FC)|AT24C|M24C)(\d+)")
# 25LC640, M95256
_SPI_EEPROM = re.compile(r"^(?:25(?:LC|AA)|M95)(\d+)")
# W25Q64JVSSIQ, W25X40CL
_SPI_FLASH = re.compile(r"^W25[QX](\d+)")

# Microchip voltage grades
_EEPROM_VOLTAGES = {"LC": "2.5-5.5V", "AA": "1.7-5.5V", "FC": "1.7-5.5V"}
# Bus clock in kHz
_EEPROM_SPEEDS = {"LC": 400, "AA": 400, "FC": 1000}


def _spi_eeprom_kbit(code: str) -> int:
    """SPI EEPROM size code in Kbit: '640' -> 64, '080' -> 8, '256' -> 256"""
    if len(code) == 3 and code.endswith("0"):
        return int(code) // 10
    return int(code)


def memory_specs(mpn: str) -> dict[str, Any]:
    """Decode a serial memory part: 24LC256 -> 256 Kbit I2C EEPROM, W25Q64 -> 64 Mbit SPI flash."""
    match = _I2C_EEPROM.match(mpn)
    if match:
        grade, size = match.groups()
        return {
            "type": EEPROM,
            "capacity": int(size),
            "interface": I2C,
            "voltage": _EEPROM_VOLTAGES.get(grade),
            "speed": _EEPROM_SPEEDS.get(grade, 400),
        }
    match = _SPI_EEPROM.match(mpn)
    if match:
        return {"type": EEPROM, "capacity": _spi_eeprom_kbit(match.group(1)), "interface": SPI}
    match = _SPI_FLASH.match(mpn)
    if match:
        return {"type": FLASH, "capacity": int(match.group(1)) * 1024, "interface": SPI}
    return {}


class MemoryComparator(SimilarityComparator):
    """Memory type and bus must agree; capacity must be at least the original's."""

    name = "memory"
    families = (t.MEMORY,)

    def _compare(self, mpn1: str, mpn2: str, context: ComparisonContext) -> float:
        specs1 = memory_specs(mpn1)
        specs2 = memory_specs(mpn2)
        logger.debug(f"Memory specs: {specs1} vs {specs2}")
        if not specs1 or not specs2:
            return self._series_fallback(mpn1, mpn2, context)
        if specs1["type"] != specs2["type"] or specs1["interface"] != specs2["interface"]:
            return LOW_SIMILARITY
        specs1["package"] = context.package(mpn1) or None
        specs2["package"] = context.package(mpn2) or None
        score = self._spec_score(t.MEMORY, context, specs1, specs2)
        return LOW_SIMILARITY if score is None else score


# =============================================================================
# MICROCONTROLLERS
# =============================================================================

# STM32F103C8T6: series F103, pins C, flash 8
_STM32 = re.compile(r"^(STM32[A-Z]\d{3})([A-Z])([0-9A-Z])")
# STM8S103F3P6: series S103, pins F, flash 3
_STM8 = re.compile(r"^(STM8[SLA]\d{3})([A-Z])(\d)")
_AVR = re.compile(r"^(AT(?:MEGA|TINY)\d+(?:U\d)?)")
_PIC = re.compile(r"^(PIC(10|12|16|18|24|32)[A-Z]{1,2}\d+)")
_MSP430 = re.compile(r"^(MSP430[A-Z]+\d+)")
_SAM = re.compile(r"^(ATSAM[A-Z0-9]+?\d{2})")

# Flash size letters in KB
STM32_FLASH_CODES: dict[str, int] = {
    "4": 16, "6": 32, "8": 64, "B": 128, "C": 256, "D": 384,
    "E": 512, "F": 768, "G": 1024, "H": 1536, "I": 2048,
}
STM8_FLASH_CODES: dict[str, int] = {"2": 4, "3": 8, "4": 16, "6": 32, "8": 64}
# Pin count letters
STM_PIN_CODES: dict[str, int] = {
    "F": 20, "G": 28, "K": 32, "T": 36, "C": 48, "R": 64, "V": 100, "Z": 144, "I": 176,
}


class AvrSpecs(NamedTuple):
    flash: int
    ram: float
    io: int


# flash KB, RAM KB, I/O pins
AVR_PARTS: dict[str, AvrSpecs] = {
    "ATMEGA8": AvrSpecs(8, 1, 23),
    "ATMEGA16": AvrSpecs(16, 1, 32),
    "ATMEGA32": AvrSpecs(32, 2, 32),
    "ATMEGA32U4": AvrSpecs(32, 2.5, 26),
    "ATMEGA48": AvrSpecs(4, 0.5, 23),
    "ATMEGA88": AvrSpecs(8, 1, 23),
    "ATMEGA168": AvrSpecs(16, 1, 23),
    "ATMEGA328": AvrSpecs(32, 2, 23),
    "ATMEGA644": AvrSpecs(64, 4, 32),
    "ATMEGA1284": AvrSpecs(128, 16, 32),
    "ATMEGA2560": AvrSpecs(256, 8, 86),
    "ATTINY13": AvrSpecs(1, 0.0625, 6),
    "ATTINY25": AvrSpecs(2, 0.125, 6),
    "ATTINY45": AvrSpecs(4, 0.25, 6),
    "ATTINY85": AvrSpecs(8, 0.5, 6),
    "ATTINY44": AvrSpecs(4, 0.25, 12),
    "ATTINY84": AvrSpecs(8, 0.5, 12),
}


def mcu_specs(mpn: str) -> dict[str, Any]:
    """Decode family, series and memory: STM32F103C8T6 -> STM32, STM32F103, 64 KB flash, 48 pins."""
    match = _STM32.match(mpn)
    if match:
        series, pins, flash = match.groups()
        return {
            "family": "STM32",
            "series": series,
            "flashSize": STM32_FLASH_CODES.get(flash),
            "ioCount": STM_PIN_CODES.get(pins),
        }
    match = _STM8.match(mpn)
    if match:
        series, pins, flash = match.groups()
        return {
            "family": "STM8",
            "series": series,
            "flashSize": STM8_FLASH_CODES.get(flash),
            "ioCount": STM_PIN_CODES.get(pins),
        }
    match = _SAM.match(mpn)
    if match:
        return {"family": "SAM", "series": match.group(1)}
    match = _AVR.match(mpn)
    if match:
        series = match.group(1)
        specs: dict[str, Any] = {"family": "AVR", "series": series}
        avr = AVR_PARTS.get(series)
        if avr is not None:
            specs.update(flashSize=avr.flash, ramSize=avr.ram, ioCount=avr.io)
        return specs
    match = _PIC.match(mpn)
    if match:
        return {"family": f"PIC{match.group(2)}", "series": match.group(1)}
    match = _MSP430.match(mpn)
    if match:
        return {"family": "MSP430", "series": match.group(1)}
    return {}


class MicrocontrollerComparator(SimilarityComparator):
    """MCUs from different architectures are never interchangeable (0.0).

    Within a family the decoded series, memory sizes and pin count are
    weighed; a candidate with less flash or RAM than the original loses
    those specs entirely.
    """

    name = "microcontroller"
    families = (t.MICROCONTROLLER,)

    def _compare(self, mpn1: str, mpn2: str, context: ComparisonContext) -> float:
        specs1 = mcu_specs(mpn1)
        specs2 = mcu_specs(mpn2)
        logger.debug(f"MCU specs: {specs1} vs {specs2}")
        if not specs1 or not specs2:
            return self._series_fallback(mpn1, mpn2, context)
        if specs1["family"] != specs2["family"]:
            return 0.0
        specs1["package"] = context.package(mpn1) or None
        specs2["package"] = context.package(mpn2) or None
        score = self._spec_score(t.MICROCONTROLLER, context, specs1, specs2)
        return LOW_SIMILARITY if score is None else score
