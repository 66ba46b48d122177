"""Value codes embedded in part numbers.

Passive MPNs carry their value as a short code instead of a number with
units: resistors use R/K/M as the decimal point (4R7, 10K0) or EIA digit
codes (1002, 103), capacitors the three-digit picofarad code (104), zener
diodes a V as the decimal point (5V1).
"""

import re


# =============================================================================
# PRE-COMPILED REGEX PATTERNS
# =============================================================================

_RKM_PATTERN = re.compile(r"^(\d*)([RKM])(\d*)$")
_EIA_PATTERN = re.compile(r"^(\d{2,3})(\d)$")
_CAP_RKM_PATTERN = re.compile(r"^(\d*)R(\d*)$")
_VOLTAGE_V_PATTERN = re.compile(r"^(\d+)V(\d*)$")
_VOLTAGE_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)V?$")
_IMPLIED_DECIMAL_PATTERN = re.compile(r"^(\d)(\d{1,2})$")

_RESISTANCE_MULTIPLIERS = {"R": 1.0, "K": 1e3, "M": 1e6}

# Tolerance letters shared by resistor and capacitor ordering codes (percent)
TOLERANCE_CODES: dict[str, float] = {
    "B": 0.1,
    "C": 0.25,
    "D": 0.5,
    "F": 1.0,
    "G": 2.0,
    "J": 5.0,
    "K": 10.0,
    "M": 20.0,
    "Z": 80.0,
}


# =============================================================================
# CODE PARSERS
# =============================================================================
# Each parser returns a float in base units, or None if the code is not understood.


def parse_resistance_code(code: str | None) -> float | None:
    """Parse resistor value code in ohms: '4R7' -> 4.7, '10K0' -> 10000, '1002' -> 10000, '103' -> 10000"""
    if not code:
        return None
    code = code.strip().upper()
    match = _RKM_PATTERN.match(code)
    if match:
        whole, unit, fraction = match.groups()
        if not whole and not fraction:
            return None
        return float(f"{whole or 0}.{fraction or 0}") * _RESISTANCE_MULTIPLIERS[unit]
    match = _EIA_PATTERN.match(code)
    if match:
        return float(match.group(1)) * 10 ** int(match.group(2))
    return None


def parse_capacitance_code(code: str | None) -> float | None:
    """Parse capacitor value code in farads: '104' -> 1e-7, '4R7' -> 4.7e-12, '229' -> 2.2e-12"""
    if not code:
        return None
    code = code.strip().upper()
    match = _CAP_RKM_PATTERN.match(code)
    if match:
        whole, fraction = match.groups()
        if not whole and not fraction:
            return None
        return float(f"{whole or 0}.{fraction or 0}") / 1e12
    if len(code) != 3 or not code.isdigit():
        return None
    significand = int(code[:2])
    exponent = int(code[2])
    # EIA: 8 and 9 are negative multipliers
    if exponent == 9:
        picofarads = significand / 10
    elif exponent == 8:
        picofarads = significand / 100
    else:
        picofarads = significand * 10 ** exponent
    return picofarads / 1e12


def parse_voltage_code(code: str | None, implied_decimal: bool = False) -> float | None:
    """Parse voltage code in volts: '5V1' -> 5.1, '3.3' -> 3.3, '12' -> 12

    With implied_decimal the first digit is the integer part: '33' -> 3.3, '50' -> 5.0
    """
    if not code:
        return None
    code = code.strip().upper()
    match = _VOLTAGE_V_PATTERN.match(code)
    if match:
        whole, fraction = match.groups()
        return float(f"{whole}.{fraction or 0}")
    if implied_decimal:
        match = _IMPLIED_DECIMAL_PATTERN.match(code)
        if match:
            return float(f"{match.group(1)}.{match.group(2)}")
        return None
    match = _VOLTAGE_PATTERN.match(code)
    return float(match.group(1)) if match else None


def parse_tolerance_code(code: str | None) -> float | None:
    """Parse tolerance letter in percent: 'F' -> 1.0, 'J' -> 5.0"""
    if not code:
        return None
    return TOLERANCE_CODES.get(code.strip().upper())
