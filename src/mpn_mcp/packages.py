"""Package code resolution: vendor ordering-code suffixes -> standard package names."""

import re


# Explicit package names that may appear verbatim in an MPN suffix
PACKAGE_NAME_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r'^(SOT-?(?:23|89|223|323|363|523)(?:-\d+)?)$'), 'sot'),
    (re.compile(r'^(SOD-?(?:123|323|523|80))$'), 'sod'),
    (re.compile(r'^(DO-?(?:35|41|201|214)(?:AA|AB|AC)?)$'), 'do'),
    (re.compile(r'^(TO-?(?:92|220|252|263|247)|DPAK|D2PAK)$'), 'to'),
    (re.compile(r'^((?:V|W)?QFN-?\d+|DFN-?\d+)$'), 'qfn'),
    (re.compile(r'^((?:L|T)?QFP-?\d+)$'), 'qfp'),
    (re.compile(r'^((?:P|S)?DIP-?\d*)$'), 'dip'),
    (re.compile(r'^(TSSOP-?\d*|SSOP-?\d*|MSOP-?\d*)$'), 'tssop'),
    (re.compile(r'^(SOIC-?\d*|SOP-?\d*|SO-?\d+)$'), 'sop'),
    (re.compile(r'^(0201|0402|0603|0805|1206|1210|2512)$'), 'imperial'),
]

# Generic ordering codes understood across vendors
PACKAGE_CODES: dict[str, str] = {
    "DIP": "DIP",
    "PDIP": "DIP",
    "SOIC": "SOIC",
    "SO": "SOIC",
    "SOP": "SOIC",
    "TSSOP": "TSSOP",
    "MSOP": "MSOP",
    "QFN": "QFN",
    "DFN": "DFN",
    "LQFP": "LQFP",
    "TQFP": "TQFP",
    "DPAK": "TO-252",
    "D2PAK": "TO-263",
}

# Vendor-specific ordering codes, keyed by provider id
VENDOR_PACKAGE_CODES: dict[str, dict[str, str]] = {
    "ti": {
        "N": "DIP", "P": "DIP",
        "D": "SOIC", "DR": "SOIC", "M": "SOIC",
        "PW": "TSSOP", "PWR": "TSSOP",
        "DGK": "MSOP", "DGKR": "MSOP",
        "DBV": "SOT-23", "DBVR": "SOT-23",
        "DCY": "SOT-223", "DCYR": "SOT-223",
        "KCS": "TO-220", "KCT": "TO-220", "T": "TO-220",
        "LP": "TO-92", "Z": "TO-92",
    },
    "microchip": {
        "P": "DIP", "PU": "DIP",
        "SN": "SOIC", "SO": "SOIC", "SM": "SOIC",
        "ST": "TSSOP", "MS": "MSOP",
        "OT": "SOT-23", "TT": "SOT-23",
        "ML": "QFN", "MV": "QFN",
        "PT": "TQFP", "AU": "TQFP", "MU": "QFN",
    },
    "st": {
        "CV": "TO-220", "CP": "TO-220FP",
        "DT": "DPAK", "D2T": "D2PAK",
        "ACZ": "TO-92", "ABZ": "TO-92",
        "DT6": "SOIC", "PT": "TSSOP",
    },
    "onsemi": {
        "G": "TO-92", "RLG": "TO-92",
        "CTG": "TO-220", "BDTG": "DPAK",
        "LT1G": "SOT-23", "LT3G": "SOT-23",
        "DR2G": "SOIC",
    },
    "nexperia": {
        "D": "SOIC", "PW": "TSSOP", "BQ": "DHVQFN", "GW": "TSSOP5", "GV": "SOT-753",
    },
}

# Footprint-compatible standard package groups
COMPATIBLE_PACKAGES: list[frozenset[str]] = [
    frozenset({"SOIC", "SOP", "SO"}),
    frozenset({"TSSOP", "MSOP"}),
    frozenset({"DIP", "PDIP"}),
    frozenset({"TO-220", "TO-220FP"}),
    frozenset({"TO-252", "DPAK"}),
    frozenset({"TO-263", "D2PAK"}),
]


def normalize_package_name(code: str) -> str:
    """Uppercase and restore the conventional hyphen (SOT23 -> SOT-23)."""
    name = code.strip().upper()
    name = re.sub(r'^(SOT|SOD|TO|DO)(\d)', r'\1-\2', name)
    return name


def is_known_package(code: str | None, vendor: str | None = None) -> bool:
    if not code:
        return False
    code = code.strip().upper()
    if vendor and code in VENDOR_PACKAGE_CODES.get(vendor, {}):
        return True
    if code in PACKAGE_CODES:
        return True
    return any(pattern.match(code) for pattern, _kind in PACKAGE_NAME_PATTERNS)


def resolve_package(code: str | None, vendor: str | None = None) -> str:
    """Resolve a package suffix to a standard package name.

    Vendor codes win over generic ones. Explicit package names (SOT23, QFN32,
    0603) are normalized and returned. Unknown codes are returned uppercased
    as-is; empty input gives "".
    """
    if not code:
        return ""
    code = code.strip().upper()
    if vendor:
        vendor_codes = VENDOR_PACKAGE_CODES.get(vendor, {})
        if code in vendor_codes:
            return vendor_codes[code]
    if code in PACKAGE_CODES:
        return PACKAGE_CODES[code]
    for pattern, _kind in PACKAGE_NAME_PATTERNS:
        match = pattern.match(code)
        if match:
            return normalize_package_name(match.group(1))
    return code


def packages_compatible(pkg1: str | None, pkg2: str | None, vendor: str | None = None) -> bool:
    """True when both codes resolve to the same or a footprint-compatible package."""
    std1 = resolve_package(pkg1, vendor)
    std2 = resolve_package(pkg2, vendor)
    if not std1 or not std2:
        return False
    if std1 == std2:
        return True
    return any(std1 in group and std2 in group for group in COMPATIBLE_PACKAGES)
