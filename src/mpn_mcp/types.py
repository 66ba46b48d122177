"""Component type taxonomy.

Types form a forest: every tag optionally points at a more generic base tag
(OPAMP_TI -> OPAMP -> ANALOG_IC -> IC). Manufacturer-qualified tags carry the
vendor explicitly instead of encoding it in the name.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, eq=False)
class ComponentType:
    """A single node in the component taxonomy. Compared by identity."""

    name: str
    base_type: "ComponentType | None" = None
    manufacturer: str | None = None
    passive: bool = False
    semiconductor: bool = False
    is_manufacturer_qualified: bool = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "is_manufacturer_qualified", self.manufacturer is not None)
        seen = {id(self)}
        node = self.base_type
        while node is not None:
            if id(node) in seen:
                raise ValueError(f"Base-type cycle detected at {self.name}")
            seen.add(id(node))
            node = node.base_type

    def __repr__(self) -> str:
        return f"ComponentType({self.name})"

    def __str__(self) -> str:
        return self.name

    def lineage(self) -> tuple["ComponentType", ...]:
        """This tag followed by each base type up to the root."""
        chain = []
        node = self
        while node is not None:
            chain.append(node)
            node = node.base_type
        return tuple(chain)

    @property
    def family(self) -> "ComponentType":
        """Root of this tag's tree (e.g. IC for OPAMP_TI)."""
        return self.lineage()[-1]

    def is_a(self, other: "ComponentType") -> bool:
        return any(node is other for node in self.lineage())

    def same_family(self, other: "ComponentType | None") -> bool:
        return other is not None and self.family is other.family


ALL_TYPES: list[ComponentType] = []
_BY_NAME: dict[str, ComponentType] = {}


def _define(name: str, base: ComponentType | None = None, manufacturer: str | None = None,
            passive: bool | None = None, semiconductor: bool | None = None) -> ComponentType:
    # Physical flags are inherited from the base unless overridden
    if passive is None:
        passive = base.passive if base else False
    if semiconductor is None:
        semiconductor = base.semiconductor if base else False
    tag = ComponentType(name, base, manufacturer, passive, semiconductor)
    ALL_TYPES.append(tag)
    _BY_NAME[name] = tag
    return tag


def get_type(name: str | None) -> ComponentType | None:
    """Look up a tag by name (case-insensitive). Unknown names return None."""
    if not name:
        return None
    return _BY_NAME.get(name.strip().upper())


def generic_types() -> list[ComponentType]:
    """Non manufacturer-qualified tags in declaration order."""
    return [t for t in ALL_TYPES if not t.is_manufacturer_qualified]


def declaration_index(component_type: ComponentType) -> int:
    """Position in ALL_TYPES; tags defined elsewhere sort last."""
    for index, tag in enumerate(ALL_TYPES):
        if tag is component_type:
            return index
    return len(ALL_TYPES)


# =============================================================================
# GENERIC TYPES (declaration order drives the generic fallback sweep)
# =============================================================================

RESISTOR = _define("RESISTOR", passive=True)
CAPACITOR = _define("CAPACITOR", passive=True)
INDUCTOR = _define("INDUCTOR", passive=True)
DIODE = _define("DIODE", semiconductor=True)
TRANSISTOR = _define("TRANSISTOR", semiconductor=True)
MOSFET = _define("MOSFET", semiconductor=True)
LED = _define("LED", semiconductor=True)
IC = _define("IC", semiconductor=True)
ANALOG_IC = _define("ANALOG_IC", IC)
DIGITAL_IC = _define("DIGITAL_IC", IC)
MICROCONTROLLER = _define("MICROCONTROLLER", DIGITAL_IC)
OPAMP = _define("OPAMP", ANALOG_IC)
VOLTAGE_REGULATOR = _define("VOLTAGE_REGULATOR", ANALOG_IC)
LOGIC_IC = _define("LOGIC_IC", DIGITAL_IC)
MEMORY = _define("MEMORY", DIGITAL_IC)
MEMORY_FLASH = _define("MEMORY_FLASH", MEMORY)
MEMORY_EEPROM = _define("MEMORY_EEPROM", MEMORY)
SENSOR = _define("SENSOR", semiconductor=True)
TEMPERATURE_SENSOR = _define("TEMPERATURE_SENSOR", SENSOR)
ACCELEROMETER = _define("ACCELEROMETER", SENSOR)
CRYSTAL = _define("CRYSTAL", passive=True)
OSCILLATOR = _define("OSCILLATOR", semiconductor=True)
CONNECTOR = _define("CONNECTOR")

# =============================================================================
# MANUFACTURER-QUALIFIED TYPES
# =============================================================================

# Resistors
RESISTOR_CHIP_VISHAY = _define("RESISTOR_CHIP_VISHAY", RESISTOR, "Vishay")
RESISTOR_THT_VISHAY = _define("RESISTOR_THT_VISHAY", RESISTOR, "Vishay")
RESISTOR_CHIP_YAGEO = _define("RESISTOR_CHIP_YAGEO", RESISTOR, "Yageo")

# Capacitors
CAPACITOR_CERAMIC_MURATA = _define("CAPACITOR_CERAMIC_MURATA", CAPACITOR, "Murata")
CAPACITOR_CERAMIC_YAGEO = _define("CAPACITOR_CERAMIC_YAGEO", CAPACITOR, "Yageo")

# Inductors
INDUCTOR_CHIP_MURATA = _define("INDUCTOR_CHIP_MURATA", INDUCTOR, "Murata")

# Diodes
DIODE_ONSEMI = _define("DIODE_ONSEMI", DIODE, "onsemi")
DIODE_NEXPERIA = _define("DIODE_NEXPERIA", DIODE, "Nexperia")
DIODE_VISHAY = _define("DIODE_VISHAY", DIODE, "Vishay")

# Transistors
TRANSISTOR_ONSEMI = _define("TRANSISTOR_ONSEMI", TRANSISTOR, "onsemi")
TRANSISTOR_NEXPERIA = _define("TRANSISTOR_NEXPERIA", TRANSISTOR, "Nexperia")

# MOSFETs
MOSFET_INFINEON = _define("MOSFET_INFINEON", MOSFET, "Infineon")
MOSFET_ST = _define("MOSFET_ST", MOSFET, "STMicroelectronics")
MOSFET_VISHAY = _define("MOSFET_VISHAY", MOSFET, "Vishay")
MOSFET_ONSEMI = _define("MOSFET_ONSEMI", MOSFET, "onsemi")
MOSFET_NEXPERIA = _define("MOSFET_NEXPERIA", MOSFET, "Nexperia")

# LEDs
LED_STANDARD_KINGBRIGHT = _define("LED_STANDARD_KINGBRIGHT", LED, "Kingbright")
LED_SMD_KINGBRIGHT = _define("LED_SMD_KINGBRIGHT", LED, "Kingbright")
LED_STANDARD_VISHAY = _define("LED_STANDARD_VISHAY", LED, "Vishay")

# Microcontrollers
MICROCONTROLLER_MICROCHIP = _define("MICROCONTROLLER_MICROCHIP", MICROCONTROLLER, "Microchip")
MICROCONTROLLER_ATMEL = _define("MICROCONTROLLER_ATMEL", MICROCONTROLLER, "Atmel")
MICROCONTROLLER_ST = _define("MICROCONTROLLER_ST", MICROCONTROLLER, "STMicroelectronics")
MICROCONTROLLER_TI = _define("MICROCONTROLLER_TI", MICROCONTROLLER, "Texas Instruments")
MICROCONTROLLER_NXP = _define("MICROCONTROLLER_NXP", MICROCONTROLLER, "NXP")

# Op-amps
OPAMP_TI = _define("OPAMP_TI", OPAMP, "Texas Instruments")
OPAMP_ST = _define("OPAMP_ST", OPAMP, "STMicroelectronics")
OPAMP_MICROCHIP = _define("OPAMP_MICROCHIP", OPAMP, "Microchip")

# Voltage regulators
VOLTAGE_REGULATOR_LINEAR_TI = _define("VOLTAGE_REGULATOR_LINEAR_TI", VOLTAGE_REGULATOR, "Texas Instruments")
VOLTAGE_REGULATOR_SWITCHING_TI = _define("VOLTAGE_REGULATOR_SWITCHING_TI", VOLTAGE_REGULATOR, "Texas Instruments")
VOLTAGE_REGULATOR_LINEAR_ST = _define("VOLTAGE_REGULATOR_LINEAR_ST", VOLTAGE_REGULATOR, "STMicroelectronics")
VOLTAGE_REGULATOR_LINEAR_ON = _define("VOLTAGE_REGULATOR_LINEAR_ON", VOLTAGE_REGULATOR, "onsemi")

# Logic
LOGIC_IC_NEXPERIA = _define("LOGIC_IC_NEXPERIA", LOGIC_IC, "Nexperia")
LOGIC_IC_TI = _define("LOGIC_IC_TI", LOGIC_IC, "Texas Instruments")

# Memory
MEMORY_MICROCHIP = _define("MEMORY_MICROCHIP", MEMORY_EEPROM, "Microchip")
MEMORY_ST = _define("MEMORY_ST", MEMORY_EEPROM, "STMicroelectronics")
MEMORY_FLASH_WINBOND = _define("MEMORY_FLASH_WINBOND", MEMORY_FLASH, "Winbond")

# Sensors
TEMPERATURE_SENSOR_TI = _define("TEMPERATURE_SENSOR_TI", TEMPERATURE_SENSOR, "Texas Instruments")
TEMPERATURE_SENSOR_MICROCHIP = _define("TEMPERATURE_SENSOR_MICROCHIP", TEMPERATURE_SENSOR, "Microchip")
ACCELEROMETER_ST = _define("ACCELEROMETER_ST", ACCELEROMETER, "STMicroelectronics")
ACCELEROMETER_BOSCH = _define("ACCELEROMETER_BOSCH", ACCELEROMETER, "Bosch")
SENSOR_BOSCH = _define("SENSOR_BOSCH", SENSOR, "Bosch")

# Connectors
CONNECTOR_MOLEX = _define("CONNECTOR_MOLEX", CONNECTOR, "Molex")
