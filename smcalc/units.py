"""Physical unit conversion: speed, temperature and mass.

Each unit maps to and from the base unit of its family, so any two units of
the same family convert through the base.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List

from smcalc.errors import (
    ConversionSyntaxError,
    IncompatibleUnits,
    InvalidConversionValue,
    UnsupportedUnit,
)
from smcalc.formatting import format_number

logger = logging.getLogger(__name__)

KMH_PER_MS = 3600.0 / 1000.0
KELVIN_OFFSET = 273.15
RANKINE_OFFSET = 459.67
LB_PER_KG = 2.20462

CONVERT_KEYWORDS = {"convert", "conv"}
TARGET_KEYWORDS = {"to"}
# accepted by the short form only
SHORT_TARGET_KEYWORDS = {"in", "в"}


@dataclass(frozen=True)
class Unit:
    name: str
    family: str
    to_base: Callable[[float], float]
    from_base: Callable[[float], float]


class UnitRegistry:
    def __init__(self):
        self._units: Dict[str, Unit] = {}

    def add(
        self,
        family: str,
        name: str,
        to_base: Callable[[float], float] = lambda x: x,
        from_base: Callable[[float], float] = lambda x: x,
    ) -> Unit:
        unit = Unit(name, family, to_base, from_base)
        self._units[name.lower()] = unit
        return unit

    def get(self, name: str) -> Unit:
        return self._units[name.lower()]

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._units

    def families(self) -> List[str]:
        return sorted({u.family for u in self._units.values()})

    def units_in(self, family: str) -> List[str]:
        return [u.name for u in self._units.values() if u.family == family]

    def convert(self, value: float, unit_from: str, unit_to: str) -> float:
        if unit_from not in self:
            raise UnsupportedUnit(unit_from, "source")
        if unit_to not in self:
            raise UnsupportedUnit(unit_to, "target")
        src, dst = self.get(unit_from), self.get(unit_to)
        if src.family != dst.family:
            raise IncompatibleUnits(unit_from, unit_to)
        base = src.to_base(value)
        logger.debug(f"{value} {src.name} -> {base} (base {src.family}) -> {dst.name}")
        return dst.from_base(base)


def default_registry() -> UnitRegistry:
    reg = UnitRegistry()

    # speed, base m/s
    reg.add("speed", "m/s")
    reg.add("speed", "km/h", lambda v: v / KMH_PER_MS, lambda v: v * KMH_PER_MS)

    # temperature, base kelvin
    reg.add("temperature", "K")
    reg.add(
        "temperature",
        "C",
        lambda v: v + KELVIN_OFFSET,
        lambda v: v - KELVIN_OFFSET,
    )
    reg.add(
        "temperature",
        "F",
        lambda v: (v + RANKINE_OFFSET) / 1.8,
        lambda v: v * 1.8 - RANKINE_OFFSET,
    )

    # mass, base kg
    reg.add("mass", "kg")
    reg.add("mass", "lb", lambda v: v / LB_PER_KG, lambda v: v * LB_PER_KG)
    return reg


REGISTRY = default_registry()


def convert(value: float, unit_from: str, unit_to: str) -> float:
    return REGISTRY.convert(value, unit_from, unit_to)


@dataclass(frozen=True)
class ConversionRequest:
    value: float
    unit_from: str
    unit_to: str


def is_conversion_command(line: str) -> bool:
    words = line.split(maxsplit=1)
    return bool(words) and words[0].lower() in CONVERT_KEYWORDS


def parse_conversion_command(line: str) -> ConversionRequest:
    """Parse ``CONVERT <value> <unit> TO <unit>``.

    The short form ``conv`` also accepts ``in`` (or ``в``) in place of ``TO``.
    """
    words = line.split()
    if not words or words[0].lower() not in CONVERT_KEYWORDS:
        raise ConversionSyntaxError("Not a conversion command. Use: CONVERT [value] [unit_1] TO [unit_2]")
    if len(words) < 5:
        raise ConversionSyntaxError(
            "Insufficient arguments for conversion. Expected: CONVERT [value] [unit_1] TO [unit_2]"
        )

    command, value_text, unit_from, keyword, unit_to = words[:5]
    allowed = set(TARGET_KEYWORDS)
    if command.lower() == "conv":
        allowed |= SHORT_TARGET_KEYWORDS
    if keyword.lower() not in allowed:
        raise ConversionSyntaxError(
            "Expected keyword 'TO'. Use: CONVERT [value] [unit_1] TO [unit_2]"
        )

    try:
        value = float(value_text)
    except ValueError:
        raise InvalidConversionValue(value_text) from None
    if not math.isfinite(value):
        raise InvalidConversionValue(value_text)
    return ConversionRequest(value, unit_from, unit_to)


def run_conversion_command(line: str) -> str:
    request = parse_conversion_command(line)
    result = convert(request.value, request.unit_from, request.unit_to)
    return f"{format_number(result)} {request.unit_to}"
