from dataclasses import dataclass
from enum import Enum

from brick.lib.expression import Expression


class Unit(str, Enum):
    ML = "mL"
    G = "g"
    TSP = "tsp"
    CELSIUS = "°C"
    OZ = "oz"
    INCH = "inch"
    BLANK = "blank"

    @property
    def label(self) -> str:
        return self.value


def format_number(value: int | float) -> str:
    # 2.0 -> "2", 0.75 -> "0.75"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Amount(Expression):
    value: int | float
    unit: Unit

    def produce_content(self) -> str:
        if self.unit is Unit.BLANK:
            return format_number(self.value)
        return f"{format_number(self.value)} {self.unit.label}"


def amount(value: int | float, unit: Unit) -> Amount:
    return Amount(value, unit)
