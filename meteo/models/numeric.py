"""Numeric cells: payload numbers that are either integers or reals."""

from dataclasses import dataclass
from typing import Any, TypeAlias

from meteo.errors import ShapeError, TypeMismatch


@dataclass(frozen=True)
class IntegerCell:
    value: int

    def to_integer(self) -> int:
        return self.value

    def to_real(self) -> float:
        return float(self.value)


@dataclass(frozen=True)
class RealCell:
    value: float

    def to_integer(self) -> int:
        # Whole-valued reals are still rejected: timestamps must be exact.
        raise TypeMismatch("Expected integer, found float")

    def to_real(self) -> float:
        return self.value


NumericCell: TypeAlias = IntegerCell | RealCell


def cell_from_json(raw: Any) -> NumericCell:
    """Wrap a decoded JSON scalar, keeping its integer/real encoding."""
    match raw:
        case bool():
            raise TypeMismatch("Expected number, found boolean")
        case int():
            return IntegerCell(raw)
        case float():
            return RealCell(raw)
        case _:
            raise TypeMismatch("Expected number")


def cells_from_json(raw: Any) -> list[NumericCell]:
    """Convert one payload tuple, e.g. ``[timestamp, value]``."""
    if not isinstance(raw, list):
        raise ShapeError("Expected an array of numbers")
    return [cell_from_json(x) for x in raw]
