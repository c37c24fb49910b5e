"""Fixed-point weight model."""

from dataclasses import dataclass
from enum import Enum

from ..errors import InvalidWeightError

# Most digits parse_pounds accepts on either side of the point
MAX_DIGITS = 15


class WeightUnit(str, Enum):
    """Units a weight can be stored in."""

    DECI_POUNDS = "DECI_POUNDS"  # 1775 decipounds == 177.5 lbs


@dataclass(frozen=True, order=True)
class Weight:
    """A weight as an integer number of units.

    All arithmetic assumes both operands share a unit.
    """

    value: int
    unit: WeightUnit = WeightUnit.DECI_POUNDS

    def __str__(self) -> str:
        if self.unit != WeightUnit.DECI_POUNDS:
            return "UNKNOWN_UNIT"
        whole, frac = divmod(self.value, 10)
        if frac == 0:
            return str(whole)
        return f"{whole}.{frac}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON responses."""
        return {"unit": WeightUnit(self.unit).value, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict) -> "Weight":
        """Create from dictionary."""
        return cls(value=int(data["value"]), unit=WeightUnit(data["unit"]))

    def to_db(self) -> str:
        """Encode for storage, e.g. '1775:DECI_POUNDS'."""
        return f"{self.value}:{WeightUnit(self.unit).value}"

    @classmethod
    def from_db(cls, encoded: str) -> "Weight":
        """Decode a stored weight."""
        parts = encoded.split(":")
        if len(parts) != 2:
            raise ValueError(f"malformed weight had {len(parts)} parts")
        try:
            value = int(parts[0])
        except ValueError as e:
            raise ValueError(f"failed to parse weight {parts[0]!r}") from e
        try:
            unit = WeightUnit(parts[1])
        except ValueError as e:
            raise ValueError(f"unknown unit {parts[1]!r}") from e
        return cls(value=value, unit=unit)


def pounds(value: int) -> Weight:
    """Shorthand for a deci-pound weight."""
    return Weight(value=value, unit=WeightUnit.DECI_POUNDS)


def _parse_part(part: str, label: str) -> int:
    if part.startswith("-"):
        raise InvalidWeightError(f"weight can't be negative, was {part[:20]!r}")
    # int() alone would also take '+5', ' 5' and '1_0'
    if not (part.isascii() and part.isdigit()):
        raise InvalidWeightError(f"failed to parse {label} portion {part[:20]!r}")
    if len(part) > MAX_DIGITS:
        raise InvalidWeightError(f"{label} portion is too long ({len(part)} digits)")
    return int(part)


def parse_pounds(text: str) -> Weight:
    """Parse a decimal pounds string like '177.5' into deci-pounds.

    Either the whole or the fractional part may be missing ('150.', '.5'),
    but not both. The fractional part holds at most one digit.
    """
    text = text.strip()
    whole_str, _, frac_str = text.partition(".")
    if not whole_str and not frac_str:
        raise InvalidWeightError(f"no weight given in {text!r}")

    whole = _parse_part(whole_str, "whole") if whole_str else 0
    frac = 0
    if frac_str:
        frac = _parse_part(frac_str, "fractional")
        if len(frac_str) > 1:
            raise InvalidWeightError(
                f"fractional part can only contain one digit, was {frac_str!r}"
            )

    return Weight(value=whole * 10 + frac, unit=WeightUnit.DECI_POUNDS)
