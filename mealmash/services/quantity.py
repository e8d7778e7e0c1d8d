"""Parsing and combining free-text quantities.

Quantities are stored as strings ("2", "1 cup", "1 1/2 tbsp", "a pinch"). Units
are opaque labels: amounts are only ever added when both sides carry the same
unit, never converted.
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Literal

MergePolicy = Literal["concat", "sum"]

MERGE_SEPARATOR = " + "
DEFAULT_QUANTITY = "1"

# "2", "1.5", "1/2", "1 1/2" optionally followed by a unit label
_QUANTITY_RE = re.compile(
    r"""^\s*
    (?:
        (?P<whole>\d+)\s+(?P<num>\d+)\s*/\s*(?P<den>\d+)   # mixed number
      | (?P<fnum>\d+)\s*/\s*(?P<fden>\d+)                  # fraction
      | (?P<decimal>\d+(?:\.\d+)?|\.\d+)                   # integer or decimal
    )
    \s*(?P<unit>[^\d\s+][^+]*?)?\s*$""",
    re.VERBOSE,
)


@dataclass(frozen=True)
class Quantity:
    """A parsed quantity, or the raw text when it does not parse."""

    raw: str
    amount: Fraction | None = None
    unit: str | None = None

    @property
    def is_parsed(self) -> bool:
        return self.amount is not None

    @classmethod
    def parse(cls, text: str | None) -> "Quantity":
        raw = (text or "").strip()
        match = _QUANTITY_RE.match(raw)
        if not match:
            return cls(raw=raw)

        try:
            if match.group("whole") is not None:
                amount = int(match.group("whole")) + Fraction(
                    int(match.group("num")), int(match.group("den"))
                )
            elif match.group("fnum") is not None:
                amount = Fraction(int(match.group("fnum")), int(match.group("fden")))
            else:
                amount = Fraction(Decimal(match.group("decimal")))
        except ZeroDivisionError:
            return cls(raw=raw)

        unit = match.group("unit") or None
        return cls(raw=raw, amount=amount, unit=unit)

    def format(self) -> str:
        if self.amount is None:
            return self.raw
        amount = format_amount(self.amount)
        return f"{amount} {self.unit}" if self.unit else amount

    def same_unit(self, other: "Quantity") -> bool:
        return (self.unit or "").lower() == (other.unit or "").lower()

    def __add__(self, other: "Quantity") -> "Quantity":
        if not (self.is_parsed and other.is_parsed and self.same_unit(other)):
            return NotImplemented
        total = self.amount + other.amount
        raw = f"{format_amount(total)} {self.unit}" if self.unit else format_amount(total)
        return Quantity(raw=raw, amount=total, unit=self.unit)


def format_amount(amount: Fraction) -> str:
    """Render an amount as an integer when whole, else a trimmed decimal."""
    if amount.denominator == 1:
        return str(amount.numerator)
    value = (Decimal(amount.numerator) / Decimal(amount.denominator)).quantize(Decimal("0.001"))
    return format(value.normalize(), "f")


def combine_quantities(
    existing: str | None,
    added: str | None,
    policy: MergePolicy = "concat",
) -> str:
    """Merge the quantity of an item already on a list with an added quantity.

    ``concat`` joins the strings with " + ". ``sum`` adds the amounts when both
    parse with the same unit and falls back to ``concat`` otherwise.
    """
    existing = (existing or "").strip()
    added = (added or "").strip()
    if not existing:
        return added or DEFAULT_QUANTITY
    if not added:
        return existing

    if policy == "sum":
        left = Quantity.parse(existing)
        right = Quantity.parse(added)
        if left.is_parsed and right.is_parsed and left.same_unit(right):
            return (left + right).format()

    return f"{existing}{MERGE_SEPARATOR}{added}"
