"""Estimated budget value object."""

from enum import Enum
from typing import Optional


class BudgetRange(str, Enum):
    """Budget ranges offered on the budget step."""

    LT_500 = "lt_500"
    FROM_500_TO_1500 = "500_1500"
    FROM_1500_TO_3000 = "1500_3000"
    FROM_3000_TO_7000 = "3000_7000"
    PLUS_7000 = "7000_plus"

    @property
    def label(self) -> str:
        """Get French label shown to the user."""
        return _LABELS[self]

    @classmethod
    def parse(cls, value: object) -> Optional["BudgetRange"]:
        """
        Parse a raw value into a budget range.

        Args:
            value: Raw value (enum value string or BudgetRange)

        Returns:
            BudgetRange, or None if the value is not a known range
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            return None


_LABELS = {
    BudgetRange.LT_500: "Moins de 500€",
    BudgetRange.FROM_500_TO_1500: "500€ – 1500€",
    BudgetRange.FROM_1500_TO_3000: "1500€ – 3000€",
    BudgetRange.FROM_3000_TO_7000: "3000€ – 7000€",
    BudgetRange.PLUS_7000: "7000€+",
}


def format_budget_label(value: object) -> str:
    """Get the label for a raw budget value, or "-" when unknown."""
    budget = BudgetRange.parse(value) if value else None
    return budget.label if budget else "-"
