"""Postal code value object."""

import re
from dataclasses import dataclass

POSTAL_DIGITS = 5


@dataclass(frozen=True)
class PostalCode:
    """Five-digit French postal code."""

    code: str

    def __post_init__(self) -> None:
        """Validate postal code."""
        if not re.fullmatch(rf"\d{{{POSTAL_DIGITS}}}", self.code):
            raise ValueError(f"Postal code must contain exactly {POSTAL_DIGITS} digits")
