"""French phone number value object."""

import re
from dataclasses import dataclass

PHONE_DIGITS = 10


@dataclass(frozen=True)
class PhoneNumber:
    """Ten-digit phone number stored without separators."""

    digits: str

    def __post_init__(self) -> None:
        """Validate phone digits."""
        if not re.fullmatch(rf"\d{{{PHONE_DIGITS}}}", self.digits):
            raise ValueError(f"Phone number must contain exactly {PHONE_DIGITS} digits")

    @classmethod
    def from_raw(cls, raw: str) -> "PhoneNumber":
        """Build from user input, ignoring spaces, dots and other separators."""
        return cls(re.sub(r"\D", "", raw))
