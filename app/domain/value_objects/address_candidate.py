"""Address lookup candidate value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AddressCandidate:
    """One geocoding suggestion."""

    label: str
    postcode: str = ""
    city: str = ""
    context: str = ""

    @property
    def location_label(self) -> str:
        """Get the value stored as the lead location (e.g., "Dijon — 21, Côte-d'Or")."""
        if self.city and self.context:
            return f"{self.city} — {self.context}"
        return self.city or self.label

    @property
    def query_text(self) -> str:
        """Get the text put back into the search box after selection."""
        prefix = f"{self.postcode} " if self.postcode else ""
        return f"{prefix}{self.city}".strip()

    @property
    def pill(self) -> str:
        """Get the one-line summary shown once a location is chosen."""
        context = f" ({self.context})" if self.context else ""
        return " ".join(f"{self.postcode} — {self.city}{context}".split())

    def to_dict(self) -> dict[str, str]:
        """Serialize for JSON responses."""
        return {
            "label": self.label,
            "postcode": self.postcode,
            "city": self.city,
            "context": self.context,
        }
