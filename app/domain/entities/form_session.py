"""Form session entity."""

from dataclasses import dataclass, field
from typing import Optional

from app.domain.value_objects.address_candidate import AddressCandidate
from app.domain.value_objects.budget_range import BudgetRange


@dataclass
class FormSession:
    """In-progress intake form state for one visitor."""

    categories: list[str] = field(default_factory=list)
    name: str = ""
    phone: str = ""  # Display form, e.g. "06 12 34 56 78"
    postal: str = ""
    cp_query: str = ""
    cp_pill: str = ""
    location: str = ""
    surface: str = ""
    budget: Optional[BudgetRange] = None
    description: str = ""
    photo_names: list[str] = field(default_factory=list)
    honeypot: str = ""
    step_index: int = 0
    # Anti-abuse timers (monotonic seconds)
    started_at: float = 0.0
    last_submit_at: Optional[float] = None
    # Address lookup results for the current query
    cp_results: list[AddressCandidate] = field(default_factory=list)
    error_message: str = ""
    loading: bool = False

    @property
    def phone_digits(self) -> str:
        """Get phone without separators."""
        return "".join(ch for ch in self.phone if ch.isdigit())

    def reset_fields(self) -> None:
        """Clear every entered value after a successful submission."""
        self.categories = []
        self.name = ""
        self.phone = ""
        self.postal = ""
        self.cp_query = ""
        self.cp_pill = ""
        self.location = ""
        self.surface = ""
        self.budget = None
        self.description = ""
        self.photo_names = []
        self.honeypot = ""
        self.step_index = 0
        self.cp_results = []
        self.error_message = ""
