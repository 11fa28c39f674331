"""Step sequencing for the multi-step intake form."""

from collections.abc import Callable
from typing import Optional

from app.application.use_cases.single_slot_timer import SingleSlotTimer
from app.application.use_cases.user_messages_fr import UserMessagesFR
from app.domain.catalog import STEPS, Step
from app.domain.entities.form_session import FormSession
from app.domain.value_objects.budget_range import BudgetRange
from app.domain.value_objects.phone_number import PHONE_DIGITS
from app.domain.value_objects.postal_code import POSTAL_DIGITS

AUTO_ADVANCE_SECONDS = 0.22

_READINESS: dict[str, Callable[[FormSession], bool]] = {
    "categories": lambda s: len(s.categories) > 0,
    "name": lambda s: len(s.name.strip()) >= 2,
    "phone": lambda s: len(s.phone_digits) == PHONE_DIGITS,
    "localisation": lambda s: len(s.postal) == POSTAL_DIGITS and len(s.location.strip()) > 0,
    "budget": lambda s: s.budget is not None,
    "photos": lambda s: True,
    "description": lambda s: True,
    "review": lambda s: True,
}

_STEP_ERRORS = {
    "categories": UserMessagesFR.STEP_CATEGORIES,
    "name": UserMessagesFR.STEP_NAME,
    "phone": UserMessagesFR.STEP_PHONE,
    "localisation": UserMessagesFR.STEP_LOCALISATION,
    "budget": UserMessagesFR.STEP_BUDGET,
}


class StepController:
    """
    Finite-state sequencer over the form steps.

    The current index lives on the FormSession and stays within [0, N-1].
    Moving forward requires the active step's readiness predicate; moving back
    is always allowed.
    """

    def __init__(
        self,
        session: FormSession,
        steps: tuple[Step, ...] = STEPS,
        auto_advance_seconds: float = AUTO_ADVANCE_SECONDS,
    ) -> None:
        """
        Initialize controller.

        Args:
            session: Form session holding the step index and field values
            steps: Ordered steps
            auto_advance_seconds: Delay before leaving the budget step once chosen
        """
        self._session = session
        self._steps = steps
        self._auto_advance = SingleSlotTimer(auto_advance_seconds)

    @property
    def index(self) -> int:
        """Get current step index."""
        return self._session.step_index

    @property
    def current_step(self) -> Step:
        """Get current step."""
        return self._steps[self._session.step_index]

    @property
    def is_review(self) -> bool:
        """Check if the terminal review step is active."""
        return self.current_step.key == "review"

    @property
    def progress_label(self) -> str:
        """Get progress text, e.g. "3 / 8"."""
        return f"{self.index + 1} / {len(self._steps)}"

    @property
    def show_back(self) -> bool:
        """Check if a back control makes sense."""
        return self.index > 0

    @property
    def auto_advance_pending(self) -> bool:
        """Check if a budget auto-advance is scheduled."""
        return self._auto_advance.pending

    def can_go_next(self) -> bool:
        """Check the readiness predicate of the current step."""
        return _READINESS[self.current_step.key](self._session)

    def next(self) -> bool:
        """
        Move forward one step if the current step is ready.

        Returns:
            True if the index changed
        """
        if not self.can_go_next():
            return False
        return self._go_to(self.index + 1)

    def prev(self) -> bool:
        """
        Move back one step.

        Returns:
            True if the index changed
        """
        return self._go_to(self.index - 1)

    def go_next_with_validation(self) -> Optional[str]:
        """
        Advance, or explain why the current step blocks.

        Returns:
            None on success, a French error message otherwise
        """
        self._session.error_message = ""
        if not self.can_go_next():
            message = _STEP_ERRORS.get(self.current_step.key, UserMessagesFR.STEP_DEFAULT)
            self._session.error_message = message
            return message
        self.next()
        return None

    def choose_budget(self, value: BudgetRange) -> None:
        """
        Record the budget and leave the budget step shortly after.

        Must be called from a running event loop. Any step change before the
        delay elapses cancels the pending advance.

        Args:
            value: Chosen budget range
        """
        self._session.budget = value
        self._session.error_message = ""
        if self.current_step.key != "budget":
            return
        budget_index = self.index
        self._auto_advance.schedule(lambda: self._advance_from(budget_index))

    def handle_key(self, key: str, in_multiline: bool = False) -> bool:
        """
        Keyboard affordance: Enter moves forward, Escape moves back.

        Args:
            key: Key name ("Enter" or "Escape")
            in_multiline: True while focus is in a multi-line text field

        Returns:
            True if the index changed
        """
        if self._session.loading:
            return False
        if key == "Escape":
            return self.prev()
        if key == "Enter" and not in_multiline:
            return self.next()
        return False

    def reset(self) -> None:
        """Return to the first step."""
        self._go_to(0)

    def _advance_from(self, expected_index: int) -> None:
        if self.index == expected_index:
            self.next()

    def _go_to(self, index: int) -> bool:
        index = max(0, min(index, len(self._steps) - 1))
        if index == self._session.step_index:
            return False
        self._auto_advance.cancel()
        self._session.step_index = index
        return True
