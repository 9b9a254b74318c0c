"""Delete confirmation states and the built-in two-step flow."""

PENDING_CONFIRMATION = "pending_confirmation"
CONFIRMED = "confirmed"
CANCELLED = "cancelled"

CONFIRM = "CONFIRM"
CANCEL = "CANCEL"


class TwoStepConfirmation:
    """pending_confirmation --CONFIRM--> confirmed, --CANCEL--> cancelled. Nothing leaves a resolved state."""

    initial = PENDING_CONFIRMATION

    _transitions = {
        (PENDING_CONFIRMATION, CONFIRM): CONFIRMED,
        (PENDING_CONFIRMATION, CANCEL): CANCELLED,
    }

    def advance(self, state_value: str, event: str) -> str | None:
        return self._transitions.get((state_value, event))
