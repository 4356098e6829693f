"""
Validation context.

The side channel a rule writes into while deciding is_valid(): it may
switch off the generic message and attach its own, scoped to a field.

Dependencies: pydantic
System role: Error collection for business-rule validation
"""

from pydantic import BaseModel


class FieldViolation(BaseModel):
    """One message, optionally tied to a request field."""

    field: str | None
    message: str


class ValidationContext:
    """
    Per-check collector handed to Validator.is_valid().

    Attributes:
        default_message: Reported when a rule fails without adding its own
        default_violation_enabled: Cleared by disable_default_violation()
    """

    def __init__(self, default_message: str = "Invalid course submission") -> None:
        self.default_message = default_message
        self.default_violation_enabled = True
        self._violations: list[FieldViolation] = []

    @property
    def violations(self) -> list[FieldViolation]:
        """Snapshot of the collected violations."""
        return list(self._violations)

    def disable_default_violation(self) -> None:
        self.default_violation_enabled = False

    def add_violation(self, message: str, field: str | None = None) -> None:
        self._violations.append(FieldViolation(field=field, message=message))
