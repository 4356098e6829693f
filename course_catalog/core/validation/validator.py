"""
Validator interface.

Business rules that need I/O (database lookups) are expressed as async
validators invoked directly by the service layer before persistence.

Dependencies: typing
System role: Contract for course business-rule validators
"""

from typing import Protocol, TypeVar, runtime_checkable

from course_catalog.core.validation.context import ValidationContext

InputT = TypeVar("InputT", contravariant=True)


@runtime_checkable
class Validator(Protocol[InputT]):
    """A business rule checked against a submission."""

    async def is_valid(self, submission: InputT, context: ValidationContext) -> bool:
        """Return False and record violations on context when the rule fails."""
        ...

    async def validate(self, submission: InputT) -> None:
        """Raise a ValidationError subclass when the rule fails."""
        ...
