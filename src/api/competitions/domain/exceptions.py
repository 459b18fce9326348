"""Domain exceptions for the Competitions bounded context."""


class CompetitionValidationError(ValueError):
    """Raised when competition data violates a structural or business rule.

    Carries the name of the offending field so callers can render
    field-level feedback.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
