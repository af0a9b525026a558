"""
Stakeholder - Exceptions

Centralized exception hierarchy for all Stakeholder errors.
"""


class StakeholderError(Exception):
    """Base exception for all Stakeholder operations."""
    pass


class TemplateError(StakeholderError):
    """Exception for progress bar template errors."""
    pass


class InvalidTemplateField(TemplateError):
    """Exception for unknown field names in a progress bar template.

    Raised when:
    - A ``{name}`` placeholder does not name a known field
      (spinner, elapsed_precise, bar, pos, len, eta)
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown template field: {name!r}")
        self.name = name
