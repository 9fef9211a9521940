"""Exceptions raised by the SEO scoring engine."""


class ScoringError(Exception):
    """Base class for scoring engine errors."""


class MissingInputError(ScoringError, ValueError):
    """Raised when a required input was not supplied."""

    def __init__(self, argument: str, action: str = "generate a report"):
        self.argument = argument
        super().__init__(f"{argument} is required to {action}")
