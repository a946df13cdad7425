"""Custom exceptions for the Party Planner Bot."""


class PlannerError(Exception):
    """Base class for all planner errors."""
    pass


class RequestValidationError(PlannerError):
    """Raised when a form answer or event request fails validation."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class PlanGenerationError(PlannerError):
    """Raised when the plan generator fails for an otherwise valid request."""
    pass


class VenueUnavailableError(PlannerError):
    """Raised when booking a venue that is not available."""
    pass
