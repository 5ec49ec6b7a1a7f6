"""
Exceptions raised by the solution service.
"""


class SolutionServiceError(Exception):
    """Base class for solution service failures."""


class ValidationError(SolutionServiceError):
    """A required report field is missing or unreadable. Maps to HTTP 400."""


class UpstreamError(SolutionServiceError):
    """The Gemini call failed or could not be made. Maps to HTTP 500."""
