from typing import Optional


class PlanningError(Exception):
    """Base class for blueprint generation failures."""


class UpstreamError(PlanningError):
    """The generation call itself failed (network, auth, quota, bad body)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EmptyResponseError(PlanningError):
    """The generation call succeeded but returned no text."""

    def __init__(self, message: str = "No response from AI"):
        super().__init__(message)


class RecoveryError(PlanningError):
    """Text came back but no strategy produced a valid blueprint."""

    def __init__(self, message: str = "Failed to parse blueprint from model output"):
        super().__init__(message)


class GenerationExhaustedError(PlanningError):
    """Every attempt failed; carries the attempt count and the last reason."""

    def __init__(self, attempts: int, last_error: BaseException):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"Failed after {attempts} attempts: {last_error}")
