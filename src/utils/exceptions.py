"""Custom exception classes."""


class RegistrationError(Exception):
    """Base class for speaker registration rejections."""
    pass


class MissingRequiredFieldError(RegistrationError, ValueError):
    """Raised when first name, last name or email is empty."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is required")


class InvalidArgumentError(RegistrationError, ValueError):
    """Raised when a speaker submits no sessions at all."""
    pass


class NoSessionsApprovedError(RegistrationError):
    """Raised when every submitted session covers an outdated topic."""
    pass


class SpeakerDoesNotMeetRequirementsError(RegistrationError):
    """Raised when the speaker profile fails the qualification rule."""
    pass


class ValidationError(Exception):
    """Raised when data fails validation."""
    pass


class FileWriteError(Exception):
    """Raised when unable to write to JSON file."""
    pass
