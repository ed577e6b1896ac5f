"""
Domain-level exceptions for the hexagonal architecture.

These exceptions represent business rule violations and domain logic errors.
They should be mapped to appropriate HTTP responses in the API layer.
"""


class DomainException(Exception):
    """Base exception for all domain-level errors."""

    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DomainException):
    """Raised when domain validation rules are violated."""

    default_message = "Invalid request"


class BaseDocumentInaccessibleError(ValidationError):
    """Raised when a base CV's stored bytes cannot be fetched."""

    default_message = "Base CV file is inaccessible"


class WeakPasswordError(ValidationError):
    """Raised when a password does not meet the configured policy."""

    default_message = "Password does not meet requirements"


class AuthenticationError(DomainException):
    """Raised when the caller cannot be identified."""

    default_message = "Unauthorized"


class AuthorizationError(DomainException):
    """Base exception for authorization errors."""

    default_message = "Forbidden"


class InsufficientPermissionsError(AuthorizationError):
    """Raised when user lacks required permissions."""

    default_message = "Admin access only"


class NotFoundError(DomainException):
    """Base exception for entities not found."""

    default_message = "Not found"


class UserNotFoundError(NotFoundError):
    """Raised when a user is not found."""

    default_message = "User not found"


class JobNotFoundError(NotFoundError):
    """Raised when a job posting is not found."""

    default_message = "Job not found"


class BaseDocumentNotFoundError(NotFoundError):
    """Raised when the base CV of a tailoring request is missing or foreign."""

    default_message = "Base CV not found"


class CVNotFoundError(NotFoundError):
    """Raised when an uploaded CV is not found."""

    default_message = "CV not found"


class TailoredCVNotFoundError(NotFoundError):
    """Raised when a tailoring outcome is not found."""

    default_message = "Tailored CV not found"


class CandidateNotFoundError(NotFoundError):
    """Raised when a candidate is not found."""

    default_message = "Candidate not found"


class ApplicationNotFoundError(NotFoundError):
    """Raised when a job application is not found."""

    default_message = "Application not found"


class ConflictError(DomainException):
    """Raised when an operation would violate a uniqueness rule."""

    default_message = "Resource already exists"


class FileTooLargeError(DomainException):
    """Raised when an upload exceeds the configured size limit."""

    default_message = "File too large"


class UnsupportedMediaTypeError(DomainException):
    """Raised when an upload has a disallowed content type."""

    default_message = "Only PDF and Word documents are allowed"


class DependencyUnavailableError(DomainException):
    """Raised when an external dependency cannot be reached."""

    default_message = "Service temporarily unavailable"


class StorageUnavailableError(DependencyUnavailableError):
    """Raised when the object store rejects or cannot accept a write."""

    default_message = "Document storage unavailable"


class DocumentNotFoundError(DomainException):
    """Raised by the document store when a reference resolves to nothing.

    Not mapped to HTTP directly; callers translate it into their own error.
    """

    default_message = "Document not found"


class DocumentUnreachableError(DomainException):
    """Raised by the document store when a reference cannot be read."""

    default_message = "Document unreachable"


class ProcessingError(DomainException):
    """Base exception for processing errors."""

    default_message = "Processing failed"


class DocumentCompositionError(ProcessingError):
    """Raised when a base document cannot be parsed for composition."""

    default_message = "Failed to compose tailored CV"


class TailoringTimeoutError(ProcessingError):
    """Raised when a tailoring request exceeds its global time budget."""

    default_message = "Tailored CV generation timed out"
