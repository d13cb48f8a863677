class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTimeFormat(ValidationError):
    """Raised when a shift time does not parse as HH:MM."""


class ReportAlreadySubmitted(ValidationError):
    """Raised when a submitted report is saved or submitted again."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class ReportNotFound(NotFoundError):
    """Raised when submitting a report that has no saved draft."""


class EmployeeNotFound(NotFoundError):
    pass


class CompanyNotFound(NotFoundError):
    pass


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
