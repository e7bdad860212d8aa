class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data violates the engine's input contract."""


class EmployeeNotFoundError(DomainError):
    """Raised when an employee id does not resolve to a known employee."""
