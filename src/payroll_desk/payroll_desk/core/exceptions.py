class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when credentials, OTP codes or tokens are invalid."""


class AuthorizationError(DomainError):
    """Raised when a caller lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when the addressed record does not exist."""


class ConflictError(DomainError):
    """Raised when a write collides with existing state."""


class AlreadyClockedInError(ConflictError):
    pass


class AlreadyOnBreakError(ConflictError):
    pass


class NoActiveSessionError(NotFoundError):
    pass


class NoActiveBreakError(NotFoundError):
    pass
