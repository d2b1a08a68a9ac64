class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationDenied(DomainError):
    """Raised when a subject may not perform the action (inactive, wrong zone)."""


class LowConfidenceMatch(DomainError):
    """Raised when face recognition finds nobody above the similarity threshold."""


class DownstreamFailure(DomainError):
    """Raised when CompreFace or the spreadsheet backend is unreachable or errors.

    Safe to retry the whole request: no partial local state is kept.
    """
