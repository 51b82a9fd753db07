"""
Marketplace Errors - Typed failures raised by the lifecycle engine

Every business-rule violation is raised as a subclass of MarketplaceError.
The HTTP layer maps each kind to a status code (see app.api.errors); the
engine itself never retries.

Kinds:
    not_found        - referenced job or application does not exist
    invalid_state    - job is not accepting applications
    forbidden        - caller lacks the required relationship
    conflict         - duplicate application, or job already assigned
    unauthenticated  - no caller identity
    partial_failure  - the accept compound mutation failed in the store
"""


class MarketplaceError(Exception):
    """Base class for lifecycle engine errors."""

    code = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(MarketplaceError):
    code = "not_found"


class InvalidStateError(MarketplaceError):
    code = "invalid_state"


class ForbiddenError(MarketplaceError):
    code = "forbidden"


class ConflictError(MarketplaceError):
    code = "conflict"


class UnauthenticatedError(MarketplaceError):
    code = "unauthenticated"

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class PartialFailureError(MarketplaceError):
    """
    The application/job compound mutation could not be completed.

    The transaction is rolled back before this is raised, so neither entity
    is left modified; operators should still treat it as a store fault.
    """

    code = "partial_failure"
