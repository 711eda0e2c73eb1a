"""Domain error classes.

Protocol-agnostic errors that represent catalog failures.
HTTP translation lives in entrypoints/http/exception_handlers.py.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message, a stable error code (usable as an
    i18n key by clients) and free-form context.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - price_min > price_max
        - preferences shorter than 10 characters
        - year outside 1900..current year + 1 on a new listing

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "price", "message": "Must be positive"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Car with ID absent locally and in the store
        - News article with unknown slug

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Car", "NewsArticle")
            identifier: Resource identifier (e.g., store id, slug)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """Business constraint conflict.

    Examples:
        - Account with this email already exists
        - Recommendation request already in flight for this requester

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"


class UnauthorizedError(DomainError):
    """Authentication required or failed.

    Protocol mappings:
        - REST: 401 Unauthorized
    """

    error_code: str = "UNAUTHORIZED"


class ServiceUnavailableError(DomainError):
    """A backing service (document store, identity provider) could not be reached.

    Distinct from NotFoundError: the resource may exist, we just could not ask.

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "SERVICE_UNAVAILABLE"


class StoreUnavailableError(ServiceUnavailableError):
    """Document store read or write failed at the transport level."""


class UpstreamServiceError(DomainError):
    """An upstream service answered, but not with something usable.

    Protocol mappings:
        - REST: 502 Bad Gateway
    """

    error_code: str = "UPSTREAM_ERROR"


class CompletionServiceError(UpstreamServiceError):
    """Completion service call failed (network, API or malformed output)."""
