"""Error hierarchy for the domain and application layers."""


class _DetailedError(Exception):
    """An exception carrying a detail string rendered through a template."""

    _template = "{detail}"

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return self._template.format(detail=self.detail)


class DomainError(_DetailedError):
    """Base class for violations of domain rules."""


class EntityNotFound(DomainError):
    """A domain entity could not be found."""

    _template = "The entity '{detail}' was not found."


class DomainValidationError(DomainError):
    """A value or entity failed validation."""

    _template = "A validation error has occurred."


class UnknownDomainError(DomainError):
    """An unexpected domain failure, such as an illegal state change."""

    _template = "An unexpected error has occurred."


class ApplicationError(_DetailedError):
    """Base class for failures raised by the application layer."""


class DomainViolation(ApplicationError):
    _template = "Domain violation: {detail}"


class EntityNotFoundError(ApplicationError):
    _template = "Entity not found: {detail}"


class InvalidOperationError(ApplicationError):
    _template = "Invalid operation: {detail}"


class ApplicationValidationError(ApplicationError):
    _template = "Validation error: {detail}"


class ConflictError(ApplicationError):
    _template = "Conflict: {detail}"


class PersistenceError(ApplicationError):
    _template = "Persistence failure: {detail}"


class ConnectionFailure(ApplicationError):
    _template = "Connection failure: {detail}"


class SerializationError(ApplicationError):
    _template = "Serialization failure: {detail}"


class ExternalServiceError(ApplicationError):
    _template = "External service failure: {detail}"


class OperationTimeout(ApplicationError):
    _template = "Timeout: {detail}"


class UnknownApplicationError(ApplicationError):
    _template = "Unknown error: {detail}"


def from_domain_error(error: DomainError) -> DomainViolation:
    """Wrap a domain error as an application-level domain violation."""
    violation = DomainViolation(str(error))
    violation.__cause__ = error
    return violation