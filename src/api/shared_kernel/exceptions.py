"""Error taxonomy shared by every bounded context.

Services raise these; the presentation layer maps them to HTTP statuses.
Access denials (unauthenticated, forbidden) are not exceptions: the
AccessGate answers them with a deny decision before any service runs.
"""


class DomainError(Exception):
    """Base class for errors surfaced to API callers."""

    pass


class NotFoundError(DomainError):
    """Raised when an entity is absent from the caller's tenant scope.

    An id that exists under a different tenant is reported exactly like an
    id that does not exist at all. Messages name the entity kind and the
    requested id, nothing else.
    """

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class ValidationError(DomainError):
    """Raised when input is malformed, e.g. a blank required field."""

    pass


class ConflictError(DomainError):
    """Raised when persistence rejects a write on a uniqueness constraint."""

    pass
