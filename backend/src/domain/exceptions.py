"""Domain exceptions shared by value objects, entities and use cases."""


class DomainError(Exception):
    """Base class for errors raised by the domain layer."""


class ValidationError(DomainError, ValueError):
    """Raised when a value object invariant is violated."""


class NotFoundError(DomainError):
    """
    Raised when an entity with the requested identifier does not exist.

    Attributes:
        entity_name: Kind of entity that was looked up (e.g. "Todo")
        entity_id: Identifier that was requested
    """

    def __init__(self, entity_name: str, entity_id: str):
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"{entity_name} not found: {entity_id}")
