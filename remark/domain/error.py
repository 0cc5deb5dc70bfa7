"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested comment is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StoreError(DomainError):
    """Raised when the comment store fails to read or write."""

    pass


class NotModifiedError(StoreError):
    """Raised when a store mutation matched no record."""

    def __init__(self, operation: str, identifier: str):
        self.operation = operation
        self.identifier = identifier
        super().__init__(f"{operation} modified no comment: {identifier}")
