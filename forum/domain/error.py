"""Domain layer errors."""

from typing import Optional


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidArgumentError(DomainError):
    """Raised when a request is malformed. Never retried."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotSupportedError(DomainError):
    """Raised by operations that exist in the forum surface but are not built yet."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Operation not supported yet: {operation}")


class DecodeError(DomainError):
    """Raised when a stored record does not have the expected shape."""

    def __init__(self, resource: str, identifier: str, reason: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"Failed to decode {resource} {identifier}: {reason}")


class StorageError(DomainError):
    """Base error for failures reported by the backing store."""

    def __init__(self, operation: str, target: Optional[str], reason: str):
        self.operation = operation
        self.target = target
        message = f"{operation} failed"
        if target is not None:
            message += f" for {target}"
        super().__init__(f"{message}: {reason}")


class StorageTransactionError(StorageError):
    """An atomic write did not commit."""

    pass


class TransactionConflictError(StorageTransactionError):
    """A write lost a race with a concurrent transaction and may be retried."""

    pass


class StorageQueryError(StorageError):
    """A read against the store failed."""

    pass
