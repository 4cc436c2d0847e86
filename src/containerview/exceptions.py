from typing import Any, Dict, Optional


class ContainerViewError(Exception):
    """Base class for errors raised by containerview."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(message)


class InventoryError(ContainerViewError):
    """Error reported while talking to the inventory."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        *,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, context=context)
        self.code = code


class NotFound(InventoryError):
    """The requested object id does not resolve."""

    def __init__(self, object_id: str):
        super().__init__(
            f"Managed object '{object_id}' not found",
            404,
            context={"object_id": object_id},
        )
        self.object_id = object_id


class Unavailable(InventoryError):
    """The inventory is unreachable or answered with an error."""


class MalformedResult(ContainerViewError):
    """An inventory response or object does not have the expected shape."""


class UnsupportedOperation(ContainerViewError):
    """The requested container operation is not supported."""

    def __init__(self, operation: str):
        super().__init__(
            f"Operation '{operation}' is not supported",
            context={"operation": operation},
        )
        self.operation = operation
