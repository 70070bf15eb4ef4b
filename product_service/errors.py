"""Failure taxonomy of the product service.

Every failure that leaves the service is a ProductServiceError carrying one
ErrorKind. The transport layer maps kinds to responses; the original cause,
when there is one, is chained and also kept on ``cause``.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Kinds of failure surfaced to callers."""

    INVALID_ARGUMENT = "invalid_argument"  # malformed request, no store access
    ALREADY_EXISTS = "already_exists"  # create targets a name already present
    NOT_FOUND = "not_found"  # id absent from the store
    STORE_FAILURE = "store_failure"  # store call failed, cause is opaque


class ProductServiceError(Exception):
    """Raised by ProductService for every failed operation."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause

    @classmethod
    def invalid_argument(cls, message: str) -> "ProductServiceError":
        return cls(ErrorKind.INVALID_ARGUMENT, message)

    @classmethod
    def already_exists(
        cls, message: str, cause: Optional[BaseException] = None
    ) -> "ProductServiceError":
        return cls(ErrorKind.ALREADY_EXISTS, message, cause)

    @classmethod
    def not_found(cls, message: str) -> "ProductServiceError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def store_failure(cls, message: str, cause: BaseException) -> "ProductServiceError":
        return cls(ErrorKind.STORE_FAILURE, message, cause)

    def __repr__(self) -> str:
        return f"ProductServiceError(kind={self.kind.value!r}, message={self.message!r})"


class ProductConflictError(Exception):
    """Raised by a store when its own uniqueness constraint rejects a write."""

    pass


class ProductMissingError(Exception):
    """Raised by a store when a replace or delete targets an id it no longer holds."""

    pass
