"""Error kinds and the error type raised across the package."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Category of an error, used to map errors to status codes."""

    UNKNOWN = "Unknown"
    ENTITY_DOES_NOT_EXIST = "NotFound"
    NOT_IMPLEMENTED = "NotImplemented"
    INVALID_ID = "InvalidId"
    DUPLICATE_NAME = "DuplicateName"
    CONTRACT_INVALID = "ContractInvalid"
    SERVER_ERROR = "UnexpectedServerError"


class EdgeXError(Exception):
    """An error carrying a kind, a message and an optional cause.

    When no kind (or ``UNKNOWN``) is given and the cause is itself an
    ``EdgeXError``, the kind of the cause is taken over.
    """

    def __init__(
        self,
        kind: ErrorKind | None = None,
        message: str = "",
        cause: BaseException | None = None,
    ) -> None:
        if kind is None or kind is ErrorKind.UNKNOWN:
            kind = cause.kind if isinstance(cause, EdgeXError) else ErrorKind.UNKNOWN
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        if not self.message:
            return str(self.cause)
        return f"{self.message} -> {self.cause}"

    def __repr__(self) -> str:
        return f"EdgeXError(kind={self.kind.name}, message={self.message!r})"