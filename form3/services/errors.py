"""
Error taxonomy for the accounts API. Each status the API documents maps to one
exception type so callers can branch with except clauses.
"""

from typing import Any


class Form3Error(Exception):
    """Base class for every failure raised by the client."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        detail: Any = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


class InvalidDataError(Form3Error):
    """The server rejected the request content (HTTP 400)."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        super().__init__(message, status_code=400, detail={"error_code": code, "error_message": message})


class AccountNotFoundError(Form3Error):
    """No account with the requested id (HTTP 404)."""

    def __init__(self, account_id: str) -> None:
        self.id = account_id
        super().__init__(f"Account not found: {account_id}", status_code=404)


class AccountAlreadyExistsError(Form3Error):
    """An account with the submitted id already exists (HTTP 409 on create)."""

    def __init__(self, account_id: str) -> None:
        self.id = account_id
        super().__init__(f"Account already exists: {account_id}", status_code=409)


class InvalidVersionError(Form3Error):
    """Delete was attempted with a version the server does not hold (HTTP 409 on delete)."""

    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(f"Invalid version: {version}", status_code=409)


class HTTPStatusError(Form3Error):
    """Any other non-2xx response."""

    def __init__(self, status_code: int, detail: Any = None) -> None:
        super().__init__(f"Invalid status code: {status_code}", status_code=status_code, detail=detail)


class TransportError(Form3Error):
    """
    The exchange itself failed: connection error, timeout, or a body that could
    not be decoded. The underlying exception is chained as __cause__.
    """
