# Services: accounts API client and its error taxonomy

from form3.services.accounts_service import AccountsService, Transport
from form3.services.errors import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    Form3Error,
    HTTPStatusError,
    InvalidDataError,
    InvalidVersionError,
    TransportError,
)

__all__ = [
    "AccountsService",
    "Transport",
    "Form3Error",
    "InvalidDataError",
    "AccountNotFoundError",
    "AccountAlreadyExistsError",
    "InvalidVersionError",
    "HTTPStatusError",
    "TransportError",
]
