"""Client library for the Form3 organisation accounts API."""

from form3.client import Form3Client, get_form3_client
from form3.schemas import AccountData, AccountResponse, Attributes, UserDefinedData
from form3.services import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    AccountsService,
    Form3Error,
    HTTPStatusError,
    InvalidDataError,
    InvalidVersionError,
    TransportError,
)

__all__ = [
    "Form3Client",
    "get_form3_client",
    "AccountData",
    "AccountResponse",
    "Attributes",
    "UserDefinedData",
    "AccountsService",
    "Form3Error",
    "InvalidDataError",
    "AccountNotFoundError",
    "AccountAlreadyExistsError",
    "InvalidVersionError",
    "HTTPStatusError",
    "TransportError",
]
