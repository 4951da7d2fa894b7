# Pydantic request/response schemas (API contract). Kept in sync with the Form3 accounts resource.

from form3.schemas.account import (
    AccountData,
    AccountResponse,
    AccountStatus,
    Attributes,
    CreateAccountRequest,
    ErrorBody,
    Links,
    ListLinks,
    UserDefinedData,
)

__all__ = [
    "AccountData",
    "AccountResponse",
    "AccountStatus",
    "Attributes",
    "CreateAccountRequest",
    "ErrorBody",
    "Links",
    "ListLinks",
    "UserDefinedData",
]
