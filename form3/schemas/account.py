"""
Account resource schema (API contract). Mirrors the organisation/accounts
resource of the Form3 API; see https://api-docs.form3.tech/api.html#organisation-accounts.

Optional fields default to None and are dropped on serialization, so an
attribute the caller never set is absent from the request body while an
explicit False or empty string is sent as-is.
"""

import uuid
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ACCOUNT_RESOURCE_TYPE = "accounts"

AccountStatus = Literal["pending", "confirmed", "closed", "failed"]


class UserDefinedData(BaseModel):
    """Free-form key/value pair attached to an account."""
    model_config = ConfigDict(frozen=True)

    key: str
    value: str


class Attributes(BaseModel):
    """Account attributes. Which of them the server requires depends on country."""
    model_config = ConfigDict(frozen=True)

    # ISO 3166-1 code, e.g. 'GB', 'FR'
    country: str | None = None
    # ISO 4217 code, e.g. 'GBP', 'EUR'
    base_currency: str | None = None
    account_number: str | None = None
    bank_id: str | None = None
    bank_id_code: str | None = None
    # SWIFT BIC, 8 or 11 characters
    bic: str | None = None
    iban: str | None = None
    customer_id: str | None = None
    # Account holder name, up to four lines
    name: list[str] | None = None
    alternative_names: list[str] | None = None

    # Confirmation of Payee fields
    account_classification: str | None = None
    joint_account: bool | None = None
    account_matching_opt_out: bool | None = None
    secondary_identification: str | None = None
    switched: bool | None = None

    status: AccountStatus | None = None
    status_reason: str | None = None

    user_defined_data: list[UserDefinedData] | None = None
    validation_type: str | None = None
    reference_mask: str | None = None
    acceptance_qualifier: str | None = None


class AccountData(BaseModel):
    """
    An account in the organisation section.
    version is assigned by the server and stays None on a resource built client-side.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    organisation_id: str
    type: Literal["accounts"] = ACCOUNT_RESOURCE_TYPE
    version: int | None = None
    attributes: Attributes | None = None

    @classmethod
    def new(
        cls,
        account_id: str,
        organisation_id: str,
        attributes: Attributes | None = None,
    ) -> "AccountData":
        return cls(id=account_id, organisation_id=organisation_id, attributes=attributes)

    @classmethod
    def new_with_generated_id(
        cls,
        organisation_id: str,
        attributes: Attributes | None = None,
    ) -> "AccountData":
        """Build an account with a random UUID4 id."""
        return cls.new(str(uuid.uuid4()), organisation_id, attributes)


class Links(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    self_: str | None = Field(default=None, alias="self")


class ListLinks(Links):
    """Links of a paginated list response."""
    first: str | None = None
    last: str | None = None
    next: str | None = None
    prev: str | None = None


class AccountResponse(BaseModel):
    """Envelope returned by create and fetch."""
    model_config = ConfigDict(frozen=True)

    data: AccountData
    links: Links | None = None


class CreateAccountRequest(BaseModel):
    """Request body for creating an account."""
    model_config = ConfigDict(frozen=True)

    data: AccountData

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict with unset optional fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ErrorBody(BaseModel):
    """Body of a 400 response."""
    error_code: str = ""
    error_message: str = ""
