"""
Form3 organisation accounts client.
Create, fetch and delete accounts through an injected HTTP transport; every
non-success response is mapped onto the error types in form3.services.errors.
No retries: each call is a single exchange.
"""

import logging
from email.utils import formatdate
from typing import Any, Protocol, TypeVar
from urllib.parse import quote, urljoin

import requests
from pydantic import BaseModel

from form3.schemas.account import AccountData, AccountResponse, CreateAccountRequest, ErrorBody
from form3.services.errors import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    HTTPStatusError,
    InvalidDataError,
    InvalidVersionError,
    TransportError,
)

logger = logging.getLogger(__name__)

MEDIA_TYPE = "application/vnd.api+json"
ACCOUNTS_PATH = "organisation/accounts"

Timeout = float | tuple[float, float] | None

M = TypeVar("M", bound=BaseModel)


class Transport(Protocol):
    """
    Executes one HTTP exchange. requests.Session and the requests module both
    satisfy it; credentials belong on the transport (e.g. Session.auth).
    """

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response: ...


class AccountsService:
    """
    Accounts API service. base_url must end with '/' so resource paths resolve under it.
    """

    def __init__(
        self,
        http_client: Transport,
        base_url: str,
        timeout: Timeout = 30.0,
        user_agent: str = "form3-accounts-client",
    ) -> None:
        self._http = http_client
        self._base_url = base_url
        self._timeout = timeout
        self._user_agent = user_agent

    def _headers(self, with_body: bool) -> dict[str, str]:
        """Content negotiation headers plus the Date the request was built."""
        headers = {
            "Accept": MEDIA_TYPE,
            "Date": formatdate(usegmt=True),
            "User-Agent": self._user_agent,
        }
        if with_body:
            headers["Content-Type"] = MEDIA_TYPE
        return headers

    def _account_url(self, account_id: str | None = None) -> str:
        if account_id is None:
            return urljoin(self._base_url, ACCOUNTS_PATH)
        return urljoin(self._base_url, f"{ACCOUNTS_PATH}/{quote(account_id, safe='')}")

    def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        timeout: Timeout = None,
    ) -> requests.Response:
        """
        Execute the exchange. A 400 is turned into InvalidDataError here, before
        any status classification by the caller; a 400 body that does not decode
        raises TransportError instead.
        """
        try:
            resp = self._http.request(
                method,
                url,
                headers=self._headers(json is not None),
                params=params,
                json=json,
                timeout=timeout if timeout is not None else self._timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e!s}") from e
        logger.debug("%s %s -> %s", method, url, resp.status_code)

        if resp.status_code == 400:
            body = self._decode(resp, ErrorBody)
            raise InvalidDataError(body.error_code, body.error_message)
        return resp

    @staticmethod
    def _decode(resp: requests.Response, model: type[M]) -> M:
        try:
            return model.model_validate(resp.json())
        except ValueError as e:
            raise TransportError(
                f"Could not decode response body (status {resp.status_code}): {e!s}",
                status_code=resp.status_code,
                detail=resp.text or None,
            ) from e

    @staticmethod
    def _check_status(resp: requests.Response) -> None:
        if not 200 <= resp.status_code < 300:
            raise HTTPStatusError(resp.status_code, detail=resp.text or None)

    # -------------------------------------------------------------------------
    # Accounts
    # -------------------------------------------------------------------------

    def create(self, account: AccountData, timeout: Timeout = None) -> AccountResponse:
        """Register an account. Returns the stored resource with its server-assigned version."""
        body = CreateAccountRequest(data=account).to_wire()
        resp = self._request("POST", self._account_url(), json=body, timeout=timeout)
        if resp.status_code == 409:
            raise AccountAlreadyExistsError(account.id)
        self._check_status(resp)
        return self._decode(resp, AccountResponse)

    def fetch(self, account_id: str, timeout: Timeout = None) -> AccountResponse:
        """Fetch a single account by ID."""
        resp = self._request("GET", self._account_url(account_id), timeout=timeout)
        if resp.status_code == 404:
            raise AccountNotFoundError(account_id)
        self._check_status(resp)
        return self._decode(resp, AccountResponse)

    def delete(self, account_id: str, version: int, timeout: Timeout = None) -> None:
        """Delete an account. version must match the server's current version."""
        resp = self._request(
            "DELETE",
            self._account_url(account_id),
            params={"version": version},
            timeout=timeout,
        )
        if resp.status_code == 404:
            raise AccountNotFoundError(account_id)
        if resp.status_code == 409:
            raise InvalidVersionError(version)
        self._check_status(resp)
