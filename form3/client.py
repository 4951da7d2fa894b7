"""
Top-level Form3 client: resolves the base URL and HTTP transport, then exposes
one service per API section.
"""

import logging

import requests

from form3.core.config import check_base_url, get_settings
from form3.services.accounts_service import AccountsService, Timeout, Transport

logger = logging.getLogger(__name__)


class Form3Client:
    """
    base_url defaults to FORM3_HOST (or http://localhost:8080/v1/) and must end
    with '/'. When no http_client is given a requests.Session is created and
    closed by close().
    """

    def __init__(
        self,
        base_url: str | None = None,
        http_client: Transport | None = None,
        timeout: Timeout = None,
    ) -> None:
        settings = get_settings()
        self.base_url = base_url or settings.form3_host
        check_base_url(self.base_url)

        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else requests.Session()
        self.accounts = AccountsService(
            self._http,
            self.base_url,
            timeout=timeout if timeout is not None else settings.timeout,
            user_agent=settings.user_agent,
        )
        logger.debug("Form3 client configured for %s", self.base_url)

    def close(self) -> None:
        if self._owns_http and isinstance(self._http, requests.Session):
            self._http.close()

    def __enter__(self) -> "Form3Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def get_form3_client(
    base_url: str | None = None,
    http_client: Transport | None = None,
    timeout: Timeout = None,
) -> Form3Client:
    """Dependency: return a Form3Client instance."""
    return Form3Client(base_url=base_url, http_client=http_client, timeout=timeout)
