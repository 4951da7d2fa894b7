"""
Sample program: create an account, fetch it back, then delete it.
Run with `python -m form3` against the API at FORM3_HOST.
"""

import logging
import sys

from form3.client import get_form3_client
from form3.core.config import get_settings
from form3.schemas.account import AccountData, Attributes
from form3.services.errors import Form3Error

ORGANISATION_ID = "0de1f73f-8af2-4316-86f9-325ce9755cb6"

_log_handler = logging.StreamHandler(sys.stdout)
_log_handler.setFormatter(logging.Formatter("%(levelname)s:     %(message)s"))
logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not logger.handlers:
        logger.addHandler(_log_handler)


def main() -> int:
    settings = get_settings()
    _configure_logging(settings.log_level)

    try:
        client = get_form3_client()
    except ValueError as e:
        logger.error("Failed to create client: %s", e)
        return 1

    with client:
        try:
            created = client.accounts.create(
                AccountData.new_with_generated_id(
                    ORGANISATION_ID,
                    Attributes(country="PL", name=["John Smith"]),
                )
            )
            account_id = created.data.id
            logger.info("Account %s created successfully", account_id)

            fetched = client.accounts.fetch(account_id)
            logger.info("Account %s fetched successfully (version %s)", account_id, fetched.data.version)

            client.accounts.delete(account_id, created.data.version)
            logger.info("Account %s deleted successfully", account_id)
        except Form3Error as e:
            logger.error("Account round trip failed: %s", e.message)
            return 1
    return 0
