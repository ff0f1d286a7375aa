"""Strava access token storage in the system keychain.

Obtaining or refreshing the token is out of scope; the token is put here by
``gear-sync --store-token`` and read back before each run.
"""

import logging
from typing import Optional

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

__all__ = ["TokenStore"]

logger = logging.getLogger(__name__)

SERVICE_NAME = "Gear Sync"
ACCOUNT_NAME = "strava_access_token"


class TokenStore:
    """Reads and writes the Strava access token."""

    def __init__(self, service_name: str = SERVICE_NAME):
        self.service_name = service_name

    def store(self, token: str) -> bool:
        try:
            keyring.set_password(self.service_name, ACCOUNT_NAME, token)
            logger.info("Strava access token stored")
            return True
        except KeyringError as e:
            logger.error(f"Failed to store access token: {e}")
            return False

    def load(self) -> Optional[str]:
        try:
            return keyring.get_password(self.service_name, ACCOUNT_NAME) or None
        except KeyringError as e:
            logger.error(f"Failed to load access token: {e}")
            return None

    def delete(self) -> bool:
        """Delete the stored token; True if deleted or absent."""
        try:
            keyring.delete_password(self.service_name, ACCOUNT_NAME)
            logger.info("Strava access token deleted")
            return True
        except PasswordDeleteError:
            return True
        except KeyringError as e:
            logger.error(f"Failed to delete access token: {e}")
            return False
