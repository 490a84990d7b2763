#!/usr/bin/env python3
"""
Vikunja Authentication Operations

Login, registration, OpenID Connect callbacks and token renewal.
"""

import logging
from typing import Any, Dict

from .models import AuthToken, LoginCredentials, OpenIDCallback, User, UserCreation
from .service import VikunjaService

# Configure logging
logger = logging.getLogger(__name__)


class AuthService(VikunjaService):
    """Handles authentication with the Vikunja API."""

    def login(self, credentials: LoginCredentials) -> AuthToken:
        """
        Login with username and password.

        Args:
            credentials: Dict with username, password and optional totp_passcode

        Returns:
            Auth token dictionary ({'token': ..., 'expires_at': ...})

        Raises:
            VikunjaAuthenticationError: If the credentials are rejected
        """
        logger.info(f"Logging in as {credentials.get('username')}")
        return self._request("/login", "POST", credentials)

    def register(self, user: UserCreation) -> User:
        """Register a new user."""
        return self._request("/register", "POST", user)

    def openid_authenticate(self, callback: OpenIDCallback) -> AuthToken:
        """Authenticate with OpenID Connect, using the provider from the callback."""
        return self._request(
            f"/auth/openid/{callback['provider']}/callback", "POST", callback
        )

    def authenticate(self, provider_id: int, callback: Dict[str, Any]) -> AuthToken:
        """
        Authenticate a user with an explicit OpenID Connect provider.

        Args:
            provider_id: The OpenID Connect provider key
            callback: Callback data (code, redirect_url)

        Returns:
            Auth token dictionary
        """
        return self._request(f"/auth/openid/{provider_id}/callback", "POST", callback)

    def renew_token(self) -> AuthToken:
        """Renew the current user's authentication token."""
        logger.info("Renewing authentication token")
        return self._request("/user/token", "POST")
