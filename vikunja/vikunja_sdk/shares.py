#!/usr/bin/env python3
"""
Vikunja Link Share Operations

Managing a project's link shares lives in ProjectService; this service only
exchanges a share hash for a token.
"""

from typing import Optional

from .models import AuthToken, LinkShareAuth
from .service import VikunjaService


class ShareService(VikunjaService):
    """Authenticates against a link share."""

    def get_share_auth(self, share_hash: str, auth: Optional[LinkShareAuth] = None) -> AuthToken:
        """
        Get an auth token for a link share.

        The request is sent without the Authorization header even when this
        service holds a token.

        Args:
            share_hash: Hash part of the share link
            auth: Password for password-protected shares ({'password': ...})

        Returns:
            Auth token dictionary for the share
        """
        return self._request(
            f"/shares/{share_hash}/auth", "POST", auth, authenticated=False
        )
