#!/usr/bin/env python3
"""
Vikunja API Token Operations

Long-lived API tokens, scoped by route permissions. Not to be confused with
the login JWT the client facade broadcasts to its services.
"""

from typing import Any, Dict, List, Optional

from .models import APIToken, APITokenRoute, Message
from .service import VikunjaService


class TokenService(VikunjaService):
    """Handles API token operations."""

    def get_tokens(self, params: Optional[Dict[str, Any]] = None) -> List[APIToken]:
        return self._request("/tokens", "GET", params=params)

    def create_token(self, token: APIToken) -> APIToken:
        """
        Create a new API token.

        The token value is only included in this response; later listings
        omit it.
        """
        return self._request("/tokens", "PUT", token)

    def delete_token(self, token_id: int) -> Message:
        return self._request(f"/tokens/{token_id}", "DELETE")

    def get_token_routes(self) -> Dict[str, Dict[str, APITokenRoute]]:
        """Get the routes an API token can be granted permissions for."""
        return self._request("/routes", "GET")
