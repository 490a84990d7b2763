#!/usr/bin/env python3
"""
Vikunja Avatar Operations
"""

from typing import Optional

from .service import VikunjaService


class AvatarService(VikunjaService):
    """Fetches user avatar images."""

    def get_user_avatar(self, username: str, size: Optional[int] = None) -> bytes:
        """
        Get a user's avatar image.

        Args:
            username: Username whose avatar to fetch
            size: Optional edge length in pixels (the server caps it at 1024)

        Returns:
            Raw image bytes
        """
        params = {"size": size} if size else None
        return self._request(
            f"/{username}/avatar", "GET", params=params, response_type="blob"
        )
