#!/usr/bin/env python3
"""
Vikunja Notification Operations
"""

from typing import Any, Dict, List, Optional

from .models import DatabaseNotification, Message
from .service import VikunjaService


class NotificationService(VikunjaService):
    """Handles user notifications."""

    def get_notifications(
        self, params: Optional[Dict[str, Any]] = None
    ) -> List[DatabaseNotification]:
        """
        Get the current user's notifications.

        Args:
            params: Optional pagination parameters (page, per_page)

        Returns:
            List of notification dictionaries
        """
        return self._request("/notifications", "GET", params=params)

    def mark_all_as_read(self) -> Message:
        return self._request("/notifications", "POST")

    def mark_notification(self, notification_id: int) -> DatabaseNotification:
        """Toggle the read state of a single notification."""
        return self._request(f"/notifications/{notification_id}", "POST")
