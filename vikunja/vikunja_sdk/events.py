#!/usr/bin/env python3
"""
Vikunja Webhook Event Operations
"""

from typing import List

from .service import VikunjaService


class EventsService(VikunjaService):
    """Lists the event names webhooks can subscribe to."""

    def get_webhook_events(self) -> List[str]:
        return self._request("/webhooks/events", "GET")
