#!/usr/bin/env python3
"""
Vikunja Saved Filter Operations

Saved filters show up as pseudo-projects in Vikunja.
"""

from .models import Message, SavedFilter
from .service import VikunjaService


class FilterService(VikunjaService):
    """CRUD for saved filters."""

    def create_filter(self, saved_filter: SavedFilter) -> SavedFilter:
        return self._request("/filters", "PUT", saved_filter)

    def get_filter(self, filter_id: int) -> SavedFilter:
        return self._request(f"/filters/{filter_id}", "GET")

    def update_filter(self, filter_id: int, saved_filter: SavedFilter) -> SavedFilter:
        return self._request(f"/filters/{filter_id}", "POST", saved_filter)

    def delete_filter(self, filter_id: int) -> Message:
        return self._request(f"/filters/{filter_id}", "DELETE")
