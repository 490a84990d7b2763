#!/usr/bin/env python3
"""
Vikunja Label Operations

Functions for managing labels. Attaching labels to tasks lives in
TaskService.
"""

import logging
from typing import Any, Dict, List, Optional

from .models import Label, Message
from .service import VikunjaService

# Configure logging
logger = logging.getLogger(__name__)


class LabelService(VikunjaService):
    """Handles label operations with the Vikunja API."""

    def get_labels(self, params: Optional[Dict[str, Any]] = None) -> List[Label]:
        """
        Get all labels the user has access to.

        Args:
            params: Optional pagination and search parameters (page, per_page, s)

        Returns:
            List of label dictionaries

        Example:
            labels = service.get_labels({'s': 'urgent', 'per_page': 20})
        """
        return self._request("/labels", "GET", params=params)

    def create_label(self, label: Label) -> Label:
        """Create a new label."""
        result = self._request("/labels", "PUT", label)
        logger.info(f"Created label '{label.get('title')}'")
        return result

    def get_label(self, label_id: int) -> Label:
        return self._request(f"/labels/{label_id}", "GET")

    def update_label(self, label_id: int, label: Label) -> Label:
        return self._request(f"/labels/{label_id}", "PUT", label)

    def delete_label(self, label_id: int) -> Message:
        return self._request(f"/labels/{label_id}", "DELETE")
