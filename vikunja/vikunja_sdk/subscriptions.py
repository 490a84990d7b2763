#!/usr/bin/env python3
"""
Vikunja Subscription Operations
"""

from typing import Union

from .models import Subscription, SubscriptionEntityType
from .service import VikunjaService


def _entity_name(entity_type: Union[str, SubscriptionEntityType]) -> str:
    return SubscriptionEntityType(entity_type).value


class SubscriptionService(VikunjaService):
    """Subscribe to change notifications for projects and tasks."""

    def subscribe(
        self, entity_type: Union[str, SubscriptionEntityType], entity_id: int
    ) -> Subscription:
        """
        Subscribe the current user to an entity.

        Args:
            entity_type: 'project' or 'task'
            entity_id: ID of the project or task

        Raises:
            ValueError: If entity_type is not a known entity
        """
        return self._request(
            f"/subscriptions/{_entity_name(entity_type)}/{entity_id}", "PUT"
        )

    def unsubscribe(
        self, entity_type: Union[str, SubscriptionEntityType], entity_id: int
    ) -> Subscription:
        return self._request(
            f"/subscriptions/{_entity_name(entity_type)}/{entity_id}", "DELETE"
        )
