#!/usr/bin/env python3
"""
Vikunja SDK - Python client for the Vikunja API

A typed, synchronous client for the Vikunja task management REST API.

Usage:
    from vikunja_sdk import VikunjaClient, VikunjaError

    client = VikunjaClient.from_env()
    client.login("alice", "secret")

    tasks = client.tasks.get_all_tasks({
        "filter_by": ["done"],
        "filter_value": ["false"],
    })
    client.tasks.mark_task_done(tasks[0]["id"])

Configuration:
    Set VIKUNJA_API_URL and VIKUNJA_API_TOKEN in the environment or a .env
    file; see vikunja_sdk.infrastructure.
"""

# Error classes
from .errors import (
    VikunjaError,
    VikunjaAuthenticationError,
    VikunjaNotFoundError,
    VikunjaValidationError,
    VikunjaServerError,
    error_for_status,
    is_vikunja_error,
    is_authentication_error,
    is_not_found_error,
    is_validation_error,
    is_server_error,
)

# Infrastructure
from .infrastructure import (
    get_config,
    VikunjaSDKConfig,
    build_session,
    SDK_VERSION,
)

# Parameter handling
from .params import (
    API_PARAMS,
    FILTER_COMPARATORS,
    transform_filter_params,
    transform_params,
    build_query_params,
    validate_required_params,
)

# Enumerations
from .models import (
    AccessRight,
    SharingType,
    RelationKind,
    AvatarProvider,
    SubscriptionEntityType,
)

# Services
from .service import VikunjaService, build_upload
from .auth import AuthService
from .avatar import AvatarService
from .events import EventsService
from .filters import FilterService
from .labels import LabelService
from .migration import MigrationService
from .notifications import NotificationService
from .projects import ProjectService
from .shares import ShareService
from .subscriptions import SubscriptionService
from .system import SystemService
from .tables import TableService
from .tasks import TaskService
from .teams import TeamService
from .tokens import TokenService
from .users import UserService

# Client facade
from .client import VikunjaClient

__all__ = [
    # Errors
    "VikunjaError",
    "VikunjaAuthenticationError",
    "VikunjaNotFoundError",
    "VikunjaValidationError",
    "VikunjaServerError",
    "error_for_status",
    "is_vikunja_error",
    "is_authentication_error",
    "is_not_found_error",
    "is_validation_error",
    "is_server_error",
    # Infrastructure
    "get_config",
    "VikunjaSDKConfig",
    "build_session",
    "SDK_VERSION",
    # Params
    "API_PARAMS",
    "FILTER_COMPARATORS",
    "transform_filter_params",
    "transform_params",
    "build_query_params",
    "validate_required_params",
    # Enums
    "AccessRight",
    "SharingType",
    "RelationKind",
    "AvatarProvider",
    "SubscriptionEntityType",
    # Services
    "VikunjaService",
    "build_upload",
    "AuthService",
    "AvatarService",
    "EventsService",
    "FilterService",
    "LabelService",
    "MigrationService",
    "NotificationService",
    "ProjectService",
    "ShareService",
    "SubscriptionService",
    "SystemService",
    "TableService",
    "TaskService",
    "TeamService",
    "TokenService",
    "UserService",
    # Client
    "VikunjaClient",
]

__version__ = SDK_VERSION
