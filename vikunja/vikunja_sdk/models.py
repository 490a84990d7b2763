#!/usr/bin/env python3
"""
Vikunja API Data Shapes

TypedDict declarations mirroring the JSON resources returned by the API.
Every field is optional (total=False): plain dicts from the API satisfy them
and nothing is validated locally.
"""

from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, TypedDict


# ============================================================================
# Enumerations
# ============================================================================

class AccessRight(IntEnum):
    READ_ONLY = 0
    READ_WRITE = 1
    ADMIN = 2


class SharingType(IntEnum):
    READ = 0
    WRITE = 1
    ADMIN = 2


class RelationKind(str, Enum):
    UNKNOWN = "unknown"
    SUBTASK = "subtask"
    PARENTTASK = "parenttask"
    RELATED = "related"
    DUPLICATEOF = "duplicateof"
    DUPLICATES = "duplicates"
    BLOCKING = "blocking"
    BLOCKED = "blocked"
    PRECEDES = "precedes"
    FOLLOWS = "follows"
    COPIEDFROM = "copiedfrom"
    COPIEDTO = "copiedto"


class AvatarProvider(str, Enum):
    GRAVATAR = "gravatar"
    UPLOAD = "upload"
    INITIALS = "initials"
    MARBLE = "marble"


class SubscriptionEntityType(str, Enum):
    PROJECT = "project"
    TASK = "task"


# ============================================================================
# Common
# ============================================================================

class Message(TypedDict, total=False):
    message: str


class UserRef(TypedDict, total=False):
    id: int
    username: str
    email: str


# ============================================================================
# Auth and users
# ============================================================================

class LoginCredentials(TypedDict, total=False):
    username: str
    password: str
    totp_passcode: str
    long_token: bool


class AuthToken(TypedDict, total=False):
    token: str
    expires_at: str


class OpenIDCallback(TypedDict, total=False):
    code: str
    provider: int
    redirect_url: str


class User(TypedDict, total=False):
    id: int
    username: str
    email: str
    name: str
    is_active: bool
    created: str
    updated: str


class UserCreation(TypedDict, total=False):
    username: str
    email: str
    password: str


class UserSettings(TypedDict, total=False):
    email: str
    name: str
    email_reminders_enabled: bool
    discoverable_by_name: bool
    discoverable_by_email: bool
    default_project_id: int
    week_start: int
    timezone: str
    language: str


class UserAvatarProvider(TypedDict, total=False):
    provider: str
    email: str


class EmailUpdate(TypedDict, total=False):
    email: str
    password: str


class CalDavToken(TypedDict, total=False):
    id: int
    token: str
    created: str
    expires: str


class TOTP(TypedDict, total=False):
    enabled: bool
    url: str
    secret: str


class TOTPPasscode(TypedDict, total=False):
    passcode: str


# ============================================================================
# Projects
# ============================================================================

class BackgroundInformation(TypedDict, total=False):
    blur_hash: str
    full_url: str
    thumb_url: str
    background_image_id: int
    background_image_url: str


class Project(TypedDict, total=False):
    id: int
    title: str
    description: str
    parent_project_id: int
    is_archived: bool
    hex_color: str
    owner: UserRef
    created: str
    updated: str
    position: float
    identifier: str
    background_information: BackgroundInformation


class ProjectUser(TypedDict, total=False):
    user_id: int
    username: str
    project_id: int
    right: int


class UserWithRight(TypedDict, total=False):
    id: int
    username: str
    email: str
    name: str
    right: int


class TeamProject(TypedDict, total=False):
    team_id: int
    project_id: int
    right: int


class TeamWithRight(TypedDict, total=False):
    id: int
    name: str
    description: str
    right: int


class ProjectDuplicate(TypedDict, total=False):
    parent_project_id: int
    title: str
    include_tasks: bool
    include_teams: bool
    include_labels: bool
    include_buckets: bool
    duplicated_project: Project


class Bucket(TypedDict, total=False):
    id: int
    project_view_id: int
    title: str
    position: float
    limit: int
    count: int
    created: str
    updated: str
    created_by: UserRef
    tasks: List["Task"]


class BackgroundImage(TypedDict, total=False):
    photo_id: str


class UnsplashBackgroundImage(TypedDict, total=False):
    id: str
    title: str
    url: str
    thumbnail_url: str
    creator: str
    meta: Dict[str, Any]


# ============================================================================
# Sharing and subscriptions
# ============================================================================

class LinkShareAuth(TypedDict, total=False):
    password: str


class LinkSharing(TypedDict, total=False):
    id: int
    project_id: int
    hash: str
    right: int
    name: str
    sharing_type: int
    password: str
    shared_by: UserRef
    created: str
    updated: str
    expires: Optional[str]


class Subscription(TypedDict, total=False):
    id: int
    entity: str
    entity_id: int
    created: str


# ============================================================================
# Tasks and labels
# ============================================================================

class Label(TypedDict, total=False):
    id: int
    title: str
    description: str
    hex_color: str
    created_by: UserRef
    created: str
    updated: str


class TaskLabel(TypedDict, total=False):
    task_id: int
    label_id: int


class TaskAttachment(TypedDict, total=False):
    id: int
    task_id: int
    file: Dict[str, Any]
    created_by: UserRef
    created: str


class Task(TypedDict, total=False):
    id: int
    project_id: int
    title: str
    description: str
    done: bool
    done_at: str
    due_date: str
    start_date: str
    end_date: str
    repeat_after: int
    repeat_mode: int
    priority: int
    percent_done: float
    hex_color: str
    identifier: str
    index: int
    position: float
    bucket_id: int
    is_favorite: bool
    created_by: UserRef
    created: str
    updated: str
    labels: List[Label]
    assignees: List[UserRef]
    related_tasks: Dict[str, List[Dict[str, Any]]]
    attachments: List[TaskAttachment]
    reminders: List[Dict[str, Any]]


class TaskAssignment(TypedDict, total=False):
    user_id: int
    task_id: int


class BulkAssignees(TypedDict, total=False):
    user_ids: List[int]


class LabelTaskBulk(TypedDict, total=False):
    label_ids: List[int]


class TaskRelation(TypedDict, total=False):
    task_id: int
    other_task_id: int
    relation_kind: str
    created_by: UserRef
    created: str


class TaskComment(TypedDict, total=False):
    id: int
    task_id: int
    comment: str
    author: UserRef
    created: str
    updated: str


class TaskBulkOperation(TypedDict, total=False):
    task_ids: List[int]
    field: str
    value: Any


class BulkTask(TypedDict, total=False):
    project_ids: List[int]
    task_ids: List[int]
    title: str
    description: str
    done: bool
    due_date: str
    priority: int
    project_id: int


# ============================================================================
# Teams, tokens, notifications
# ============================================================================

class TeamMember(TypedDict, total=False):
    id: int
    username: str
    admin: bool


class Team(TypedDict, total=False):
    id: int
    name: str
    description: str
    is_public: bool
    members: List[TeamMember]
    created_by: UserRef
    created: str
    updated: str


class APIToken(TypedDict, total=False):
    id: int
    title: str
    token: str
    permissions: Dict[str, List[str]]
    expires_at: str
    created: str


class APITokenRoute(TypedDict, total=False):
    path: str
    method: str


class DatabaseNotification(TypedDict, total=False):
    id: int
    name: str
    notification: Dict[str, Any]
    read: bool
    read_at: Optional[str]
    created: str


# ============================================================================
# Filters, migration, system
# ============================================================================

class SavedFilter(TypedDict, total=False):
    id: int
    title: str
    description: str
    filters: Dict[str, Any]
    is_favorite: bool
    owner: UserRef
    created: str
    updated: str


class AuthURL(TypedDict, total=False):
    url: str


class MigrationStatus(TypedDict, total=False):
    id: int
    migrator_name: str
    started_at: str
    finished_at: str


class WebhookEvent(TypedDict, total=False):
    name: str


class VikunjaInfo(TypedDict, total=False):
    version: str
    frontend_url: str
    motd: str
    link_sharing_enabled: bool
    max_file_size: str
    registration_enabled: bool
    available_migrators: List[str]
    task_attachments_enabled: bool
    enabled_background_providers: List[str]
    totp_enabled: bool
    legal: Dict[str, str]
    caldav_enabled: bool
    auth: Dict[str, Any]
    email_reminders_enabled: bool
    user_deletion_enabled: bool
    task_comments_enabled: bool
    demo_mode_enabled: bool
    webhooks_enabled: bool
    public_teams_enabled: bool
