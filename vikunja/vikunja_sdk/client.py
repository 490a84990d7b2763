#!/usr/bin/env python3
"""
Vikunja Client

VikunjaClient bundles one instance of every resource service behind a single
object. All services share one HTTP session; the bearer token is kept in step
across them whenever it changes through the client.
"""

import logging
from typing import List, Optional

import requests

from .auth import AuthService
from .avatar import AvatarService
from .events import EventsService
from .filters import FilterService
from .infrastructure import build_session, get_config
from .labels import LabelService
from .migration import MigrationService
from .models import AuthToken, LoginCredentials
from .notifications import NotificationService
from .projects import ProjectService
from .service import VikunjaService
from .shares import ShareService
from .subscriptions import SubscriptionService
from .system import SystemService
from .tables import TableService
from .tasks import TaskService
from .teams import TeamService
from .tokens import TokenService
from .users import UserService

# Configure logging
logger = logging.getLogger(__name__)


class VikunjaClient:
    """
    Entry point to the Vikunja API.

    Example:
        client = VikunjaClient("https://vikunja.example.com/api/v1")
        client.login("alice", "secret")
        for project in client.projects.get_projects():
            print(project["title"])
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the client and all of its services.

        Args:
            base_url: API base URL including the /api/v1 prefix
            token: Optional bearer token (API token or JWT)
            session: Optional requests.Session to share (created if omitted)
            timeout: Request timeout in seconds (defaults to VIKUNJA_TIMEOUT)
        """
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else build_session()

        def make(service_class):
            return service_class(self.base_url, token, self.session, timeout)

        self.auth = make(AuthService)
        self.avatar = make(AvatarService)
        self.events = make(EventsService)
        self.filters = make(FilterService)
        self.labels = make(LabelService)
        self.migration = make(MigrationService)
        self.notifications = make(NotificationService)
        self.projects = make(ProjectService)
        self.shares = make(ShareService)
        self.subscriptions = make(SubscriptionService)
        self.system = make(SystemService)
        self.tables = make(TableService)
        self.tasks = make(TaskService)
        self.teams = make(TeamService)
        self.tokens = make(TokenService)
        self.users = make(UserService)

    @classmethod
    def from_env(cls) -> "VikunjaClient":
        """Build a client from VIKUNJA_API_URL / VIKUNJA_API_TOKEN / VIKUNJA_TIMEOUT."""
        config = get_config()
        return cls(config.api_url, token=config.api_token, timeout=config.timeout)

    @property
    def services(self) -> List[VikunjaService]:
        return [
            self.auth,
            self.avatar,
            self.events,
            self.filters,
            self.labels,
            self.migration,
            self.notifications,
            self.projects,
            self.shares,
            self.subscriptions,
            self.system,
            self.tables,
            self.tasks,
            self.teams,
            self.tokens,
            self.users,
        ]

    @property
    def token(self) -> Optional[str]:
        return self.auth.token

    def set_token(self, token: str) -> None:
        """Set the bearer token on every service."""
        for service in self.services:
            service.set_token(token)
        logger.info(f"Token set on {len(self.services)} services")

    def clear_token(self) -> None:
        """Remove the bearer token from every service."""
        for service in self.services:
            service.clear_token()
        logger.info("Token cleared")

    def login(
        self, username: str, password: str, totp_passcode: Optional[str] = None
    ) -> AuthToken:
        """
        Log in and use the returned token for all further requests.

        Args:
            username: Vikunja username
            password: Password
            totp_passcode: Current TOTP code, if two-factor auth is enabled

        Returns:
            Auth token dictionary

        Raises:
            VikunjaAuthenticationError: If the credentials are rejected
        """
        credentials: LoginCredentials = {"username": username, "password": password}
        if totp_passcode:
            credentials["totp_passcode"] = totp_passcode

        result = self.auth.login(credentials)
        self._apply_token(result)
        return result

    def renew_token(self) -> AuthToken:
        """Renew the current token and use the renewed one everywhere."""
        result = self.auth.renew_token()
        self._apply_token(result)
        return result

    def _apply_token(self, result: AuthToken) -> None:
        token = result.get("token") if isinstance(result, dict) else None
        if token:
            self.set_token(token)
        else:
            logger.warning("Authentication response did not contain a token")
