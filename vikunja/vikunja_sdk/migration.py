#!/usr/bin/env python3
"""
Vikunja Migration Operations

Import data from other task managers into Vikunja.

OAuth-based migrators (Todoist, Microsoft To Do, Trello) follow the same
three steps: fetch the auth URL, send the returned code to /migrate, then
poll /status. File-based migrators (TickTick CSV, Vikunja export zip) upload
the file as the multipart field 'import'.
"""

import logging
from typing import Optional

from .models import AuthURL, Message, MigrationStatus
from .service import VikunjaService, build_upload

# Configure logging
logger = logging.getLogger(__name__)

IMPORT_FIELD = "import"


class MigrationService(VikunjaService):
    """Handles migrations from other services."""

    # ========== Todoist ==========

    def get_todoist_auth_url(self) -> AuthURL:
        return self._request("/migration/todoist/auth", "GET")

    def migrate_todoist(self, migration: dict) -> Message:
        """Start a Todoist migration with the OAuth code ({'code': ...})."""
        return self._request("/migration/todoist/migrate", "POST", migration)

    def get_todoist_migration_status(self) -> MigrationStatus:
        return self._request("/migration/todoist/status", "GET")

    # ========== TickTick ==========

    def migrate_ticktick(
        self,
        file_path: Optional[str] = None,
        file_content: Optional[bytes] = None,
        file_name: Optional[str] = None,
    ) -> Message:
        """
        Import a TickTick CSV backup.

        Args:
            file_path: Path to the exported CSV (use this OR file_content)
            file_content: Raw CSV bytes
            file_name: File name, required with file_content

        Returns:
            Success message
        """
        files = build_upload(
            IMPORT_FIELD, file_path=file_path, file_content=file_content, file_name=file_name
        )
        logger.info("Starting TickTick migration")
        return self._request("/migration/ticktick/migrate", "POST", files=files)

    def get_ticktick_migration_status(self) -> MigrationStatus:
        return self._request("/migration/ticktick/status", "GET")

    # ========== Microsoft To Do ==========

    def get_microsoft_todo_auth_url(self) -> AuthURL:
        return self._request("/migration/microsoft-todo/auth", "GET")

    def migrate_microsoft_todo(self, migration: dict) -> Message:
        return self._request("/migration/microsoft-todo/migrate", "POST", migration)

    def get_microsoft_todo_migration_status(self) -> MigrationStatus:
        return self._request("/migration/microsoft-todo/status", "GET")

    # ========== Trello ==========

    def get_trello_auth_url(self) -> AuthURL:
        return self._request("/migration/trello/auth", "GET")

    def migrate_trello(self, migration: dict) -> Message:
        return self._request("/migration/trello/migrate", "POST", migration)

    def get_trello_migration_status(self) -> MigrationStatus:
        return self._request("/migration/trello/status", "GET")

    # ========== Vikunja export file ==========

    def migrate_vikunja_file(
        self,
        file_path: Optional[str] = None,
        file_content: Optional[bytes] = None,
        file_name: Optional[str] = None,
    ) -> Message:
        """Import a Vikunja data export (zip), from a path or raw bytes."""
        files = build_upload(
            IMPORT_FIELD, file_path=file_path, file_content=file_content, file_name=file_name
        )
        logger.info("Starting Vikunja file migration")
        return self._request("/migration/vikunja-file/migrate", "POST", files=files)

    def get_vikunja_file_migration_status(self) -> MigrationStatus:
        return self._request("/migration/vikunja-file/status", "GET")
