#!/usr/bin/env python3
"""
Vikunja Project Operations

Project CRUD plus everything hanging off a project: user and team access,
duplication, backgrounds (uploaded or from Unsplash), buckets and link
shares.
"""

import logging
from typing import Any, Dict, List, Optional

from .models import (
    BackgroundImage,
    Bucket,
    LinkSharing,
    Message,
    Project,
    ProjectDuplicate,
    ProjectUser,
    TeamProject,
    TeamWithRight,
    UnsplashBackgroundImage,
    UserWithRight,
)
from .service import VikunjaService, build_upload

# Configure logging
logger = logging.getLogger(__name__)


class ProjectService(VikunjaService):
    """Handles project operations with the Vikunja API."""

    # ========== Project CRUD ==========

    def get_projects(self, params: Optional[Dict[str, Any]] = None) -> List[Project]:
        """
        Get all projects the user has access to.

        Args:
            params: Optional query parameters (page, per_page, s, is_archived)

        Returns:
            List of project dictionaries

        Example:
            projects = service.get_projects({'is_archived': True})
        """
        return self._request("/projects", "GET", params=params)

    def create_project(self, project: Project) -> Project:
        """Create a new project."""
        result = self._request("/projects", "PUT", project)
        logger.info(f"Created project '{project.get('title')}' (ID: {result.get('id')})")
        return result

    def get_project(self, project_id: int) -> Project:
        return self._request(f"/projects/{project_id}", "GET")

    def update_project(self, project_id: int, project: Project) -> Project:
        return self._request(f"/projects/{project_id}", "POST", project)

    def delete_project(self, project_id: int) -> Message:
        return self._request(f"/projects/{project_id}", "DELETE")

    def duplicate_project(self, project_id: int, config: ProjectDuplicate) -> ProjectDuplicate:
        """
        Duplicate an existing project.

        Args:
            project_id: Project ID to duplicate
            config: Duplication options (parent_project_id, ...)

        Returns:
            Duplication result, including the new project
        """
        return self._request(f"/projects/{project_id}/duplicate", "PUT", config)

    # ========== User Access ==========

    def get_project_users(
        self, project_id: int, params: Optional[Dict[str, Any]] = None
    ) -> List[UserWithRight]:
        return self._request(f"/projects/{project_id}/users", "GET", params=params)

    def add_user_to_project(self, project_id: int, project_user: ProjectUser) -> ProjectUser:
        return self._request(f"/projects/{project_id}/users", "PUT", project_user)

    def update_project_user_right(self, project_id: int, user_id: int, right: int) -> ProjectUser:
        """Change a user's access right (0 read, 1 read/write, 2 admin)."""
        return self._request(
            f"/projects/{project_id}/users/{user_id}", "POST", {"right": int(right)}
        )

    def remove_user_from_project(self, project_id: int, user_id: int) -> Message:
        return self._request(f"/projects/{project_id}/users/{user_id}", "DELETE")

    # ========== Team Access ==========

    def get_project_teams(
        self, project_id: int, params: Optional[Dict[str, Any]] = None
    ) -> List[TeamWithRight]:
        return self._request(f"/projects/{project_id}/teams", "GET", params=params)

    def add_team_to_project(self, project_id: int, team_project: TeamProject) -> TeamProject:
        return self._request(f"/projects/{project_id}/teams", "PUT", team_project)

    def update_project_team_right(self, project_id: int, team_id: int, right: int) -> TeamProject:
        return self._request(
            f"/projects/{project_id}/teams/{team_id}", "POST", {"right": int(right)}
        )

    def remove_team_from_project(self, project_id: int, team_id: int) -> Message:
        return self._request(f"/projects/{project_id}/teams/{team_id}", "DELETE")

    # ========== Backgrounds ==========

    def get_project_background(self, project_id: int) -> bytes:
        """Download the project background image as raw bytes."""
        return self._request(
            f"/projects/{project_id}/background", "GET", response_type="blob"
        )

    def delete_project_background(self, project_id: int) -> Project:
        return self._request(f"/projects/{project_id}/background", "DELETE")

    def set_unsplash_background(self, project_id: int, image: BackgroundImage) -> Project:
        return self._request(
            f"/projects/{project_id}/backgrounds/unsplash", "POST", image
        )

    def upload_project_background(
        self,
        project_id: int,
        file_path: Optional[str] = None,
        file_content: Optional[bytes] = None,
        file_name: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> Project:
        """
        Upload an image as the project background.

        Args:
            project_id: Project ID
            file_path: Path to the image (use this OR file_content)
            file_content: Raw image bytes
            file_name: File name, required with file_content
            content_type: MIME type (guessed from the file name if omitted)

        Returns:
            Updated project
        """
        files = build_upload(
            "background",
            file_path=file_path,
            file_content=file_content,
            file_name=file_name,
            content_type=content_type,
        )
        return self._request(
            f"/projects/{project_id}/backgrounds/upload", "PUT", files=files
        )

    def search_backgrounds(
        self, search: str, page: Optional[int] = None
    ) -> List[UnsplashBackgroundImage]:
        """
        Search Unsplash for background images.

        The Unsplash proxy pages with `p`; `page` is remapped on the way out.

        Args:
            search: Search term
            page: Optional page number

        Returns:
            List of image dictionaries
        """
        params: Dict[str, Any] = {"s": search}
        if page is not None:
            params["page"] = page
        return self._request("/backgrounds/unsplash/search", "GET", params=params)

    def get_background_image(self, image_id: str) -> bytes:
        return self._request(
            f"/backgrounds/unsplash/image/{image_id}", "GET", response_type="blob"
        )

    def get_background_thumbnail(self, image_id: str) -> bytes:
        return self._request(
            f"/backgrounds/unsplash/image/{image_id}/thumb", "GET", response_type="blob"
        )

    # ========== Buckets ==========

    def get_buckets(
        self, project_id: int, params: Optional[Dict[str, Any]] = None
    ) -> List[Bucket]:
        """Get the kanban buckets of a project, with their tasks."""
        return self._request(f"/projects/{project_id}/buckets", "GET", params=params)

    def create_bucket(self, project_id: int, bucket: Bucket) -> Bucket:
        return self._request(f"/projects/{project_id}/buckets", "PUT", bucket)

    def update_bucket(self, project_id: int, bucket_id: int, bucket: Bucket) -> Bucket:
        return self._request(f"/projects/{project_id}/buckets/{bucket_id}", "POST", bucket)

    def delete_bucket(self, project_id: int, bucket_id: int) -> Message:
        return self._request(f"/projects/{project_id}/buckets/{bucket_id}", "DELETE")

    # ========== Link Shares ==========

    def get_link_shares(
        self, project_id: int, params: Optional[Dict[str, Any]] = None
    ) -> List[LinkSharing]:
        return self._request(f"/projects/{project_id}/shares", "GET", params=params)

    def get_link_share(self, project_id: int, share_id: int) -> LinkSharing:
        return self._request(f"/projects/{project_id}/shares/{share_id}", "GET")

    def create_link_share(self, project_id: int, share: LinkSharing) -> LinkSharing:
        return self._request(f"/projects/{project_id}/shares", "PUT", share)

    def delete_link_share(self, project_id: int, share_id: int) -> Message:
        return self._request(f"/projects/{project_id}/shares/{share_id}", "DELETE")
