#!/usr/bin/env python3
"""
Vikunja Task Operations

Functions for reading, creating and updating tasks, plus everything attached
to a task: assignees, comments, labels, relations and attachments.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from .models import (
    BulkAssignees,
    BulkTask,
    Label,
    LabelTaskBulk,
    Message,
    RelationKind,
    Task,
    TaskAssignment,
    TaskAttachment,
    TaskBulkOperation,
    TaskComment,
    TaskLabel,
    TaskRelation,
    User,
)
from .service import VikunjaService, build_upload

# Configure logging
logger = logging.getLogger(__name__)


class TaskService(VikunjaService):
    """Handles task operations with the Vikunja API."""

    # ========== Task CRUD ==========

    def get_all_tasks(self, params: Optional[Dict[str, Any]] = None) -> List[Task]:
        """
        Get tasks across all projects the user has access to.

        Args:
            params: Optional query parameters. Accepts the server's `filter`
                    expression directly, or the legacy filter_by /
                    filter_value / filter_comparator / filter_concat keys,
                    which are folded into a single `filter`.

        Returns:
            List of task dictionaries

        Example:
            tasks = service.get_all_tasks({
                'filter_by': ['done', 'priority'],
                'filter_value': ['false', '3'],
                'filter_comparator': 'greater',
            })
        """
        return self._request("/tasks/all", "GET", params=params)

    def get_project_tasks(
        self, project_id: int, params: Optional[Dict[str, Any]] = None
    ) -> List[Task]:
        return self._request(f"/projects/{project_id}/tasks", "GET", params=params)

    def create_task(self, project_id: int, task: Task) -> Task:
        """
        Create a task in a project.

        Args:
            project_id: Project ID
            task: Task data; 'title' is required by the server

        Returns:
            Created task
        """
        result = self._request(f"/projects/{project_id}/tasks", "PUT", task)
        logger.info(f"Created task '{task.get('title')}' in project {project_id}")
        return result

    def get_task(self, task_id: int) -> Task:
        return self._request(f"/tasks/{task_id}", "GET")

    def update_task(self, task_id: int, task: Task) -> Task:
        """
        Update a task.

        The server replaces the task with the given fields, so callers
        usually send the full task they fetched with the changes applied.
        """
        return self._request(f"/tasks/{task_id}", "POST", task)

    def delete_task(self, task_id: int) -> Message:
        return self._request(f"/tasks/{task_id}", "DELETE")

    def mark_task_done(self, task_id: int) -> Task:
        return self._request(f"/tasks/{task_id}/done", "POST")

    def mark_task_undone(self, task_id: int) -> Task:
        return self._request(f"/tasks/{task_id}/undone", "POST")

    # ========== Assignees ==========

    def get_task_assignees(
        self, task_id: int, params: Optional[Dict[str, Any]] = None
    ) -> List[User]:
        return self._request(f"/tasks/{task_id}/assignees", "GET", params=params)

    def assign_user_to_task(self, task_id: int, user_id: int) -> TaskAssignment:
        return self._request(f"/tasks/{task_id}/assignees", "PUT", {"user_id": user_id})

    def bulk_assign_users_to_task(self, task_id: int, assignees: BulkAssignees) -> TaskAssignment:
        """Assign several users at once ({'user_ids': [...]})."""
        return self._request(f"/tasks/{task_id}/assignees/bulk", "POST", assignees)

    def remove_user_from_task(self, task_id: int, user_id: int) -> Message:
        return self._request(f"/tasks/{task_id}/assignees/{user_id}", "DELETE")

    # ========== Comments ==========

    def get_task_comments(self, task_id: int) -> List[TaskComment]:
        return self._request(f"/tasks/{task_id}/comments", "GET")

    def create_task_comment(self, task_id: int, comment: TaskComment) -> TaskComment:
        return self._request(f"/tasks/{task_id}/comments", "PUT", comment)

    def get_task_comment(self, task_id: int, comment_id: int) -> TaskComment:
        return self._request(f"/tasks/{task_id}/comments/{comment_id}", "GET")

    def update_task_comment(
        self, task_id: int, comment_id: int, comment: TaskComment
    ) -> TaskComment:
        return self._request(f"/tasks/{task_id}/comments/{comment_id}", "POST", comment)

    def delete_task_comment(self, task_id: int, comment_id: int) -> Message:
        return self._request(f"/tasks/{task_id}/comments/{comment_id}", "DELETE")

    # ========== Labels ==========

    def get_task_labels(
        self, task_id: int, params: Optional[Dict[str, Any]] = None
    ) -> List[Label]:
        return self._request(f"/tasks/{task_id}/labels", "GET", params=params)

    def add_label_to_task(self, task_id: int, label_task: TaskLabel) -> TaskLabel:
        return self._request(f"/tasks/{task_id}/labels", "PUT", label_task)

    def remove_label_from_task(self, task_id: int, label_id: int) -> Message:
        return self._request(f"/tasks/{task_id}/labels/{label_id}", "DELETE")

    def update_task_labels(self, task_id: int, labels: LabelTaskBulk) -> LabelTaskBulk:
        """Replace all labels on a task ({'label_ids': [...]})."""
        return self._request(f"/tasks/{task_id}/labels/bulk", "POST", labels)

    # ========== Relations ==========

    def create_task_relation(self, task_id: int, relation: TaskRelation) -> TaskRelation:
        return self._request(f"/tasks/{task_id}/relations", "PUT", relation)

    def delete_task_relation(
        self,
        task_id: int,
        relation_kind: Union[str, RelationKind],
        other_task_id: int,
    ) -> Message:
        """
        Delete a relation between two tasks.

        Args:
            task_id: Task the relation starts from
            relation_kind: Relation kind (e.g. 'subtask', 'blocking')
            other_task_id: Task the relation points to

        Raises:
            ValueError: If relation_kind is not a known relation kind
        """
        kind = RelationKind(relation_kind).value
        return self._request(
            f"/tasks/{task_id}/relations/{kind}/{other_task_id}", "DELETE"
        )

    # ========== Bulk ==========

    def bulk_update_tasks(self, operation: TaskBulkOperation) -> List[Task]:
        """
        Set one field to the same value on several tasks.

        Args:
            operation: {'task_ids': [...], 'field': 'done', 'value': True}
        """
        return self._request("/tasks/bulk", "POST", operation)

    def update_tasks_across_projects(self, bulk_task: BulkTask) -> Task:
        """Update tasks using a task body that carries project_ids instead of project_id."""
        return self._request("/tasks/bulk", "POST", bulk_task)

    # ========== Attachments ==========

    def get_task_attachments(
        self, task_id: int, params: Optional[Dict[str, Any]] = None
    ) -> List[TaskAttachment]:
        return self._request(f"/tasks/{task_id}/attachments", "GET", params=params)

    def upload_task_attachment(
        self,
        task_id: int,
        file_path: Optional[str] = None,
        file_content: Optional[bytes] = None,
        file_name: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> Message:
        """
        Upload a file as an attachment to a task.

        Args:
            task_id: Task ID
            file_path: Path to file to upload (use this OR file_content)
            file_content: Raw file bytes (use this OR file_path)
            file_name: Name for the file (required with file_content)
            content_type: MIME type (auto-detected if not provided)

        Returns:
            Server response for the upload

        Raises:
            ValueError: If the file inputs are invalid
            VikunjaError: If the upload fails

        Example:
            service.upload_task_attachment(42, file_path='/tmp/report.pdf')
        """
        files = build_upload(
            "files",
            file_path=file_path,
            file_content=file_content,
            file_name=file_name,
            content_type=content_type,
        )
        result = self._request(f"/tasks/{task_id}/attachments", "PUT", files=files)
        logger.info(f"Uploaded attachment '{files['files'][0]}' to task {task_id}")
        return result

    def get_task_attachment(self, task_id: int, attachment_id: int) -> bytes:
        """Download an attachment as raw bytes."""
        return self._request(
            f"/tasks/{task_id}/attachments/{attachment_id}", "GET", response_type="blob"
        )

    def delete_task_attachment(self, task_id: int, attachment_id: int) -> Message:
        return self._request(f"/tasks/{task_id}/attachments/{attachment_id}", "DELETE")
