#!/usr/bin/env python3
"""
Vikunja User Operations

The current user's account (deletion, export, password, email) and settings
(avatar, general settings, TOTP, CalDAV tokens), plus user search.
"""

import logging
from typing import Any, Dict, List, Optional

from .models import (
    TOTP,
    CalDavToken,
    EmailUpdate,
    LoginCredentials,
    Message,
    TOTPPasscode,
    User,
    UserAvatarProvider,
    UserSettings,
)
from .service import VikunjaService, build_upload

# Configure logging
logger = logging.getLogger(__name__)


class UserService(VikunjaService):
    """Handles user and user-settings operations."""

    def get_user(self) -> User:
        """Get the currently authenticated user."""
        return self._request("/user", "GET")

    def get_users(self, params: Optional[Dict[str, Any]] = None) -> List[User]:
        """
        Search users.

        Args:
            params: Query parameters, usually {'s': 'search term'}

        Returns:
            List of matching users
        """
        return self._request("/users", "GET", params=params)

    # ========== Account ==========

    def request_deletion(self, confirmation: Dict[str, Any]) -> Message:
        """Request deletion of the current account ({'password': ...})."""
        return self._request("/user/deletion/request", "POST", confirmation)

    def confirm_deletion(self, confirmation: Dict[str, Any]) -> Message:
        """Confirm a pending account deletion ({'token': ...})."""
        return self._request("/user/deletion/confirm", "POST", confirmation)

    def cancel_deletion(self, confirmation: Dict[str, Any]) -> Message:
        return self._request("/user/deletion/cancel", "POST", confirmation)

    def confirm_email(self, confirmation: Dict[str, Any]) -> Message:
        return self._request("/user/confirm", "POST", confirmation)

    def request_export(self, confirmation: Dict[str, Any]) -> Message:
        return self._request("/user/export/request", "POST", confirmation)

    def download_export(self, confirmation: Dict[str, Any]) -> Message:
        return self._request("/user/export/download", "POST", confirmation)

    def change_password(self, old_password: str, new_password: str) -> Message:
        result = self._request(
            "/user/password",
            "POST",
            {"old_password": old_password, "new_password": new_password},
        )
        logger.info("Password changed")
        return result

    def reset_password(self, reset: Dict[str, Any]) -> Message:
        """Reset a password with a token ({'token': ..., 'new_password': ...})."""
        return self._request("/user/password/reset", "POST", reset)

    def request_reset_token(self, email: str) -> Message:
        return self._request("/user/password/token", "POST", {"email": email})

    # ========== Settings ==========

    def get_user_avatar(self) -> UserAvatarProvider:
        return self._request("/user/settings/avatar", "GET")

    def set_user_avatar(self, avatar: UserAvatarProvider) -> Message:
        """Choose the avatar provider ({'avatar_provider': 'gravatar'})."""
        return self._request("/user/settings/avatar", "POST", avatar)

    def upload_avatar(
        self,
        file_path: Optional[str] = None,
        file_content: Optional[bytes] = None,
        file_name: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> Message:
        """
        Upload an avatar image for the current user.

        Args:
            file_path: Path to the image (use this OR file_content)
            file_content: Raw image bytes
            file_name: File name, required with file_content
            content_type: MIME type (guessed from the file name if omitted)

        Returns:
            Server message
        """
        files = build_upload(
            "avatar",
            file_path=file_path,
            file_content=file_content,
            file_name=file_name,
            content_type=content_type,
        )
        return self._request("/user/settings/avatar/upload", "PUT", files=files)

    def update_general_settings(self, settings: UserSettings) -> Message:
        return self._request("/user/settings/general", "POST", settings)

    def update_email(self, email_update: EmailUpdate) -> Message:
        return self._request("/user/settings/email", "POST", email_update)

    def get_timezones(self) -> List[str]:
        return self._request("/user/timezones", "GET")

    # ========== TOTP ==========

    def get_totp_settings(self) -> TOTP:
        return self._request("/user/settings/totp", "GET")

    def enroll_totp(self) -> TOTP:
        """Start TOTP enrollment; returns the secret and enrollment URL."""
        return self._request("/user/settings/totp/enroll", "POST")

    def enable_totp(self, passcode: TOTPPasscode) -> Message:
        return self._request("/user/settings/totp/enable", "POST", passcode)

    def disable_totp(self, credentials: LoginCredentials) -> Message:
        return self._request("/user/settings/totp/disable", "POST", credentials)

    def get_totp_qrcode(self) -> bytes:
        """Get the enrollment QR code as PNG bytes."""
        return self._request("/user/settings/totp/qrcode", "GET", response_type="blob")

    # ========== CalDAV Tokens ==========

    def get_caldav_tokens(self) -> List[CalDavToken]:
        return self._request("/user/settings/token/caldav", "GET")

    def generate_caldav_token(self) -> CalDavToken:
        return self._request("/user/settings/token/caldav", "PUT")

    def delete_caldav_token(self, token_id: int) -> Message:
        return self._request(f"/user/settings/token/caldav/{token_id}", "DELETE")
