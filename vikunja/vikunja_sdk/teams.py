#!/usr/bin/env python3
"""
Vikunja Team Operations

Functions for managing teams and their members.
"""

import logging
from typing import Any, Dict, List, Optional

from .models import Message, Team, TeamMember
from .service import VikunjaService

# Configure logging
logger = logging.getLogger(__name__)


class TeamService(VikunjaService):
    """Handles team operations with the Vikunja API."""

    def get_teams(self, params: Optional[Dict[str, Any]] = None) -> List[Team]:
        """
        Get all teams the user is part of.

        Args:
            params: Optional pagination and search parameters (page, per_page, s)

        Returns:
            List of team dictionaries
        """
        return self._request("/teams", "GET", params=params)

    def create_team(self, team: Team) -> Team:
        result = self._request("/teams", "PUT", team)
        logger.info(f"Created team '{team.get('name')}'")
        return result

    def get_team(self, team_id: int) -> Team:
        return self._request(f"/teams/{team_id}", "GET")

    def update_team(self, team_id: int, team: Team) -> Team:
        return self._request(f"/teams/{team_id}", "POST", team)

    def delete_team(self, team_id: int) -> Message:
        return self._request(f"/teams/{team_id}", "DELETE")

    def add_team_member(self, team_id: int, username: str, admin: bool = False) -> TeamMember:
        """
        Add a user to a team.

        Args:
            team_id: Team ID
            username: Username of the user to add
            admin: Whether the new member administers the team

        Returns:
            Team member dictionary
        """
        return self._request(
            f"/teams/{team_id}/members", "PUT", {"username": username, "admin": admin}
        )

    def remove_team_member(self, team_id: int, username: str) -> Message:
        return self._request(f"/teams/{team_id}/members/{username}", "DELETE")
