#!/usr/bin/env python3
"""
Vikunja Test Table Operations

Only available when the server runs with testing endpoints enabled.
"""

from typing import Any, Dict, List

from .service import VikunjaService


class TableService(VikunjaService):
    """Resets database tables on test instances."""

    def reset_table(self, table_name: str) -> List[Dict[str, Any]]:
        """Reset a table to its fixture state and return the new rows."""
        return self._request(f"/test/{table_name}", "PATCH")
