#!/usr/bin/env python3
"""
Vikunja System Information
"""

from .models import VikunjaInfo
from .service import VikunjaService


class SystemService(VikunjaService):
    """Reads instance-wide information (version, enabled features)."""

    def get_info(self) -> VikunjaInfo:
        return self._request("/info", "GET")
