#!/usr/bin/env python3
"""
Vikunja SDK Infrastructure

Shared utilities for the Vikunja API client:
- Configuration singleton (environment variables, optional .env file)
- HTTP session construction
"""

import logging
import os
from typing import Optional

import requests
from dotenv import load_dotenv

# Configure logging
logger = logging.getLogger(__name__)

# Load environment variables from .env file (optional)
load_dotenv()

SDK_VERSION = "1.0.0"

DEFAULT_API_URL = "http://localhost:3456/api/v1"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = f"vikunja-sdk/{SDK_VERSION}"


# ============================================================================
# Configuration
# ============================================================================

class VikunjaSDKConfig:
    """
    Global configuration for the Vikunja SDK.

    Values come from the environment (a .env file in the working directory
    is loaded on import):
    - VIKUNJA_API_URL: Base URL including the /api/v1 prefix
    - VIKUNJA_API_TOKEN: Bearer token (personal API token or JWT)
    - VIKUNJA_TIMEOUT: Per-request timeout in seconds
    - VIKUNJA_USER_AGENT: User-Agent header sent with every request
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_defaults()
        return cls._instance

    def _init_defaults(self):
        self.api_url = os.environ.get("VIKUNJA_API_URL", DEFAULT_API_URL)
        self.api_token: Optional[str] = os.environ.get("VIKUNJA_API_TOKEN") or None
        self.user_agent = os.environ.get("VIKUNJA_USER_AGENT", DEFAULT_USER_AGENT)

        raw_timeout = os.environ.get("VIKUNJA_TIMEOUT")
        self.timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                self.timeout = float(raw_timeout)
            except ValueError:
                logger.warning(
                    f"Ignoring invalid VIKUNJA_TIMEOUT={raw_timeout!r}, "
                    f"using {DEFAULT_TIMEOUT}s"
                )

    def reload(self):
        """Re-read configuration from the environment."""
        self._init_defaults()


def get_config() -> VikunjaSDKConfig:
    """Get the global SDK configuration."""
    return VikunjaSDKConfig()


# ============================================================================
# HTTP Session
# ============================================================================

def build_session(user_agent: Optional[str] = None) -> requests.Session:
    """
    Create the requests.Session shared by all resource services.

    Args:
        user_agent: Optional User-Agent override (defaults to config value)

    Returns:
        Session with JSON Accept and User-Agent headers set
    """
    session = requests.Session()
    session.headers["Accept"] = "application/json"
    session.headers["User-Agent"] = user_agent or get_config().user_agent
    return session
