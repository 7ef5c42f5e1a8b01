"""
Failures raised by the reset pipeline.

Every fatal stage failure derives from ResetError so the entry point can map
it to exit code 1. Individual delete failures are not raised; they are
recorded as DeleteOutcome entries instead.
"""

from typing import Any, Optional

LOGIN_HINT = "Run: npx firebase-tools login"


class ResetError(Exception):
    """Base class for fatal reset failures."""


class SettingsInvalid(ResetError):
    pass


class ConfigMissing(ResetError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Firebase CLI not logged in ({path} not found). {LOGIN_HINT}")


class CredentialMissing(ResetError):
    def __init__(self, path, reason: str = "No refresh token found"):
        self.path = path
        super().__init__(f"{reason} in {path}. {LOGIN_HINT}")


class AuthFailed(ResetError):
    def __init__(self, payload: Any):
        self.payload = payload
        super().__init__(f"Token refresh failed: {payload}")


class FetchFailed(ResetError):
    def __init__(self, status_code: Optional[int], body: Any):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Failed to list documents ({status_code}): {body}")
