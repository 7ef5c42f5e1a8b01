from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FIREBASE_TOOLS_CONFIG = Path.home() / ".config" / "configstore" / "firebase-tools.json"


class Settings(BaseSettings):
    firebase_project_id: str
    oauth_client_id: str
    oauth_client_secret: str
    firebase_tools_config: Path = DEFAULT_FIREBASE_TOOLS_CONFIG
    token_url: AnyHttpUrl = "https://oauth2.googleapis.com/token"
    firestore_base_url: AnyHttpUrl = "https://firestore.googleapis.com/v1"
    collection: str = "attendance_logs"
    page_size: int = 500
    timezone: Optional[str] = None  # IANA name; None means the host's zone
    http_timeout: Optional[float] = None  # seconds; None disables timeouts
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def documents_url(self) -> str:
        base = str(self.firestore_base_url).rstrip("/")
        return f"{base}/projects/{self.firebase_project_id}/databases/(default)/documents"


@lru_cache
def get_settings() -> Settings:
    return Settings()
