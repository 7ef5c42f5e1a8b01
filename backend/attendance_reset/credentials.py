import json
from pathlib import Path

from .errors import ConfigMissing, CredentialMissing


def load_refresh_token(config_path: Path) -> str:
    """
    Read the refresh token stored by `firebase-tools login`.

    The configstore file looks like {"tokens": {"refresh_token": "..."}, ...}.
    """
    path = Path(config_path).expanduser()
    if not path.exists():
        raise ConfigMissing(path)

    try:
        with path.open("r", encoding="utf-8") as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CredentialMissing(path, reason=f"Unreadable Firebase CLI config ({e})") from e

    tokens = config.get("tokens") if isinstance(config, dict) else None
    refresh_token = tokens.get("refresh_token") if isinstance(tokens, dict) else None
    if not refresh_token:
        raise CredentialMissing(path)
    return refresh_token
