from typing import Any

import httpx

from .errors import AuthFailed
from .logging_conf import get_logger

log = get_logger(__name__)


def _payload(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


async def exchange_refresh_token(
    client: httpx.AsyncClient,
    token_url: str,
    refresh_token: str,
    client_id: str,
    client_secret: str,
) -> str:
    """
    Trade a refresh token for a short-lived access token (OAuth2 refresh_token grant).

    Raises AuthFailed with the provider's raw payload when no access_token comes back.
    """
    form = {
        "grant_type": "refresh_token",
        "refresh_token": refresh_token,
        "client_id": client_id,
        "client_secret": client_secret,
    }
    try:
        r = await client.post(token_url, data=form)
    except httpx.HTTPError as e:
        log.error(f"[AUTH] Token endpoint unreachable: {e}")
        raise AuthFailed(str(e)) from e

    payload = _payload(r)
    token = payload.get("access_token") if isinstance(payload, dict) else None
    if not token:
        log.error(f"[AUTH] Token refresh failed with status {r.status_code}")
        raise AuthFailed(payload)
    return token
