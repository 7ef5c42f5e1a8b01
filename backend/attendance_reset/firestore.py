"""
Minimal Firestore REST access for the attendance collection.

Only the two calls the reset needs: list one page of documents and delete
a single document by id. Both use the bearer token from oauth.exchange_refresh_token.
"""

from typing import Any, Dict, List, Optional

import httpx

from .errors import FetchFailed
from .logging_conf import get_logger
from .models import DeleteOutcome

log = get_logger(__name__)


def _body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(body: Any) -> str:
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
    return str(body)


class FirestoreClient:
    def __init__(self, client: httpx.AsyncClient, documents_url: str, access_token: str):
        self.client = client
        self.documents_url = documents_url.rstrip("/")
        self.headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }

    async def list_documents(self, collection: str, page_size: int = 500) -> List[Dict[str, Any]]:
        """Fetch a single page of documents. Later pages are never requested."""
        url = f"{self.documents_url}/{collection}"
        try:
            r = await self.client.get(url, params={"pageSize": page_size}, headers=self.headers)
        except httpx.HTTPError as e:
            raise FetchFailed(None, str(e)) from e

        if r.status_code != 200:
            raise FetchFailed(r.status_code, _body(r))

        data = r.json()
        if data.get("nextPageToken"):
            log.warning(
                f"[FETCH] {collection} has more than {page_size} documents; "
                f"only the first page is examined"
            )
        return data.get("documents") or []

    async def delete_document(self, collection: str, doc_id: str) -> DeleteOutcome:
        url = f"{self.documents_url}/{collection}/{doc_id}"
        try:
            r = await self.client.delete(url, headers=self.headers)
        except httpx.HTTPError as e:
            log.warning(f"[DELETE] {doc_id}: request failed: {e}")
            return DeleteOutcome(doc_id=doc_id, error=str(e))

        outcome = DeleteOutcome(doc_id=doc_id, status_code=r.status_code)
        if not outcome.ok:
            outcome.error = _error_message(_body(r)) if r.content else None
            log.warning(f"[DELETE] {doc_id}: status {r.status_code} {outcome.error or ''}".rstrip())
        return outcome
