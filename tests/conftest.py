import json

import httpx
import pytest

from backend.attendance_reset.config import Settings

PROJECT_ID = "demo-project"
DOCS_PREFIX = f"/v1/projects/{PROJECT_ID}/databases/(default)/documents/attendance_logs"


def make_doc(doc_id, check_in=None, user_id="u1"):
    fields = {"userId": {"stringValue": user_id}}
    if check_in is not None:
        fields["checkIn"] = {"timestampValue": check_in}
    return {
        "name": f"projects/{PROJECT_ID}/databases/(default)/documents/attendance_logs/{doc_id}",
        "fields": fields,
    }


class FakeGoogle:
    """Routes token, list and delete calls; records every request."""

    def __init__(self, token_response=None, list_status=200, documents=None, delete_status=None):
        self.token_response = token_response if token_response is not None else {"access_token": "at-123"}
        self.list_status = list_status
        self.documents = documents or []
        self.delete_status = delete_status or {}
        self.requests = []

    @property
    def deletes(self):
        return [r for r in self.requests if r.method == "DELETE"]

    @property
    def lists(self):
        return [r for r in self.requests if r.method == "GET"]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "oauth2.googleapis.com":
            return httpx.Response(200, json=self.token_response)
        if request.method == "GET" and request.url.path == DOCS_PREFIX:
            if self.list_status != 200:
                return httpx.Response(self.list_status, json={"error": {"message": "denied"}})
            return httpx.Response(200, json={"documents": self.documents} if self.documents else {})
        if request.method == "DELETE" and request.url.path.startswith(DOCS_PREFIX + "/"):
            doc_id = request.url.path.rsplit("/", 1)[-1]
            status = self.delete_status.get(doc_id, 200)
            if status in (200, 204):
                return httpx.Response(status, json={}) if status == 200 else httpx.Response(204)
            return httpx.Response(status, json={"error": {"message": "backend error"}})
        return httpx.Response(404, text="unexpected route")

    @property
    def transport(self):
        return httpx.MockTransport(self.handler)


@pytest.fixture
def credential_file(tmp_path):
    path = tmp_path / "firebase-tools.json"
    path.write_text(json.dumps({"user": {"email": "ops@example.com"}, "tokens": {"refresh_token": "rt-abc"}}))
    return path


@pytest.fixture
def settings(credential_file):
    return Settings(
        firebase_project_id=PROJECT_ID,
        oauth_client_id="client-id",
        oauth_client_secret="client-secret",
        firebase_tools_config=credential_file,
        timezone="UTC",
    )
