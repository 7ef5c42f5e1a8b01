"""
Delete today's attendance logs so every employee starts the day neutral.

Pipeline: refresh token from the Firebase CLI config -> access token ->
one page of attendance_logs -> keep records checked in today -> delete
them one at a time. Individual delete failures are reported and skipped.
"""

import asyncio
import sys
from datetime import datetime
from typing import List, Optional

import httpx
from pydantic import ValidationError

from .config import Settings, get_settings
from .credentials import load_refresh_token
from .errors import ResetError, SettingsInvalid
from .firestore import FirestoreClient
from .logging_conf import configure_logging, get_logger
from .models import AttendanceRecord, DeleteOutcome, ResetSummary
from .oauth import exchange_refresh_token
from .selection import filter_only_today, today_window

log = get_logger(__name__)


def load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        missing = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise SettingsInvalid(f"Invalid or missing settings: {missing}. Check your .env") from e


async def delete_records(
    firestore: FirestoreClient, collection: str, records: List[AttendanceRecord]
) -> List[DeleteOutcome]:
    outcomes: List[DeleteOutcome] = []
    for record in records:
        print(f"  - {record.doc_id} | user: {record.user_id or '?'} | checkIn: {record.check_in_raw or '?'}")
        outcome = await firestore.delete_document(collection, record.doc_id)
        if not outcome.ok:
            print(f"    FAIL: {outcome.status_code} {outcome.error or ''}".rstrip(), file=sys.stderr)
        outcomes.append(outcome)
    return outcomes


async def run_reset(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    now: Optional[datetime] = None,
) -> ResetSummary:
    refresh_token = load_refresh_token(settings.firebase_tools_config)

    timeout = httpx.Timeout(settings.http_timeout)
    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        print("Refreshing access token...")
        access_token = await exchange_refresh_token(
            client,
            str(settings.token_url),
            refresh_token,
            settings.oauth_client_id,
            settings.oauth_client_secret,
        )
        print("Got access token.")

        firestore = FirestoreClient(client, settings.documents_url, access_token)
        print(f"\nFetching {settings.collection}...")
        documents = await firestore.list_documents(settings.collection, settings.page_size)
        print(f"Total docs: {len(documents)}")

        window = today_window(now, settings.timezone)
        records = [AttendanceRecord.from_document(doc) for doc in documents if isinstance(doc, dict)]
        todays = filter_only_today(records, window)
        summary = ResetSummary(window=window, fetched=len(documents), targeted=len(todays))

        if not todays:
            print("\nNo logs for today. Already neutral!")
            return summary

        print(f"Found {len(todays)} log(s) for today ({window.start.date().isoformat()}). Deleting...")
        summary.outcomes = await delete_records(firestore, settings.collection, todays)

    if summary.failed:
        log.warning(f"[RESET] {summary.failed} of {summary.targeted} deletion(s) failed")
    print(f"\nDone! Deleted {summary.targeted} log(s). All employees are neutral.")
    return summary


def main(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    now: Optional[datetime] = None,
) -> int:
    """Run the reset once. Returns the process exit code."""
    try:
        if settings is None:
            settings = load_settings()
        configure_logging(settings.log_level)
        asyncio.run(run_reset(settings, transport=transport, now=now))
    except ResetError as e:
        log.error(f"[RESET] Aborted: {e.__class__.__name__}")
        print(str(e), file=sys.stderr)
        return 1
    except Exception as e:
        log.error(f"[RESET] Unexpected error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
