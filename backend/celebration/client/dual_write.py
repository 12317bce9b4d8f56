"""Dual-write submission flow: local cache first, remote API best effort.

Every submission has two legs:

1. Local leg (synchronous). The record is appended to the cached list and
   the list is written back whole. Once this returns, the submission counts
   as done for the user.
2. Remote leg (background task). The same payload is posted to the API.
   Failures are logged and recorded on the receipt, never raised, never
   retried, and never roll back the local leg.

Reads merge the cached list with the remote one (see ``merge_by_id``).
"""
import asyncio
import enum
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Optional, Union

from celebration.client.api_client import CelebrationApi
from celebration.client.local_cache import (
    FileCache,
    LocalCache,
    read_list,
    read_map,
    write_list,
    write_map,
)
from celebration.client.merge import merge_by_id
from celebration.config import settings
from celebration.schemas.badge import Badge
from celebration.schemas.memory import MemoryCreate
from celebration.schemas.rsvp import RsvpCreate
from celebration.schemas.validation import Rejected, check
from celebration.services.badge_service import assign_badge

logger = logging.getLogger(__name__)

RSVPS_KEY = "pr_party_rsvps"
MEMORIES_KEY = "pr_party_memories"
BADGES_KEY = "pr_party_badges"


class RemoteStatus(str, enum.Enum):
    pending = "pending"
    committed = "committed"
    failed = "failed"


@dataclass
class RemoteOutcome:
    status: RemoteStatus = RemoteStatus.pending
    record: Optional[dict[str, Any]] = None
    error: Optional[BaseException] = None


@dataclass
class SubmissionReceipt:
    """Result of a submission whose local leg has committed."""

    record: dict[str, Any]
    badge: Optional[Badge] = None
    remote: RemoteOutcome = field(default_factory=RemoteOutcome)
    task: Optional[asyncio.Task] = field(default=None, repr=False)

    async def wait_remote(self) -> RemoteOutcome:
        if self.task is not None:
            await self.task
        return self.remote


class DualWriteClient:
    def __init__(
        self,
        cache: LocalCache,
        api: CelebrationApi,
        clock: Callable[[], float] = time.time,
    ):
        self.cache = cache
        self.api = api
        self._clock = clock
        self._pending: set[asyncio.Task] = set()

    @classmethod
    def from_settings(cls) -> "DualWriteClient":
        return cls(FileCache(settings.LOCAL_CACHE_PATH), CelebrationApi.from_settings())

    # -- submissions --------------------------------------------------------

    async def submit_rsvp(self, payload: dict[str, Any]) -> Union[SubmissionReceipt, Rejected]:
        """Commit an RSVP locally, award its badge, and mirror it remotely."""
        checked = check(RsvpCreate, payload)
        if isinstance(checked, Rejected):
            return checked

        fields = checked.model_dump(by_alias=True)
        record = self._commit_local(RSVPS_KEY, fields)

        badge = assign_badge(checked.full_name, earned_at=record["createdAt"])
        badges = read_map(self.cache, BADGES_KEY)
        badges[checked.full_name] = badge.model_dump(by_alias=True)
        write_map(self.cache, BADGES_KEY, badges)

        return self._mirror(record, self.api.create_rsvp(fields), badge)

    async def submit_memory(self, payload: dict[str, Any]) -> Union[SubmissionReceipt, Rejected]:
        """Commit a memory (photo kept as its data-URI) locally and mirror it."""
        checked = check(MemoryCreate, payload)
        if isinstance(checked, Rejected):
            return checked

        fields = checked.model_dump(by_alias=True)
        record = self._commit_local(MEMORIES_KEY, fields)
        return self._mirror(record, self.api.create_memory(fields))

    def _commit_local(self, key: str, fields: dict[str, Any]) -> dict[str, Any]:
        now = self._clock()
        # Timestamp ids: not unique under clock skew or a double submit
        record = {
            "id": int(now * 1000),
            **fields,
            "createdAt": datetime.fromtimestamp(now, timezone.utc).isoformat(),
        }
        records = read_list(self.cache, key)
        records.append(record)
        write_list(self.cache, key, records)
        logger.info("Saved %s %s locally", key, record["id"])
        return record

    def _mirror(
        self,
        record: dict[str, Any],
        request: Awaitable[dict[str, Any]],
        badge: Optional[Badge] = None,
    ) -> SubmissionReceipt:
        receipt = SubmissionReceipt(record=record, badge=badge)
        task = asyncio.create_task(self._run_remote(receipt.remote, request))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        receipt.task = task
        return receipt

    async def _run_remote(self, outcome: RemoteOutcome, request: Awaitable[dict[str, Any]]) -> RemoteOutcome:
        try:
            outcome.record = await request
        except Exception as exc:
            outcome.status = RemoteStatus.failed
            outcome.error = exc
            logger.warning("Remote submission failed, record kept locally only: %s", exc)
        else:
            outcome.status = RemoteStatus.committed
        return outcome

    async def drain(self) -> None:
        """Wait for every remote leg still in flight."""
        if self._pending:
            await asyncio.gather(*list(self._pending))

    # -- reads --------------------------------------------------------------

    def local_rsvps(self) -> list[dict[str, Any]]:
        return read_list(self.cache, RSVPS_KEY)

    def local_memories(self) -> list[dict[str, Any]]:
        return read_list(self.cache, MEMORIES_KEY)

    def badge_for(self, name: str) -> Optional[Badge]:
        stored = read_map(self.cache, BADGES_KEY).get(name)
        if not isinstance(stored, dict):
            return None
        checked = check(Badge, stored)
        return None if isinstance(checked, Rejected) else checked

    async def _fetch_remote(self, fetch: Callable[[], Awaitable[list]]) -> list[dict[str, Any]]:
        try:
            records = await fetch()
        except Exception as exc:
            logger.warning("Remote fetch failed, showing local records only: %s", exc)
            return []
        return records if isinstance(records, list) else []

    async def list_rsvps(self) -> list[dict[str, Any]]:
        return merge_by_id(self.local_rsvps(), await self._fetch_remote(self.api.list_rsvps))

    async def list_memories(self) -> list[dict[str, Any]]:
        return merge_by_id(self.local_memories(), await self._fetch_remote(self.api.list_memories))
