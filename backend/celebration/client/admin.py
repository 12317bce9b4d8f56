"""Admin dashboard and memory gallery gates.

Neither gate is access control: the passphrase lives with the client and
the list endpoints take no credentials. They only keep casual visitors
out of the views.
"""
import logging
from dataclasses import dataclass, field
from typing import Any

from celebration.client.dual_write import DualWriteClient
from celebration.config import settings
from celebration.errors import AdminLocked

logger = logging.getLogger(__name__)


class AdminGate:
    def __init__(self, passphrase: str = None):
        self._passphrase = passphrase if passphrase is not None else settings.ADMIN_PASSPHRASE
        self.unlocked = False

    def unlock(self, attempt: str) -> bool:
        self.unlocked = attempt == self._passphrase
        if not self.unlocked:
            logger.info("Incorrect admin passphrase")
        return self.unlocked


class GalleryGate:
    """Opens for any non-blank answer to the gallery prompt."""

    def __init__(self):
        self.unlocked = False

    def unlock(self, answer: str) -> bool:
        self.unlocked = bool(answer and answer.strip())
        return self.unlocked


@dataclass
class AdminSnapshot:
    rsvps: list[dict[str, Any]] = field(default_factory=list)
    memories: list[dict[str, Any]] = field(default_factory=list)

    @property
    def total_guests(self) -> int:
        total = 0
        for rsvp in self.rsvps:
            try:
                total += int(rsvp.get("guests") or 0)
            except (TypeError, ValueError):
                continue
        return total

    @property
    def photo_count(self) -> int:
        return sum(1 for memory in self.memories if memory.get("photo"))


async def load_dashboard(client: DualWriteClient, gate: AdminGate) -> AdminSnapshot:
    """Merged local + remote RSVPs and memories for the admin view."""
    if not gate.unlocked:
        raise AdminLocked("Enter the admin passphrase first")
    return AdminSnapshot(
        rsvps=await client.list_rsvps(),
        memories=await client.list_memories(),
    )


async def load_gallery(client: DualWriteClient, gate: GalleryGate) -> list[dict[str, Any]]:
    if not gate.unlocked:
        raise AdminLocked("Answer the gallery prompt first")
    return await client.list_memories()
