"""Participation badges: a cosmetic title/color derived from a guest name.

Two guests with the same name get the same badge, and since the local badge
map is keyed by name the later one overwrites the earlier. That is accepted.
"""
from datetime import datetime, timezone
from typing import Optional

from celebration.schemas.badge import Badge

BADGE_TITLES = (
    "Early Bird",
    "Party Enthusiast",
    "Celebration VIP",
    "Special Guest",
    "Friend of Honor",
    "PR Celebration Star",
    "Grand Guest",
    "Celebration Royalty",
)


def name_hash(name: str) -> int:
    """Sum of the UTF-16 code units of ``name``."""
    encoded = name.encode("utf-16-le")
    return sum(int.from_bytes(encoded[i:i + 2], "little") for i in range(0, len(encoded), 2))


def assign_badge(name: str, earned_at: Optional[str] = None) -> Badge:
    total = name_hash(name)
    hue = (total * 37) % 360
    return Badge(
        title=BADGE_TITLES[total % len(BADGE_TITLES)],
        color=f"hsl({hue}, 80%, 45%)",
        earned_at=earned_at or datetime.now(timezone.utc).isoformat(),
    )
