"""In-process link-in-bio profiles mutated by the Credo voice tools."""

from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone
from functools import lru_cache

from pydantic import BaseModel, Field


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProfileLink(BaseModel):
    id: str = Field(default_factory=lambda: f"link-{uuid.uuid4().hex[:12]}")
    url: str
    title: str
    description: str | None = None
    clicks: int = 0
    created_at: datetime = Field(default_factory=_utc_now)


class Profile(BaseModel):
    user_id: str
    bio: str = ""
    bio_style: str | None = None
    theme: str = "default"
    links: list[ProfileLink] = Field(default_factory=list)

    def find_link(self, title: str) -> int | None:
        wanted = title.strip().lower()
        for index, link in enumerate(self.links):
            if link.title.lower() == wanted:
                return index
        for index, link in enumerate(self.links):
            if wanted and wanted in link.title.lower():
                return index
        return None


class ProfileStore:
    """Thread-safe map of user id to profile. Profiles are created on first access."""

    def __init__(self) -> None:
        self._profiles: dict[str, Profile] = {}
        self._lock = threading.Lock()

    def get(self, user_id: str) -> Profile:
        with self._lock:
            profile = self._profiles.get(user_id)
            if profile is None:
                profile = Profile(user_id=user_id)
                self._profiles[user_id] = profile
            return profile


@lru_cache
def get_profile_store() -> ProfileStore:
    """Process-wide store shared by API tool calls and agent runs."""
    return ProfileStore()
