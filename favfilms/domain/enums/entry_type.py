from __future__ import annotations
from enum import StrEnum


class EntryType(StrEnum):
    movie = "Movie"
    tv_show = "TV_Show"

    @classmethod
    def parse(cls, v: str | EntryType) -> EntryType:
        """Accept the spellings clients send ("TV Show", "TVShow", "tv_show")."""
        if isinstance(v, cls):
            return v
        key = str(v).strip().replace(" ", "").replace("_", "").lower()
        for member in cls:
            if member.value.replace("_", "").lower() == key:
                return member
        raise ValueError(f"type must be one of: {', '.join(m.value for m in cls)}")
