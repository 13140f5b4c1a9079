"""
osu! v1 API data models and lookup results.

The v1 API serialises every number as a string; the models coerce them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from reworkbot.data_models.fields import float_field, int_field, require_mapping, str_field


@dataclass(frozen=True)
class OsuUser:
    """An osu! user as returned by get_user."""
    id: int
    name: str
    country: Optional[str] = None
    pp_raw: Optional[float] = None
    pp_rank: Optional[int] = None
    pp_country_rank: Optional[int] = None
    accuracy: Optional[float] = None
    playcount: Optional[int] = None
    level: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Any) -> "OsuUser":
        data = require_mapping(data, "user")
        return cls(
            id=int_field(data, "user_id", "user", required=True),
            name=str_field(data, "username", "user", required=True),
            country=str_field(data, "country", "user"),
            pp_raw=float_field(data, "pp_raw", "user"),
            pp_rank=int_field(data, "pp_rank", "user"),
            pp_country_rank=int_field(data, "pp_country_rank", "user"),
            accuracy=float_field(data, "accuracy", "user"),
            playcount=int_field(data, "playcount", "user"),
            level=float_field(data, "level", "user"),
        )


@dataclass(frozen=True)
class OsuBeatmap:
    """A single difficulty as returned by get_beatmaps."""
    id: int
    beatmapset_id: Optional[int] = None
    title: Optional[str] = None
    artist: Optional[str] = None
    version: Optional[str] = None
    creator: Optional[str] = None
    difficulty_rating: Optional[float] = None
    bpm: Optional[float] = None
    total_length: Optional[int] = None
    max_combo: Optional[int] = None
    approved: Optional[int] = None

    @property
    def display_name(self) -> str:
        return f"{self.artist or '?'} - {self.title or '?'} [{self.version or '?'}]"

    @property
    def url(self) -> str:
        return f"https://osu.ppy.sh/b/{self.id}"

    @classmethod
    def from_dict(cls, data: Any) -> "OsuBeatmap":
        data = require_mapping(data, "beatmap")
        return cls(
            id=int_field(data, "beatmap_id", "beatmap", required=True),
            beatmapset_id=int_field(data, "beatmapset_id", "beatmap"),
            title=str_field(data, "title", "beatmap"),
            artist=str_field(data, "artist", "beatmap"),
            version=str_field(data, "version", "beatmap"),
            creator=str_field(data, "creator", "beatmap"),
            difficulty_rating=float_field(data, "difficultyrating", "beatmap"),
            bpm=float_field(data, "bpm", "beatmap"),
            total_length=int_field(data, "total_length", "beatmap"),
            max_combo=int_field(data, "max_combo", "beatmap"),
            approved=int_field(data, "approved", "beatmap"),
        )


class LookupStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class UserLookup:
    """Result of resolving a username.

    NOT_FOUND means the API answered and has no such user; ERROR means the
    API could not be asked or answered with something unusable.
    """
    status: LookupStatus
    user: Optional[OsuUser] = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @property
    def user_id(self) -> Optional[int]:
        return self.user.id if self.user is not None else None

    @classmethod
    def of(cls, user: OsuUser) -> "UserLookup":
        return cls(LookupStatus.FOUND, user)

    @classmethod
    def not_found(cls) -> "UserLookup":
        return cls(LookupStatus.NOT_FOUND)

    @classmethod
    def error(cls) -> "UserLookup":
        return cls(LookupStatus.ERROR)
