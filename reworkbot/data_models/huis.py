"""
Huis API data models.

Immutable value objects for the rework list and per-player rework snapshots
served by https://pp-api.huismetbenen.nl/.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional

from reworkbot.data_models.fields import (
    bool_field, datetime_field, float_field, int_field, require_mapping, str_field
)
from reworkbot.utils.exceptions import DeserializationError


@dataclass(frozen=True)
class Rework:
    """One variant of the pp algorithm hosted on Huis."""
    id: Optional[int] = None
    name: Optional[str] = None
    code: Optional[str] = None
    url: Optional[str] = None
    commit: Optional[str] = None
    description: Optional[str] = None
    gamemode: Optional[int] = None
    rework_type: Optional[str] = None
    is_active: Optional[bool] = None
    is_public: Optional[bool] = None
    is_historic: Optional[bool] = None
    is_confirmed: Optional[bool] = None

    @property
    def display_name(self) -> str:
        return self.name or self.code or f"Rework #{self.id}"

    @classmethod
    def from_dict(cls, data: Any) -> "Rework":
        data = require_mapping(data, "rework")
        return cls(
            id=int_field(data, "id", "rework"),
            name=str_field(data, "name", "rework"),
            code=str_field(data, "code", "rework"),
            url=str_field(data, "url", "rework"),
            commit=str_field(data, "commit", "rework"),
            description=str_field(data, "description", "rework"),
            gamemode=int_field(data, "gamemode", "rework"),
            rework_type=str_field(data, "rework_type", "rework"),
            is_active=bool_field(data, "active", "rework"),
            is_public=bool_field(data, "public", "rework"),
            is_historic=bool_field(data, "historic", "rework"),
            is_confirmed=bool_field(data, "confirmed", "rework"),
        )

    @classmethod
    def list_from_json(cls, data: Any) -> List["Rework"]:
        if not isinstance(data, list):
            raise DeserializationError("rework list", f"expected a JSON array, got {type(data).__name__}")
        return [cls.from_dict(item) for item in data]


@dataclass(frozen=True)
class HuisPlayer:
    """A player's pp breakdown in one rework, keyed by (player id, rework id)."""
    id: int
    name: Optional[str]
    old_pp: Optional[float]   # live pp
    new_pp: Optional[float]   # pp in the rework, bonus included
    bonus_pp: float
    weighted_acc_pp: float
    weighted_aim_pp: float
    weighted_tap_pp: float
    weighted_fl_pp: float
    last_updated: datetime

    @property
    def pp_difference(self) -> Optional[float]:
        if self.old_pp is None or self.new_pp is None:
            return None
        return self.new_pp - self.old_pp

    @property
    def new_pp_excl_bonus(self) -> Optional[float]:
        if self.new_pp is None:
            return None
        return self.new_pp - self.bonus_pp

    @classmethod
    def from_dict(cls, data: Any) -> "HuisPlayer":
        data = require_mapping(data, "player")
        return cls(
            id=int_field(data, "user_id", "player", required=True),
            name=str_field(data, "name", "player"),
            old_pp=float_field(data, "old_pp", "player"),
            new_pp=float_field(data, "new_pp_incl_bonus", "player"),
            bonus_pp=float_field(data, "bonus_pp", "player", required=True),
            weighted_acc_pp=float_field(data, "weighted_acc_pp", "player", required=True),
            weighted_aim_pp=float_field(data, "weighted_aim_pp", "player", required=True),
            weighted_tap_pp=float_field(data, "weighted_tap_pp", "player", required=True),
            weighted_fl_pp=float_field(data, "weighted_fl_pp", "player", required=True),
            last_updated=datetime_field(data, "last_updated", "player", required=True),
        )
