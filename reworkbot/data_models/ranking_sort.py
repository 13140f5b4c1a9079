"""
Sort options for the Huis global player rankings.

A closed set: each member pairs a Huis sort code with an order. The member
``id`` is the stable key handed to Discord autocomplete and passed back in
commands.
"""

from enum import Enum
from typing import List

from reworkbot.utils.exceptions import SortOptionNotFoundError


class PlayerRankingSort(Enum):
    """Sort code, ascending flag and display name of a ranking sort option."""

    OLD_PP_DESC = ("old_pp", False, "Old PP (Descending)")
    OLD_PP_ASC = ("old_pp", True, "Old PP (Ascending)")
    NEW_PP_DESC = ("new_pp_incl_bonus", False, "New PP (Descending)")
    NEW_PP_ASC = ("new_pp_incl_bonus", True, "New PP (Ascending)")
    PP_DIFFERENCE_DESC = ("pp_change", False, "PP Difference (Descending)")
    PP_DIFFERENCE_ASC = ("pp_change", True, "PP Difference (Ascending)")
    AIM_PP_DESC = ("weighted_aim_pp", False, "Weighted Aim PP (Descending)")
    AIM_PP_ASC = ("weighted_aim_pp", True, "Weighted Aim PP (Ascending)")
    TAP_PP_DESC = ("weighted_tap_pp", False, "Weighted Tap PP (Descending)")
    TAP_PP_ASC = ("weighted_tap_pp", True, "Weighted Tap PP (Ascending)")
    ACC_PP_DESC = ("weighted_acc_pp", False, "Weighted Acc PP (Descending)")
    ACC_PP_ASC = ("weighted_acc_pp", True, "Weighted Acc PP (Ascending)")
    FL_PP_DESC = ("weighted_fl_pp", False, "Weighted FL PP (Descending)")
    FL_PP_ASC = ("weighted_fl_pp", True, "Weighted FL PP (Ascending)")
    BONUS_PP_DESC = ("bonus_pp", False, "Bonus PP (Descending)")
    BONUS_PP_ASC = ("bonus_pp", True, "Bonus PP (Ascending)")
    # This pair lists ascending first
    NEW_PP_EXCL_BONUS_ASC = ("new_pp_excl_bonus", True, "New PP Excl. Bonus (Ascending)")
    NEW_PP_EXCL_BONUS_DESC = ("new_pp_excl_bonus", False, "New PP Excl. Bonus (Descending)")

    def __init__(self, code: str, is_ascending: bool, display_name: str):
        self.code = code
        self.is_ascending = is_ascending
        self.display_name = display_name

    @property
    def order(self) -> str:
        return "asc" if self.is_ascending else "desc"

    @property
    def id(self) -> str:
        return f"{self.code}_{self.order}"

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def all(cls) -> List["PlayerRankingSort"]:
        """All sort options in display order."""
        return list(cls)

    @classmethod
    def from_id(cls, sort_id: str) -> "PlayerRankingSort":
        """Resolve an id produced by ``PlayerRankingSort.id``."""
        for option in cls.all():
            if option.id == sort_id:
                return option
        raise SortOptionNotFoundError(sort_id)
