import pytest

from reworkbot.data_models.ranking_sort import PlayerRankingSort
from reworkbot.utils.exceptions import SortOptionNotFoundError


def test_registry_has_eighteen_options():
    assert len(PlayerRankingSort.all()) == 18


def test_ids_are_unique():
    ids = [option.id for option in PlayerRankingSort.all()]
    assert len(set(ids)) == len(ids)


def test_display_names_are_unique():
    names = [option.display_name for option in PlayerRankingSort.all()]
    assert len(set(names)) == len(names)


@pytest.mark.parametrize("option", PlayerRankingSort.all(), ids=lambda option: option.id)
def test_id_round_trip(option):
    assert PlayerRankingSort.from_id(option.id) is option


def test_id_format():
    assert PlayerRankingSort.OLD_PP_DESC.id == "old_pp_desc"
    assert PlayerRankingSort.NEW_PP_EXCL_BONUS_ASC.id == "new_pp_excl_bonus_asc"


def test_fixed_order_starts_with_old_pp_pair():
    options = PlayerRankingSort.all()
    assert options[0] is PlayerRankingSort.OLD_PP_DESC
    assert options[1] is PlayerRankingSort.OLD_PP_ASC
    assert options[-2] is PlayerRankingSort.NEW_PP_EXCL_BONUS_ASC
    assert options[-1] is PlayerRankingSort.NEW_PP_EXCL_BONUS_DESC


def test_pairs_share_code_and_differ_in_order():
    options = PlayerRankingSort.all()
    for first, second in zip(options[::2], options[1::2]):
        assert first.code == second.code
        assert first.is_ascending != second.is_ascending
        desc, asc = (second, first) if first.is_ascending else (first, second)
        assert not desc.is_ascending
        assert asc.is_ascending
        assert desc.display_name.endswith("(Descending)")
        assert asc.display_name.endswith("(Ascending)")


def test_unknown_id_raises():
    with pytest.raises(SortOptionNotFoundError) as excinfo:
        PlayerRankingSort.from_id("old_pp_sideways")
    assert excinfo.value.sort_id == "old_pp_sideways"


def test_str_is_display_name():
    assert str(PlayerRankingSort.BONUS_PP_DESC) == "Bonus PP (Descending)"


def test_only_excl_bonus_pair_lists_ascending_first():
    options = PlayerRankingSort.all()
    ascending_first = [first.code for first in options[::2] if first.is_ascending]
    assert ascending_first == ["new_pp_excl_bonus"]
