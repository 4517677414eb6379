import pytest

from zap_users.app.domain.models.selection_mode import SelectionMode
from zap_users.app.domain.models.user import User
from zap_users.app.ui.users_list_model import UsersListModel


def _users(*names: str, context_id: int = 1) -> list[User]:
    return [User(id=index, context_id=context_id, name=name) for index, name in enumerate(names)]


def test_replace_keeps_order_and_clears_selection() -> None:
    model = UsersListModel(selection_mode=SelectionMode.MULTIPLE)
    model.replace(1, _users("alice", "bob", "carol"))
    model.select([0, 2])

    model.replace(2, _users("dave", context_id=2))

    assert model.context_id == 2
    assert [user.name for user in model] == ["dave"]
    assert model.selected_indices == []


def test_multiple_selection_accepts_arbitrary_rows() -> None:
    model = UsersListModel(selection_mode=SelectionMode.MULTIPLE)
    model.replace(1, _users("alice", "bob", "carol", "dave"))

    assert model.select([3, 0]) == [0, 3]
    assert [user.name for user in model.selected_users()] == ["alice", "dave"]


def test_single_selection_keeps_highest_requested_row() -> None:
    model = UsersListModel(selection_mode=SelectionMode.SINGLE)
    model.replace(1, _users("alice", "bob", "carol"))

    assert model.select([0, 1]) == [1]
    assert model.select([2, 0]) == [2]


def test_contiguous_selection_fills_span() -> None:
    model = UsersListModel(selection_mode=SelectionMode.CONTIGUOUS_RANGE)
    model.replace(1, _users("alice", "bob", "carol", "dave"))

    assert model.select([3, 1]) == [1, 2, 3]


def test_select_out_of_range_raises_and_keeps_selection() -> None:
    model = UsersListModel(selection_mode=SelectionMode.MULTIPLE)
    model.replace(1, _users("alice"))
    model.select([0])

    with pytest.raises(IndexError):
        model.select([1])

    assert model.selected_indices == [0]


def test_empty_selection_clears() -> None:
    model = UsersListModel(selection_mode=SelectionMode.MULTIPLE)
    model.replace(1, _users("alice", "bob"))
    model.select([1])

    assert model.select([]) == []
