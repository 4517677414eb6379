import pytest

from zap_users.app.domain.models.selection_mode import SelectionMode


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("single", SelectionMode.SINGLE),
        ("MULTIPLE", SelectionMode.MULTIPLE),
        ("contiguous-range", SelectionMode.CONTIGUOUS_RANGE),
        ("range", SelectionMode.CONTIGUOUS_RANGE),
        (SelectionMode.SINGLE, SelectionMode.SINGLE),
    ],
)
def test_parse_accepts_names_and_aliases(raw, expected) -> None:  # noqa: ANN001
    assert SelectionMode.parse(raw) is expected


def test_parse_rejects_unknown_mode() -> None:
    with pytest.raises(ValueError):
        SelectionMode.parse("lasso")


def test_tk_selectmode_mapping() -> None:
    assert SelectionMode.SINGLE.tk_selectmode == "browse"
    assert SelectionMode.CONTIGUOUS_RANGE.tk_selectmode == "extended"
    assert SelectionMode.MULTIPLE.tk_selectmode == "extended"
