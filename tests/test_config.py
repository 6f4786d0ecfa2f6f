import pytest

from reversi import config
from reversi.othello.board import Board


@pytest.mark.parametrize(
    ["value", "expected"],
    [
        pytest.param(None, False, id="unset"),
        pytest.param("0", False, id="zero"),
        pytest.param("1", True, id="one"),
        pytest.param("yes", True, id="other"),
    ],
)
def test_verbose(
    monkeypatch: pytest.MonkeyPatch, value: str | None, expected: bool
) -> None:
    if value is None:
        monkeypatch.delenv("REVERSI_VERBOSE", raising=False)
    else:
        monkeypatch.setenv("REVERSI_VERBOSE", value)

    assert config.verbose() == expected


def test_empty_token_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REVERSI_EMPTY_TOKEN", raising=False)
    assert config.empty_token() == "."


def test_empty_token_custom(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVERSI_EMPTY_TOKEN", "_")
    assert config.empty_token() == "_"
    assert str(Board()).split("\n")[3] == "___WB___"


@pytest.mark.parametrize(
    ["value"],
    [
        pytest.param("", id="empty"),
        pytest.param("ab", id="too-long"),
    ],
)
def test_empty_token_error(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("REVERSI_EMPTY_TOKEN", value)

    with pytest.raises(ValueError):
        config.empty_token()
