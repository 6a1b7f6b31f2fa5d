"""Tests for the two-step target/client selector."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from harsnip.exceptions import NoTargetsError, SelectorStateError
from harsnip.selector import (
    BACK_BUTTON,
    SelectionItem,
    SelectorState,
    TargetClientSelector,
)
from harsnip.snippet.base import SnippetClient, SnippetTarget

CURL = SnippetClient("curl", "cURL", "command line tool", "http://curl.se/")
WGET = SnippetClient("wget", "Wget", "retrieves files", "https://www.gnu.org/software/wget/")
REQUESTS = SnippetClient(
    "requests", "Requests", "HTTP for humans", "https://requests.readthedocs.io/"
)

SHELL = SnippetTarget("shell", "Shell", (CURL, WGET))
PYTHON = SnippetTarget("python", "Python", (REQUESTS,))
TARGETS = [SHELL, PYTHON]


@pytest.fixture
def on_complete() -> MagicMock:
    return MagicMock()


@pytest.fixture
def on_cancel() -> MagicMock:
    return MagicMock()


@pytest.fixture
def selector(on_complete: MagicMock, on_cancel: MagicMock) -> TargetClientSelector:
    return TargetClientSelector(TARGETS, on_complete=on_complete, on_cancel=on_cancel)


def _item(selector: TargetClientSelector, label: str) -> SelectionItem:
    return next(item for item in selector.items if item.label == label)


class TestInitialState:
    """Tests for a freshly created selector."""

    def test_starts_selecting_target(self, selector: TargetClientSelector) -> None:
        assert selector.state is SelectorState.SELECTING_TARGET
        assert selector.step == 1
        assert selector.total_steps == 2
        assert selector.title == "Generate Code Snippet"

    def test_shows_all_targets(self, selector: TargetClientSelector) -> None:
        assert [item.label for item in selector.items] == ["Shell", "Python"]
        assert all(item.client is None for item in selector.items)

    def test_no_back_button(self, selector: TargetClientSelector) -> None:
        assert selector.buttons == ()
        assert not selector.can_go_back

    def test_empty_catalog_rejected(self) -> None:
        with pytest.raises(NoTargetsError):
            TargetClientSelector([])


class TestAcceptTarget:
    """Tests for accepting a target."""

    def test_moves_to_client_step(self, selector: TargetClientSelector) -> None:
        selector.accept(_item(selector, "Shell"))

        assert selector.state is SelectorState.SELECTING_CLIENT
        assert selector.step == 2
        assert selector.selected_target == SHELL

    def test_shows_exactly_target_clients(self, selector: TargetClientSelector) -> None:
        selector.accept(_item(selector, "Shell"))

        assert [item.client for item in selector.items] == [CURL, WGET]
        assert all(item.target == SHELL for item in selector.items)

    def test_client_items_carry_description_and_link(self, selector: TargetClientSelector) -> None:
        selector.accept(_item(selector, "Shell"))

        curl = _item(selector, "cURL")
        assert curl.description == "command line tool"
        assert curl.detail == "http://curl.se/"

    def test_exposes_back_button(self, selector: TargetClientSelector) -> None:
        selector.accept(_item(selector, "Python"))

        assert selector.buttons == (BACK_BUTTON,)
        assert selector.can_go_back

    def test_accept_none_is_ignored(
        self, selector: TargetClientSelector, on_complete: MagicMock
    ) -> None:
        selector.accept(None)

        assert selector.state is SelectorState.SELECTING_TARGET
        on_complete.assert_not_called()

    def test_accept_unknown_item_rejected(self, selector: TargetClientSelector) -> None:
        stranger = SelectionItem(label="Go", target=SnippetTarget("go", "Go"))
        with pytest.raises(SelectorStateError, match="not in the current list"):
            selector.accept(stranger)


class TestAcceptClient:
    """Tests for accepting a client."""

    def test_completes_with_pair(
        self, selector: TargetClientSelector, on_complete: MagicMock
    ) -> None:
        selector.accept(_item(selector, "Shell"))
        selector.accept(_item(selector, "Wget"))

        assert selector.state is SelectorState.COMPLETED
        assert selector.result == (SHELL, WGET)
        on_complete.assert_called_once_with(SHELL, WGET)

    def test_completion_fires_once(
        self, selector: TargetClientSelector, on_complete: MagicMock
    ) -> None:
        selector.accept(_item(selector, "Python"))
        item = _item(selector, "Requests")
        selector.accept(item)

        with pytest.raises(SelectorStateError, match="already completed"):
            selector.accept(item)
        on_complete.assert_called_once()

    def test_dismiss_after_completion_is_noop(
        self, selector: TargetClientSelector, on_cancel: MagicMock
    ) -> None:
        selector.accept(_item(selector, "Python"))
        selector.accept(_item(selector, "Requests"))
        selector.dismiss()

        assert selector.state is SelectorState.COMPLETED
        on_cancel.assert_not_called()


class TestBack:
    """Tests for the back button."""

    def test_restores_targets(self, selector: TargetClientSelector) -> None:
        original = selector.items
        selector.accept(_item(selector, "Shell"))
        selector.back()

        assert selector.state is SelectorState.SELECTING_TARGET
        assert selector.step == 1
        assert selector.items == original
        assert len(selector.items) == len(TARGETS)
        assert selector.buttons == ()
        assert selector.selected_target is None

    def test_can_pick_another_target_after_back(
        self, selector: TargetClientSelector, on_complete: MagicMock
    ) -> None:
        selector.accept(_item(selector, "Shell"))
        selector.back()
        selector.accept(_item(selector, "Python"))
        selector.accept(_item(selector, "Requests"))

        on_complete.assert_called_once_with(PYTHON, REQUESTS)

    def test_back_on_first_step_rejected(self, selector: TargetClientSelector) -> None:
        with pytest.raises(SelectorStateError, match="Back is only available"):
            selector.back()

    def test_back_after_cancel_rejected(self, selector: TargetClientSelector) -> None:
        selector.dismiss()
        with pytest.raises(SelectorStateError, match="already cancelled"):
            selector.back()


class TestDismiss:
    """Tests for dismissing the selector."""

    def test_dismiss_on_target_step(
        self, selector: TargetClientSelector, on_complete: MagicMock, on_cancel: MagicMock
    ) -> None:
        selector.dismiss()

        assert selector.state is SelectorState.CANCELLED
        assert selector.result is None
        on_cancel.assert_called_once_with()
        on_complete.assert_not_called()

    def test_dismiss_on_client_step(
        self, selector: TargetClientSelector, on_complete: MagicMock, on_cancel: MagicMock
    ) -> None:
        selector.accept(_item(selector, "Shell"))
        selector.dismiss()

        assert selector.state is SelectorState.CANCELLED
        assert selector.result is None
        on_cancel.assert_called_once_with()
        on_complete.assert_not_called()

    def test_dismiss_twice_cancels_once(
        self, selector: TargetClientSelector, on_cancel: MagicMock
    ) -> None:
        selector.dismiss()
        selector.dismiss()
        on_cancel.assert_called_once()

    def test_accept_after_dismiss_rejected(self, selector: TargetClientSelector) -> None:
        item = _item(selector, "Shell")
        selector.dismiss()
        with pytest.raises(SelectorStateError):
            selector.accept(item)

    def test_callbacks_optional(self) -> None:
        selector = TargetClientSelector(TARGETS)
        selector.accept(_item(selector, "Shell"))
        selector.accept(_item(selector, "cURL"))
        assert selector.result == (SHELL, CURL)
