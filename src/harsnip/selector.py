"""Two-step target/client selection.

The selector is a small state machine that a UI host drives with
``accept()``, ``back()`` and ``dismiss()``. It owns the list of visible items
and the back button; the host only renders them and forwards user input.

Lifecycle:
    SELECTING_TARGET --accept--> SELECTING_CLIENT --accept--> COMPLETED
    SELECTING_CLIENT --back--> SELECTING_TARGET
    SELECTING_TARGET / SELECTING_CLIENT --dismiss--> CANCELLED
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from harsnip.exceptions import NoTargetsError, SelectorStateError
from harsnip.logging import get_logger
from harsnip.snippet.base import SnippetClient, SnippetTarget

LOG = get_logger(__name__)

BACK_BUTTON = "back"

CompleteCallback = Callable[[SnippetTarget, SnippetClient], None]
CancelCallback = Callable[[], None]


class SelectorState(StrEnum):
    """State of a target/client selection."""

    SELECTING_TARGET = "selecting_target"
    SELECTING_CLIENT = "selecting_client"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class SelectionItem:
    """One row shown by the host.

    Target rows have ``client`` set to None. Client rows carry the target they
    belong to so accepting them yields the full pair.
    """

    label: str
    target: SnippetTarget
    client: SnippetClient | None = None
    description: str = ""
    detail: str = ""


def _target_items(targets: Sequence[SnippetTarget]) -> tuple[SelectionItem, ...]:
    return tuple(SelectionItem(label=t.title, target=t) for t in targets)


def _client_items(target: SnippetTarget) -> tuple[SelectionItem, ...]:
    return tuple(
        SelectionItem(
            label=c.title,
            target=target,
            client=c,
            description=c.description,
            detail=c.link,
        )
        for c in target.clients
    )


class TargetClientSelector:
    """Pick a snippet target, then a client within it.

    Args:
        targets: Catalog to choose from. Must not be empty.
        on_complete: Called once with ``(target, client)`` when a client is
            accepted.
        on_cancel: Called once when the selection is dismissed.

    Raises:
        NoTargetsError: If ``targets`` is empty.
    """

    title = "Generate Code Snippet"
    total_steps = 2

    def __init__(
        self,
        targets: Sequence[SnippetTarget],
        on_complete: CompleteCallback | None = None,
        on_cancel: CancelCallback | None = None,
    ) -> None:
        if not targets:
            raise NoTargetsError("No available code snippet convert targets")
        self._target_items = _target_items(targets)
        self._on_complete = on_complete
        self._on_cancel = on_cancel
        self.state = SelectorState.SELECTING_TARGET
        self.step = 1
        self.items: tuple[SelectionItem, ...] = self._target_items
        self.buttons: tuple[str, ...] = ()
        self.selected_target: SnippetTarget | None = None
        self.result: tuple[SnippetTarget, SnippetClient] | None = None

    @property
    def is_done(self) -> bool:
        """True once the selection has completed or been cancelled."""
        return self.state in (SelectorState.COMPLETED, SelectorState.CANCELLED)

    @property
    def can_go_back(self) -> bool:
        return BACK_BUTTON in self.buttons

    def _require_active(self, action: str) -> None:
        if self.is_done:
            raise SelectorStateError(f"Cannot {action}: selection is already {self.state}")

    def accept(self, item: SelectionItem | None) -> None:
        """Accept the highlighted item.

        ``None`` means nothing was highlighted and is ignored.

        Raises:
            SelectorStateError: If the selection has finished or ``item`` is
                not one of the visible items.
        """
        self._require_active("accept")
        if item is None:
            return
        if item not in self.items:
            raise SelectorStateError(f"Item '{item.label}' is not in the current list")

        if self.state is SelectorState.SELECTING_TARGET:
            self.selected_target = item.target
            self.state = SelectorState.SELECTING_CLIENT
            self.step = 2
            self.items = _client_items(item.target)
            self.buttons = (BACK_BUTTON,)
            LOG.debug("selector_target_accepted", target=item.target.key)
            return

        assert item.client is not None
        self.state = SelectorState.COMPLETED
        self.result = (item.target, item.client)
        LOG.debug("selector_completed", target=item.target.key, client=item.client.key)
        if self._on_complete is not None:
            self._on_complete(item.target, item.client)

    def back(self) -> None:
        """Return from the client list to the target list.

        Raises:
            SelectorStateError: If the back button is not shown.
        """
        self._require_active("go back")
        if not self.can_go_back:
            raise SelectorStateError("Back is only available while selecting a client")
        self.state = SelectorState.SELECTING_TARGET
        self.step = 1
        self.items = self._target_items
        self.buttons = ()
        self.selected_target = None

    def dismiss(self) -> None:
        """Close the selection without choosing.

        Dismissing a finished selection does nothing, so hosts can call this
        unconditionally when their UI closes.
        """
        if self.is_done:
            return
        self.state = SelectorState.CANCELLED
        LOG.debug("selector_cancelled", step=self.step)
        if self._on_cancel is not None:
            self._on_cancel()
