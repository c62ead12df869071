"""Wall graph edit commands — transient preview, finalize and revert."""

from __future__ import annotations
import logging
from collections.abc import Sequence
from pydantic import BaseModel

from planedit.commands.base import CommitEdit, PreviewEdit
from planedit.models import GraphHost, Room, Wall

logger = logging.getLogger(__name__)

DEFAULT_EDIT_ACTION = "Edit wall"


class WallEditFinalizePayload(BaseModel):
    """What a finalize needs: the history label and the pre-edit snapshot."""
    wall_id: str
    selection_ids: list[str] = []
    action: str = DEFAULT_EDIT_ACTION
    original_walls: list[Wall]
    original_rooms: list[Room]

    def resolved_selection(self) -> list[str]:
        return list(self.selection_ids) if self.selection_ids else [self.wall_id]


class ApplyTransientWallGraphCommand(PreviewEdit):
    """Show `next_walls` on the host without touching history.

    Issued once per pointer move; each execution replaces the previous
    preview entirely.
    """

    def __init__(
        self,
        host: GraphHost,
        next_walls: Sequence[Wall],
        selection_ids: Sequence[str] = (),
    ) -> None:
        super().__init__(host)
        self.next_walls = list(next_walls)
        self.selection_ids = list(selection_ids)

    def execute(self) -> None:
        self.host.set_graph_state(list(self.next_walls), self.host.get_rooms())
        self.host.set_selected_ids(list(self.selection_ids))
        self.host.notify_validation()


class RevertWallEditCommand(PreviewEdit):
    """Restore a caller-retained snapshot, e.g. when a gesture is abandoned."""

    def __init__(
        self,
        host: GraphHost,
        original_walls: Sequence[Wall],
        original_rooms: Sequence[Room],
        selection_ids: Sequence[str] = (),
    ) -> None:
        super().__init__(host)
        self.original_walls = list(original_walls)
        self.original_rooms = list(original_rooms)
        self.selection_ids = list(selection_ids)

    def execute(self) -> None:
        self.host.set_graph_state(list(self.original_walls), list(self.original_rooms))
        self.host.set_selected_ids(list(self.selection_ids))


class FinalizeWallEditCommand(CommitEdit):
    """Record the already-previewed edit as one undo-history entry.

    The graph must already hold the final state (from the last transient
    command); geometry is not recomputed here.
    """

    def __init__(self, host: GraphHost, payload: WallEditFinalizePayload) -> None:
        super().__init__(host)
        self.payload = payload

    def execute(self) -> None:
        logger.info("Committing wall edit %r on %s", self.payload.action, self.payload.wall_id)
        self.host.save_to_history(self.payload.action)

    def revert_command(self) -> RevertWallEditCommand:
        """Build the command that puts the pre-edit snapshot back."""
        return RevertWallEditCommand(
            self.host,
            self.payload.original_walls,
            self.payload.original_rooms,
            self.payload.resolved_selection(),
        )
