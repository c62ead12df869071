"""In-memory graph host used by the API and the test suite."""

from __future__ import annotations
from collections.abc import Sequence
from pydantic import BaseModel

from planedit.models import GraphHost, Room, Wall


class HistoryEntry(BaseModel):
    """One undo step: the label and the graph as it stood when saved."""
    label: str
    walls: list[Wall]
    rooms: list[Room]


class InMemoryGraphHost(GraphHost):
    """Holds the wall/room lists and a flat history log."""

    def __init__(self, walls: Sequence[Wall] = (), rooms: Sequence[Room] = ()) -> None:
        self.walls: list[Wall] = list(walls)
        self.rooms: list[Room] = list(rooms)
        self.selected_ids: list[str] = []
        self.history: list[HistoryEntry] = []
        self.validation_count = 0

    def load(self, walls: Sequence[Wall], rooms: Sequence[Room] = ()) -> None:
        """Replace the whole plan and start a fresh history."""
        self.walls = list(walls)
        self.rooms = list(rooms)
        self.selected_ids = []
        self.history = []

    @property
    def history_labels(self) -> list[str]:
        return [entry.label for entry in self.history]

    # GraphHost

    def get_walls(self) -> list[Wall]:
        return self.walls

    def get_rooms(self) -> list[Room]:
        return self.rooms

    def set_graph_state(self, walls: Sequence[Wall], rooms: Sequence[Room]) -> None:
        self.walls = list(walls)
        self.rooms = list(rooms)

    def set_selected_ids(self, ids: Sequence[str]) -> None:
        self.selected_ids = list(ids)

    def save_to_history(self, label: str) -> None:
        self.history.append(HistoryEntry(label=label, walls=self.walls, rooms=self.rooms))

    def notify_validation(self) -> None:
        self.validation_count += 1
