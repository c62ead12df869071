"""Graph host contract — the editor state the command protocol writes to."""

from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Sequence

from .building import Room, Wall


class GraphHost(ABC):
    """
    Owner of the wall/room lists.

    The host replaces its lists wholesale on every `set_graph_state` call;
    commands never modify entities in place. Any implementation of these
    six operations can stand in for the application store.
    """

    @abstractmethod
    def get_walls(self) -> list[Wall]:
        ...

    @abstractmethod
    def get_rooms(self) -> list[Room]:
        ...

    @abstractmethod
    def set_graph_state(self, walls: Sequence[Wall], rooms: Sequence[Room]) -> None:
        """Replace both lists at once."""
        ...

    @abstractmethod
    def set_selected_ids(self, ids: Sequence[str]) -> None:
        ...

    @abstractmethod
    def save_to_history(self, label: str) -> None:
        """Append one undo-history entry labelled `label`."""
        ...

    @abstractmethod
    def notify_validation(self) -> None:
        """Signal that the graph changed and should be re-validated."""
        ...
