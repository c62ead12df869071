"""Abstract base classes for wall edit commands.

Every command in the system implements this interface. Commands are:
- Bound: each holds the graph host it writes to and its own inputs
- Phase-typed: a command is either a preview or a commit, never both
- Single-shot: `execute()` applies the edit; there is no implicit undo
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from planedit.models.context import GraphHost


class WallEditCommand(ABC):
    """
    Base class for all wall edit commands.

    Subclass `PreviewEdit` or `CommitEdit` rather than this class so the
    edit phase is visible from the type.
    """

    def __init__(self, host: GraphHost) -> None:
        self.host = host

    @abstractmethod
    def execute(self) -> None:
        """Apply the edit to the host."""
        ...


class PreviewEdit(WallEditCommand):
    """A cheap, repeatable edit that never writes undo history."""


class CommitEdit(WallEditCommand):
    """The edit that closes a gesture; writes exactly one history entry."""
