"""Abstract interfaces between the move selector and its host.

The host owns the game loop; it only talks to the agent through
:class:`IPlayer` and supplies turn timing through :class:`ITurnTimer`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from meangreen.core.enums import Color

if TYPE_CHECKING:
    from meangreen.core.board import Board
    from meangreen.core.move import Move


class ITurnTimer(ABC):
    """Interface for a per-turn time budget."""

    @abstractmethod
    def start(self) -> None: ...

    @abstractmethod
    def stop(self) -> None: ...

    @abstractmethod
    def is_turn_over(self) -> bool:
        """Whether the allotted time for the current decision has elapsed."""


class IPlayer(ABC):
    """Interface for an agent the host asks for moves."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def get_next_move(self, board: Board) -> Move | None:
        """Move to play on *board*, or ``None`` if the turn expired first."""

    @abstractmethod
    def is_valid_move(self, board_before: Board, move: Move, color: Color) -> bool:
        """Validate an opponent's claimed move."""
