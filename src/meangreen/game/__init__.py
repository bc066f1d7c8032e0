"""Host integration layer: agent, turn timer and interfaces.

Quick start::

    from meangreen.core import Board, Color
    from meangreen.game import GreedyAIPlayer

    agent = GreedyAIPlayer(Color.WHITE, log=print)
    move = agent.get_next_move(Board.initial())
"""

from meangreen.game.clock import TurnTimer
from meangreen.game.interfaces import IPlayer, ITurnTimer
from meangreen.game.player import DEFAULT_NAME, GreedyAIPlayer

__all__ = [
    # Interfaces
    "IPlayer",
    "ITurnTimer",
    # Concrete
    "DEFAULT_NAME",
    "GreedyAIPlayer",
    "TurnTimer",
]
