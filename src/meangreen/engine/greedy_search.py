"""Greedy one-ply move selection with self-check pruning."""

from __future__ import annotations

import logging

from meangreen.core.board import Board
from meangreen.core.enums import Color
from meangreen.core.move import Move
from meangreen.core.move_generator import MoveGenerator
from meangreen.core.rules import Rules
from meangreen.core.types import Square
from meangreen.engine.evaluation import material_balance
from meangreen.engine.search import DecisionNode, IEngine, SearchContext, SearchResult

_LOGGER = logging.getLogger(__name__)

_FALLBACK_TERMINAL_SQUARE = Square(0, 0)


class GreedySearchEngine(IEngine):
    """Plays the highest-valued move that keeps its own king safe.

    Candidates come pre-ranked from the move rules (captures score the
    value of the captured unit, quiet moves score zero). The engine takes
    the best remaining candidate, drops it if the opponent could then
    capture the king, and repeats. It never looks at the value of the
    opponent's reply.
    """

    __slots__ = ()

    def select_move(
        self,
        board: Board,
        color: Color,
        context: SearchContext | None = None,
    ) -> Move:
        """Selected move, or the terminal sentinel when nothing is safe."""
        return self.search(board, color, context).best_move

    def search(
        self,
        board: Board,
        color: Color,
        context: SearchContext | None = None,
    ) -> SearchResult:
        if board is None:
            raise ValueError("Search requires a board")
        if color is None:
            raise ValueError("Search requires a side to move")
        ctx = context or SearchContext()
        king_missing = board.find_king(color) is None
        if king_missing:
            ctx.emit(f"No {color} king on board; moves cannot be checked for safety")

        ctx.tick("successors")
        moves, boards = MoveGenerator(board).successors(color)
        nodes = len(boards)
        ctx.emit(f"Accumulated {len(moves)} successors for {color}")

        root = DecisionNode(board=board, score=material_balance(board, color))
        root.children = [
            DecisionNode(
                board=child,
                move=move,
                value=move.value,
                score=material_balance(child, color),
            )
            for move, child in zip(moves, boards)
        ]

        pool = list(range(len(moves)))
        rejected = 0
        while pool:
            # max() keeps the first maximum, so ties go to scan order.
            best = max(pool, key=lambda idx: moves[idx].value)
            move = moves[best]
            ctx.emit(
                f"Greedy search has {len(pool)} candidates; best value is {move.value}"
            )

            ctx.tick("results_in_check")
            nodes += 1
            unsafe = Rules.results_in_check(board, move, color)
            node = root.children[best]
            node.safe = not unsafe
            if not unsafe:
                node.selected = True
                ctx.emit(f"{color} plays {move} (value {move.value})")
                ctx.publish_tree(root)
                return SearchResult(
                    best_move=move,
                    score=node.score,
                    candidates=len(moves),
                    rejected=rejected,
                    nodes=nodes,
                    king_missing=king_missing,
                )

            pool.remove(best)
            rejected += 1
            ctx.emit(f"Removed {move}: it leaves the {color} king capturable")

        return self._no_move_result(board, color, ctx, root, len(moves), rejected, nodes)

    def _no_move_result(
        self,
        board: Board,
        color: Color,
        ctx: SearchContext,
        root: DecisionNode,
        candidates: int,
        rejected: int,
        nodes: int,
    ) -> SearchResult:
        in_check = Rules.is_in_check(board, color)
        outcome = "checkmate" if in_check else "stalemate"
        ctx.emit(f"No safe move for {color} ({outcome}); signalling game over")
        _LOGGER.info("No safe move for %s (%s)", color, outcome)

        king_sq = board.find_king(color)
        terminal = Move.terminal(king_sq if king_sq is not None else _FALLBACK_TERMINAL_SQUARE)
        ctx.publish_tree(root)
        return SearchResult(
            best_move=terminal,
            score=root.score,
            candidates=candidates,
            rejected=rejected,
            nodes=nodes,
            in_check=in_check,
            king_missing=king_sq is None,
        )
