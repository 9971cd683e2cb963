import logging
from dataclasses import dataclass
from typing import Optional

import chess

from .config import BAD_MOVE_ROLL, ENGINE_COLOR, GOOD_MOVE_ROLL, MATERIAL_SWING, OPENING_PLY_LIMIT
from .moves import material_balance
from .personas import Category

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommentaryContext:
    """What the persona knows about the game when it decides what to say."""
    ply: int
    in_check: bool
    side_to_move: bool
    last_move: Optional[str] = None     # SAN of the move just played, if any
    material_balance: int = 0

    @classmethod
    def from_board(cls, board: chess.Board, last_move: Optional[str] = None) -> "CommentaryContext":
        return cls(
            ply=board.ply(),
            in_check=board.is_check(),
            side_to_move=board.turn,
            last_move=last_move,
            material_balance=material_balance(board),
        )


class CommentarySelector:
    """Turns game context into a category, then into a fresh remark."""

    def __init__(self, rng):
        self.rng = rng

    def category_for(self, context: CommentaryContext) -> Category:
        if context.ply <= OPENING_PLY_LIMIT:
            return Category.OPENING

        # The engine reacts to being checked, not to giving check
        if context.in_check and context.side_to_move == ENGINE_COLOR:
            return Category.CHECK

        if context.last_move and "x" in context.last_move:
            return Category.CAPTURE

        # Engine plays black: a white-favouring balance means it is losing
        if context.material_balance > MATERIAL_SWING:
            return Category.LOSING
        if context.material_balance < -MATERIAL_SWING:
            return Category.WINNING

        roll = self.rng.random()
        if roll < GOOD_MOVE_ROLL:
            return Category.GOOD_MOVE
        if roll < BAD_MOVE_ROLL:
            return Category.BAD_MOVE
        return Category.GENERAL

    def pick(self, persona, category: Category, state) -> str:
        """Draw a remark not said recently; repeats only once the pool is exhausted."""
        pool = persona.messages(category)
        available = [msg for msg in pool if not state.was_used(msg)]
        message = self.rng.choice(available or list(pool))
        state.remember(message)
        return message

    def comment(self, persona, state, context: CommentaryContext) -> str:
        category = self.category_for(context)
        log.debug("%s speaks from the %s pool", persona.name, category.value)
        return self.pick(persona, category, state)
