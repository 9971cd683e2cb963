import logging
import random
from typing import NamedTuple

import chess

from .difficulty import DifficultyScheduler
from .errors import NoLegalMoves
from .moves import CandidateMove, MoveEvaluator, legal_candidates
from .speech import CommentaryContext, CommentarySelector
from .state import EngineState

log = logging.getLogger(__name__)


class MoveDecision(NamedTuple):
    move: CandidateMove
    comment: str


class AIOpponentController:
    """Main controller tying the persona's skill, judgement and voice together.

    Every random draw (skill coin flip, tie-break, remark choice) comes from
    the one ``rng`` so a seeded generator replays a whole game.
    """

    def __init__(self, persona, rng=None):
        self.persona = persona
        self.rng = rng if rng is not None else random.Random()
        self.state = EngineState(persona)

        # Core subsystems
        self.scheduler = DifficultyScheduler()
        self.evaluator = MoveEvaluator()
        self.speech = CommentarySelector(self.rng)

    @property
    def difficulty_level(self) -> int:
        return self.state.difficulty_level

    def reset(self):
        """Start a fresh game with the same persona."""
        self.state = EngineState(self.persona)

    # ---------------- Main Game Flow ----------------
    def decide_move(self, board: chess.Board) -> MoveDecision:
        """
        Choose a move for the side to move plus a remark about the position.

        Raises NoLegalMoves on a finished position; callers should check
        for game over first.
        """
        candidates = legal_candidates(board)
        if not candidates:
            raise NoLegalMoves(board.fen())

        level = self.difficulty_level
        play_best = self.scheduler.decide(level, self.rng)
        if play_best and level > 0:
            move = self.evaluator.select_best(board, candidates, self.rng)
        else:
            move = self.rng.choice(candidates)

        comment = self.speech.comment(self.persona, self.state,
                                      CommentaryContext.from_board(board))
        log.info("%s plays %s (%s)", self.persona.name, move.san,
                 "best" if play_best and level > 0 else "random")
        return MoveDecision(move, comment)

    def react_to_move(self, board: chess.Board, notation: str) -> str:
        """One remark about the move just played; ``board`` is the position after it."""
        context = CommentaryContext.from_board(board, last_move=notation)
        return self.speech.comment(self.persona, self.state, context)
