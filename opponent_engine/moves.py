import logging
from dataclasses import dataclass
from enum import Flag, auto
from typing import List, Optional, Tuple

import chess

from .config import (
    CAPTURE_BONUS,
    CASTLING_BONUS,
    CENTER_BONUS,
    CENTER_PLY_LIMIT,
    CENTER_SQUARES,
    CHECKMATE_SCORE,
    DEVELOPMENT_BONUS,
    DEVELOPMENT_PLY_LIMIT,
    FORCING_CHECK_BONUS,
    FORCING_CHECK_MAX_REPLIES,
    HANGING_PENALTY,
    KING_ATTACKER_PENALTY,
    MATE_CHECK_BONUS,
    MATERIAL_WEIGHT,
    MILD_CHECK_BONUS,
    PIECE_VALUES,
)
from .errors import NoLegalMoves

log = logging.getLogger(__name__)


class MoveFlag(Flag):
    NORMAL = 0
    CAPTURE = auto()
    EN_PASSANT = auto()
    BIG_PAWN = auto()           # Two-square pawn push
    PROMOTION = auto()
    KINGSIDE_CASTLE = auto()
    QUEENSIDE_CASTLE = auto()


@dataclass(frozen=True)
class CandidateMove:
    """A legal move together with the facts the evaluator needs about it."""
    from_square: int
    to_square: int
    piece: int
    captured: Optional[int]
    flags: MoveFlag
    promotion: Optional[int]
    san: str
    move: chess.Move

    @classmethod
    def from_board(cls, board: chess.Board, move: chess.Move) -> "CandidateMove":
        """Describe ``move`` as played from ``board`` (which must allow it)."""
        piece = board.piece_type_at(move.from_square)
        flags = MoveFlag.NORMAL
        captured = None

        if board.is_en_passant(move):
            flags |= MoveFlag.CAPTURE | MoveFlag.EN_PASSANT
            captured = chess.PAWN
        elif board.is_capture(move):
            flags |= MoveFlag.CAPTURE
            captured = board.piece_type_at(move.to_square)

        if board.is_kingside_castling(move):
            flags |= MoveFlag.KINGSIDE_CASTLE
        elif board.is_queenside_castling(move):
            flags |= MoveFlag.QUEENSIDE_CASTLE

        if piece == chess.PAWN and abs(move.to_square - move.from_square) == 16:
            flags |= MoveFlag.BIG_PAWN
        if move.promotion:
            flags |= MoveFlag.PROMOTION

        return cls(
            from_square=move.from_square,
            to_square=move.to_square,
            piece=piece,
            captured=captured,
            flags=flags,
            promotion=move.promotion,
            san=board.san(move),
            move=move,
        )

    @property
    def uci(self) -> str:
        return self.move.uci()

    @property
    def is_capture(self) -> bool:
        return bool(self.flags & MoveFlag.CAPTURE)

    @property
    def is_castling(self) -> bool:
        return bool(self.flags & (MoveFlag.KINGSIDE_CASTLE | MoveFlag.QUEENSIDE_CASTLE))


# -------------------- Board helpers --------------------
def piece_value(piece_type) -> int:
    return PIECE_VALUES.get(piece_type, 0)


def material_balance(board: chess.Board) -> int:
    """Signed material in pawn units: positive favours White."""
    balance = 0
    for piece in board.piece_map().values():
        value = piece_value(piece.piece_type)
        balance += value if piece.color == chess.WHITE else -value
    return balance


def count_attackers(board: chess.Board, square: int, color: bool) -> int:
    """Number of ``color`` pieces with a legal move landing on ``square``.

    Legal moves are generated as if ``color`` had the move, so this also
    works for the side that is not to move.
    """
    probe = board.copy(stack=False)
    probe.turn = color
    probe.ep_square = None
    return len({m.from_square for m in probe.legal_moves if m.to_square == square})


def legal_candidates(board: chess.Board) -> List[CandidateMove]:
    return [CandidateMove.from_board(board, move) for move in board.legal_moves]


class MoveEvaluator:
    """Single-ply heuristic: material, safety, checks and a few opening hints."""

    def score(self, board: chess.Board, candidate: CandidateMove) -> int:
        """Score ``candidate`` from the mover's point of view; ``board`` is left untouched."""
        ply = board.ply()
        mover = board.turn
        enemy = not mover

        temp = board.copy(stack=False)
        temp.push(candidate.move)

        # Mate ends the discussion
        if temp.is_checkmate():
            return CHECKMATE_SCORE

        score = material_balance(temp) * MATERIAL_WEIGHT

        # Don't hang pieces
        landed = temp.piece_at(candidate.to_square)
        if landed is not None:
            attackers = count_attackers(temp, candidate.to_square, enemy)
            defenders = count_attackers(temp, candidate.to_square, mover)
            if attackers > defenders:
                score -= piece_value(landed.piece_type) * HANGING_PENALTY

        if candidate.captured is not None:
            score += piece_value(candidate.captured) * CAPTURE_BONUS

        # Checks only count for much when they force something
        if temp.is_check():
            if temp.is_checkmate():
                score += MATE_CHECK_BONUS
            elif temp.legal_moves.count() < FORCING_CHECK_MAX_REPLIES:
                score += FORCING_CHECK_BONUS
            else:
                score += MILD_CHECK_BONUS

        if candidate.to_square in CENTER_SQUARES and ply < CENTER_PLY_LIMIT:
            score += CENTER_BONUS

        if ply < DEVELOPMENT_PLY_LIMIT and candidate.piece != chess.PAWN:
            score += DEVELOPMENT_BONUS

        if candidate.is_castling:
            score += CASTLING_BONUS

        king_square = temp.king(mover)
        if king_square is not None:
            score -= count_attackers(temp, king_square, enemy) * KING_ATTACKER_PENALTY

        return score

    def best_moves(self, board: chess.Board, candidates) -> Tuple[Optional[int], List[CandidateMove]]:
        """Return the top score and every candidate tied with it."""
        best_score = None
        best = []
        for candidate in candidates:
            score = self.score(board, candidate)
            log.debug("%s scores %d", candidate.san, score)
            if best_score is None or score > best_score:
                best_score = score
                best = [candidate]
            elif score == best_score:
                best.append(candidate)
        return best_score, best

    def select_best(self, board: chess.Board, candidates, rng) -> CandidateMove:
        """Pick uniformly among the top-scoring candidates."""
        best_score, best = self.best_moves(board, candidates)
        if not best:
            raise NoLegalMoves(board.fen())
        choice = rng.choice(best)
        log.debug("Best score %d shared by %d move(s); picked %s",
                  best_score, len(best), choice.san)
        return choice
