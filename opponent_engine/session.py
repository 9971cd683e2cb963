import logging
from typing import Optional

import chess

from .config import ENGINE_COLOR
from .game_logic import AIOpponentController

log = logging.getLogger(__name__)

PLAYER_COLOR = not ENGINE_COLOR

ENGINE_WIN_REMARK = "Good game! Better luck next time!"
PLAYER_WIN_REMARK = "Well played! You got me!"
DRAW_REMARK = "A well-fought battle!"


class GameSession:
    """One game against a persona: the human plays White, the persona Black."""

    def __init__(self, persona, rng=None, board: Optional[chess.Board] = None):
        self.persona = persona
        self.board = board if board is not None else chess.Board()
        self.opponent = AIOpponentController(persona, rng)

    def greeting(self) -> str:
        return f"{self.persona.display_name}: Let's play! You're White, I'm Black."

    # -------------------- Parsing helpers --------------------
    def _needs_promotion(self, move: chess.Move) -> bool:
        piece = self.board.piece_at(move.from_square)
        return (piece is not None and piece.piece_type == chess.PAWN
                and chess.square_rank(move.to_square) in (0, 7))

    def _parse_move_from_text(self, text: str) -> Optional[chess.Move]:
        """Try SAN, then UCI. Bare pawn moves to the last rank promote to a queen."""
        t = text.strip()
        if not t:
            return None
        try:
            return self.board.parse_san(t)
        except ValueError:
            pass
        try:
            move = chess.Move.from_uci(t.lower())
        except ValueError:
            return None
        if move.promotion is None and self._needs_promotion(move):
            move = chess.Move(move.from_square, move.to_square, promotion=chess.QUEEN)
        return move if move in self.board.legal_moves else None

    # -------------------- Game status --------------------
    def is_over(self) -> bool:
        return self.board.outcome(claim_draw=True) is not None

    def winner(self) -> Optional[str]:
        outcome = self.board.outcome(claim_draw=True)
        if outcome is None:
            return None
        if outcome.winner is None:
            return "draw"
        return chess.COLOR_NAMES[outcome.winner]

    def status(self) -> str:
        winner = self.winner()
        if winner == "draw":
            return "Draw!"
        if winner is not None:
            return f"Checkmate! {winner.capitalize()} wins!"
        if self.board.is_check():
            return "Check!"
        return ""

    def final_remark(self) -> Optional[str]:
        winner = self.winner()
        if winner is None:
            return None
        if winner == "draw":
            return DRAW_REMARK
        return ENGINE_WIN_REMARK if winner == chess.COLOR_NAMES[ENGINE_COLOR] else PLAYER_WIN_REMARK

    # -------------------- Public API --------------------
    def player_move(self, text: str) -> dict:
        """Apply the human's move and collect the persona's reaction."""
        if self.is_over():
            return {"success": False, "message": "Game over."}
        if self.board.turn != PLAYER_COLOR:
            return {"success": False, "message": "Wait for your turn."}

        move = self._parse_move_from_text(text)
        if move is None:
            return {"success": False, "message": "Illegal move."}

        san = self.board.san(move)
        self.board.push(move)
        log.debug("Player played %s", san)

        reaction = self.opponent.react_to_move(self.board, san)
        result = {"success": True, "move": san, "message": f"White played {san}",
                  "reaction": reaction, "status": self.status()}
        if self.is_over():
            result["final"] = self.final_remark()
        return result

    def engine_move(self) -> dict:
        """Let the persona choose and play its move."""
        if self.is_over():
            return {"success": False, "message": "Game over."}
        if self.board.turn != ENGINE_COLOR:
            return {"success": False, "message": "It's not my turn."}

        decision = self.opponent.decide_move(self.board)
        san = decision.move.san
        self.board.push(decision.move.move)

        result = {"success": True, "move": san, "message": f"Black played {san}",
                  "comment": decision.comment, "status": self.status()}
        if self.is_over():
            result["final"] = self.final_remark()
        return result

    def undo(self) -> dict:
        """Take back the persona's reply and the player's move before it."""
        if not self.board.move_stack:
            return {"success": False, "message": "Nothing to undo."}
        if self.board.turn != PLAYER_COLOR and not self.is_over():
            return {"success": False, "message": "Wait for my move first."}

        taken_back = []
        while self.board.move_stack:
            move = self.board.pop()
            taken_back.append(self.board.san(move))
            # Stop once the player has the move again
            if self.board.turn == PLAYER_COLOR:
                break
        taken_back.reverse()
        log.debug("Took back %s", " ".join(taken_back))
        return {"success": True, "undone": taken_back,
                "message": f"Took back {' '.join(taken_back)}"}

    def new_game(self) -> str:
        """Reset the board and the persona's memory; returns a fresh greeting."""
        self.board = chess.Board()
        self.opponent.reset()
        return self.greeting()
