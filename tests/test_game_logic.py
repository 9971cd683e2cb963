"""Tests for the opponent controller."""

import random

import chess
import pytest

from opponent_engine import AIOpponentController, Category, MoveDecision, NoLegalMoves

MATE_IN_ONE = "k3r3/8/8/8/8/8/5PPP/6K1 b - - 0 1"


class TestDecideMove:
    def test_newbie_plays_random_legal_moves(self, catalog) -> None:
        persona = catalog.by_name("Newbie")
        controller = AIOpponentController(persona, rng=random.Random(2024))
        board = chess.Board()
        legal = {m.uci() for m in board.legal_moves}
        opening = set(persona.messages(Category.OPENING))

        seen = set()
        for _ in range(400):
            move, comment = controller.decide_move(board)
            assert move.uci in legal
            assert comment in opening
            seen.add(move.uci)
        assert seen == legal

    def test_mysterious_always_finds_mate(self, catalog, rng) -> None:
        controller = AIOpponentController(catalog.by_name("Mysterious"), rng=rng)
        board = chess.Board(MATE_IN_ONE)
        for _ in range(10):
            decision = controller.decide_move(board)
            assert decision.move.san == "Re1#"

    def test_returns_move_decision(self, catalog, rng) -> None:
        controller = AIOpponentController(catalog.by_name("Professor"), rng=rng)
        decision = controller.decide_move(chess.Board())
        assert isinstance(decision, MoveDecision)
        move, comment = decision
        assert move is decision.move
        assert comment is decision.comment

    def test_board_is_not_modified(self, catalog, rng) -> None:
        controller = AIOpponentController(catalog.by_name("Zen"), rng=rng)
        board = chess.Board()
        board.push_san("e4")
        fen = board.fen()
        controller.decide_move(board)
        assert board.fen() == fen

    @pytest.mark.parametrize("fen", [
        "k7/1Q6/1K6/8/8/8/8/8 b - - 0 1",    # checkmated
        "k7/8/1Q6/8/8/8/8/7K b - - 0 1",     # stalemated
    ])
    def test_no_legal_moves(self, catalog, rng, fen) -> None:
        controller = AIOpponentController(catalog.by_name("Cocky"), rng=rng)
        with pytest.raises(NoLegalMoves):
            controller.decide_move(chess.Board(fen))

    def test_comments_on_being_in_check(self, catalog, rng) -> None:
        persona = catalog.by_name("Chatty")
        controller = AIOpponentController(persona, rng=rng)
        board = chess.Board("4k3/8/8/8/8/8/8/4RK2 b - - 0 30")
        _, comment = controller.decide_move(board)
        assert comment in persona.messages(Category.CHECK)

    def test_seeded_games_repeat(self, catalog) -> None:
        persona = catalog.by_name("Cocky")

        def play_out(seed):
            controller = AIOpponentController(persona, rng=random.Random(seed))
            board = chess.Board()
            record = []
            for _ in range(12):
                if board.is_game_over():
                    break
                move, comment = controller.decide_move(board)
                board.push(move.move)
                record.append((move.san, comment))
            return record

        assert play_out(99) == play_out(99)


class TestReactToMove:
    def test_capture_reaction(self, catalog, rng) -> None:
        persona = catalog.by_name("Dramatic")
        controller = AIOpponentController(persona, rng=rng)
        board = chess.Board("r1bqkbnr/pppp1ppp/2B5/4p3/4P3/5N2/PPPP1PPP/RNBQK2R b KQkq - 0 4")
        comment = controller.react_to_move(board, "Bxc6")
        assert comment in persona.messages(Category.CAPTURE)
        assert controller.state.recent_messages == (comment,)

    def test_winning_reaction(self, catalog, rng) -> None:
        persona = catalog.by_name("Professor")
        controller = AIOpponentController(persona, rng=rng)
        board = chess.Board("q3k3/8/8/8/8/8/8/3K4 b - - 1 30")
        comment = controller.react_to_move(board, "Kd1")
        assert comment in persona.messages(Category.WINNING)


class TestState:
    def test_difficulty_copied_from_persona(self, catalog) -> None:
        controller = AIOpponentController(catalog.by_name("Dramatic"))
        assert controller.difficulty_level == 8
        assert controller.state.persona.name == "Dramatic"

    def test_reset_starts_fresh(self, catalog, rng) -> None:
        controller = AIOpponentController(catalog.by_name("Friendly"), rng=rng)
        controller.decide_move(chess.Board())
        old_state = controller.state
        assert old_state.recent_messages
        controller.reset()
        assert controller.state is not old_state
        assert controller.state.recent_messages == ()

    def test_controllers_do_not_share_state(self, catalog, rng) -> None:
        persona = catalog.by_name("Zen")
        first = AIOpponentController(persona, rng=rng)
        second = AIOpponentController(persona, rng=rng)
        first.decide_move(chess.Board())
        assert second.state.recent_messages == ()
