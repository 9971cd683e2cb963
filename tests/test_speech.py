"""Tests for commentary categories and the no-repeat remark picker."""

import chess
import pytest

from opponent_engine import (
    Category,
    CommentaryContext,
    CommentarySelector,
    EngineState,
    make_persona,
)


def _context(**kwargs) -> CommentaryContext:
    values = dict(ply=20, in_check=False, side_to_move=chess.BLACK,
                  last_move=None, material_balance=0)
    values.update(kwargs)
    return CommentaryContext(**values)


@pytest.fixture
def big_pool_persona():
    pools = {category: [f"{category.value} {i}" for i in range(12)] for category in Category}
    return make_persona("Talker", "Talker Tom", "Says a lot", pools)


class TestCommentaryContext:
    def test_from_board(self) -> None:
        board = chess.Board("3qk3/8/8/8/8/8/8/4K3 w - - 0 30")
        ctx = CommentaryContext.from_board(board, last_move="Kd1")
        assert ctx.ply == 58
        assert ctx.side_to_move == chess.WHITE
        assert ctx.in_check is False
        assert ctx.last_move == "Kd1"
        assert ctx.material_balance == -9


class TestCategoryFor:
    @pytest.mark.parametrize("ply", [0, 1, 2, 3])
    def test_opening_wins_over_everything(self, rng, ply) -> None:
        selector = CommentarySelector(rng)
        ctx = _context(ply=ply, in_check=True, last_move="Qxf7+", material_balance=20)
        assert selector.category_for(ctx) is Category.OPENING

    def test_engine_in_check(self, rng) -> None:
        selector = CommentarySelector(rng)
        assert selector.category_for(_context(in_check=True, last_move="Bxf7+")) is Category.CHECK

    def test_check_on_the_other_side_is_not_check(self, rng) -> None:
        selector = CommentarySelector(rng)
        ctx = _context(in_check=True, side_to_move=chess.WHITE, last_move="Bxf2+")
        assert selector.category_for(ctx) is Category.CAPTURE

    def test_capture(self, rng) -> None:
        selector = CommentarySelector(rng)
        assert selector.category_for(_context(last_move="Nxe5", material_balance=8)) is Category.CAPTURE

    def test_material_polarity(self, rng) -> None:
        selector = CommentarySelector(rng)
        assert selector.category_for(_context(material_balance=4)) is Category.LOSING
        assert selector.category_for(_context(material_balance=-4)) is Category.WINNING

    @pytest.mark.parametrize("roll, expected", [
        (0.0, Category.GOOD_MOVE),
        (0.19, Category.GOOD_MOVE),
        (0.2, Category.BAD_MOVE),
        (0.29, Category.BAD_MOVE),
        (0.3, Category.GENERAL),
        (0.99, Category.GENERAL),
    ])
    def test_random_roll(self, fixed_random, roll, expected) -> None:
        selector = CommentarySelector(fixed_random([roll]))
        # Balance of exactly 3 is not a swing
        assert selector.category_for(_context(material_balance=3)) is expected

    def test_black_up_a_queen_is_winning(self, rng) -> None:
        board = chess.Board("q3k3/8/8/8/8/8/8/4K3 w - - 0 30")
        selector = CommentarySelector(rng)
        assert selector.category_for(CommentaryContext.from_board(board)) is Category.WINNING


class TestPick:
    def test_message_comes_from_pool(self, rng, catalog) -> None:
        persona = catalog.by_name("Zen")
        state = EngineState(persona)
        selector = CommentarySelector(rng)
        message = selector.pick(persona, Category.CAPTURE, state)
        assert message in persona.messages(Category.CAPTURE)
        assert state.recent_messages == (message,)

    def test_no_repeats_until_pool_exhausted(self, rng, catalog) -> None:
        persona = catalog.by_name("Friendly")
        pool = persona.messages(Category.OPENING)
        state = EngineState(persona)
        selector = CommentarySelector(rng)
        picks = [selector.pick(persona, Category.OPENING, state) for _ in pool]
        assert sorted(picks) == sorted(pool)

    def test_falls_back_to_full_pool(self, rng) -> None:
        pools = {category: ["only line"] for category in Category}
        persona = make_persona("Quiet", "Quiet Quinn", "", pools)
        state = EngineState(persona)
        selector = CommentarySelector(rng)
        assert selector.pick(persona, Category.GENERAL, state) == "only line"
        assert selector.pick(persona, Category.GENERAL, state) == "only line"

    def test_history_clears_in_one_shot(self, rng, big_pool_persona) -> None:
        state = EngineState(big_pool_persona)
        selector = CommentarySelector(rng)
        picks = []
        for i in range(1, 12):
            picks.append(selector.pick(big_pool_persona, Category.GENERAL, state))
            assert len(state.recently_used) <= 10
            if i <= 10:
                assert len(state.recently_used) == i
        assert len(set(picks)) == 11
        assert len(state.recently_used) == 0

    def test_comment_uses_category(self, fixed_random, catalog) -> None:
        persona = catalog.by_name("Dramatic")
        state = EngineState(persona)
        selector = CommentarySelector(fixed_random([0.5]))
        message = selector.comment(persona, state, _context(ply=2))
        assert message in persona.messages(Category.OPENING)
