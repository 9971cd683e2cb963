"""Tests for the skill coin flip."""

import pytest

from opponent_engine import DifficultyScheduler

DRAWS = [0.0, 0.05, 0.25, 0.5, 0.75, 0.9999]


class TestDifficultyScheduler:
    def test_level_zero_never_plays_best(self, fixed_random) -> None:
        scheduler = DifficultyScheduler()
        rng = fixed_random(DRAWS)
        assert not any(scheduler.decide(0, rng) for _ in DRAWS)

    def test_level_ten_always_plays_best(self, fixed_random) -> None:
        scheduler = DifficultyScheduler()
        rng = fixed_random(DRAWS)
        assert all(scheduler.decide(10, rng) for _ in DRAWS)

    def test_threshold(self, fixed_random) -> None:
        scheduler = DifficultyScheduler()
        # r = 0.69 * 10 = 6.9 < 7, r = 0.7 * 10 = 7.0 is not
        assert scheduler.decide(7, fixed_random([0.69])) is True
        assert scheduler.decide(7, fixed_random([0.7])) is False

    def test_rate_tracks_level(self, rng) -> None:
        scheduler = DifficultyScheduler()
        hits = sum(scheduler.decide(3, rng) for _ in range(2000))
        assert 500 < hits < 700

    @pytest.mark.parametrize("level", [-1, 11])
    def test_out_of_range(self, rng, level) -> None:
        with pytest.raises(ValueError):
            DifficultyScheduler().decide(level, rng)
