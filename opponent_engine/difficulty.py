import logging

from .config import MAX_DIFFICULTY, MIN_DIFFICULTY

log = logging.getLogger(__name__)


class DifficultyScheduler:
    """Per-move coin flip between the best move and a random one."""

    def decide(self, difficulty_level: int, rng) -> bool:
        """
        True means "play the best move this turn".

        Draws r uniformly from [0, 10) and compares it to the level, so a
        level of 0 never plays best and a level of 10 always does.
        """
        if not MIN_DIFFICULTY <= difficulty_level <= MAX_DIFFICULTY:
            raise ValueError(f"difficulty level must be within "
                             f"{MIN_DIFFICULTY}..{MAX_DIFFICULTY}, got {difficulty_level}")
        roll = rng.random() * MAX_DIFFICULTY
        play_best = roll < difficulty_level
        log.debug("Skill roll %.2f vs level %d -> %s",
                  roll, difficulty_level, "best" if play_best else "random")
        return play_best
