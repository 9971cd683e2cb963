from .config import RECENT_MESSAGE_LIMIT


class EngineState:
    """Per-game state for one persona opponent.

    Holds the persona binding, its skill level and the set of remarks used
    recently. One instance belongs to exactly one game; never share it.
    """

    def __init__(self, persona, difficulty_level=None):
        self.persona = persona
        self.difficulty_level = (persona.difficulty_level
                                 if difficulty_level is None else difficulty_level)
        # dict keys keep insertion order, so this doubles as an ordered set
        self.recently_used = {}

    def was_used(self, message: str) -> bool:
        return message in self.recently_used

    def remember(self, message: str):
        """Record a remark; the whole history is dropped once it overflows."""
        self.recently_used[message] = None
        if len(self.recently_used) > RECENT_MESSAGE_LIMIT:
            self.recently_used.clear()

    @property
    def recent_messages(self):
        return tuple(self.recently_used)

    def __repr__(self):
        return (f"EngineState(persona={self.persona.name!r}, "
                f"difficulty_level={self.difficulty_level}, "
                f"recent={len(self.recently_used)})")
