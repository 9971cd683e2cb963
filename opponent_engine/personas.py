"""
Opponent personas: who the engine pretends to be.

Each persona pairs a fixed skill level with one pool of remarks per
commentary category. The data lives here as plain tables and is frozen
into a validated PersonaCatalog when the module is imported.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

from .config import DEFAULT_DIFFICULTY, DIFFICULTY_LEVELS, MAX_DIFFICULTY, MIN_DIFFICULTY
from .errors import CatalogError, PersonaNotFound

log = logging.getLogger(__name__)


class Category(Enum):
    OPENING = "opening"        # First few plies of the game
    GOOD_MOVE = "goodMove"     # Player made a strong move
    BAD_MOVE = "badMove"       # Player made a mistake
    WINNING = "winning"
    LOSING = "losing"
    CHECK = "check"            # Player put the engine in check
    CAPTURE = "capture"        # Player took one of the engine's pieces
    GENERAL = "general"


@dataclass(frozen=True)
class Persona:
    """An opponent personality: identity, skill level and remark pools."""
    name: str
    display_name: str
    description: str
    difficulty_level: int
    message_pool: Mapping[Category, Tuple[str, ...]]

    def messages(self, category: Category) -> Tuple[str, ...]:
        return self.message_pool[category]


def difficulty_for(name: str) -> int:
    """Fixed skill level for a persona name; unlisted names get the default."""
    return DIFFICULTY_LEVELS.get(name, DEFAULT_DIFFICULTY)


def make_persona(name, display_name, description, pools, difficulty_level=None) -> Persona:
    """Freeze a raw ``{category value: [messages]}`` table into a Persona."""
    if difficulty_level is None:
        difficulty_level = difficulty_for(name)
    frozen = {}
    for key, messages in pools.items():
        category = key if isinstance(key, Category) else Category(key)
        frozen[category] = tuple(messages)
    return Persona(
        name=name,
        display_name=display_name,
        description=description,
        difficulty_level=difficulty_level,
        message_pool=MappingProxyType(frozen),
    )


class PersonaCatalog:
    """Read-only, insertion-ordered registry of personas."""

    def __init__(self, personas: Iterable[Persona]):
        self._personas = tuple(personas)
        self._validate()
        self._by_key = {}
        for persona in self._personas:
            self._by_key[persona.name.lower()] = persona
            self._by_key.setdefault(persona.display_name.lower(), persona)
        log.debug("Loaded %d personas", len(self._personas))

    def _validate(self):
        seen = set()
        for persona in self._personas:
            if persona.name in seen:
                raise CatalogError(f"Duplicate persona name {persona.name!r}")
            seen.add(persona.name)

            level = persona.difficulty_level
            if not MIN_DIFFICULTY <= level <= MAX_DIFFICULTY:
                raise CatalogError(f"{persona.name}: difficulty {level} outside "
                                   f"{MIN_DIFFICULTY}..{MAX_DIFFICULTY}")

            for category in Category:
                pool = persona.message_pool.get(category)
                if not pool:
                    raise CatalogError(f"{persona.name}: no {category.value} messages")
                if len(set(pool)) != len(pool):
                    raise CatalogError(f"{persona.name}: duplicate {category.value} messages")

    def list(self) -> Tuple[Persona, ...]:
        return self._personas

    def by_name(self, name: str) -> Persona:
        """Look up a persona by short name or display name (case-insensitive)."""
        try:
            return self._by_key[name.strip().lower()]
        except (KeyError, AttributeError):
            raise PersonaNotFound(name) from None

    def __len__(self):
        return len(self._personas)

    def __iter__(self):
        return iter(self._personas)

    def __contains__(self, name):
        return isinstance(name, str) and name.strip().lower() in self._by_key


# ------------------ PERSONA DATA ------------------

_FRIENDLY = make_persona("Friendly", "Friendly Fred", "A kind and encouraging opponent", {
    "opening": [
        "Hey! Good luck, have fun!",
        "Let's have a great game!",
        "Ready when you are, friend!",
        "This is going to be fun!",
    ],
    "goodMove": [
        "Nice move! I didn't see that coming!",
        "Wow, that's clever!",
        "Great thinking there!",
        "You're playing really well!",
        "Impressive! You've been practicing!",
        "I like how you think!",
        "That's a smart play!",
    ],
    "badMove": [
        "Hmm, you might want to reconsider that one.",
        "That's okay, we all make mistakes!",
        "Interesting choice... let's see how it plays out.",
        "No worries, you'll get the next one!",
        "Everyone has off moves sometimes!",
    ],
    "winning": [
        "You're giving me a real challenge!",
        "This is a close game!",
        "You're keeping me on my toes!",
        "Great defense!",
    ],
    "losing": [
        "Nice! You've got me in a tough spot!",
        "You're playing fantastic!",
        "Wow, you're really good at this!",
        "I'm in trouble now!",
    ],
    "check": [
        "Ooh, check! Good eye!",
        "Nice check! I need to be more careful!",
        "Check! You got me!",
        "Sharp move with that check!",
    ],
    "capture": [
        "Oh no, you got my piece!",
        "Fair capture!",
        "I'll miss that piece!",
        "Good trade!",
    ],
    "general": [
        "I'm thinking about my next move...",
        "This is a fun game!",
        "Let me see what I can do here...",
        "Interesting position we have here!",
        "Hmm, what should I do...",
    ],
})

_COCKY = make_persona("Cocky", "Cocky Carl", "An overconfident trash-talker", {
    "opening": [
        "Hope you're ready to lose!",
        "Try to keep up if you can!",
        "This won't take long...",
        "Let's see what you've got, rookie!",
    ],
    "goodMove": [
        "Lucky shot!",
        "Okay, okay, that was decent... I guess.",
        "Beginner's luck!",
        "Hmph, not bad... for you.",
        "Did you actually plan that?",
        "Alright, you got one good move in you!",
        "Don't get cocky, that was a fluke!",
    ],
    "badMove": [
        "Seriously? That's your move?",
        "Yikes, that was rough!",
        "I could beat you with my eyes closed!",
        "Are you even trying?",
        "Thanks for the free win!",
        "My grandma plays better than that!",
    ],
    "winning": [
        "Told you I'd win!",
        "Too easy!",
        "Is this the best you can do?",
        "I'm barely trying here!",
        "Victory is mine!",
    ],
    "losing": [
        "Just warming up!",
        "I'm letting you have this one...",
        "Lucky moves won't save you!",
        "This isn't over yet!",
        "I've got you right where I want you... I think.",
    ],
    "check": [
        "Check? Big deal, I've got this!",
        "That's cute, thinking you can threaten me!",
        "I saw that coming a mile away!",
        "Nice try, but I'm unstoppable!",
    ],
    "capture": [
        "I didn't need that piece anyway!",
        "That piece was bait, obviously!",
        "Congratulations on your first good move!",
        "Take it, I've got plenty more!",
    ],
    "general": [
        "Watch and learn!",
        "Prepare to be amazed!",
        "This is how a pro plays!",
        "You're about to witness greatness!",
        "Time to show off my skills!",
    ],
})

_PROFESSOR = make_persona("Professor", "Professor Pat", "A scholarly teacher", {
    "opening": [
        "Let's explore some interesting chess concepts today.",
        "A fascinating game awaits us!",
        "Shall we begin our chess study?",
        "I look forward to analyzing this game with you.",
    ],
    "goodMove": [
        "Excellent! That demonstrates good board control.",
        "Very strategic! You're controlling key squares.",
        "Brilliant tactical awareness!",
        "That shows good positional understanding!",
        "A textbook example of proper development!",
        "Superb calculation!",
        "You're applying theory correctly!",
    ],
    "badMove": [
        "Consider the consequences of weakening that square.",
        "That move may compromise your pawn structure.",
        "Perhaps a developing move would be better?",
        "Tactically, that leaves you vulnerable.",
        "Think about piece coordination here.",
    ],
    "winning": [
        "Your opening theory is sound.",
        "You're demonstrating strong positional play.",
        "Interesting approach to this middle game!",
        "Well-executed strategy!",
    ],
    "losing": [
        "You're executing your strategy well!",
        "I'm observing excellent tactical play from you.",
        "You've created a strong position!",
        "Impressive endgame technique!",
    ],
    "check": [
        "Check! A forcing move - well calculated!",
        "Check! Excellent tactical opportunity!",
        "A discovered check! Textbook tactics!",
        "Forcing the issue with check - good!",
    ],
    "capture": [
        "A fair exchange of material.",
        "Interesting piece sacrifice!",
        "That alters the material balance significantly.",
        "Trading pieces to simplify - strategic!",
    ],
    "general": [
        "Let me calculate the best continuation...",
        "The position requires careful analysis.",
        "Considering multiple candidate moves...",
        "This position has interesting strategic themes.",
        "Evaluating pawn structures...",
    ],
})

_ZEN = make_persona("Zen", "Zen Master Zara", "A calm, philosophical player", {
    "opening": [
        "The board is empty, full of possibilities...",
        "Let us flow like water across these squares.",
        "In chess, as in life, balance is key.",
        "The journey of a thousand moves begins with one.",
    ],
    "goodMove": [
        "Your move flows naturally, like a river.",
        "Harmony between your pieces.",
        "Balance achieved.",
        "You see the invisible threads connecting the pieces.",
        "Mindful play.",
        "The universe smiles upon your choice.",
        "Like bamboo, you bend but do not break.",
    ],
    "badMove": [
        "Sometimes we must lose our way to find it.",
        "Every mistake is a teacher.",
        "The path reveals itself in time.",
        "Patience, young grasshopper.",
        "Even chaos has its place in the cosmic dance.",
    ],
    "winning": [
        "The tide shifts like seasons.",
        "All things change in time.",
        "I am but dust in the wind.",
        "Victory and defeat are illusions.",
    ],
    "losing": [
        "You have found inner peace in your play.",
        "Your moves reflect clarity of mind.",
        "You are one with the board.",
        "The student has become the master.",
    ],
    "check": [
        "The king awakens from his slumber.",
        "A moment of clarity in chaos.",
        "The universe speaks through your check.",
        "Pressure creates diamonds.",
    ],
    "capture": [
        "All pieces return to the void eventually.",
        "What is taken was never truly possessed.",
        "The cycle of chess life continues.",
        "In loss, we find meaning.",
    ],
    "general": [
        "Contemplating the eternal dance of pieces...",
        "In stillness, I find my move.",
        "The answer comes when I stop seeking it.",
        "Breathing with the rhythm of the game...",
        "The board whispers ancient wisdom.",
    ],
})

_MYSTERIOUS = make_persona("Mysterious", "Mysterious Magnus", "A silent, calculating grandmaster", {
    "opening": [
        "The shadows hide many secrets...",
        "Do you feel it? The game has already begun...",
        "Interesting... very interesting indeed.",
        "I've been expecting you...",
    ],
    "goodMove": [
        "Ahh... you begin to see...",
        "Curious... most curious.",
        "Perhaps you understand more than you realize.",
        "The veil lifts slightly...",
        "One piece of the puzzle falls into place.",
        "So... you've discovered that, have you?",
        "Intriguing...",
    ],
    "badMove": [
        "All will be revealed in time...",
        "Not all paths lead where they seem.",
        "Appearances can be deceiving...",
        "Or so you think...",
        "The fog deepens...",
    ],
    "winning": [
        "The endgame approaches...",
        "Everything is going according to plan...",
        "The pieces align as foreseen...",
        "The pattern emerges...",
    ],
    "losing": [
        "Just as the prophecy foretold...",
        "You play your role perfectly...",
        "Exactly as I calculated... or did I?",
        "Fascinating... I didn't anticipate this.",
    ],
    "check": [
        "The king trembles... as it should.",
        "You've discovered one of my secrets.",
        "Clever... but there are deeper layers...",
        "Expected.",
    ],
    "capture": [
        "That piece served its purpose.",
        "A sacrifice for the greater design.",
        "Some losses are necessary...",
        "All part of the plan.",
    ],
    "general": [
        "Hmm... hmmmm...",
        "The mists are clearing...",
        "I see something you don't... yet.",
        "Time will tell...",
        "The game within the game...",
    ],
})

_CHATTY = make_persona("Chatty", "Chatty Charlie", "Can't stop talking, goes off on tangents", {
    "opening": [
        "Oh boy, I LOVE chess! Did I mention I love chess? Let's gooo!",
        "Hey hey hey! Ready to play? I've been waiting ALL DAY!",
        "Okay okay okay, white moves first, that's you! Exciting!",
        "This reminds me of this one game I played in 2019... anyway, let's start!",
    ],
    "goodMove": [
        "Whoa! Where did THAT come from? That was awesome!",
        "No way! That's like... chef's kiss! Brilliant!",
        "Okay I gotta admit, that was pretty slick!",
        "Oh snap! I felt that one! Nice!",
        "Hold up, that's actually genius! Why didn't I think of that?",
        "Dude! DUDE! That was so smart!",
        "I'm not even mad, that was amazing!",
    ],
    "badMove": [
        "Oof... you sure about that one, buddy?",
        "Hmmm... interesting choice... I mean, bold... very bold!",
        "Well THAT happened! Let's see where this goes!",
        "Oh! Oh no... I mean, it's your game!",
        "Yikes on bikes, as my cousin says!",
    ],
    "winning": [
        "Wait wait wait, you're making this harder than I expected!",
        "Okay you're actually good! Who taught you?!",
        "Plot twist: You can actually play!",
        "Hold up, this is getting intense!",
    ],
    "losing": [
        "Uhhhh I might be in trouble here... haha... ha...",
        "Okay so MAYBE I underestimated you a teensy bit!",
        "This is fine. Everything is fine. Totally fine.",
        "Houston, we have a problem!",
    ],
    "check": [
        "CHECK! CHECKITY CHECK CHECK! Oh wait, that's bad for me...",
        "Did you just... you DID! Oh man, my king is SO exposed right now!",
        "Yikes! Check! My king's having a panic attack!",
        "Red alert! Red alert! King in danger!",
    ],
    "capture": [
        "NOOOO not my piece! I liked that piece!",
        "Ow! Right in the material advantage!",
        "Oh come ON! I was using that!",
        "RIP my piece, gone too soon!",
    ],
    "general": [
        "Let me think... thinking... still thinking... almost there!",
        "Hmm hmm hmmm... what to do, what to do...",
        "Oh! Wait! No... nah, that doesn't work... or does it?",
        "Processing... please hold... elevator music playing...",
        "Brain.exe is loading...",
    ],
})

_DRAMATIC = make_persona("Dramatic", "Dramatic Diana", "Every move is a theatrical performance", {
    "opening": [
        "The stage is set! The pieces await their destiny!",
        "ACT ONE: The Opening! *Dramatic music*",
        "Our tale begins on this checkered battlefield!",
        "The curtain rises on our chess drama!",
    ],
    "goodMove": [
        "BRILLIANT! The crowd goes wild!",
        "A STUNNING display of tactical prowess!",
        "*Gasp!* MAGNIFICENT!",
        "The plot thickens! What a move!",
        "BRAVO! BRAVISSIMO!",
        "The audience is on their FEET!",
        "EXTRAORDINARY! Simply EXTRAORDINARY!",
    ],
    "badMove": [
        "Oh no! A tragic error!",
        "The hero stumbles!",
        "*Dramatic gasp* What have you done?!",
        "A plot twist nobody wanted!",
        "The tragedy unfolds!",
    ],
    "winning": [
        "My victory draws near! The tension builds!",
        "The tide turns in my favor! Feel the drama!",
        "ACT THREE: My Triumph!",
        "The finale approaches!",
    ],
    "losing": [
        "Alas! My demise approaches!",
        "The tables have turned! What treachery!",
        "Could this be... my downfall?!",
        "A twist worthy of Shakespeare!",
    ],
    "check": [
        "CHECK! The king in peril! The audience holds their breath!",
        "Hark! The king is threatened! *Dramatic chord*",
        "A CHECK! The plot reaches its climax!",
        "The tension is UNBEARABLE!",
    ],
    "capture": [
        "NOOOO! My dear piece falls in battle!",
        "A sacrifice! How poetic!",
        "They shall be remembered! *Salutes*",
        "Exit, stage left! *Weeps*",
    ],
    "general": [
        "The next move shall be... LEGENDARY!",
        "*Deep contemplation* What fate awaits?",
        "The chess gods whisper to me...",
        "*Paces dramatically* To move or not to move...",
        "The suspense is KILLING me!",
    ],
})

_NEWBIE = make_persona("Newbie", "Newbie Nina", "Just learning chess, makes mistakes but stays positive", {
    "opening": [
        "I'm still learning, but let's try our best!",
        "Okay, I think I remember how the pieces move!",
        "This is so exciting! My first real game!",
        "Please go easy on me, I'm new at this!",
    ],
    "goodMove": [
        "Oh wow, that looks like a good move!",
        "I should write that down for later!",
        "That's smart! Can I do that too?",
        "You make it look so easy!",
        "Wait, you can do that? Cool!",
        "Teach me your ways!",
        "That's SO clever!",
    ],
    "badMove": [
        "Oh! Was that a mistake? I can't tell yet...",
        "Hmm, I'm not sure what that did...",
        "Interesting! I'm learning so much!",
        "I'll figure out if that's good or bad eventually!",
        "We all have to learn somehow!",
    ],
    "winning": [
        "Wait, am I winning? Is this what winning feels like?!",
        "I think I'm doing okay! Maybe!",
        "OMG I'm actually playing chess!",
        "Is this real life?!",
    ],
    "losing": [
        "You're so good! Teach me!",
        "I see what you're doing! That's so clever!",
        "I'm learning so much from you!",
        "One day I'll be as good as you!",
    ],
    "check": [
        "CHECK! I did it! Wait, is my king safe too?",
        "That's check, right? I think that's check!",
        "Yay! I checked you! ...Now what?",
        "Did I do it right?!",
    ],
    "capture": [
        "Oh no! Can I have that back? Just kidding!",
        "I'll do better at protecting my pieces!",
        "Note to self: guard pieces better!",
        "Oopsie daisy!",
    ],
    "general": [
        "Umm... let me think what I learned...",
        "Knights move in an L-shape, right? Just checking!",
        "I'm getting better at this!",
        "Where should this piece go... decisions decisions...",
        "Learning is fun!",
    ],
})

DEFAULT_CATALOG = PersonaCatalog([
    _FRIENDLY, _COCKY, _PROFESSOR, _ZEN, _MYSTERIOUS, _CHATTY, _DRAMATIC, _NEWBIE,
])
