import chess

# Material values (pawn units), used for material arithmetic only
PIECE_VALUES = {
    chess.PAWN: 1,
    chess.KNIGHT: 3,
    chess.BISHOP: 3,
    chess.ROOK: 5,
    chess.QUEEN: 9,
    chess.KING: 0,
}

# The persona always plays the second side
ENGINE_COLOR = chess.BLACK

# ---------------- Move evaluation weights ----------------
CHECKMATE_SCORE = 100000        # Returned immediately, dominates everything
MATERIAL_WEIGHT = -100          # Balance is white-positive, engine is black
HANGING_PENALTY = 200           # Per pawn unit of the piece left en prise
CAPTURE_BONUS = 50              # Per pawn unit of the captured piece
MATE_CHECK_BONUS = 10000
FORCING_CHECK_BONUS = 100
FORCING_CHECK_MAX_REPLIES = 3   # Fewer legal replies than this = forcing
MILD_CHECK_BONUS = 10
CENTER_BONUS = 30
DEVELOPMENT_BONUS = 25
CASTLING_BONUS = 100
KING_ATTACKER_PENALTY = 50

CENTER_SQUARES = frozenset([chess.E4, chess.D4, chess.E5, chess.D5])
CENTER_PLY_LIMIT = 15           # Centre bonus while ply-before-move < this
DEVELOPMENT_PLY_LIMIT = 10      # Development bonus while ply-before-move < this

# ---------------- Commentary ----------------
OPENING_PLY_LIMIT = 3           # ply <= this -> opening remarks
MATERIAL_SWING = 3              # |balance| above this -> winning/losing
GOOD_MOVE_ROLL = 0.2
BAD_MOVE_ROLL = 0.3
RECENT_MESSAGE_LIMIT = 10       # Recent set is wiped once it grows past this

# ---------------- Skill levels ----------------
MIN_DIFFICULTY = 0
MAX_DIFFICULTY = 10
DEFAULT_DIFFICULTY = 5
DIFFICULTY_LEVELS = {
    "Newbie": 0,        # pure random
    "Friendly": 3,
    "Chatty": 4,
    "Zen": 6,
    "Cocky": 7,         # talks big, plays decent
    "Dramatic": 8,
    "Professor": 9,
    "Mysterious": 10,   # always best
}
