"""
The opponent_engine package contains the decision core of a persona chess
opponent: persona data, skill scheduling, single-ply move evaluation,
commentary selection and the controller that ties them together.
Chess rules themselves come from python-chess.
"""

from .config import DIFFICULTY_LEVELS, ENGINE_COLOR, PIECE_VALUES
from .difficulty import DifficultyScheduler
from .errors import CatalogError, NoLegalMoves, OpponentError, PersonaNotFound
from .game_logic import AIOpponentController, MoveDecision
from .moves import CandidateMove, MoveEvaluator, MoveFlag, count_attackers, legal_candidates, material_balance
from .personas import DEFAULT_CATALOG, Category, Persona, PersonaCatalog, difficulty_for, make_persona
from .session import GameSession
from .speech import CommentaryContext, CommentarySelector
from .state import EngineState
