"""
Three-row split simulator
"""

from .engine.deck import Card, Deck, Suit, parse_cards
from .engine.hand_detector import HandType, detect_hand, score_hand
from .engine.auto_win import AutoWinType, detect_auto_win
from .engine.splits import Split
from .engine.errors import (SimulationError, InvalidInputError, InvalidHandError,
                            NoValidSplitError, SimulationCancelled)
from .presets import SolverConfig, Preset, PRESETS, get_preset
from .simulator import Simulator, SimulationResult, run

__version__ = "0.1.0"
