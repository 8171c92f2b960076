"""
Services Package

Contains the word store, the feedback engine and the game controllers.
"""

from .feedback_engine import compute_feedback, score_guess
from .game_service import (
    GameOrchestrator,
    GameService,
    get_game_service,
    initialize_game_service,
)
from .word_store import WordStore

__all__ = [
    'WordStore',
    'compute_feedback', 'score_guess',
    'GameOrchestrator', 'GameService', 'get_game_service', 'initialize_game_service',
]
