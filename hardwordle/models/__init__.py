"""
Data Models Package

Contains all data models and value types used throughout the engine.
"""

from .game import (
    Attempt,
    GameState,
    GameStatus,
    GuessRejection,
    GuessResult,
    LetterFeedback,
    LetterStatus,
)
from .session import GameSession

__all__ = [
    'Attempt', 'GameSession', 'GameState', 'GameStatus', 'GuessRejection',
    'GuessResult', 'LetterFeedback', 'LetterStatus',
]
