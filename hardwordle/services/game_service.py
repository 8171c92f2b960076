"""
Game Service

Contains the single-player game controller and the registry that keeps one
controller per game id for the HTTP layer.
"""

import logging
import uuid
from typing import Dict, Optional

from ..config.game_settings import MAX_ATTEMPTS, WORD_LENGTH, validate_max_attempts
from ..errors import ConfigError, StateError
from ..models.game import Attempt, GameState, GuessRejection, GuessResult
from ..models.session import GameSession
from .feedback_engine import score_guess
from .word_store import WordStore

logger = logging.getLogger(__name__)

GAME_OVER_MESSAGE = "Game is over. Start a new game!"
EMPTY_INPUT_MESSAGE = "Please enter a word"
LENGTH_ERROR_MESSAGE = f"Word must be exactly {WORD_LENGTH} letters"
NOT_IN_DICTIONARY_MESSAGE = "Not a valid word"


class GameOrchestrator:
    """
    Drives one player's games.

    This class handles:
    - Target selection from the word store
    - Guess normalization and validation
    - Feedback computation and attempt recording
    - Replacing the session wholesale on every new game

    The orchestrator is the only writer of its current session. Callers read
    state through get_game_state() or the session's snapshot().
    """

    def __init__(self, word_store: WordStore, max_attempts: int = MAX_ATTEMPTS):
        if word_store is None:
            raise ConfigError("GameOrchestrator requires a word store")
        if word_store.count_of_length(WORD_LENGTH) == 0:
            raise ConfigError(f"Dictionary has no {WORD_LENGTH}-letter words to use as targets")
        self._word_store = word_store
        self._max_attempts = validate_max_attempts(max_attempts)
        self._session: Optional[GameSession] = None

    @property
    def word_store(self) -> WordStore:
        return self._word_store

    def has_game(self) -> bool:
        return self._session is not None

    def start_new_game(self) -> GameSession:
        """
        Draws a fresh target and replaces the current session.

        Returns:
            GameSession: The new, empty session
        """
        target = self._word_store.get_random_word(length=WORD_LENGTH)
        self._session = GameSession(target, self._max_attempts)
        logger.info("New game started (max_attempts=%s)", self._max_attempts)
        return self._session

    def get_game_state(self) -> GameSession:
        """
        Returns the current session.

        Raises:
            StateError: If no game has been started
        """
        if self._session is None:
            raise StateError("No game has been started")
        return self._session

    def submit_guess(self, raw_input) -> GuessResult:
        """
        Validates and records a guess.

        Rejected guesses never consume an attempt; the first failing check
        decides the error.

        Args:
            raw_input: The guess as typed by the player

        Returns:
            GuessResult: success with the recorded attempt, or a rejection
        """
        session = self._session
        if session is None or session.is_over():
            return self._reject(GuessRejection.STATE_ERROR, GAME_OVER_MESSAGE)

        guess = raw_input.strip().lower() if isinstance(raw_input, str) else ""

        if not guess:
            return self._reject(GuessRejection.EMPTY_INPUT, EMPTY_INPUT_MESSAGE)

        if len(guess) != WORD_LENGTH:
            return self._reject(GuessRejection.LENGTH_ERROR, LENGTH_ERROR_MESSAGE)

        if not self._word_store.is_valid_word(guess):
            return self._reject(GuessRejection.NOT_IN_DICTIONARY, NOT_IN_DICTIONARY_MESSAGE)

        attempt = Attempt(guess, score_guess(guess, session.target))
        status = session.record_attempt(attempt)

        if session.is_over():
            logger.info(
                "Game finished: %s after %s attempt(s)",
                status.value, len(session.attempts)
            )

        return GuessResult(success=True, status=status, attempt=attempt)

    def _reject(self, kind: GuessRejection, message: str) -> GuessResult:
        logger.debug("Guess rejected: %s", kind.value)
        status = self._session.status if self._session is not None else None
        return GuessResult(success=False, status=status, error=message, error_kind=kind)


class GameService:
    """
    Registry of independent games keyed by a unique game id.

    Every game gets its own GameOrchestrator, all sharing one read-only
    WordStore, so players never share a session.
    """

    def __init__(self, word_store: WordStore, max_attempts: int = MAX_ATTEMPTS):
        if word_store is None:
            raise ConfigError("GameService requires a word store")
        if word_store.count_of_length(WORD_LENGTH) == 0:
            raise ConfigError(f"Dictionary has no {WORD_LENGTH}-letter words to use as targets")
        self.word_store = word_store
        self.max_attempts = validate_max_attempts(max_attempts)
        self.games: Dict[str, GameOrchestrator] = {}  # Store active games by game_id

    def create_new_game(self) -> str:
        """
        Creates a new game with a randomly selected word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        orchestrator = GameOrchestrator(self.word_store, self.max_attempts)
        orchestrator.start_new_game()
        self.games[game_id] = orchestrator
        return game_id

    def get_orchestrator(self, game_id: str) -> Optional[GameOrchestrator]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state (without revealing an unfinished answer).

        Returns:
            GameState object or None if game not found
        """
        orchestrator = self.games.get(game_id)
        if orchestrator is None:
            return None
        return orchestrator.get_game_state().snapshot()

    def submit_guess(self, game_id: str, guess) -> Optional[GuessResult]:
        """
        Processes a guess for a game.

        Returns:
            GuessResult, or None if game not found
        """
        orchestrator = self.games.get(game_id)
        if orchestrator is None:
            return None
        return orchestrator.submit_guess(guess)

    def restart_game(self, game_id: str) -> Optional[GameState]:
        """Starts a new target under an existing game id."""
        orchestrator = self.games.get(game_id)
        if orchestrator is None:
            return None
        return orchestrator.start_new_game().snapshot()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False

    def active_games(self) -> int:
        return len(self.games)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_store: WordStore, max_attempts: int = MAX_ATTEMPTS) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_store, max_attempts)
    return _game_service
