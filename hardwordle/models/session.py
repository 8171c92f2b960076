"""
Game Session Model

Holds the target word, the chronological attempt history and the attempt
budget for one play-through. The status is always derived from the history.
"""

from typing import Dict, List, Tuple

from ..config.game_settings import MAX_ATTEMPTS, WORD_LENGTH, validate_max_attempts
from ..errors import ConfigError, StateError, ValidationError
from .game import Attempt, GameState, GameStatus, LetterStatus


class GameSession:
    """
    A single game from target selection to win or loss.

    Only the orchestrator that created a session appends to it; everything
    else reads it through the properties below or through snapshot().
    """

    def __init__(self, target: str, max_attempts: int = MAX_ATTEMPTS):
        if not isinstance(target, str) or len(target) != WORD_LENGTH:
            raise ConfigError(f"Target must be a {WORD_LENGTH}-letter word, got {target!r}")
        validate_max_attempts(max_attempts)

        self._target = target.lower()
        self._max_attempts = max_attempts
        self._attempts: List[Attempt] = []
        self._status = GameStatus.IN_PROGRESS

    @property
    def target(self) -> str:
        return self._target

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def attempts(self) -> Tuple[Attempt, ...]:
        return tuple(self._attempts)

    @property
    def status(self) -> GameStatus:
        return self._status

    def remaining_attempts(self) -> int:
        return self._max_attempts - len(self._attempts)

    def is_over(self) -> bool:
        return self._status != GameStatus.IN_PROGRESS

    def record_attempt(self, attempt: Attempt) -> GameStatus:
        """
        Append an accepted attempt and re-derive the status.

        Raises:
            StateError: if the game is already over or the budget is spent
            ValidationError: if attempt is not an Attempt
        """
        if self.is_over():
            raise StateError(f"Game is already {self._status.value}")
        if len(self._attempts) >= self._max_attempts:
            raise StateError("No attempts remaining")
        if not isinstance(attempt, Attempt):
            raise ValidationError(f"Expected an Attempt, got {type(attempt).__name__}")

        self._attempts.append(attempt)
        self._status = self._derive_status()
        return self._status

    def _derive_status(self) -> GameStatus:
        if any(attempt.word == self._target for attempt in self._attempts):
            return GameStatus.WON
        if len(self._attempts) >= self._max_attempts:
            return GameStatus.LOST
        return GameStatus.IN_PROGRESS

    def letter_statuses(self) -> Dict[str, LetterStatus]:
        """
        Best status seen so far for every guessed letter.

        A letter never moves down the order correct > present > absent.
        """
        best: Dict[str, LetterStatus] = {}
        for attempt in self._attempts:
            for item in attempt.feedback:
                current = best.get(item.letter)
                if current is None or item.status.rank > current.rank:
                    best[item.letter] = item.status
        return best

    def snapshot(self) -> GameState:
        """Returns the current game state (the answer only once the game is over)."""
        return GameState(
            max_attempts=self._max_attempts,
            remaining_attempts=self.remaining_attempts(),
            status=self._status.value,
            game_over=self.is_over(),
            won=self._status == GameStatus.WON,
            guesses=[attempt.word for attempt in self._attempts],
            guess_results=[
                [(item.letter, item.status.value) for item in attempt.feedback]
                for attempt in self._attempts
            ],
            letter_status={letter: status.value for letter, status in self.letter_statuses().items()},
            answer=self._target if self.is_over() else None,
        )

    def __repr__(self):
        status = getattr(self, "_status", None)
        attempts = getattr(self, "_attempts", ())
        return (
            f"GameSession(status={status.value if status else None}, "
            f"attempts={len(attempts)}/{getattr(self, '_max_attempts', None)})"
        )
