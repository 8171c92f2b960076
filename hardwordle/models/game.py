"""
Game Data Models

Contains the value types passed between the feedback engine, the session
and the orchestrator.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..errors import ValidationError


class LetterStatus(Enum):
    """Per-letter evaluation of a guess."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def rank(self) -> int:
        """Ordering used for keyboard hints: correct > present > absent."""
        return _STATUS_RANK[self]


_STATUS_RANK = {
    LetterStatus.ABSENT: 0,
    LetterStatus.PRESENT: 1,
    LetterStatus.CORRECT: 2,
}


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class GuessRejection(Enum):
    """Why a submitted guess was refused without consuming an attempt."""
    STATE_ERROR = "state_error"
    EMPTY_INPUT = "empty_input"
    LENGTH_ERROR = "length_error"
    NOT_IN_DICTIONARY = "not_in_dictionary"


@dataclass(frozen=True)
class LetterFeedback:
    letter: str
    status: LetterStatus


class Attempt:
    """
    One accepted guess and its feedback.

    The word is lowercased on construction and the feedback is frozen into a
    tuple, so an Attempt never changes after it is built.
    """

    __slots__ = ("_word", "_feedback")

    def __init__(self, word: str, feedback: Sequence):
        if not isinstance(word, str):
            raise ValidationError("Guess word must be a string")
        if isinstance(feedback, str) or not isinstance(feedback, Sequence):
            raise ValidationError("Feedback must be a sequence")
        if len(feedback) != len(word):
            raise ValidationError("Feedback length must match word length")

        self._word = word.lower()
        self._feedback: Tuple[LetterFeedback, ...] = tuple(feedback)

    @property
    def word(self) -> str:
        return self._word

    @property
    def feedback(self) -> Tuple[LetterFeedback, ...]:
        return self._feedback

    @property
    def statuses(self) -> List[LetterStatus]:
        return [item.status for item in self._feedback]

    def is_solved(self) -> bool:
        return all(item.status == LetterStatus.CORRECT for item in self._feedback)

    def to_dict(self) -> Dict:
        return {
            "word": self._word,
            "feedback": [
                {"letter": item.letter, "status": item.status.value}
                for item in self._feedback
            ],
        }

    def __eq__(self, other):
        if not isinstance(other, Attempt):
            return NotImplemented
        return self._word == other._word and self._feedback == other._feedback

    def __hash__(self):
        return hash((self._word, self._feedback))

    def __repr__(self):
        return f"Attempt(word={self._word!r}, statuses={[s.value for s in self.statuses]})"


@dataclass(frozen=True)
class GuessResult:
    """Outcome of a single submit_guess call."""
    success: bool
    status: Optional[GameStatus]
    attempt: Optional[Attempt] = None
    error: Optional[str] = None
    error_kind: Optional[GuessRejection] = None

    def to_dict(self) -> Dict:
        return {
            "success": self.success,
            "status": self.status.value if self.status else None,
            "attempt": self.attempt.to_dict() if self.attempt else None,
            "error": self.error,
            "error_kind": self.error_kind.value if self.error_kind else None,
        }


@dataclass
class GameState:
    """Read-only snapshot of a session, safe to hand to any renderer."""
    max_attempts: int
    remaining_attempts: int
    status: str
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # (letter, status) pairs for JSON serialization
    letter_status: Dict[str, str]
    answer: Optional[str] = None  # Only included when game is over
