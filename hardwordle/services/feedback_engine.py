"""
Feedback Engine

Implements the Wordle letter evaluation algorithm with duplicate handling.
"""

from collections import Counter
from typing import List

from ..models.game import LetterFeedback, LetterStatus


def compute_feedback(guess: str, target: str) -> List[LetterStatus]:
    """
    Evaluate a guess against the target, one status per position.

    Exact matches are marked first and consume their letter. The remaining
    target letters are then handed out left to right as PRESENT, so a guess
    with more copies of a letter than the target only gets as many
    CORRECT/PRESENT marks as the target has copies.

    Args:
        guess: Lowercase guess
        target: Lowercase target of the same length

    Returns:
        List[LetterStatus]: Status for each position of the guess
    """
    result = [LetterStatus.ABSENT] * len(guess)
    available = Counter(target)

    # First pass: exact position matches
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            result[i] = LetterStatus.CORRECT
            available[g] -= 1

    # Second pass: displaced letters, leftmost wins
    for i, g in enumerate(guess):
        if result[i] is LetterStatus.CORRECT:
            continue
        if available[g] > 0:
            result[i] = LetterStatus.PRESENT
            available[g] -= 1

    return result


def score_guess(guess: str, target: str) -> List[LetterFeedback]:
    """Pair each guessed letter with its status."""
    return [
        LetterFeedback(letter=letter, status=status)
        for letter, status in zip(guess, compute_feedback(guess, target))
    ]
