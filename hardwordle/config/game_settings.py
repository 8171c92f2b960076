"""
Game Configuration Constants Module

This module defines the game rules and the dictionary file loader.
All game parameters are centralized here to enable easy modification.
"""

import json
import os
from typing import Dict, Final, Iterable, List

from ..errors import ConfigError

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""Number of letters in every target and every accepted guess."""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

MIN_RECOMMENDED_WORDS: Final[int] = 5000
"""Dictionary size below which targets become too predictable. Deployment concern only."""

DEFAULT_WORDS_FILE: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.json'
)


def validate_max_attempts(max_attempts) -> int:
    """
    Check an attempt budget.

    Raises:
        ConfigError: Unless max_attempts is a positive integer (bools excluded)
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1:
        raise ConfigError(f"max_attempts must be a positive integer, got {max_attempts!r}")
    return max_attempts


def load_word_list(path: str = DEFAULT_WORDS_FILE) -> List[str]:
    """
    Load the dictionary from a JSON file.

    The file holds an object with a ``words`` array; a bare array is also
    accepted. Words are returned as found, normalization is left to WordStore.

    Args:
        path: Location of the JSON dictionary file

    Returns:
        List[str]: Raw words from the file

    Raises:
        ConfigError: If the file is missing, is not valid JSON, has no words
            array, or the array is empty
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigError(f"Word list file not found: {path}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}")

    words = data.get('words') if isinstance(data, dict) else data

    if not isinstance(words, list):
        raise ConfigError('Invalid dictionary format: expected "words" array')

    if not words:
        raise ConfigError('Dictionary is empty')

    return words


def validate_word_list_integrity(words: Iterable[str]) -> bool:
    """
    Validates that every dictionary entry can be used as a target.

    This function checks:
    1. Type validation: every entry is a string
    2. Length validation: every word is exactly WORD_LENGTH characters
    3. Character validation: only alphabetic characters allowed

    Duplicates and mixed case are allowed; WordStore collapses them.

    Returns:
        bool: True if the word list passes all validation checks

    Raises:
        ConfigError: If any check fails, naming the offending entry
    """
    count = 0
    for index, word in enumerate(words):
        count += 1
        if not isinstance(word, str):
            raise ConfigError(f"Word at index {index} is not a string: {word!r}")

        if len(word) != WORD_LENGTH:
            raise ConfigError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ConfigError(f"Word at index {index} '{word}' contains non-alphabetic characters")

    if count == 0:
        raise ConfigError("Word list cannot be empty")

    return True


def get_word_statistics(words: Iterable[str]) -> Dict:
    """
    Analyzes a word list and returns statistical information for game balancing.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of distinct words
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Top five letters by frequency
    """
    unique = {word.lower() for word in words}
    if not unique:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in unique)

    letter_frequency: Dict[str, int] = {}
    for word in unique:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(unique),
        "avg_vowel_count": round(total_vowels / len(unique), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
