"""
Word Store

In-memory dictionary of valid guesses and source of random targets.
The store performs no I/O; see config.game_settings.load_word_list for
reading the dictionary file.
"""

import logging
import random
from collections.abc import Iterable
from typing import Dict, FrozenSet, Optional, Tuple

from ..errors import ConfigError

logger = logging.getLogger(__name__)


class WordStore:
    """
    Immutable set of lowercase words.

    Entries are lowercased and deduplicated on construction. Word length is
    not policed here; the orchestrator checks guess length and draws
    targets with get_random_word(length=...).
    """

    def __init__(self, words: Iterable):
        if words is None or isinstance(words, (str, bytes)) or not isinstance(words, Iterable):
            raise ConfigError("WordStore requires a collection of words")

        normalized = set()
        for word in words:
            if not isinstance(word, str):
                raise ConfigError(f"Dictionary entries must be strings, got {word!r}")
            normalized.add(word.lower())

        if not normalized:
            raise ConfigError("Dictionary cannot be empty")

        self._word_set: FrozenSet[str] = frozenset(normalized)
        # Indexable copy for uniform random selection
        self._word_list: Tuple[str, ...] = tuple(sorted(normalized))
        by_length: Dict[int, list] = {}
        for word in self._word_list:
            by_length.setdefault(len(word), []).append(word)
        self._by_length: Dict[int, Tuple[str, ...]] = {
            length: tuple(words) for length, words in by_length.items()
        }
        logger.debug("WordStore built with %s distinct words", len(self._word_list))

    def is_valid_word(self, word) -> bool:
        """Case-insensitive membership test; anything but a string is simply not a word."""
        if not isinstance(word, str):
            return False
        return word.lower() in self._word_set

    def get_random_word(self, length: Optional[int] = None) -> str:
        """
        Uniform pick over distinct words, or over the words of one length.
        Earlier picks are not excluded.

        Raises:
            ConfigError: If no stored word has the requested length
        """
        if length is None:
            return random.choice(self._word_list)
        candidates = self._by_length.get(length)
        if not candidates:
            raise ConfigError(f"Dictionary has no {length}-letter words")
        return random.choice(candidates)

    def count_of_length(self, length: int) -> int:
        return len(self._by_length.get(length, ()))

    def size(self) -> int:
        return len(self._word_list)

    def __len__(self):
        return len(self._word_list)

    def __contains__(self, word):
        return self.is_valid_word(word)

    def __iter__(self):
        return iter(self._word_list)
