"""
Testing the game controller end to end and the per-game registry.
"""

import pytest

from hardwordle.errors import ConfigError, StateError
from hardwordle.models.game import GameStatus, GuessRejection, LetterStatus
from hardwordle.services.game_service import (
    GameOrchestrator,
    GameService,
    get_game_service,
    initialize_game_service,
)
from hardwordle.services.word_store import WordStore


# -------------------------
# GameOrchestrator
# -------------------------

def test_requires_word_store():
    with pytest.raises(ConfigError):
        GameOrchestrator(None)


def test_get_game_state_before_start_raises(orchestrator):
    assert not orchestrator.has_game()
    with pytest.raises(StateError):
        orchestrator.get_game_state()


def test_guess_before_start_is_rejected(orchestrator):
    result = orchestrator.submit_guess("crane")

    assert result.success is False
    assert result.error_kind == GuessRejection.STATE_ERROR
    assert result.error == "Game is over. Start a new game!"
    assert result.status is None


def test_start_new_game_is_fresh(orchestrator):
    session = orchestrator.start_new_game()

    assert orchestrator.get_game_state() is session
    assert session.target == "crane"
    assert session.attempts == ()
    assert session.remaining_attempts() == session.max_attempts == 6
    assert session.status == GameStatus.IN_PROGRESS


def test_win_scenario(orchestrator):
    orchestrator.start_new_game()

    first = orchestrator.submit_guess("apple")
    assert first.success is True
    assert first.status == GameStatus.IN_PROGRESS
    assert orchestrator.get_game_state().remaining_attempts() == 5

    second = orchestrator.submit_guess("crane")
    assert second.success is True
    assert second.status == GameStatus.WON
    assert second.attempt.statuses == [LetterStatus.CORRECT] * 5

    third = orchestrator.submit_guess("house")
    assert third.success is False
    assert third.error_kind == GuessRejection.STATE_ERROR
    assert third.status == GameStatus.WON
    assert len(orchestrator.get_game_state().attempts) == 2


def test_loss_scenario(orchestrator):
    orchestrator.start_new_game()
    for word in ("apple", "speed", "erase", "geese", "abbey", "house"):
        result = orchestrator.submit_guess(word)
        assert result.success is True

    session = orchestrator.get_game_state()
    assert session.status == GameStatus.LOST
    assert session.remaining_attempts() == 0
    assert session.is_over()

    after = orchestrator.submit_guess("crane")
    assert after.success is False
    assert after.error_kind == GuessRejection.STATE_ERROR
    assert after.status == GameStatus.LOST


def test_each_accepted_guess_costs_one_attempt(orchestrator):
    session = orchestrator.start_new_game()
    for expected_remaining, word in zip((5, 4, 3), ("apple", "house", "mouse")):
        result = orchestrator.submit_guess(word)
        assert result.attempt is session.attempts[-1]
        assert session.remaining_attempts() == expected_remaining

    assert [a.word for a in session.attempts] == ["apple", "house", "mouse"]


@pytest.mark.parametrize("raw, kind, message", [
    ("", GuessRejection.EMPTY_INPUT, "Please enter a word"),
    ("   ", GuessRejection.EMPTY_INPUT, "Please enter a word"),
    (None, GuessRejection.EMPTY_INPUT, "Please enter a word"),
    ("cat", GuessRejection.LENGTH_ERROR, "Word must be exactly 5 letters"),
    ("cranes", GuessRejection.LENGTH_ERROR, "Word must be exactly 5 letters"),
    ("zzzzz", GuessRejection.NOT_IN_DICTIONARY, "Not a valid word"),
    ("cr4ne", GuessRejection.NOT_IN_DICTIONARY, "Not a valid word"),
])
def test_rejections_are_no_ops(orchestrator, raw, kind, message):
    session = orchestrator.start_new_game()
    orchestrator.submit_guess("apple")

    result = orchestrator.submit_guess(raw)

    assert result.success is False
    assert result.error_kind == kind
    assert result.error == message
    assert result.attempt is None
    assert result.status == GameStatus.IN_PROGRESS
    assert len(session.attempts) == 1
    assert session.remaining_attempts() == 5


def test_input_is_trimmed_and_case_insensitive(word_store, pin_target):
    pin_target(word_store, "trace")
    results = []
    for raw in ("CRANE", "crane", "CrAnE", "  crane\n"):
        orchestrator = GameOrchestrator(word_store)
        orchestrator.start_new_game()
        result = orchestrator.submit_guess(raw)
        assert result.success is True
        assert result.attempt.word == "crane"
        results.append(result.attempt.statuses)

    assert all(statuses == results[0] for statuses in results)


def test_start_new_game_discards_previous_session(orchestrator):
    first = orchestrator.start_new_game()
    orchestrator.submit_guess("crane")
    assert first.is_over()

    second = orchestrator.start_new_game()
    assert second is not first
    assert orchestrator.get_game_state() is second
    assert second.attempts == ()
    assert orchestrator.submit_guess("apple").success is True
    assert len(first.attempts) == 1


def test_custom_attempt_budget(word_store, pin_target):
    pin_target(word_store, "crane")
    orchestrator = GameOrchestrator(word_store, max_attempts=2)
    orchestrator.start_new_game()
    orchestrator.submit_guess("apple")
    result = orchestrator.submit_guess("house")

    assert result.status == GameStatus.LOST


def test_guess_result_to_dict(orchestrator):
    orchestrator.start_new_game()
    data = orchestrator.submit_guess("cat").to_dict()

    assert data == {
        "success": False,
        "status": "in_progress",
        "attempt": None,
        "error": "Word must be exactly 5 letters",
        "error_kind": "length_error",
    }


# -------------------------
# GameService
# -------------------------

def test_service_games_are_independent(word_store, pin_target):
    pin_target(word_store, "crane")
    service = GameService(word_store)
    first = service.create_new_game()
    second = service.create_new_game()

    assert first != second
    service.submit_guess(first, "crane")

    assert service.get_game_state(first).won is True
    assert service.get_game_state(second).guesses == []
    assert service.active_games() == 2


def test_service_unknown_game(word_store):
    service = GameService(word_store)

    assert service.get_game_state("missing") is None
    assert service.submit_guess("missing", "crane") is None
    assert service.restart_game("missing") is None
    assert service.delete_game("missing") is False


def test_service_restart_and_delete(word_store, pin_target):
    pin_target(word_store, "crane")
    service = GameService(word_store)
    game_id = service.create_new_game()
    service.submit_guess(game_id, "crane")

    state = service.restart_game(game_id)
    assert state.game_over is False
    assert state.guesses == []

    assert service.delete_game(game_id) is True
    assert service.get_orchestrator(game_id) is None


def test_service_requires_word_store():
    with pytest.raises(ConfigError):
        GameService(None)


def test_initialize_game_service_sets_global(word_store):
    service = initialize_game_service(word_store, max_attempts=4)

    assert get_game_service() is service
    assert service.max_attempts == 4


# -------------------------
# Construction checks
# -------------------------

def test_mixed_length_dictionary_always_draws_five_letter_targets():
    orchestrator = GameOrchestrator(WordStore(["crane", "cat", "elephant"]))
    for _ in range(40):
        assert orchestrator.start_new_game().target == "crane"


def test_mixed_length_dictionary_service_games_start():
    service = GameService(WordStore(["crane", "cat", "elephant"]))
    for _ in range(40):
        game_id = service.create_new_game()
        assert service.get_game_state(game_id).status == "in_progress"


@pytest.mark.parametrize("cls", [GameOrchestrator, GameService])
def test_dictionary_without_targets_rejected(cls):
    with pytest.raises(ConfigError, match="no 5-letter words"):
        cls(WordStore(["cat", "dog"]))


@pytest.mark.parametrize("cls", [GameOrchestrator, GameService])
@pytest.mark.parametrize("max_attempts", [0, -1, 2.5, "6", True, None])
def test_invalid_max_attempts_rejected(cls, word_store, max_attempts):
    with pytest.raises(ConfigError, match="max_attempts"):
        cls(word_store, max_attempts=max_attempts)
