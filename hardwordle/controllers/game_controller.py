"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _game_not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _internal_error(action, error, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            max_attempts=state.max_attempts
        )

        return jsonify(response_data)

    except Exception as e:
        return _internal_error('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _game_not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            remaining_attempts=state.remaining_attempts, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        return _internal_error('get_state', e, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for validation and evaluation."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        result = game_service.submit_guess(game_id, guess)
        if result is None:
            return _game_not_found('submit_guess', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            **result.to_dict(),
            'state': asdict(state)
        }

        if not result.success:
            game_logger.log_server_response(
                request, 'submit_guess', False, response_data, game_id,
                validation_error=result.error_kind.value, attempted_guess=guess
            )
            return jsonify(response_data), 400

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=result.attempt.word, remaining_attempts=state.remaining_attempts,
            game_over=state.game_over
        )

        if state.game_over:
            attempts_used = state.max_attempts - state.remaining_attempts
            if state.won:
                game_logger.log_game_event(
                    game_id, 'game_won', request.remote_addr,
                    attempts_used=attempts_used, target_word=state.answer,
                    winning_guess=result.attempt.word
                )
            else:
                game_logger.log_game_event(
                    game_id, 'game_lost', request.remote_addr,
                    attempts_used=attempts_used, target_word=state.answer,
                    final_guess=result.attempt.word
                )

        return jsonify(response_data)

    except Exception as e:
        return _internal_error('submit_guess', e, game_id)


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
def restart_game(game_id):
    """Start over with a fresh target under the same game id."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'restart_game', game_id)

        state = game_service.restart_game(game_id)
        if state is None:
            return _game_not_found('restart_game', game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'restart_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_restarted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        return _internal_error('restart_game', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if not success:
            return jsonify({'success': False, 'error': 'Game not found'}), 404

        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
        return jsonify(response_data)

    except Exception as e:
        return _internal_error('delete_game', e, game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy' if game_service else 'degraded',
            'active_games': game_service.active_games() if game_service else 0,
            'dictionary_size': game_service.word_store.size() if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        return jsonify({
            'status': 'error',
            'error': str(e)
        }), 500
