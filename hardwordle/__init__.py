"""
Hard Wordle Game Engine Package

This package contains the single-player Wordle engine (word store, feedback
engine, session state machine and game controller) plus a thin Flask layer
that exposes one independent game per game id.
"""

import logging

from flask import Flask
from flask_cors import CORS
from .config import Config

logger = logging.getLogger(__name__)


def create_app(config_class=Config, word_store=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        word_store: Optional prebuilt WordStore; loaded from WORDS_FILE when omitted

    Returns:
        Flask application instance with all extensions initialized
    """
    from .config.game_settings import (
        MIN_RECOMMENDED_WORDS,
        load_word_list,
        validate_word_list_integrity,
    )
    from .services.game_service import initialize_game_service
    from .services.word_store import WordStore
    from .utils.game_logger import game_logger

    app = Flask(__name__)
    app.config.from_object(config_class)

    game_logger.configure(app.config.get('LOG_DIR'), app.config.get('LOG_LEVEL', 'INFO'))

    if word_store is None:
        words = load_word_list(app.config['WORDS_FILE'])
        validate_word_list_integrity(words)
        word_store = WordStore(words)
        logger.info("Dictionary loaded: %s words", word_store.size())

    if word_store.size() < MIN_RECOMMENDED_WORDS:
        logger.warning(
            "Dictionary has %s words; at least %s are recommended for play",
            word_store.size(), MIN_RECOMMENDED_WORDS
        )

    initialize_game_service(word_store, app.config['MAX_ATTEMPTS'])

    # Initialize extensions
    CORS(app)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    return app
