"""
Hard Wordle Server - Main Entry Point

This is the main entry point for the Hard Wordle game server.
It loads the dictionary, initializes the game service and starts Flask.
"""

from hardwordle import create_app
from hardwordle.config import Config
from hardwordle.errors import ConfigError
from hardwordle.services.game_service import get_game_service
from hardwordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_service = get_game_service()
        print(f"✓ Game service initialized ({game_service.word_store.size()} words)")

        game_logger.logger.info("Hard Wordle Server Starting")

        print(f"\nStarting Hard Wordle Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Hard Wordle Server shutting down (KeyboardInterrupt)")
    except ConfigError as e:
        print(f"Failed to load game: {e}")
        game_logger.logger.error(f"Failed to load game: {e}")
        raise


if __name__ == '__main__':
    main()
