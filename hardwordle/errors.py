"""
Engine Errors

Exception hierarchy shared by the word store, session and orchestrator.
Expected user mistakes (empty, wrong-length or unknown guesses) are not
exceptions; they come back as rejected GuessResult values.
"""


class HardWordleError(Exception):
    """Base class for all engine errors."""


class ConfigError(HardWordleError):
    """Invalid construction arguments or a malformed dictionary."""


class ValidationError(HardWordleError):
    """Malformed value object (an internal invariant was violated)."""


class StateError(HardWordleError):
    """Operation against a session that is absent, finished or full."""
