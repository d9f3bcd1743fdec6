class UnknownLanguageError(KeyError):
    """Errors raised when no stemmer is registered for a language."""


class FixtureError(ValueError):
    """Errors raised when a vocabulary/output fixture pair can't be read."""
