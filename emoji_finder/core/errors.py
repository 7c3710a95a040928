# emoji_finder/core/errors.py
# error types shared by the loader, the projector and the config layer


class FinderError(Exception):
    """Base class for every error raised by emoji_finder."""


class ParseError(FinderError, ValueError):
    """Raised when the glyph dataset is malformed or a record is incomplete."""


class ConfigurationError(FinderError, ValueError):
    """Raised for invalid caller-supplied settings (column count, ranking name, config keys)."""
