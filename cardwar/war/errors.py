"""Exceptions raised while loading decks and playing War."""


class WarError(Exception):
    """Base class for every error raised by cardwar."""


class DeckLoadError(WarError):
    """The input deck could not be turned into two player decks."""


class FileError(DeckLoadError):
    """A deck or result file could not be opened, read or written."""


class EmptyInputError(DeckLoadError):
    """The input contained no card rows."""


class MalformedRowError(DeckLoadError):
    """An input row had the wrong number of fields or an unparsable rank."""

    def __init__(self, message: str, line_number: int = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class ParseError(WarError, ValueError):
    """A suit/rank token pair does not describe a card."""


class InsufficientCardsError(WarError):
    """A round was started while a player had no cards left."""
