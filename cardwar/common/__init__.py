"""Cards, decks and output sinks shared by the game code."""
