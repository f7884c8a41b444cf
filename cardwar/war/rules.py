import os
from typing import Optional

MAX_ROUNDS_ENV = "CARDWAR_MAX_ROUNDS"
DETECT_REPEATS_ENV = "CARDWAR_DETECT_REPEATS"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


class WarRules:
    """
    Settings for a game of War.

    :param max_rounds: Stop the game as a tie after this many rounds. None
                       plays until a player runs out of cards.
    :param detect_repeats: Stop the game as a tie when both decks return to an
                           order already seen, since play would then repeat
                           forever.
    """

    def __init__(
        self,
        max_rounds: Optional[int] = None,
        detect_repeats: bool = True,
    ):
        if max_rounds is not None and max_rounds < 1:
            raise ValueError("max_rounds must be a positive integer")
        self.max_rounds = max_rounds
        self.detect_repeats = detect_repeats

    @classmethod
    def from_env(cls, environ=None) -> "WarRules":
        """Build rules from ``CARDWAR_MAX_ROUNDS`` and ``CARDWAR_DETECT_REPEATS``."""
        environ = os.environ if environ is None else environ

        max_rounds = None
        raw_max = environ.get(MAX_ROUNDS_ENV, "").strip()
        if raw_max:
            try:
                max_rounds = int(raw_max)
            except ValueError as exc:
                raise ValueError(
                    f"{MAX_ROUNDS_ENV} must be an integer, got {raw_max!r}"
                ) from exc

        detect_repeats = True
        raw_detect = environ.get(DETECT_REPEATS_ENV, "").strip().lower()
        if raw_detect in _FALSE_VALUES:
            detect_repeats = False
        elif raw_detect and raw_detect not in _TRUE_VALUES:
            raise ValueError(
                f"{DETECT_REPEATS_ENV} must be a boolean, got {raw_detect!r}"
            )

        return cls(max_rounds=max_rounds, detect_repeats=detect_repeats)

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {
            "max_rounds": self.max_rounds,
            "detect_repeats": self.detect_repeats,
        }

    def __repr__(self) -> str:
        return (
            f"WarRules(max_rounds={self.max_rounds!r}, "
            f"detect_repeats={self.detect_repeats!r})"
        )
