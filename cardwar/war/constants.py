"""War-specific constants and value mappings."""

JOKER_SUIT = "Joker"

# Cards each player puts into the pot when a war is declared: the face-down
# cards followed by one face-up comparison card.
WAR_FACE_DOWN = 2
WAR_ANTE = WAR_FACE_DOWN + 1

# War values indexed by Rank.value (Ace is lowest, Joker beats everything)
_WAR_VALUE_ARRAY = [
    0,   # unused
    1,   # ACE (1)
    2,   # TWO (2)
    3,   # THREE (3)
    4,   # FOUR (4)
    5,   # FIVE (5)
    6,   # SIX (6)
    7,   # SEVEN (7)
    8,   # EIGHT (8)
    9,   # NINE (9)
    10,  # TEN (10)
    11,  # JACK (11)
    12,  # QUEEN (12)
    13,  # KING (13)
    14,  # JOKER (14)
]

OUTPUT_HEADER = [
    "Round",
    "PlayerA_Count",
    "PlayerB_Count",
    "PlayerA_Cards",
    "PlayerB_Cards",
]


def get_war_value(rank) -> int:
    """Get the war value for a given rank."""
    return _WAR_VALUE_ARRAY[rank.value]
