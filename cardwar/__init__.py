"""
cardwar: a simulator for the two-player card game War.

Decks are read from CSV, split between Player A and Player B, and played
until one player holds every card. See ``cardwar.war.war`` for the command
line entry point.
"""

__version__ = "0.1.0"
