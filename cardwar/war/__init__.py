"""
The game of War: deck loading, round resolution, the game loop and result
recording.
"""
