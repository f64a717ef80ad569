"""
player.py - The two players of the game
"""

from enum import Enum


class Player(Enum):
    """
    Enumeration of the two players. Values are 1-indexed, which is also how
    players are shown to people; 0 is left free to mean "empty" in numeric
    board snapshots.
    """
    PLAYER_1 = 1
    PLAYER_2 = 2

    def opponent(self) -> 'Player':
        """Get the other player."""
        if self == Player.PLAYER_1:
            return Player.PLAYER_2
        return Player.PLAYER_1

    def display(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return self.display()
