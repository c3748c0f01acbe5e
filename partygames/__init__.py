"""
Party Games.

Coin flip, dice, rock-paper-scissors, high card and roulette mini-games
for a handful of locally entered players.
"""

__version__ = "0.1.0"
