"""
Party Games Setups.

Reusable {player names, game type} records.
"""

from partygames.setups.models import GameSetup, create_session_from_setup

__all__ = ["GameSetup", "create_session_from_setup"]
