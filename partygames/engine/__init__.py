"""
Party Games Engine.

Pure Python round-resolution and scoring logic with zero UI dependencies.
Handles random draws, the card deck, per-game winner rules, eliminations
and cumulative scores.
"""

from partygames.engine.base import (
    CoinSide,
    GameSummary,
    GameType,
    Hand,
    LoserAction,
    Phase,
    Player,
    Resolution,
    RoundOutcome,
    Standing,
    WheelSpin,
    available_game_types,
)
from partygames.engine.cards import Card, Deck, Rank, Suit
from partygames.engine.errors import (
    EmptyDeck,
    GameAlreadyOver,
    GameEngineError,
    InsufficientCards,
    InvalidPhase,
    InvalidRoster,
)
from partygames.engine.random_source import RandomOutcomeSource
from partygames.engine.resolvers import OutcomeResolver, get_resolver
from partygames.engine.session import (
    CoinFlipSession,
    DiceSession,
    HighCardSession,
    RockPaperScissorsSession,
    RoundSession,
    RouletteSession,
    create_session,
    is_complete,
    play_round,
    standings,
    start_new_game,
)

__all__ = [
    # Data Classes
    "Card",
    "GameSummary",
    "Player",
    "Resolution",
    "RoundOutcome",
    "Standing",
    "WheelSpin",
    # Enums
    "CoinSide",
    "GameType",
    "Hand",
    "LoserAction",
    "Phase",
    "Rank",
    "Suit",
    # Errors
    "EmptyDeck",
    "GameAlreadyOver",
    "GameEngineError",
    "InsufficientCards",
    "InvalidPhase",
    "InvalidRoster",
    # Randomness
    "Deck",
    "RandomOutcomeSource",
    # Resolvers
    "OutcomeResolver",
    "get_resolver",
    # Sessions
    "RoundSession",
    "CoinFlipSession",
    "DiceSession",
    "HighCardSession",
    "RockPaperScissorsSession",
    "RouletteSession",
    "available_game_types",
    "create_session",
    "start_new_game",
    "play_round",
    "is_complete",
    "standings",
]
