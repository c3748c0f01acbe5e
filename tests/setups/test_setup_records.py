"""
Party Games - Setup Record Tests
"""

import pytest
from pydantic import ValidationError

from partygames.config import Settings
from partygames.engine import DiceSession, GameType, InvalidRoster, RouletteSession
from partygames.setups import GameSetup, create_session_from_setup


def settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestGameSetup:
    """Tests for the GameSetup model."""

    def test_defaults_to_random(self):
        setup = GameSetup(player_names=["Alice", "Bob"])
        assert setup.game_type is GameType.RANDOM
        assert setup.number_of_players == 2

    def test_parses_game_type_string(self):
        setup = GameSetup(game_type="dice", player_names=["Alice", "Bob"])
        assert setup.game_type is GameType.DICE

    def test_strips_names(self):
        setup = GameSetup(player_names=[" Alice ", "Bob  "])
        assert setup.player_names == ["Alice", "Bob"]

    @pytest.mark.parametrize("names", [["Solo"], [f"P{i}" for i in range(11)]])
    def test_rejects_bad_counts(self, names):
        with pytest.raises(ValidationError):
            GameSetup(player_names=names)

    def test_round_trip(self):
        setup = GameSetup(game_type=GameType.HIGH_CARD, player_names=["Alice", "Bob"], max_rounds=5)
        restored = GameSetup.model_validate(setup.model_dump())
        assert restored == setup

    def test_frozen(self):
        setup = GameSetup(player_names=["Alice", "Bob"])
        with pytest.raises(ValidationError):
            setup.game_type = GameType.DICE


class TestCreateSessionFromSetup:
    """Tests for create_session_from_setup()."""

    def test_default_rounds_from_settings(self):
        setup = GameSetup(game_type=GameType.ROULETTE, player_names=["A", "B", "C"])
        session = create_session_from_setup(setup, settings(default_max_rounds=3))
        assert isinstance(session, RouletteSession)
        assert session.max_rounds == 3

    def test_explicit_rounds_win(self):
        setup = GameSetup(game_type=GameType.ROULETTE, player_names=["A", "B"], max_rounds=7)
        session = create_session_from_setup(setup, settings(default_max_rounds=3))
        assert session.max_rounds == 7

    def test_dice_stays_uncapped(self):
        setup = GameSetup(game_type=GameType.DICE, player_names=["A", "B"])
        session = create_session_from_setup(setup, settings(default_max_rounds=3))
        assert isinstance(session, DiceSession)
        assert session.max_rounds is None

    def test_seeded_sessions_repeat(self):
        setup = GameSetup(game_type=GameType.DICE, player_names=["A", "B", "C"])
        config = settings(rng_seed=2024)

        def play(session):
            session.start_new_game()
            results = []
            while not session.is_complete():
                results.append(tuple(session.play_round().picks.values()))
            return results

        assert play(create_session_from_setup(setup, config)) == play(create_session_from_setup(setup, config))

    def test_invalid_names_for_game(self):
        setup = GameSetup(game_type=GameType.COIN_FLIP, player_names=["A", "B", "C"])
        with pytest.raises(InvalidRoster):
            create_session_from_setup(setup, settings())

    def test_blank_name_rejected_by_engine(self):
        setup = GameSetup(game_type=GameType.DICE, player_names=["A", "   "])
        with pytest.raises(InvalidRoster):
            create_session_from_setup(setup, settings())
