"""
Party Games - Dice Session Tests

Highest roll wins; tied leaders eliminate everyone else and re-roll.
"""

import pytest

from partygames.engine.base import GameType, LoserAction, Phase
from partygames.engine.errors import GameAlreadyOver
from partygames.engine.session import create_session


def _names(players):
    return [p.name for p in players]


class TestDiceElimination:
    """Tests for the dice tie / elimination cascade."""

    def test_four_player_cascade(self, scripted, four_names):
        source = scripted.from_dice([6, 6, 3, 2], [4, 5])
        session = create_session(GameType.DICE, four_names, source=source)
        session.start_new_game()

        first = session.play_round()
        assert first.is_tie is True
        assert _names(first.winners) == ["Alice", "Bob"]
        assert _names(first.eliminated) == ["Charlie", "Diana"]
        assert first.loser_action is LoserAction.ELIMINATE_NON_MAX
        assert first.scored is None
        assert first.game_over is False
        assert first.message == "Tie between Alice and Bob! Others eliminated."
        assert _names(session.active_players) == ["Alice", "Bob"]
        assert session.phase is Phase.ROUND_RESULT

        second = session.play_round()
        assert list(second.picks.values()) == [4, 5]
        assert _names(second.winners) == ["Bob"]
        assert second.scored.name == "Bob"
        assert second.game_over is True
        assert session.is_complete()

        summary = session.summary
        assert _names(summary.winners) == ["Bob"]
        assert summary.winners[0].score == 1
        assert summary.rounds_played == 2

    def test_next_round_only_rolls_tied_players(self, scripted, four_names):
        source = scripted.from_dice([5, 2, 5, 1], [3, 3], [6, 1])
        session = create_session(GameType.DICE, four_names, source=source)
        session.start_new_game()
        session.play_round()
        alice, bob, charlie, diana = session.players

        second = session.play_round()
        assert set(second.picks) == {alice.id, charlie.id}
        assert second.is_tie is True
        assert second.eliminated == ()
        assert second.loser_action is LoserAction.NONE
        assert second.message == "Tie between Alice and Charlie!"

        third = session.play_round()
        assert set(third.picks) == {alice.id, charlie.id}
        assert _names(third.winners) == ["Alice"]
        assert session.is_complete()

    def test_distinct_values_single_winner(self, scripted, four_names):
        source = scripted.from_dice([2, 5, 4, 1])
        session = create_session(GameType.DICE, four_names, source=source)
        session.start_new_game()
        outcome = session.play_round()
        assert _names(outcome.winners) == ["Bob"]
        assert outcome.is_tie is False
        assert _names(outcome.eliminated) == ["Alice", "Charlie", "Diana"]
        assert outcome.game_over is True
        assert session.standings()[0].player.name == "Bob"
        assert session.standings()[0].score == 1

    def test_active_set_never_grows(self, seeded_source, four_names):
        session = create_session(GameType.DICE, four_names, source=seeded_source)
        session.start_new_game()
        sizes = [len(session.active_players)]
        while not session.is_complete():
            session.play_round()
            sizes.append(len(session.active_players))
        assert sizes == sorted(sizes, reverse=True)
        assert sizes[-1] == 1

    def test_eliminated_players_cannot_win_summary(self, scripted, four_names):
        source = scripted.from_dice([6, 6, 3, 2], [4, 5])
        session = create_session(GameType.DICE, four_names, source=source)
        session.start_new_game()
        session.play_round()
        session.play_round()
        assert all(p.active for p in session.summary.winners)

    def test_play_after_winner(self, scripted, two_names):
        session = create_session(GameType.DICE, two_names, source=scripted.from_dice([6, 1]))
        session.start_new_game()
        session.play_round()
        with pytest.raises(GameAlreadyOver):
            session.play_round()

    def test_new_game_restores_eliminated(self, scripted, four_names):
        source = scripted.from_dice([6, 1, 1, 1])
        session = create_session(GameType.DICE, four_names, source=source)
        session.start_new_game()
        session.play_round()
        session.start_new_game()
        assert len(session.active_players) == 4
        assert all(p.score == 0 for p in session.players)


class TestDiceRoundCap:
    """Dice ends by elimination unless a cap is given."""

    def test_uncapped_by_default(self, two_names):
        session = create_session(GameType.DICE, two_names)
        assert session.max_rounds is None
        assert session.rounds_remaining is None
        assert session.progress is None

    def test_default_cap_ignored(self, two_names):
        session = create_session(GameType.DICE, two_names, default_max_rounds=3)
        assert session.max_rounds is None

    def test_explicit_cap_ends_tied_game(self, scripted, two_names):
        source = scripted.from_dice([4, 4], [2, 2])
        session = create_session(GameType.DICE, two_names, source=source, max_rounds=2)
        session.start_new_game()
        session.play_round()
        outcome = session.play_round()
        assert outcome.game_over is True
        assert session.summary.is_tie is True
        assert _names(session.summary.winners) == ["Alice", "Bob"]
