"""Tests for the roster module."""

import random

import pytest

from trivia_teams.assigner import TeamAssigner
from trivia_teams.config import Config
from trivia_teams.roster import Roster


class TestRoster:
    """Test cases for the Roster context."""

    def test_add_player_strips_and_ignores_blank(self):
        """Test names are stripped and blank input is ignored."""
        roster = Roster()

        assert roster.add_player('  Alice ')
        assert not roster.add_player('   ')
        assert roster.players == ['Alice']

    def test_add_duplicate_player(self):
        """Test adding a name twice is rejected."""
        roster = Roster(['Alice'])

        with pytest.raises(ValueError, match="already on the roster"):
            roster.add_player('Alice')

    def test_remove_player_drops_links(self):
        """Test removing a player removes every link mentioning them."""
        roster = Roster(['A', 'B', 'C', 'D'], [['A', 'B'], ['C', 'D'], ['B', 'C']])

        roster.remove_player('B')

        assert roster.players == ['A', 'C', 'D']
        assert roster.links == [['C', 'D']]

    def test_remove_unknown_player(self):
        """Test removing someone not on the roster fails."""
        with pytest.raises(ValueError, match="not on the roster"):
            Roster(['A']).remove_player('Z')

    def test_link_selection(self):
        """Test linking the selection creates a link and clears it."""
        roster = Roster(['A', 'B', 'C'])
        roster.toggle_selection('A')
        roster.toggle_selection('C')

        link = roster.create_link()

        assert link == ['A', 'C']
        assert roster.links == [['A', 'C']]
        assert roster.selected == []

    def test_toggle_selection_twice(self):
        """Test toggling a player twice deselects them."""
        roster = Roster(['A', 'B'])
        roster.toggle_selection('A')
        roster.toggle_selection('A')

        assert roster.selected == []

    def test_link_needs_two_players(self):
        """Test a link of one player is rejected."""
        roster = Roster(['A', 'B'])
        roster.toggle_selection('A')

        with pytest.raises(ValueError, match="at least 2"):
            roster.create_link()
        with pytest.raises(ValueError, match="at least 2"):
            roster.create_link(['A', 'A'])

    def test_link_unknown_player(self):
        """Test linking someone not on the roster fails."""
        with pytest.raises(ValueError, match="unknown people"):
            Roster(['A', 'B']).create_link(['A', 'Z'])

    def test_remove_player_clears_selection(self):
        """Test a removed player leaves the selection."""
        roster = Roster(['A', 'B'])
        roster.toggle_selection('A')
        roster.remove_player('A')

        assert roster.selected == []

    def test_remove_link(self):
        """Test removing a link by index."""
        roster = Roster(['A', 'B', 'C'], [['A', 'B'], ['B', 'C']])

        assert roster.remove_link(0) == ['A', 'B']
        assert roster.links == [['B', 'C']]

    def test_team_count_is_clamped(self):
        """Test team counts below 2 are raised to 2."""
        roster = Roster(team_count=0)
        assert roster.team_count == 2

        assert roster.set_team_count('4') == 4
        assert roster.set_team_count(None) == 2

    def test_from_config(self):
        """Test building a roster from a config."""
        config = Config()
        config.people = ['A', 'B', 'C']
        config.links = [['A', 'B']]
        config.team_count = 3

        roster = Roster.from_config(config)

        assert roster.players == ['A', 'B', 'C']
        assert roster.links == [['A', 'B']]
        assert roster.team_count == 3

    def test_assign_rerolls(self):
        """Test assigning from the roster keeps links together."""
        roster = Roster(['A', 'B', 'C', 'D', 'E', 'F'], [['A', 'B']], team_count=3)
        assigner = TeamAssigner(Config(), rng=random.Random(0))

        for _ in range(10):
            teams = roster.assign(assigner)
            assert len(teams) == 3
            with_a = next(team for team in teams if 'A' in team.members)
            assert 'B' in with_a.members
            assert sorted(m for team in teams for m in team.members) == roster.players
