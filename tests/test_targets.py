"""Tests for the targets module."""

import pytest

from trivia_teams.targets import MIN_TEAM_COUNT, clamp_team_count, target_sizes


class TestTargetSizes:
    """Test cases for target size calculation."""

    @pytest.mark.parametrize("total,team_count,expected", [
        (7, 2, [4, 3]),
        (11, 2, [6, 5]),
        (10, 4, [3, 3, 2, 2]),
        (9, 3, [3, 3, 3]),
        (2, 5, [1, 1, 0, 0, 0]),
        (0, 3, [0, 0, 0]),
        (5, 1, [5]),
    ])
    def test_target_sizes(self, total, team_count, expected):
        """Test remainders go to the first teams."""
        assert target_sizes(total, team_count) == expected

    def test_targets_sum_to_total(self):
        """Test targets always sum to the roster size."""
        for total in range(30):
            for team_count in range(1, 8):
                sizes = target_sizes(total, team_count)
                assert len(sizes) == team_count
                assert sum(sizes) == total
                assert max(sizes) - min(sizes) <= 1

    def test_negative_total(self):
        """Test a negative roster size is rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            target_sizes(-1, 2)

    def test_zero_teams(self):
        """Test fewer than one team is rejected."""
        with pytest.raises(ValueError, match="at least 1"):
            target_sizes(4, 0)


class TestClampTeamCount:
    """Test cases for clamping the requested team count."""

    @pytest.mark.parametrize("value,expected", [
        (None, MIN_TEAM_COUNT),
        ("", MIN_TEAM_COUNT),
        ("abc", MIN_TEAM_COUNT),
        (0, MIN_TEAM_COUNT),
        (1, MIN_TEAM_COUNT),
        (-3, MIN_TEAM_COUNT),
        (2, 2),
        ("5", 5),
        (8, 8),
    ])
    def test_clamp(self, value, expected):
        """Test missing, invalid and small counts become 2."""
        assert clamp_team_count(value) == expected
