"""Target team sizes."""

from typing import List, Optional, Union

MIN_TEAM_COUNT = 2
# Exhaustive search enumerates 2**atoms subsets per team
MAX_EXHAUSTIVE_ATOMS = 20


def target_sizes(total: int, team_count: int) -> List[int]:
    """Split ``total`` participants into ``team_count`` near-equal sizes.

    The remainder is handed out one each to the first teams, e.g. 11
    participants over 2 teams gives ``[6, 5]``.

    Args:
        total: Number of participants in the roster
        team_count: Number of teams to build

    Returns:
        One target size per team, summing to ``total``

    Raises:
        ValueError: If ``total`` is negative or ``team_count`` is below 1
    """
    if total < 0:
        raise ValueError(f"total must be non-negative, got {total}")
    if team_count < 1:
        raise ValueError(f"team_count must be at least 1, got {team_count}")

    base, extra = divmod(total, team_count)
    return [base + 1 if i < extra else base for i in range(team_count)]


def clamp_team_count(value: Optional[Union[int, str]]) -> int:
    """Coerce a user-supplied team count to an integer of at least 2."""
    try:
        count = int(value)
    except (TypeError, ValueError):
        return MIN_TEAM_COUNT
    return max(MIN_TEAM_COUNT, count)
