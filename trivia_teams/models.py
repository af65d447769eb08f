"""Value types shared by the partitioning pipeline."""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class Atom:
    """An indivisible group of participants that must share a team.

    Either the union of transitively overlapping links, or a lone
    participant that no link mentions.
    """

    members: Tuple[str, ...]

    @property
    def size(self) -> int:
        return len(self.members)

    def __len__(self) -> int:
        return len(self.members)


@dataclass
class Team:
    """A team produced by one partitioning call."""

    name: str
    target_size: int
    members: List[str] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def deviation(self) -> int:
        """Members above (positive) or below (negative) the target size."""
        return self.size - self.target_size
