"""Mutable roster state owned by the caller between partitioning calls."""

from typing import List, Optional, Sequence

from .config import Config
from .models import Team
from .targets import MIN_TEAM_COUNT, clamp_team_count


class Roster:
    """Players, links, the current selection and the requested team count.

    The assigner holds no state of its own; a front end keeps one of these
    and hands its contents to ``TeamAssigner.partition`` on every re-roll.
    """

    def __init__(
        self,
        players: Optional[Sequence[str]] = None,
        links: Optional[Sequence[Sequence[str]]] = None,
        team_count: int = MIN_TEAM_COUNT,
    ):
        self.players: List[str] = []
        self.links: List[List[str]] = []
        self.selected: List[str] = []
        self.team_count = clamp_team_count(team_count)

        for name in players or []:
            self.add_player(name)
        for link in links or []:
            self.create_link(link)

    @classmethod
    def from_config(cls, config: Config) -> "Roster":
        return cls(config.people, config.links, config.team_count)

    def add_player(self, name: str) -> bool:
        """Add a player; blank names are ignored.

        Returns:
            True if the player was added

        Raises:
            ValueError: If the player is already on the roster
        """
        name = name.strip()
        if not name:
            return False
        if name in self.players:
            raise ValueError(f"{name} is already on the roster")
        self.players.append(name)
        return True

    def remove_player(self, name: str) -> None:
        """Remove a player along with every link that mentions them.

        Raises:
            ValueError: If the player is not on the roster
        """
        if name not in self.players:
            raise ValueError(f"{name} is not on the roster")
        self.players.remove(name)
        self.links = [link for link in self.links if name not in link]
        if name in self.selected:
            self.selected.remove(name)

    def toggle_selection(self, name: str) -> None:
        if name not in self.players:
            raise ValueError(f"{name} is not on the roster")
        if name in self.selected:
            self.selected.remove(name)
        else:
            self.selected.append(name)

    def create_link(self, members: Optional[Sequence[str]] = None) -> List[str]:
        """Link the given players, or the current selection.

        Linking the selection clears it.

        Returns:
            The new link

        Raises:
            ValueError: If fewer than 2 distinct players are given or a
                player is not on the roster
        """
        from_selection = members is None
        link = list(dict.fromkeys(self.selected if from_selection else members))
        if len(link) < 2:
            raise ValueError("A link needs at least 2 players")

        unknown = [name for name in link if name not in self.players]
        if unknown:
            raise ValueError(f"Link contains unknown people: {sorted(unknown)}")

        self.links.append(link)
        if from_selection:
            self.selected = []
        return link

    def remove_link(self, index: int) -> List[str]:
        return self.links.pop(index)

    def set_team_count(self, value) -> int:
        self.team_count = clamp_team_count(value)
        return self.team_count

    def assign(self, assigner) -> List[Team]:
        """Re-roll teams for the current roster with ``assigner``."""
        return assigner.partition(self.players, self.links, self.team_count)
