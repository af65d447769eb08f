"""Trivia Teams - split players into balanced teams that keep linked players together."""

__version__ = "0.1.0"

from .assigner import TeamAssigner
from .atoms import build_atoms, merge_links
from .config import Config
from .models import Atom, Team
from .roster import Roster
from .targets import clamp_team_count, target_sizes

__all__ = [
    "Atom",
    "Config",
    "Roster",
    "Team",
    "TeamAssigner",
    "build_atoms",
    "clamp_team_count",
    "merge_links",
    "target_sizes",
]
