"""Configuration management for Trivia Teams."""

from pathlib import Path
from typing import List, Optional

import yaml

from .targets import MAX_EXHAUSTIVE_ATOMS, MIN_TEAM_COUNT
from .validators import validate_links


class Config:
    """Configuration class for team partitioning settings."""

    def __init__(self):
        """Initialize configuration with default values."""
        self.team_count: int = MIN_TEAM_COUNT
        self.max_exhaustive_atoms: int = 16
        self.seed: Optional[int] = None
        self.people: List[str] = []
        self.links: List[List[str]] = []

    def load_from_file(self, config_path: Path) -> None:
        """Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            FileNotFoundError: If the config file doesn't exist
            yaml.YAMLError: If the YAML file is invalid
            ValueError: If the configuration structure is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)

        if not isinstance(config_data, dict):
            raise ValueError("Configuration file must contain a YAML dictionary")

        team_config = config_data.get('teams', {}) or {}
        if not isinstance(team_config, dict):
            raise ValueError("teams must be a mapping")

        if 'count' in team_config:
            count = team_config['count']
            if not isinstance(count, int) or isinstance(count, bool) or count < MIN_TEAM_COUNT:
                raise ValueError(f"teams.count must be an integer >= {MIN_TEAM_COUNT}")
            self.team_count = count

        if 'exhaustive_max_atoms' in team_config:
            limit = team_config['exhaustive_max_atoms']
            if (not isinstance(limit, int) or isinstance(limit, bool)
                    or not 0 <= limit <= MAX_EXHAUSTIVE_ATOMS):
                raise ValueError(
                    f"teams.exhaustive_max_atoms must be an integer from 0 to {MAX_EXHAUSTIVE_ATOMS}"
                )
            self.max_exhaustive_atoms = limit

        if 'seed' in team_config:
            seed = team_config['seed']
            if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
                raise ValueError("teams.seed must be an integer")
            self.seed = seed

        if 'people' in config_data:
            people = config_data['people'] or []
            if not isinstance(people, list):
                raise ValueError("people must be a list of names")
            for name in people:
                if not isinstance(name, str):
                    raise ValueError(f"people entries must be names, got {name!r}")
            self.people = [name.strip() for name in people]

        if 'links' in config_data:
            links = config_data['links'] or []
            if not isinstance(links, list):
                raise ValueError("links must be a list")

            self.links = []
            for link in links:
                self.links.append(self.parse_link(link))

    @staticmethod
    def parse_link(link) -> List[str]:
        """Parse one link given as a comma-separated string or a list of names.

        Raises:
            ValueError: If the link is malformed or has fewer than 2 people
        """
        if isinstance(link, str):
            names = [name.strip() for name in link.split(',')]
        elif isinstance(link, list):
            names = [str(name).strip() for name in link]
        else:
            raise ValueError("Each link must be a comma-separated string or list")

        # Drop blanks and repeats, keep the written order
        names = list(dict.fromkeys(name for name in names if name))
        if len(names) < 2:
            raise ValueError("Each link must contain at least 2 people")
        return names

    def validate_links(self, people: Optional[List[str]] = None) -> None:
        """Validate the configured links against the roster.

        Args:
            people: Roster to check against; defaults to the configured people

        Raises:
            ValueError: If a link has fewer than 2 distinct people or
                contains people not in the roster
        """
        validate_links(self.links, self.people if people is None else people)

    def to_dict(self) -> dict:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary representation of the configuration
        """
        config_dict = {
            'teams': {
                'count': self.team_count,
                'exhaustive_max_atoms': self.max_exhaustive_atoms,
            }
        }

        if self.seed is not None:
            config_dict['teams']['seed'] = self.seed
        if self.people:
            config_dict['people'] = list(self.people)
        if self.links:
            config_dict['links'] = [','.join(link) for link in self.links]

        return config_dict

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a YAML file.

        Args:
            config_path: Path where to save the configuration
        """
        config_dict = self.to_dict()

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=True)
