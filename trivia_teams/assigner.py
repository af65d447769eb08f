"""Core team partitioning logic for Trivia Teams."""

import math
import random
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence

import pandas as pd
import yaml

from .atoms import build_atoms
from .config import Config
from .models import Atom, Team
from .names import TeamNameGenerator
from .targets import MAX_EXHAUSTIVE_ATOMS, target_sizes

# Score of a combination that would leave the next team worse off than
# one member beyond the current team's deviation.
INFEASIBLE = math.inf


class TeamAssigner:
    """Splits a roster into balanced teams while keeping linked people together."""

    def __init__(
        self,
        config: Config,
        rng: Optional[random.Random] = None,
        name_generator: Optional[Callable[[int], List[str]]] = None,
    ):
        """Initialize the team assigner.

        Args:
            config: Configuration object with team settings
            rng: Random source for tie-breaking and shuffling; seeded from
                ``config.seed`` when omitted
            name_generator: Returns the given number of team names
        """
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)
        if name_generator is None:
            name_generator = TeamNameGenerator(self.rng).unique_names
        self.name_generator = name_generator

    def partition(
        self,
        roster: Sequence[str],
        links: Iterable[Sequence[str]],
        team_count: int,
    ) -> List[Team]:
        """Partition a roster into ``team_count`` teams.

        Args:
            roster: Ordered participant names
            links: Groups of names that must end up in the same team
            team_count: Number of teams to build

        Returns:
            Fresh teams covering every participant exactly once
        """
        roster = list(roster)
        atoms = build_atoms(roster, [list(link) for link in links])
        targets = target_sizes(len(roster), team_count)
        return self.assign(atoms, targets)

    def assign(self, atoms: Sequence[Atom], targets: Sequence[int]) -> List[Team]:
        """Place atoms into teams whose sizes track ``targets``.

        Atoms are never split. An atom larger than every target still lands
        whole in one team, which then exceeds its target.

        Args:
            atoms: Disjoint placement units
            targets: Target size per team

        Returns:
            One team per target, members shuffled
        """
        names = self.name_generator(len(targets))
        teams = [Team(name=name, target_size=size) for name, size in zip(names, targets)]

        if not atoms:
            return teams

        # For small inputs, try exhaustive search
        if len(atoms) <= min(self.config.max_exhaustive_atoms, MAX_EXHAUSTIVE_ATOMS):
            groups = self._assign_exhaustive(list(atoms), list(targets))
        else:
            groups = self._assign_greedy(list(atoms), list(targets))

        for team, group in zip(teams, groups):
            team.members = [member for atom in group for member in atom.members]
            self.rng.shuffle(team.members)

        self._check_invariants(atoms, teams, len(targets))
        return teams

    def _assign_exhaustive(self, atoms: List[Atom], targets: List[int]) -> List[List[Atom]]:
        """Fill teams one at a time with the best-scoring subset of what is left.

        The last team takes whatever remains.
        """
        groups: List[List[Atom]] = [[] for _ in targets]
        remaining = atoms

        for i in range(len(targets) - 1):
            if not remaining:
                break
            next_is_last = i + 1 == len(targets) - 1
            chosen = self._choose_combination(remaining, targets[i], targets[i + 1], next_is_last)
            groups[i] = [remaining[j] for j in chosen]
            chosen_set = set(chosen)
            remaining = [atom for j, atom in enumerate(remaining) if j not in chosen_set]

        groups[-1].extend(remaining)
        return groups

    def _choose_combination(
        self,
        atoms: List[Atom],
        target: int,
        next_target: int,
        next_is_last: bool,
    ) -> List[int]:
        """Pick, uniformly among the best, a subset of ``atoms`` for one team.

        Subsets are bitmasks over ``atoms``. A subset scores its own deviation
        from ``target`` plus the best deviation the next team could still
        reach from the atoms left over. Subsets whose lookahead is more than
        one worse than their own deviation are infeasible.

        Returns:
            Indices into ``atoms`` of the chosen subset
        """
        sizes = [atom.size for atom in atoms]
        n = len(sizes)
        full = (1 << n) - 1

        # totals[mask]: members in the subset; reachable[mask]: bitset of
        # every member count a sub-subset of it can produce
        totals = [0] * (1 << n)
        reachable = [1] * (1 << n)
        for mask in range(1, 1 << n):
            low = mask & -mask
            rest = mask ^ low
            size = sizes[low.bit_length() - 1]
            totals[mask] = totals[rest] + size
            if not next_is_last:
                reachable[mask] = reachable[rest] | (reachable[rest] << size)

        best_score = INFEASIBLE
        best_masks: List[int] = []
        for mask in range(1 << n):
            deviation = abs(totals[mask] - target)
            left = full ^ mask
            if next_is_last:
                lookahead = abs(totals[left] - next_target)
            else:
                lookahead = _nearest_reachable(reachable[left], next_target)

            score = _score(deviation, lookahead)
            if score < best_score:
                best_score = score
                best_masks = [mask]
            elif score == best_score:
                best_masks.append(mask)

        mask = self.rng.choice(best_masks)
        return [j for j in range(n) if mask >> j & 1]

    def _assign_greedy(self, atoms: List[Atom], targets: List[int]) -> List[List[Atom]]:
        """Use greedy heuristic for larger inputs.

        Biggest atoms first, each into the team with the most room left
        that can still hold it, else into the smallest team.
        """
        order = sorted(atoms, key=lambda atom: (-atom.size, self.rng.random()))
        groups: List[List[Atom]] = [[] for _ in targets]
        sizes = [0] * len(targets)

        for atom in order:
            capacities = [target - size for target, size in zip(targets, sizes)]
            fitting = [i for i, capacity in enumerate(capacities) if capacity >= atom.size]
            if fitting:
                most_room = max(capacities[i] for i in fitting)
                candidates = [i for i in fitting if capacities[i] == most_room]
            else:
                fewest = min(sizes)
                candidates = [i for i, size in enumerate(sizes) if size == fewest]

            choice = self.rng.choice(candidates)
            groups[choice].append(atom)
            sizes[choice] += atom.size

        return groups

    @staticmethod
    def _check_invariants(atoms: Sequence[Atom], teams: List[Team], team_count: int) -> None:
        """Check that the teams hold every atom member exactly once.

        Raises:
            RuntimeError: If the team count or the placed members are wrong
        """
        if len(teams) != team_count:
            raise RuntimeError("team count changed during assignment")
        placed = sorted(member for team in teams for member in team.members)
        expected = sorted(member for atom in atoms for member in atom.members)
        if placed != expected:
            raise RuntimeError("participants lost or duplicated during assignment")

    def save_teams_csv(self, teams: List[Team], output_path: Path) -> None:
        """Save teams to CSV, one row per member.

        Args:
            teams: Teams returned by ``partition`` or ``assign``
            output_path: Path where to save the CSV
        """
        rows = [
            {'team': team.name, 'member': member}
            for team in teams
            for member in team.members
        ]
        teams_df = pd.DataFrame(rows, columns=['team', 'member'])
        teams_df.to_csv(output_path, index=False)

    def save_teams_yaml(self, teams: List[Team], output_path: Path) -> None:
        """Save teams to YAML with their target sizes.

        Args:
            teams: Teams returned by ``partition`` or ``assign``
            output_path: Path where to save the YAML
        """
        yaml_data = {
            'teams': [
                {
                    'name': team.name,
                    'target_size': team.target_size,
                    'members': list(team.members),
                }
                for team in teams
            ]
        }

        with open(output_path, 'w', encoding='utf-8') as f:
            yaml.dump(yaml_data, f, default_flow_style=False, sort_keys=False)

    def get_assignment_summary(self, teams: List[Team]) -> Dict[str, object]:
        """Get a summary of the partitioning results.

        Args:
            teams: Teams returned by ``partition`` or ``assign``

        Returns:
            Dictionary with assignment statistics
        """
        if not teams:
            return {
                'total_people': 0,
                'team_sizes': [],
                'target_sizes': [],
                'max_deviation': 0,
                'average_team_size': 0.0
            }

        team_sizes = [team.size for team in teams]
        return {
            'total_people': sum(team_sizes),
            'team_sizes': team_sizes,
            'target_sizes': [team.target_size for team in teams],
            'max_deviation': max(abs(team.deviation) for team in teams),
            'average_team_size': round(sum(team_sizes) / len(teams), 2)
        }


def _score(deviation: int, lookahead: int) -> float:
    """Combined score of a candidate; lower is better."""
    if lookahead > deviation + 1:
        return INFEASIBLE
    return deviation + lookahead


def _nearest_reachable(bits: int, target: int) -> int:
    """Distance from ``target`` to the closest set bit of ``bits``.

    Bit 0 is always set (the empty subset), so the search terminates.
    """
    distance = 0
    while True:
        below = target - distance
        if below >= 0 and bits >> below & 1:
            return distance
        if bits >> (target + distance) & 1:
            return distance
        distance += 1
