"""Cosmetic team names."""

import random
from typing import List, Optional

ADJECTIVES = ['Mighty', 'Clever', 'Witty', 'Blazing', 'Quantum', 'Epic', 'Cosmic']
NOUNS = ['Minds', 'Wizards', 'Dragons', 'Legends', 'Phoenixes', 'Titans', 'Scholars']


class TeamNameGenerator:
    """Random "<Adjective> <Noun>" team names."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def __call__(self) -> str:
        return f"{self.rng.choice(ADJECTIVES)} {self.rng.choice(NOUNS)}"

    def unique_names(self, count: int) -> List[str]:
        """Return ``count`` distinct names.

        Once every adjective/noun pair is used, names repeat with a numeric
        suffix ("Epic Titans 2").
        """
        pool = [f"{adjective} {noun}" for adjective in ADJECTIVES for noun in NOUNS]
        names = []
        round_number = 1
        while len(names) < count:
            batch = pool.copy()
            self.rng.shuffle(batch)
            if round_number > 1:
                batch = [f"{name} {round_number}" for name in batch]
            names.extend(batch[:count - len(names)])
            round_number += 1
        return names
