"""Collapse links and the roster into atoms (indivisible placement units)."""

from typing import Dict, Iterable, List, Sequence

from .models import Atom


class _DisjointSet:
    """Union-find over integer positions with path halving."""

    def __init__(self, n: int):
        self.parent = list(range(n))
        self.rank = [0] * n

    def find(self, a: int) -> int:
        while self.parent[a] != a:
            self.parent[a] = self.parent[self.parent[a]]
            a = self.parent[a]
        return a

    def union(self, a: int, b: int) -> None:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1

    def groups(self) -> List[List[int]]:
        """Positions grouped by root, ordered by each group's first position."""
        out: Dict[int, List[int]] = {}
        for i in range(len(self.parent)):
            out.setdefault(self.find(i), []).append(i)
        return list(out.values())


def build_atoms(roster: Sequence[str], links: Iterable[Sequence[str]]) -> List[Atom]:
    """Build the atoms for a roster and its links.

    Links sharing a participant are merged (transitive closure). Every
    participant not mentioned by a link becomes a singleton atom. Link
    members missing from the roster are ignored.

    Duplicate names are kept as distinct participants by position; links
    refer to the first occurrence of a name.

    Args:
        roster: Ordered participant names
        links: Groups of names that must end up in the same team

    Returns:
        Atoms in roster order of their first member. Taken together their
        members are exactly the roster.
    """
    index: Dict[str, int] = {}
    for position, name in enumerate(roster):
        index.setdefault(name, position)

    ds = _DisjointSet(len(roster))
    for link in links:
        positions = [index[name] for name in link if name in index]
        for other in positions[1:]:
            ds.union(positions[0], other)

    return [Atom(tuple(roster[i] for i in group)) for group in ds.groups()]


def merge_links(links: Iterable[Sequence[str]]) -> List[List[str]]:
    """Merge overlapping links into disjoint groups.

    >>> merge_links([["A", "B"], ["B", "C"], ["D", "E"]])
    [['A', 'B', 'C'], ['D', 'E']]
    """
    names: List[str] = []
    seen = set()
    link_list = [list(link) for link in links]
    for link in link_list:
        for name in link:
            if name not in seen:
                seen.add(name)
                names.append(name)

    return [
        list(atom.members)
        for atom in build_atoms(names, link_list)
        if atom.size > 1
    ]
