"""Validation utilities for Trivia Teams."""

from collections import Counter
from typing import Iterable, Sequence


def validate_people_names(people: Sequence[str]) -> None:
    """Validate the roster names.

    Args:
        people: Ordered roster of names to validate

    Raises:
        ValueError: If people names are invalid
    """
    if not people:
        raise ValueError("No people found in roster")

    # Check for empty or whitespace-only names
    for person in people:
        if not person or not person.strip():
            raise ValueError("People names cannot be empty or whitespace-only")

    # Check for very long names (likely data issue)
    for person in people:
        if len(person) > 100:
            raise ValueError(f"Person name too long (max 100 chars): '{person[:50]}...'")

    duplicates = sorted(name for name, count in Counter(people).items() if count > 1)
    if duplicates:
        raise ValueError(f"Duplicate people names: {duplicates}")


def validate_links(links: Iterable[Sequence[str]], people: Iterable[str]) -> None:
    """Validate links against the roster.

    Args:
        links: Groups of names that must share a team
        people: Roster names

    Raises:
        ValueError: If a link has fewer than 2 distinct people or names
            someone outside the roster
    """
    roster = set(people)
    for link in links:
        if len(set(link)) < 2:
            raise ValueError(f"Link must contain at least 2 distinct people: {list(link)}")

        unknown_people = set(link) - roster
        if unknown_people:
            raise ValueError(
                f"Link contains unknown people: {sorted(unknown_people)}"
            )
