"""Folder-aware reordering of playlist locations.

Tracks are grouped by the folder they live in. The folder order and the order
of tracks inside each folder are then either shuffled or sorted, independently
of each other, and the groups are joined back into one sequence.
"""

from __future__ import annotations

import logging
import random
import secrets
from collections.abc import Sequence

from rbshuffle.lib.errors import ReorderInvariantError
from rbshuffle.lib.location import split_location


def seeded_random() -> random.Random:
    """Create the generator used for every shuffle decision of a run.

    It is seeded once from the operating system's cryptographically strong
    entropy source, so separate runs are not correlated.
    """
    return random.Random(secrets.randbits(62))


def group_locations(locations: Sequence[str]) -> dict[str, list[tuple[str, str]]]:
    """Group locations by folder.

    Keys appear in first-occurrence order and each group keeps the original
    relative order of its members. Members are ``(leaf_name, location)`` pairs
    so every location is decoded exactly once.
    """
    groups: dict[str, list[tuple[str, str]]] = {}
    for location in locations:
        folder, leaf = split_location(location)
        groups.setdefault(folder, []).append((leaf, location))
    return groups


def reorder(
    locations: Sequence[str],
    shuffle_groups: bool,
    shuffle_within_group: bool,
    rng: random.Random | None = None,
) -> list[str]:
    """Return the locations reordered folder by folder.

    Args:
        locations: Raw location strings, in playlist order.
        shuffle_groups: Shuffle the folder order. If False, folders are sorted
            by their path.
        shuffle_within_group: Shuffle the tracks of each folder. If False, they
            are sorted by file name.
        rng: Generator used for shuffling. A freshly seeded one is created when
            omitted.

    Returns:
        list[str]: A permutation of ``locations``.

    Raises:
        LocationDecodeError: If any location cannot be decoded.
        ReorderInvariantError: If the result is not the same length as the input.
    """
    if rng is None:
        rng = seeded_random()

    groups = group_locations(locations)
    folders = list(groups)

    if shuffle_groups:
        rng.shuffle(folders)
    else:
        folders.sort()

    for folder in folders:
        members = groups[folder]
        if shuffle_within_group:
            rng.shuffle(members)
        else:
            # Plain string order, "10.mp3" sorts before "2.mp3"
            members.sort(key=lambda member: member[0])

    result = [location for folder in folders for _, location in groups[folder]]
    if len(result) != len(locations):
        raise ReorderInvariantError(
            f"Reordered {len(result)} locations but received {len(locations)}"
        )

    logging.debug(
        f"Reordered {len(result)} locations in {len(folders)} folders "
        f"(shuffle_groups={shuffle_groups}, shuffle_within_group={shuffle_within_group})"
    )
    return result
