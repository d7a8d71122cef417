# MIT License (see LICENSE)
"""
Replay history of a simulation run.

The HistoryLog is an append-only list of Snapshots, seeded with the t = 0
state on every reset. It exists for retrospective plotting (velocity vs.
time); entries are never modified once recorded.
"""
from __future__ import annotations
from typing import Iterator

import numpy as np

from .types import Snapshot


class HistoryLog:
    """
    Ordered, append-only sequence of Snapshots.

    Entries must be appended in strictly increasing elapsed_time order.
    Readers get tuples or fresh numpy arrays, never the internal list.
    """

    def __init__(self, seed: Snapshot) -> None:
        self._entries: list[Snapshot] = [seed]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(tuple(self._entries))

    def __getitem__(self, index: int) -> Snapshot:
        return self._entries[index]

    @property
    def last(self) -> Snapshot:
        """Most recently recorded snapshot."""
        return self._entries[-1]

    def append(self, snapshot: Snapshot) -> None:
        """
        Record a new snapshot.

        Raises:
            ValueError: If the snapshot is not later than the last entry.
        """
        if snapshot.elapsed_time <= self._entries[-1].elapsed_time:
            raise ValueError(
                f"Snapshot at t={snapshot.elapsed_time} is not after "
                f"t={self._entries[-1].elapsed_time}"
            )
        self._entries.append(snapshot)

    def reset(self, seed: Snapshot) -> None:
        """Drop all entries and start over from a single seed."""
        self._entries = [seed]

    def snapshots(self) -> tuple[Snapshot, ...]:
        """Immutable view of all entries in recording order."""
        return tuple(self._entries)

    def times(self) -> np.ndarray:
        """Elapsed times as a float64 array."""
        return np.array([s.elapsed_time for s in self._entries], dtype=np.float64)

    def velocities(self) -> np.ndarray:
        """Velocities as a float64 array."""
        return np.array([s.velocity for s in self._entries], dtype=np.float64)

    def displacements(self) -> np.ndarray:
        """Displacements as a float64 array."""
        return np.array([s.displacement for s in self._entries], dtype=np.float64)
