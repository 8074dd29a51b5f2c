from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import Snapshot


class ISnapshotRepository(ABC):
    """Persistence port for the BUILD -> SERVE hand-off.

    Implementations must round-trip the catalogue, routing settings and the
    shortest-path table exactly; an absent table entry stays absent.
    """

    @abstractmethod
    def save(self, snapshot: Snapshot) -> None:
        raise NotImplementedError

    @abstractmethod
    def load(self) -> Snapshot:
        """Return the stored snapshot or raise SnapshotError."""

    @abstractmethod
    def location(self) -> str:
        """Human-readable place the snapshot is stored at, for logs."""
