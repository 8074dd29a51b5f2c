class CatalogueError(Exception):
    """Base exception for invalid catalogue definitions."""


class MissingDistance(CatalogueError):
    """Raised when no road distance is recorded between two adjacent stops."""

    def __init__(self, stop_from: str, stop_to: str) -> None:
        super().__init__(f"No road distance between {stop_from!r} and {stop_to!r}")
        self.stop_from = stop_from
        self.stop_to = stop_to


class SnapshotError(Exception):
    """Persisted state is missing, truncated or malformed."""
