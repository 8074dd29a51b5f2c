class RoutingError(Exception):
    """Base exception for route calculation failures."""


class NoPathFound(RoutingError):
    """Raised when no feasible path exists for the given request."""


class UnknownStop(NoPathFound):
    """Raised when a stop name was never registered in the catalogue."""


class UnknownBus(NoPathFound):
    """Raised when a bus name is not part of the catalogue."""


class InconsistentTable(RoutingError):
    """Shortest-path table disagrees with the graph it was built for.

    This is an invariant violation, never a user error.
    """
