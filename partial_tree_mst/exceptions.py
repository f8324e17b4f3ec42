"""Errors raised while building or draining the partial tree list."""


class MSTError(Exception):
    """Base class for all minimum spanning tree failures."""


class EmptyCollectionError(MSTError, IndexError):
    """``remove()`` was called on an empty partial tree list."""


class NoMatchingTreeError(MSTError, LookupError):
    """No partial tree in the list shares the vertex's root."""


class QueueExhaustedError(MSTError, RuntimeError):
    """A tree ran out of candidate arcs before reaching another component.

    This only happens when the input graph is disconnected.
    """
