"""Errors raised while sorting a dependency graph."""


class TopsortError(Exception):
    """Base class for sorting failures. Carries the offending identifier."""

    def __init__(self, id: object, message: str) -> None:  # noqa: A002
        self.id = id
        super().__init__(message)


class TargetNotFoundError(TopsortError):
    """Raised when an identifier does not name any node of the graph.

    This covers both the requested target and any dependency declared by a
    visited node.
    """

    def __init__(self, id: object) -> None:  # noqa: A002
        super().__init__(id, f"Target {id!r} not found in graph")


class CyclicDependencyError(TopsortError):
    """Raised when a node is reached again while its own dependencies are being resolved.

    The reported identifier is the one whose re-entry was detected, which is
    not necessarily where the caller would say the cycle starts.
    """

    def __init__(self, id: object) -> None:  # noqa: A002
        super().__init__(id, f"Cyclic dependency detected at {id!r}")
