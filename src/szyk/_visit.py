"""Depth-first visitor restricted to the closure of a single target."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ._errors import CyclicDependencyError
from ._resolve import find_index

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from ._node import Node

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


@dataclass(slots=True)
class _Frame[Id]:
    """A node that is in progress: pushed on the current path, deps pending."""

    id: Id
    index: int
    pending: Iterator[Id]


def walk[Id, Item](domain: Sequence[Node[Id, Item]], target: Id) -> Iterator[Node[Id, Item]]:
    """Yield the closure of `target` in dependency-first order.

    Every node reachable from `target` is yielded exactly once, after all of
    its dependencies, and `target` itself is yielded last. Nodes that are not
    reachable from `target` are never resolved or validated.

    The traversal keeps an explicit stack of in-progress nodes instead of
    recursing, so long dependency chains are not bound by the interpreter's
    recursion limit. Ordering and error reporting are those of the plain
    recursive depth-first visit.

    Args:
        domain: The graph. Only read.
        target: Identifier of the node to produce.

    Yields:
        Nodes of the closure, dependencies first.

    Raises:
        TargetNotFoundError: If `target` or any dependency reached from it
            names no node.
        CyclicDependencyError: If an identifier is reached again while it is
            still on the current path. The error carries that identifier.

    Example:
        >>> from szyk import Node
        >>> graph = [Node("cat", ["dog"]), Node("dog")]
        >>> [node.id for node in walk(graph, "cat")]
        ['dog', 'cat']

    """
    # Indexed by position: duplicate ids resolve to the first match anyway.
    visited = [False] * len(domain)
    current_path: list[Id] = []
    stack: list[_Frame[Id]] = []

    def enter(id: Id) -> None:  # noqa: A002
        index = find_index(domain, id)
        if visited[index]:
            return
        # Checked after `visited` so shared, already emitted nodes are not cycles.
        if id in current_path:
            logger.debug("Cycle closed by %r (path: %r)", id, current_path)
            raise CyclicDependencyError(id)
        current_path.append(id)
        stack.append(_Frame(id=id, index=index, pending=iter(domain[index].deps)))

    enter(target)
    while stack:
        frame = stack[-1]
        dep = next(frame.pending, _EXHAUSTED)
        if dep is not _EXHAUSTED:
            enter(dep)
            continue

        stack.pop()
        node = domain[frame.index]
        logger.debug("Emitting %r", node.id)
        yield node
        visited[frame.index] = True
        current_path.pop()

