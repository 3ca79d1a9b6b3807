"""Public sorting entry points built on the depth-first visitor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._visit import walk

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence

    from ._node import Node

logger = logging.getLogger(__name__)


def topsort[Id, Item](
    domain: Sequence[Node[Id, Item]],
    target: Id,
    callback: Callable[[Node[Id, Item]], object],
) -> None:
    """Call `callback` with the nodes needed to produce `target`, in topological order.

    The callback receives every node of the target's closure exactly once,
    each after all of its dependencies, ending with the target node.

    There is no rollback: if an error is raised part way through, nodes
    already passed to `callback` stay reported. Nodes on the unfinished path
    are never reported. Exceptions raised by `callback` propagate unchanged.

    Args:
        domain: The graph, an ordered sequence of nodes.
        target: Identifier of the node to produce.
        callback: Called once per node.

    Raises:
        TargetNotFoundError: If a required identifier names no node.
        CyclicDependencyError: If the closure contains a cycle.

    Example:
        >>> from szyk import Node
        >>> out = []
        >>> topsort([Node("cat", ["dog"], "Garfield"), Node("dog", [], "Odie")], "cat", lambda n: out.append(n.id))
        >>> out
        ['dog', 'cat']

    """
    for node in walk(domain, target):
        callback(node)


def topsort_values[Id, Item](domain: Sequence[Node[Id, Item]], target: Id) -> list[Item]:
    """Return the values of the nodes needed to produce `target`, in topological order.

    The result lists `node.value` in exactly the order `topsort` would call
    its callback. On error nothing is returned; the values collected so far
    are discarded.

    Example:
        >>> from szyk import Node
        >>> topsort_values([Node("cat", ["dog"], "Garfield"), Node("dog", [], "Odie")], "cat")
        ['Odie', 'Garfield']

    """
    values: list[Item] = []
    topsort(domain, target, lambda node: values.append(node.value))
    logger.debug("Sorted %d values for target %r", len(values), target)
    return values


def iter_topsort[Id, Item](domain: Sequence[Node[Id, Item]], target: Id) -> Iterator[Node[Id, Item]]:
    """Lazily iterate over the nodes needed to produce `target`.

    Same order and errors as `topsort`. Errors are raised when iteration
    reaches the failing node.
    """
    return walk(domain, target)
