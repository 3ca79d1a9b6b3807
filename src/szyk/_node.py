"""Node type for dependency graphs."""

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Node[Id, Item]:
    """A single unit of a dependency graph.

    Nodes are plain immutable records. A graph (also called the domain) is
    just an ordered sequence of nodes owned by the caller; it is never
    indexed or mutated by the sorting functions.

    Attributes:
        id: Identifier used for lookups. Only equality is required.
        deps: Identifiers of the direct dependencies, in visiting order.
        value: Payload returned by `topsort_values`. Optional when only the
            callback form is used.

    Example:
        >>> Node("planks", ["wood"], "Planks")
        Node(id='planks', deps=['wood'], value='Planks')

    """

    id: Id
    deps: Sequence[Id] = field(default=())
    value: Item = None  # type: ignore[assignment]
