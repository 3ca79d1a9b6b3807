"""Target-scoped topological sorting of dependency graphs.

Example:
    >>> from szyk import Node, topsort_values
    >>> topsort_values(
    ...     [
    ...         Node("wooden pickaxe", ["planks", "sticks"], "Pickaxe"),
    ...         Node("planks", ["wood"], "Planks"),
    ...         Node("sticks", ["planks"], "Sticks"),
    ...         Node("wood", [], "Wood"),
    ...     ],
    ...     "wooden pickaxe",
    ... )
    ['Wood', 'Planks', 'Sticks', 'Pickaxe']

"""

__all__ = [
    "CyclicDependencyError",
    "GraphDocument",
    "GraphFileError",
    "Node",
    "NodeDocument",
    "TargetNotFoundError",
    "TopsortError",
    "find_duplicate_ids",
    "find_index",
    "graph_from_dict",
    "iter_topsort",
    "load_graph_from_toml",
    "topsort",
    "topsort_values",
]

from ._errors import CyclicDependencyError, TargetNotFoundError, TopsortError
from ._io import GraphDocument, GraphFileError, NodeDocument, graph_from_dict, load_graph_from_toml
from ._node import Node
from ._resolve import find_duplicate_ids, find_index
from ._sort import iter_topsort, topsort, topsort_values
