"""Identifier resolution against a graph."""

from collections.abc import Sequence
from typing import Any

from ._errors import TargetNotFoundError
from ._node import Node


def find_index[Id](domain: Sequence[Node[Id, Any]], target: Id) -> int:
    """Return the position of the first node whose id equals `target`.

    The scan is linear and builds no index, so resolving every identifier of
    a traversal costs O(n) each. When several nodes share an identifier the
    one at the lowest position wins silently; use `find_duplicate_ids` to
    detect such graphs up front.

    Args:
        domain: The graph to search.
        target: The identifier to look up.

    Returns:
        Position of the matching node.

    Raises:
        TargetNotFoundError: If no node carries `target`.

    """
    for index, node in enumerate(domain):
        if node.id == target:
            return index
    raise TargetNotFoundError(target)


def find_duplicate_ids[Id](domain: Sequence[Node[Id, Any]]) -> list[Id]:
    """Return identifiers that appear on more than one node.

    Each duplicate is reported once, in the order its first repetition
    occurs. Only equality is used, so unhashable identifiers are fine.

    Example:
        >>> find_duplicate_ids([Node("a"), Node("b"), Node("a"), Node("a")])
        ['a']

    """
    seen: list[Id] = []
    duplicates: list[Id] = []
    for node in domain:
        if node.id not in seen:
            seen.append(node.id)
        elif node.id not in duplicates:
            duplicates.append(node.id)
    return duplicates
