"""Loading dependency graphs from TOML documents.

A graph document is a list of `[[node]]` tables:

    [[node]]
    id = "wooden pickaxe"
    deps = ["planks", "sticks"]
    value = "Pickaxe"

Unlike the sorting functions, which tolerate duplicate identifiers (first
match wins), documents with duplicate ids are rejected.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ._node import Node
from ._resolve import find_duplicate_ids

logger = logging.getLogger(__name__)


class GraphFileError(Exception):
    """Error reading or validating a graph document."""


class NodeDocument(BaseModel):
    """One `[[node]]` table of a graph document."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    deps: list[str] = Field(default_factory=list)
    value: Any = None

    def to_node(self) -> Node[str, Any]:
        return Node(self.id, tuple(self.deps), self.value)


class GraphDocument(BaseModel):
    """A whole graph document."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    nodes: list[NodeDocument] = Field(default_factory=list, alias="node")

    @model_validator(mode="after")
    def _check_unique_ids(self) -> GraphDocument:
        duplicates = find_duplicate_ids(self.to_domain())
        if duplicates:
            msg = f"Duplicate node ids: {', '.join(repr(d) for d in duplicates)}"
            raise ValueError(msg)
        return self

    def to_domain(self) -> list[Node[str, Any]]:
        """Convert to the node sequence accepted by the sorting functions, keeping document order."""
        return [node.to_node() for node in self.nodes]


def graph_from_dict(contents: dict[str, Any]) -> list[Node[str, Any]]:
    """Validate parsed document contents and return the graph.

    Args:
        contents: Parsed TOML (or any equivalent mapping) with a `node` list.

    Returns:
        The nodes in document order.

    Raises:
        GraphFileError: If the contents do not describe a valid graph.

    """
    try:
        document = GraphDocument.model_validate(contents)
    except ValidationError as e:
        msg = f"Invalid graph document: {e}"
        raise GraphFileError(msg) from e
    return document.to_domain()


def load_graph_from_toml(input_path: Path | str) -> list[Node[str, Any]]:
    """Load a graph from a TOML file.

    Args:
        input_path: Path to the graph document.

    Returns:
        The nodes in document order.

    Raises:
        GraphFileError: If the file cannot be read, is not valid TOML, or
            does not describe a valid graph.

    """
    input_path = Path(input_path)

    try:
        with input_path.open("rb") as f:
            toml_contents = tomllib.load(f)
    except OSError as e:
        msg = f"Cannot read graph file {input_path}: {e}"
        raise GraphFileError(msg) from e
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {input_path}: {e}"
        raise GraphFileError(msg) from e

    domain = graph_from_dict(toml_contents)
    logger.debug(f"Loaded {len(domain)} nodes from {input_path}")
    return domain
