"""
Graph store capability consumed by the connector.

Any object with these coroutines can back a Neo4jConnector; the bundled
implementation is `Neo4jClient`. Records are dicts of node properties
plus the store-assigned identifier under `_id`.
"""

from typing import Any, Optional, Protocol, runtime_checkable

Record = dict[str, Any]


@runtime_checkable
class GraphStore(Protocol):
    """Node-level operations on a labelled property graph."""

    async def connect(self) -> None:
        ...

    async def close(self) -> None:
        ...

    async def health_check(self) -> bool:
        ...

    async def cypher_query(
        self,
        query: str,
        parameters: Optional[dict[str, Any]] = None,
        include_stats: bool = False,
    ) -> dict[str, Any]:
        """
        Run a Cypher statement.

        Returns a mapping with `columns` and `data` (one entry per row,
        unwrapped when there is a single column) and, when requested,
        `stats` with the update counters.
        """
        ...

    async def insert_node(self, properties: dict[str, Any], label: str) -> Optional[Record]:
        ...

    async def read_node(self, node_id: str) -> Optional[Record]:
        ...

    async def update_node_by_id(
        self,
        node_id: str,
        properties: dict[str, Any],
    ) -> Optional[Record]:
        ...

    async def update_nodes_with_labels_and_properties(
        self,
        label: str,
        match: dict[str, Any],
        properties: dict[str, Any],
        remove_other_properties: bool = False,
        node_id: Optional[str] = None,
    ) -> list[Record]:
        """Update `label` nodes carrying `match`, narrowed to `node_id` if given."""
        ...

    async def delete_node(self, node_id: str) -> bool:
        ...

    async def delete_nodes_with_labels_and_properties(
        self,
        label: str,
        properties: Optional[dict[str, Any]] = None,
    ) -> int:
        ...
