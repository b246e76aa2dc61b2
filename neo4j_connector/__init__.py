"""Neo4j connector: Cypher query building and result mapping for ORM hosts."""

from .connector import DataSource, Neo4jConnector, initialize
from .errors import (
    ConnectorError,
    InsertFailedError,
    InvalidIdentifierError,
    MissingIdentifierError,
    NotFoundError,
    StoreError,
)

__all__ = [
    "DataSource",
    "Neo4jConnector",
    "initialize",
    "ConnectorError",
    "InsertFailedError",
    "InvalidIdentifierError",
    "MissingIdentifierError",
    "NotFoundError",
    "StoreError",
]
