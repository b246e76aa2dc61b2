"""Core modules: graph store client, store protocol, logging setup."""

from .logging_setup import configure_logging
from .neo4j_client import Neo4jClient
from .store import GraphStore

__all__ = ["Neo4jClient", "GraphStore", "configure_logging"]
