"""Shared fixtures: settings, mocked driver, mocked graph store."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from neo4j.graph import Node

from neo4j_connector.config import Settings
from neo4j_connector.core.neo4j_client import Neo4jClient
from neo4j_connector.core.store import GraphStore


@pytest.fixture
def settings():
    """Settings isolated from the environment's .env file."""
    return Settings(
        _env_file=None,
        neo4j_uri="bolt://localhost:7687",
        neo4j_user="neo4j",
        neo4j_password="test",
        neo4j_max_retries=1,
    )


@pytest.fixture
def make_node():
    """Factory for driver Node objects."""

    def factory(element_id, labels=("Person",), **properties):
        node = MagicMock(spec=Node)
        node.element_id = element_id
        node.labels = frozenset(labels)
        node.items.return_value = list(properties.items())
        return node

    return factory


@pytest.fixture
def make_result():
    """Factory for async driver results yielding `rows` (dicts keyed by column)."""

    def factory(columns=(), rows=(), **counters):
        result = MagicMock()
        result.keys = AsyncMock(return_value=tuple(columns))
        result.__aiter__.return_value = list(rows)
        result.consume = AsyncMock(return_value=SimpleNamespace(counters=SimpleNamespace(**counters)))
        return result

    return factory


@pytest.fixture
def mock_driver(make_result):
    """Create a mock async Neo4j driver."""
    driver = MagicMock()
    driver.verify_connectivity = AsyncMock()
    driver.close = AsyncMock()

    session = MagicMock()
    session.run = AsyncMock(return_value=make_result())
    session.close = AsyncMock()
    driver.session.return_value = session

    return driver


@pytest.fixture
def client(mock_driver, settings):
    """Create a Neo4jClient with mocked driver."""
    with patch("neo4j_connector.core.neo4j_client.AsyncGraphDatabase") as mock_gd:
        mock_gd.driver.return_value = mock_driver
        yield Neo4jClient(settings=settings, retry_wait=0)


@pytest.fixture
def store():
    """A GraphStore whose coroutines are all AsyncMocks."""
    return AsyncMock(spec=GraphStore)
