"""
Connector error types.

Store and transport errors raised by the neo4j driver are not wrapped;
these cover the conditions the connector itself detects.
"""

from typing import Optional


class ConnectorError(Exception):
    """Base class for errors raised by the connector."""
    pass


class InsertFailedError(ConnectorError):
    """The store returned no node for a create."""

    def __init__(self, message: str = "failed to add node!"):
        super().__init__(message)


class MissingIdentifierError(ConnectorError):
    """A save was requested for a record without an `_id`."""

    def __init__(self, message: str = "missing id!"):
        super().__init__(message)


class NotFoundError(ConnectorError):
    """No node matched the identifier or condition set."""

    def __init__(self, message: str = "not found!"):
        super().__init__(message)


class StoreError(ConnectorError):
    """The store answered with something the connector cannot interpret."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class InvalidIdentifierError(ConnectorError, ValueError):
    """A label or field name is not safe to interpolate into Cypher."""

    def __init__(self, name: str, kind: str = "identifier"):
        self.name = name
        self.kind = kind
        super().__init__(f"Invalid {kind}: {name!r}")
