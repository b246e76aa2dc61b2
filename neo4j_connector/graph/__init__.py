"""Cypher query builders and filter/record models."""

from .models import Filter, serialize_record
from .queries import QueryPlan

__all__ = ["Filter", "QueryPlan", "serialize_record"]
