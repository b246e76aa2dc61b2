"""
Cypher query builders for connector operations.

Turns condition sets, ordering and pagination options into Cypher
fragments and parameter maps. Values are always bound as parameters;
labels and field names are interpolated, so callers validate them with
`validate_identifier` first.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional, Union

from neo4j_connector.errors import InvalidIdentifierError

if TYPE_CHECKING:
    from neo4j_connector.graph.models import Filter

logger = logging.getLogger(__name__)

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
WHERE_SUFFIX = "_where"


@dataclass
class QueryPlan:
    """A Cypher statement with its parameters."""

    cypher: str
    parameters: dict[str, Any] = field(default_factory=dict)


# =============================================================================
# Identifiers
# =============================================================================

def validate_identifier(name: str, kind: str = "identifier") -> str:
    """Return `name` if it is a plain identifier, raise otherwise."""
    if not isinstance(name, str) or not IDENTIFIER_PATTERN.match(name):
        raise InvalidIdentifierError(name, kind)
    return name


def quote_identifier(name: str) -> str:
    """Backtick-quote a label or property name."""
    return "`" + str(name).replace("`", "``") + "`"


def is_structured(value: Any) -> bool:
    """True for values the store cannot hold as a scalar property."""
    return isinstance(value, (dict, list, tuple, set)) or hasattr(value, "model_dump")


# =============================================================================
# Clause builders
# =============================================================================

def _scalar_items(
    conditions: Optional[Mapping[str, Any]],
    warn: bool = True,
) -> list[tuple[str, Any]]:
    if not conditions or not isinstance(conditions, Mapping):
        return []
    items = []
    for key, value in conditions.items():
        if is_structured(value):
            # TODO: support {op: value} conditions and and/or composition
            if warn:
                logger.warning(f"Skipping unsupported condition on '{key}': {value!r}")
            continue
        items.append((key, value))
    return items


def build_condition_clause(
    conditions: Optional[Mapping[str, Any]],
    parameter_suffix: str = "",
    separator: str = ", ",
    alias: str = "n",
) -> str:
    """
    Build `n.field = $param` terms for a condition set.

    Args:
        conditions: Field to expected value mapping (may be empty or None)
        parameter_suffix: Appended to parameter names, so WHERE parameters
            do not collide with SET parameters for the same field
        separator: Term separator (", " for SET, " AND " for WHERE)
        alias: Node alias the fields belong to

    Returns:
        The joined terms, or an empty string when nothing applies
    """
    terms = [
        f"{alias}.{key} = ${key}{parameter_suffix}"
        for key, _ in _scalar_items(conditions)
    ]
    return separator.join(terms)


def build_condition_parameters(
    conditions: Optional[Mapping[str, Any]],
    parameter_suffix: str = "",
) -> dict[str, Any]:
    """Parameter map matching the terms of `build_condition_clause`."""
    return {
        f"{key}{parameter_suffix}": value
        for key, value in _scalar_items(conditions, warn=False)
    }


def split_order_token(token: str) -> list[str]:
    """Split an order token like "name DESC" or "name,DESC" into parts."""
    return [part for part in re.split(r"[\s,]+", token.strip()) if part]


def build_order_clause(
    order: Union[str, Iterable[str], None],
    alias: Optional[str] = None,
) -> str:
    """
    Build an ORDER BY clause.

    "field DESC" becomes `field DESC`; a bare "field" is passed through and
    the store applies its default direction.
    """
    if not order:
        return ""
    if isinstance(order, str):
        order = [order]

    terms = []
    for token in order:
        parts = split_order_token(token)
        if not parts:
            continue
        name = f"{alias}.{parts[0]}" if alias else parts[0]
        if len(parts) == 1:
            terms.append(name)
        else:
            terms.append(f"{name} {parts[1]}")

    if not terms:
        return ""
    return "ORDER BY " + ", ".join(terms)


def to_count(value: Any) -> int:
    """Normalize a limit/offset value; non-numeric and negative become 0."""
    if isinstance(value, bool):
        return 0
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(number, 0)


def build_limit_clause(limit: Any, offset: Any = 0, style: str = "limit") -> str:
    """
    Build a pagination clause.

    Style "limit" emits `LIMIT offset,limit` (or `LIMIT limit` for a zero
    offset); style "skip" emits Neo4j's `SKIP offset LIMIT limit`. A zero
    limit means no limit, never `LIMIT 0`.
    """
    limit = to_count(limit)
    offset = to_count(offset)

    if style == "skip":
        parts = []
        if offset:
            parts.append(f"SKIP {offset}")
        if limit:
            parts.append(f"LIMIT {limit}")
        return " ".join(parts)

    if not limit:
        return ""
    if offset:
        return f"LIMIT {offset},{limit}"
    return f"LIMIT {limit}"


def assemble_match_query(
    label: str,
    where_clause: str = "",
    return_clause: str = "n",
    order_clause: str = "",
    limit_clause: str = "",
    set_clause: str = "",
    alias: str = "n",
) -> str:
    """Join clauses in MATCH, WHERE, SET, RETURN, ORDER BY, LIMIT order."""
    parts = [f"MATCH ({alias}:{quote_identifier(label)})"]
    if where_clause:
        parts.append(f"WHERE {where_clause}")
    if set_clause:
        parts.append(f"SET {set_clause}")
    if return_clause:
        parts.append(f"RETURN {return_clause}")
    if order_clause:
        parts.append(order_clause)
    if limit_clause:
        parts.append(limit_clause)
    return " ".join(parts)


# =============================================================================
# Statement builders
# =============================================================================

def build_find_query(
    label: str,
    filter: Optional["Filter"] = None,
    alias: str = "n",
    paging_style: str = "skip",
) -> QueryPlan:
    """Full MATCH query for a filtered listing."""
    where = filter.where if filter else None
    order = filter.order if filter else None
    limit = filter.limit if filter else 0
    offset = filter.offset if filter else 0

    cypher = assemble_match_query(
        label,
        where_clause=build_condition_clause(where, separator=" AND ", alias=alias),
        return_clause=alias,
        order_clause=build_order_clause(order, alias=alias),
        limit_clause=build_limit_clause(limit, offset, style=paging_style),
        alias=alias,
    )
    return QueryPlan(cypher=cypher, parameters=build_condition_parameters(where))


def build_count_query(
    label: str,
    where: Optional[Mapping[str, Any]] = None,
    alias: str = "n",
) -> QueryPlan:
    """MATCH query returning `count(n)` for an optional condition set."""
    cypher = assemble_match_query(
        label,
        where_clause=build_condition_clause(where, separator=" AND ", alias=alias),
        return_clause=f"count({alias}) AS count",
        alias=alias,
    )
    return QueryPlan(cypher=cypher, parameters=build_condition_parameters(where))


def build_update_query(
    label: str,
    where: Optional[Mapping[str, Any]],
    data: Mapping[str, Any],
    alias: str = "n",
) -> QueryPlan:
    """
    MATCH + WHERE + SET query.

    WHERE parameters carry the `_where` suffix, SET parameters are bare,
    so a field present on both sides binds two distinct parameters.

    Raises:
        InvalidIdentifierError: A SET field's parameter name equals a
            suffixed WHERE parameter (e.g. setting `name_where` while
            matching on `name`)
    """
    where_parameters = build_condition_parameters(where, parameter_suffix=WHERE_SUFFIX)
    for key, _ in _scalar_items(data, warn=False):
        if key in where_parameters:
            raise InvalidIdentifierError(key, "field name (clashes with a where parameter)")

    cypher = assemble_match_query(
        label,
        where_clause=build_condition_clause(
            where, parameter_suffix=WHERE_SUFFIX, separator=" AND ", alias=alias
        ),
        set_clause=build_condition_clause(data, alias=alias),
        return_clause=alias,
        alias=alias,
    )
    parameters = build_condition_parameters(data)
    parameters.update(where_parameters)
    return QueryPlan(cypher=cypher, parameters=parameters)
