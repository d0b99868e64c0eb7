"""
Fluent builder for ServiceNow encoded query strings.

Exposes `QueryBuilder`, the fragment schemas and the exception hierarchy.
"""

from .exceptions import GlideQueryError, QueryEmptyError, QueryMissingFieldError, QueryTypeError
from .querydsl import QueryBuilder
from .schema import ConditionFragment, ConnectorFragment, Fragment, OrderFragment

__version__ = "0.1.0"

__all__ = [
    "QueryBuilder",
    "Fragment",
    "ConditionFragment",
    "ConnectorFragment",
    "OrderFragment",
    "GlideQueryError",
    "QueryEmptyError",
    "QueryMissingFieldError",
    "QueryTypeError",
]
