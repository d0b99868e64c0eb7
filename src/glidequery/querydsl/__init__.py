"""Query DSL module.

Exports the `QueryBuilder` class for building ServiceNow encoded queries.
"""

from .builder import QueryBuilder

__all__ = ("QueryBuilder",)
