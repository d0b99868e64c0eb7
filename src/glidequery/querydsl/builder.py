"""Fluent builder for ServiceNow encoded queries.

`QueryBuilder` accumulates conditions, logical connectors and ordering
directives and joins them into one encoded query string, e.g.::

    query = (
        QueryBuilder()
        .select_field("active").equals("true")
        .and_()
        .select_field("priority").is_one_of([1, 2])
        .select_field("opened_at").order_descending()
        .build()
    )
    # active=true^priorityIN1,2ORDERBYDESCopened_at

A selected field persists across calls, so several conditions can follow one
`select_field`. The output is not URL-encoded.
"""

import logging
from typing import Any, Collection, List, Sequence, Tuple

from glidequery.constants import BETWEEN_SEPARATOR, NUMBER, STRING, GlideConnector, GlideOperator
from glidequery.exceptions import QueryEmptyError, QueryMissingFieldError, QueryTypeError
from glidequery.logger import get_logger
from glidequery.schema import ConditionFragment, ConnectorFragment, Fragment, OrderFragment
from glidequery.types import ComparisonOperand, Operand, Scalar
from glidequery.utils import (
    is_array,
    is_date_like,
    is_number,
    is_scalar,
    is_string,
    normalize_operand,
    render_scalar,
    to_utc_query_format,
    type_label,
)

__all__ = ("QueryBuilder",)

logger = get_logger(__name__)

_STRING_ONLY = (STRING,)
_STRING_OR_NUMBER = (STRING, NUMBER)


class QueryBuilder:
    """Accumulates encoded query fragments in call order.

    Every mutating method returns the builder itself. A rejected call raises
    and leaves previously accumulated fragments untouched.
    """

    def __init__(self) -> None:
        self._fragments: List[Fragment] = []
        self._current_field = ""

    @property
    def current_field(self) -> str:
        return self._current_field

    @property
    def fragments(self) -> Tuple[Fragment, ...]:
        """Snapshot of the accumulated fragments, in output order."""
        return tuple(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)

    def __str__(self) -> str:
        return self._render()

    def __repr__(self) -> str:
        return f"<QueryBuilder: {self._render()!r}>"

    # -------------------
    # Field selection and ordering
    # -------------------
    def select_field(self, name: str) -> "QueryBuilder":
        """Set the field subsequent conditions and orderings apply to.

        The name is not validated; non-string names are converted with `str()`
        and `None` clears the selection.
        """
        self._current_field = "" if name is None else str(name)
        return self

    field = select_field

    def order_ascending(self) -> "QueryBuilder":
        return self._append(OrderFragment(field=self._current_field))

    def order_descending(self) -> "QueryBuilder":
        return self._append(OrderFragment(field=self._current_field, descending=True))

    # -------------------
    # String conditions
    # -------------------
    def starts_with(self, value: str) -> "QueryBuilder":
        return self._add_condition(GlideOperator.STARTS_WITH, value, _STRING_ONLY)

    def ends_with(self, value: str) -> "QueryBuilder":
        return self._add_condition(GlideOperator.ENDS_WITH, value, _STRING_ONLY)

    def contains(self, value: str) -> "QueryBuilder":
        return self._add_condition(GlideOperator.CONTAINS, value, _STRING_ONLY)

    def does_not_contain(self, value: str) -> "QueryBuilder":
        return self._add_condition(GlideOperator.NOT_CONTAINS, value, _STRING_ONLY)

    # -------------------
    # Operand-less conditions
    # -------------------
    def is_empty(self) -> "QueryBuilder":
        return self._add_condition(GlideOperator.IS_EMPTY, "", _STRING_ONLY)

    def is_not_empty(self) -> "QueryBuilder":
        return self._add_condition(GlideOperator.IS_NOT_EMPTY, "", _STRING_ONLY)

    def is_empty_string(self) -> "QueryBuilder":
        return self._add_condition(GlideOperator.EMPTY_STRING, "", _STRING_ONLY)

    def is_anything(self) -> "QueryBuilder":
        return self._add_condition(GlideOperator.ANYTHING, "", _STRING_ONLY)

    # -------------------
    # Equality and membership
    # -------------------
    def equals(self, value: Operand) -> "QueryBuilder":
        """Add ``=`` for a string/number, ``IN`` for a list or tuple of them.

        Raises:
            QueryTypeError: If `value` is neither a scalar nor a list/tuple.
        """
        return self._add_equality(value, GlideOperator.EQUALS, GlideOperator.IN)

    def not_equals(self, value: Operand) -> "QueryBuilder":
        """Add ``!=`` for a string/number, ``NOT IN`` for a list or tuple of them."""
        return self._add_equality(value, GlideOperator.NOT_EQUALS, GlideOperator.NOT_IN)

    def is_one_of(self, values: Sequence[Scalar]) -> "QueryBuilder":
        if not is_array(values):
            raise QueryTypeError(f"Expected list type, found: {type_label(values)}", found=type_label(values))
        return self._add_condition(GlideOperator.IN, values, _STRING_OR_NUMBER)

    # -------------------
    # Comparisons
    # -------------------
    def greater_than(self, value: ComparisonOperand) -> "QueryBuilder":
        return self._add_comparison(GlideOperator.GREATER_THAN, value)

    def greater_than_or_is(self, value: ComparisonOperand) -> "QueryBuilder":
        return self._add_comparison(GlideOperator.GREATER_OR_EQUAL, value)

    def less_than(self, value: ComparisonOperand) -> "QueryBuilder":
        return self._add_comparison(GlideOperator.LESS_THAN, value)

    def less_than_or_is(self, value: ComparisonOperand) -> "QueryBuilder":
        return self._add_comparison(GlideOperator.LESS_OR_EQUAL, value)

    def between(self, start: ComparisonOperand, end: ComparisonOperand) -> "QueryBuilder":
        """Add a BETWEEN condition encoded as ``<start>@<end>``.

        Both bounds must be the same kind: two numbers, two strings, or two
        dates (normalized to UTC).

        Raises:
            QueryTypeError: If the bounds are of different or unsupported kinds.
        """
        if (is_number(start) and is_number(end)) or (is_string(start) and is_string(end)):
            operand = f"{render_scalar(start)}{BETWEEN_SEPARATOR}{render_scalar(end)}"
        elif is_date_like(start) and is_date_like(end):
            operand = f"{to_utc_query_format(start)}{BETWEEN_SEPARATOR}{to_utc_query_format(end)}"
        else:
            raise QueryTypeError(
                "Expected string/date/number type, found: "
                f"start: {type_label(start)}, end: {type_label(end)}",
                start=type_label(start),
                end=type_label(end),
            )
        return self._add_condition(GlideOperator.BETWEEN, operand, _STRING_ONLY)

    # -------------------
    # Logical connectors
    # -------------------
    def and_(self) -> "QueryBuilder":
        return self._append(ConnectorFragment(token=GlideConnector.AND))

    def or_(self) -> "QueryBuilder":
        return self._append(ConnectorFragment(token=GlideConnector.OR))

    def not_queried(self) -> "QueryBuilder":
        """Start a new, independent query segment (``^NQ``)."""
        return self._append(ConnectorFragment(token=GlideConnector.NQ))

    nq = not_queried

    # -------------------
    # Build
    # -------------------
    def build(self) -> str:
        """Join all fragments into the encoded query string.

        Does not mutate the builder; repeated calls return the same string
        until more fragments are added.

        Raises:
            QueryEmptyError: If nothing has been accumulated.
        """
        if not self._fragments:
            raise QueryEmptyError("At least one condition is required in query.")
        query = self._render()
        logger.debug("Built encoded query from %d fragments: %s", len(self._fragments), query)
        return query

    # -------------------
    # Internals
    # -------------------
    def _render(self) -> str:
        return "".join(fragment.render() for fragment in self._fragments)

    def _append(self, fragment: Fragment) -> "QueryBuilder":
        self._fragments.append(fragment)
        if logger.is_enabled_for(logging.DEBUG):
            logger.debug("Appended %s fragment: %s", fragment.kind, fragment.render())
        return self

    def _add_condition(self, operator: str, operand: Any, allowed: Collection[str]) -> "QueryBuilder":
        """Validate `operand` and append ``<field><operator><operand>``.

        Raises:
            QueryMissingFieldError: If no field is selected.
            QueryTypeError: If the operand (or any array element) is not an allowed type.
        """
        if not self._current_field:
            raise QueryMissingFieldError("A field must be selected before adding a condition.", operator=operator)
        rendered = normalize_operand(operand, allowed)
        return self._append(ConditionFragment(field=self._current_field, operator=operator, operand=rendered))

    def _add_equality(self, value: Any, scalar_operator: str, list_operator: str) -> "QueryBuilder":
        if is_scalar(value):
            return self._add_condition(scalar_operator, value, _STRING_OR_NUMBER)
        if is_array(value):
            return self._add_condition(list_operator, value, _STRING_OR_NUMBER)
        raise QueryTypeError(f"Expected string or list type, found: {type_label(value)}", found=type_label(value))

    def _add_comparison(self, operator: str, value: Any) -> "QueryBuilder":
        if is_date_like(value):
            value = to_utc_query_format(value)
        elif not is_scalar(value):
            raise QueryTypeError(
                f"Expected string/date/number type, found: {type_label(value)}", found=type_label(value)
            )
        return self._add_condition(operator, value, _STRING_OR_NUMBER)
