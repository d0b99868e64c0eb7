"""Pydantic schemas for encoded query fragments.

A builder keeps each step of a query as one of these tagged variants and only
renders them to text in `QueryBuilder.build`.
"""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .constants import ORDER_BY, ORDER_BY_DESC


class OrderFragment(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["order"] = "order"
    field: str = Field(description="Field to order by. May be empty.")
    descending: bool = Field(False, description="Order descending instead of ascending.")

    def render(self) -> str:
        return (ORDER_BY_DESC if self.descending else ORDER_BY) + self.field


class ConnectorFragment(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["connector"] = "connector"
    token: Literal["^", "^OR", "^NQ"] = Field(description="Logical connector token.")

    def render(self) -> str:
        return self.token


class ConditionFragment(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["condition"] = "condition"
    field: str = Field(min_length=1, description="Field the condition applies to.")
    operator: str = Field(description="Operator token, e.g. '=', 'LIKE', 'NOT IN'.")
    operand: str = Field("", description="Operand already rendered to text.")

    def render(self) -> str:
        return f"{self.field}{self.operator}{self.operand}"


Fragment = Union[OrderFragment, ConnectorFragment, ConditionFragment]
