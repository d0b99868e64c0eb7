"""
Tokens of the encoded query grammar.
"""


class GlideOperator:
    EQUALS = "="
    NOT_EQUALS = "!="
    GREATER_THAN = ">"
    GREATER_OR_EQUAL = ">="
    LESS_THAN = "<"
    LESS_OR_EQUAL = "<="

    CONTAINS = "LIKE"
    NOT_CONTAINS = "NOTLIKE"
    STARTS_WITH = "STARTSWITH"
    ENDS_WITH = "ENDSWITH"

    IN = "IN"
    NOT_IN = "NOT IN"
    BETWEEN = "BETWEEN"

    IS_EMPTY = "ISEMPTY"
    IS_NOT_EMPTY = "ISNOTEMPTY"
    EMPTY_STRING = "EMPTYSTRING"
    ANYTHING = "ANYTHING"


class GlideConnector:
    AND = "^"
    OR = "^OR"
    NQ = "^NQ"


ORDER_BY = "ORDERBY"
ORDER_BY_DESC = "ORDERBYDESC"

LIST_SEPARATOR = ","
BETWEEN_SEPARATOR = "@"

# Operand type labels
STRING = "string"
NUMBER = "number"
