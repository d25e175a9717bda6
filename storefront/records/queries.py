"""
Record Query Construction

Builds the query descriptors understood by the Apper records API:

- explicit field projection:  {"fields": [{"field": {"Name": "name_c"}}, ...]}
- flat conditions:            {"where": [{"FieldName", "Operator", "Values"}]}
- grouped conditions:         {"whereGroups": [{"operator": "OR", "subGroups": [...]}]}

Flat conditions use PascalCase keys while grouped conditions use camelCase;
both spellings are what the backend expects.
"""

from collections.abc import Iterable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ConditionOperator(str, Enum):
    """Comparison operators supported by the records API."""

    EQUAL_TO = "EqualTo"
    NOT_EQUAL_TO = "NotEqualTo"
    CONTAINS = "Contains"
    DOES_NOT_CONTAIN = "DoesNotContain"
    STARTS_WITH = "StartsWith"
    GREATER_THAN = "GreaterThan"
    GREATER_THAN_OR_EQUAL_TO = "GreaterThanOrEqualTo"
    LESS_THAN = "LessThan"
    LESS_THAN_OR_EQUAL_TO = "LessThanOrEqualTo"
    HAS_VALUE = "HasValue"
    HAS_NO_VALUE = "HasNoValue"


class GroupOperator(str, Enum):
    """Boolean combinators for condition groups."""

    AND = "AND"
    OR = "OR"


# Product fields matched by free-text search
SEARCH_FIELDS: tuple[str, ...] = ("name_c", "description_c", "category_c", "brand_c")


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True, frozen=True)


class WhereCondition(_WireModel):
    """Flat condition restricting one field."""

    field_name: str = Field(alias="FieldName")
    operator: ConditionOperator = Field(ConditionOperator.EQUAL_TO, alias="Operator")
    values: list[Any] = Field(alias="Values")


class GroupCondition(_WireModel):
    """Condition inside a where-group."""

    field_name: str = Field(alias="fieldName")
    operator: ConditionOperator = Field(alias="operator")
    values: list[Any] = Field(alias="values")


class SubGroup(_WireModel):
    conditions: list[GroupCondition]
    operator: GroupOperator | None = None


class WhereGroup(_WireModel):
    """Combines sub-groups with a single boolean operator."""

    operator: GroupOperator
    sub_groups: list[SubGroup] = Field(alias="subGroups")


class RecordQuery(_WireModel):
    """
    Query against one entity.

    The entity name travels next to the descriptor rather than inside it,
    because the client takes it as a separate argument.
    """

    entity: str
    projection: tuple[str, ...]
    where: tuple[WhereCondition, ...] = ()
    where_groups: tuple[WhereGroup, ...] = ()

    def to_wire(self) -> dict[str, Any]:
        """
        Render the descriptor sent to the backend.

        Returns:
            Dict with "fields" and, when present, "where" / "whereGroups"
        """
        descriptor: dict[str, Any] = {
            "fields": [{"field": {"Name": name}} for name in self.projection],
        }
        if self.where:
            descriptor["where"] = [c.model_dump(by_alias=True, mode="json") for c in self.where]
        if self.where_groups:
            descriptor["whereGroups"] = [
                g.model_dump(by_alias=True, mode="json", exclude_none=True) for g in self.where_groups
            ]
        return descriptor


def build_list_query(entity: str, fields: Iterable[str]) -> RecordQuery:
    """Projection-only query: every record, only the named fields."""
    return RecordQuery(entity=entity, projection=tuple(fields))


def build_filter_query(
    entity: str,
    fields: Iterable[str],
    field_name: str,
    value: Any,
    operator: ConditionOperator = ConditionOperator.EQUAL_TO,
) -> RecordQuery:
    """
    Query restricting one field to one value.

    Args:
        entity: Wire entity name
        fields: Field projection
        field_name: Field to filter on (e.g. "status_c")
        value: Value compared against the field
        operator: Comparison operator (EqualTo by default)

    Returns:
        RecordQuery with a single where condition
    """
    condition = WhereCondition(field_name=field_name, operator=operator, values=[value])
    return RecordQuery(entity=entity, projection=tuple(fields), where=(condition,))


def build_search_query(
    entity: str,
    fields: Iterable[str],
    query: str,
    search_fields: Iterable[str] = SEARCH_FIELDS,
) -> RecordQuery:
    """
    Free-text query: a record matches when ANY search field contains `query`.

    Produces one OR group holding one sub-group per search field, each with a
    single Contains condition. Case sensitivity is up to the backend.

    Args:
        entity: Wire entity name
        fields: Field projection
        query: Substring to look for
        search_fields: Fields tested independently against `query`

    Returns:
        RecordQuery with one OR where-group
    """
    group = WhereGroup(
        operator=GroupOperator.OR,
        sub_groups=[
            SubGroup(
                conditions=[
                    GroupCondition(field_name=name, operator=ConditionOperator.CONTAINS, values=[query]),
                ]
            )
            for name in search_fields
        ],
    )
    return RecordQuery(entity=entity, projection=tuple(fields), where_groups=(group,))
