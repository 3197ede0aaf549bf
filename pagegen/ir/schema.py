"""
Pydantic models for the editor schema accepted at the pipeline boundary.

The schema is untyped beyond its node shape: only ``name`` is required and
prop values are kept exactly as supplied (no copying or coercion), so the
parser can classify them itself.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pagegen.errors import SchemaValidationError


class SchemaNode(BaseModel):
    """One node of the editor schema: ``{id, name, props, children?, styles?}``."""

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    id: Optional[Any] = None
    name: str
    props: Dict[str, Any] = Field(default_factory=dict)
    children: Optional[List["SchemaNode"]] = None
    styles: Optional[Dict[str, Any]] = None

    @field_validator("props", mode="before")
    @classmethod
    def _none_props_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value


SchemaNode.model_rebuild()


SchemaInput = Sequence[Union[SchemaNode, Mapping[str, Any]]]


def coerce_schema(schema: Optional[SchemaInput]) -> List[SchemaNode]:
    """
    Validate raw schema input into :class:`SchemaNode` models.

    Args:
        schema: Ordered list of nodes as dicts or ``SchemaNode`` instances

    Returns:
        List of validated ``SchemaNode`` models (empty for empty input)

    Raises:
        SchemaValidationError: If a node lacks the required shape
    """
    if not schema:
        return []
    if isinstance(schema, (str, bytes)) or not isinstance(schema, Sequence):
        raise SchemaValidationError(
            f"Schema must be a list of nodes, got {type(schema).__name__}",
            hint="Pass the editor's component tree as a JSON array.",
        )
    nodes: List[SchemaNode] = []
    for index, raw in enumerate(schema):
        if isinstance(raw, SchemaNode):
            nodes.append(raw)
            continue
        try:
            nodes.append(SchemaNode.model_validate(raw))
        except ValidationError as exc:
            raise SchemaValidationError(
                f"Schema node #{index} is invalid: {exc.errors()[0].get('msg', exc)}"
            ) from exc
    return nodes


__all__ = ["SchemaNode", "SchemaInput", "coerce_schema"]
