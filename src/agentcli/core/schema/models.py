"""OutputShape — the parsed form of an agent's ``output_schema``.

Agent definitions describe their expected output with a small
JSON-Schema subset::

    output_schema:
      type: object
      description: Word statistics.
      properties:
        count: { type: number, description: Number of words. }
        words:
          type: array
          items: { type: string }
      required: [count]

:func:`parse_shape` turns such a mapping into a tree of frozen shape
models. A missing or unrecognised ``type`` becomes :class:`AnyShape`;
structurally malformed input (``properties`` that is not a mapping,
``required`` that is not a list of strings, ...) raises
:class:`pydantic.ValidationError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, field_validator


class _Shape(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    description: str | None = None


class AnyShape(_Shape):
    """Accepts any value."""

    type: Literal["any"] = "any"


class StringShape(_Shape):
    type: Literal["string"] = "string"


class NumberShape(_Shape):
    type: Literal["number"] = "number"


class IntegerShape(_Shape):
    type: Literal["integer"] = "integer"


class BooleanShape(_Shape):
    type: Literal["boolean"] = "boolean"


class ArrayShape(_Shape):
    """A homogeneous list; ``items`` defaults to :class:`AnyShape`."""

    type: Literal["array"] = "array"
    items: OutputShape = AnyShape()

    @field_validator("items", mode="before")
    @classmethod
    def _parse_items(cls, value: Any) -> Any:
        if value is None:
            return AnyShape()
        return _parse_child(value, "items")


class ObjectShape(_Shape):
    """A mapping of named fields.

    Fields listed in ``required`` must be present and non-null; all other
    declared fields may be absent or null.
    """

    type: Literal["object"] = "object"
    properties: dict[str, OutputShape] = {}
    required: list[str] = []

    @field_validator("properties", mode="before")
    @classmethod
    def _parse_properties(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ValueError("properties must be a mapping of field name to schema")
        return {str(key): _parse_child(child, str(key)) for key, child in value.items()}

    @field_validator("required", mode="before")
    @classmethod
    def _check_required(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str) or not isinstance(value, list):
            raise ValueError("required must be a list of field names")
        return value


OutputShape = Union[
    ObjectShape,
    ArrayShape,
    StringShape,
    NumberShape,
    IntegerShape,
    BooleanShape,
    AnyShape,
]

_SHAPE_TYPES: dict[str, type[_Shape]] = {
    "object": ObjectShape,
    "array": ArrayShape,
    "string": StringShape,
    "number": NumberShape,
    "integer": IntegerShape,
    "boolean": BooleanShape,
}

ArrayShape.model_rebuild()
ObjectShape.model_rebuild()


def parse_shape(raw: Mapping[str, Any] | _Shape | None) -> OutputShape:
    """Parse a raw schema mapping into an :data:`OutputShape` tree.

    Args:
        raw: The ``output_schema`` mapping, an already-parsed shape, or ``None``.

    Raises:
        ValueError: If *raw* is neither a mapping, a shape, nor ``None``.
        pydantic.ValidationError: If a node is structurally malformed.
    """
    if raw is None:
        return AnyShape()
    if isinstance(raw, _Shape):
        return raw  # type: ignore[return-value]
    if not isinstance(raw, Mapping):
        raise ValueError(f"schema node must be a mapping, got {type(raw).__name__}")

    type_tag = raw.get("type")
    shape_cls = _SHAPE_TYPES.get(type_tag) if isinstance(type_tag, str) else None
    if shape_cls is None:
        return AnyShape(description=_description_or_none(raw))
    data = {k: v for k, v in raw.items() if k != "type"}
    return shape_cls.model_validate(data)  # type: ignore[return-value]


def _parse_child(value: Any, where: str) -> OutputShape:
    if isinstance(value, _Shape):
        return value  # type: ignore[return-value]
    if not isinstance(value, Mapping):
        raise ValueError(f"schema for '{where}' must be a mapping")
    return parse_shape(value)


def _description_or_none(raw: Mapping[str, Any]) -> str | None:
    description = raw.get("description")
    return description if isinstance(description, str) else None
