"""Schema translator — compiles an :data:`OutputShape` into a pydantic validator.

The compilation is a pure recursive walk:

- ``object``  -> a model built with :func:`pydantic.create_model`
- ``string``  -> ``StrictStr``
- ``number``  -> ``StrictInt | StrictFloat``
- ``integer`` -> ``StrictInt``
- ``boolean`` -> ``StrictBool``
- ``array``   -> ``list[<items>]``
- ``any``     -> ``Any``

Strict primitives mean a model answering ``"3"`` for a number field is a
mismatch, not a coercion. Object fields keep the key names from the schema
(via aliases) and their descriptions; required fields must be present and
non-null, optional fields may be absent or null.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Annotated, Any, Optional, Union

from pydantic import (
    AfterValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    create_model,
)

from agentcli.core.schema.models import (
    AnyShape,
    ArrayShape,
    BooleanShape,
    IntegerShape,
    NumberShape,
    ObjectShape,
    OutputShape,
    StringShape,
    parse_shape,
)

_FENCE_RE = re.compile(r"^\s*```(?:json)?\s*(.*?)\s*```\s*$", re.DOTALL | re.IGNORECASE)

_PRIMITIVES: dict[type, Any] = {
    StringShape: StrictStr,
    NumberShape: Union[StrictInt, StrictFloat],
    IntegerShape: StrictInt,
    BooleanShape: StrictBool,
}


class OutputValidationError(ValueError):
    """A value (or response text) does not match the compiled shape."""


class OutputValidator:
    """A compiled output shape.

    Wraps a :class:`pydantic.TypeAdapter` and keeps the source shape and
    description around for introspection.
    """

    def __init__(self, shape: OutputShape, annotation: Any) -> None:
        self.shape = shape
        if shape.description:
            annotation = Annotated[annotation, Field(description=shape.description)]
        self._adapter: TypeAdapter[Any] = TypeAdapter(annotation)

    @property
    def description(self) -> str | None:
        return self.shape.description

    @property
    def accepts_anything(self) -> bool:
        return isinstance(self.shape, AnyShape)

    def validate(self, value: Any) -> Any:
        """Validate *value* and return it as plain data.

        Object results are plain dicts keyed by the schema's field names;
        optional fields the value did not provide are left out.

        Raises:
            OutputValidationError: If *value* does not match.
        """
        try:
            parsed = self._adapter.validate_python(value)
        except ValidationError as exc:
            raise OutputValidationError(str(exc)) from exc
        return self._adapter.dump_python(parsed, by_alias=True, exclude_unset=True)

    def parse_text(self, text: str) -> Any:
        """Decode a JSON response (optionally wrapped in a code fence) and validate it.

        A validator that accepts anything returns non-JSON text unchanged.

        Raises:
            OutputValidationError: On invalid JSON or a shape mismatch.
        """
        match = _FENCE_RE.match(text)
        payload = match.group(1) if match else text.strip()
        try:
            value = json.loads(payload)
        except json.JSONDecodeError as exc:
            if self.accepts_anything:
                return text
            raise OutputValidationError(f"Response is not valid JSON: {exc}") from exc
        return self.validate(value)

    def json_schema(self) -> dict[str, Any]:
        """Return the JSON schema of the compiled validator (descriptions included)."""
        return self._adapter.json_schema(by_alias=True)

    def __repr__(self) -> str:
        return f"OutputValidator(type={self.shape.type!r}, description={self.description!r})"


def compile_shape(shape: OutputShape, *, name: str = "Output") -> OutputValidator:
    """Compile a parsed shape into an :class:`OutputValidator`."""
    return OutputValidator(shape, _to_annotation(shape, name))


def compile_output_schema(
    raw: Mapping[str, Any] | None, *, name: str = "Output"
) -> OutputValidator:
    """Parse and compile a raw ``output_schema`` mapping."""
    return compile_shape(parse_shape(raw), name=name)


def _to_annotation(shape: OutputShape, name: str) -> Any:
    if isinstance(shape, ObjectShape):
        return _object_model(shape, name)
    if isinstance(shape, ArrayShape):
        item = _to_annotation(shape.items, f"{name}Item")
        if shape.items.description:
            item = Annotated[item, Field(description=shape.items.description)]
        return list[item]  # type: ignore[valid-type]
    primitive = _PRIMITIVES.get(type(shape))
    if primitive is not None:
        return primitive
    return Any


def _object_model(shape: ObjectShape, name: str) -> Any:
    required = set(shape.required)
    fields: dict[str, Any] = {}
    for index, (key, child) in enumerate(shape.properties.items()):
        annotation = _to_annotation(child, f"{name}_{_identifier(key)}")
        # Field names are positional so schema keys like "_id" or "json"
        # never collide with pydantic internals; the alias keeps the real key.
        if key in required:
            if annotation is Any:
                annotation = Annotated[Any, AfterValidator(_reject_none)]
            fields[f"f{index}"] = (
                annotation,
                Field(alias=key, description=child.description),
            )
        else:
            fields[f"f{index}"] = (
                Optional[annotation],
                Field(default=None, alias=key, description=child.description),
            )

    return create_model(
        _identifier(name),
        __config__=ConfigDict(extra="ignore"),
        __doc__=shape.description,
        **fields,
    )


def _reject_none(value: Any) -> Any:
    if value is None:
        raise ValueError("required field must not be null")
    return value


def _identifier(text: str) -> str:
    cleaned = re.sub(r"\W", "_", text)
    return cleaned if cleaned and not cleaned[0].isdigit() else f"_{cleaned}"
